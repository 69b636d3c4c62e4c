from __future__ import annotations

from typing import TypeAlias

# =============================================================================
# TILE-BASED COORDINATE SYSTEMS (Always integers)
# =============================================================================

TileCoord = int  # Always integer tile position

# Game world coordinates - absolute positions on the dungeon map
WorldTileCoord = TileCoord  # Example: x=5, y=3
WorldTilePos = tuple[WorldTileCoord, WorldTileCoord]  # Example: (5, 3)

# Linear index into a row-major tile array (y * width + x)
TileIndex = int

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Dungeon level. Set once when a map is built.
Depth = int

# Seed for the random stream system. None means non-deterministic.
RandomSeed: TypeAlias = int | str | None
