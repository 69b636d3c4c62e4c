"""
Tile types for dungeon maps, stored flyweight style.

This module defines:
- `TileType`: the integer id stored per cell. `Map.tiles` is a NumPy array of
  these ids, one byte per cell.
- `TileTypeData`: the intrinsic properties shared by every cell of a type
  (walkable, transparent, display glyph and name).
- Lookup helpers that turn a whole array of ids into a boolean property map
  in one vectorized step. FOV and pathfinding consumers use these instead of
  asking cell by cell.
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np


class TileType(IntEnum):
    """What a single cell of the dungeon is made of.

    A cell starts as WALL and may be dug out to FLOOR exactly once.
    """

    WALL = 0
    FLOOR = 1


TileTypeData = np.dtype(
    [
        ("walkable", bool),
        ("transparent", bool),  # FOV/line-of-sight
        ("glyph", np.int32),  # Character code used by text renderers
        ("display_name", "U32"),
    ]
)

_registered_tile_type_data: dict[TileType, np.ndarray] = {}


def register_tile_type(tile_type: TileType, data: np.ndarray) -> None:
    """Attach the shared properties for ``tile_type``.

    Raises:
        ValueError: If ``tile_type`` is already registered.
    """
    if tile_type in _registered_tile_type_data:
        raise ValueError(f"Tile type {tile_type.name} is already registered.")
    _registered_tile_type_data[tile_type] = data


def make_tile_type_data(
    *,
    walkable: bool,
    transparent: bool,
    glyph: str,
    display_name: str,
) -> np.ndarray:
    """Build one TileTypeData record."""
    return np.array(
        (walkable, transparent, ord(glyph), display_name), dtype=TileTypeData
    )


register_tile_type(
    TileType.WALL,
    make_tile_type_data(
        walkable=False, transparent=False, glyph="#", display_name="Wall"
    ),
)
register_tile_type(
    TileType.FLOOR,
    make_tile_type_data(
        walkable=True, transparent=True, glyph=".", display_name="Floor"
    ),
)

# Property arrays indexed by TileType value. Fancy-indexing one of these with
# a tile id array yields the property for every cell at once.
_all_tile_type_data = [_registered_tile_type_data[t] for t in TileType]

_tile_type_properties_walkable = np.array(
    [t["walkable"] for t in _all_tile_type_data], dtype=bool
)
_tile_type_properties_transparent = np.array(
    [t["transparent"] for t in _all_tile_type_data], dtype=bool
)
_tile_type_properties_glyph = np.array(
    [t["glyph"] for t in _all_tile_type_data], dtype=np.int32
)


def get_walkable_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """True where the tile can be walked on."""
    return _tile_type_properties_walkable[tile_type_ids_map]


def get_transparent_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """True where the tile can be seen through (for FOV)."""
    return _tile_type_properties_transparent[tile_type_ids_map]


def get_opaque_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """True where the tile blocks line of sight."""
    return ~get_transparent_map(tile_type_ids_map)


def get_glyph_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """Character codes for each tile, for plain text output."""
    return _tile_type_properties_glyph[tile_type_ids_map]


def get_tile_type_data(tile_type: int) -> np.ndarray:
    """Return the TileTypeData record for a tile id.

    Raises:
        IndexError: If ``tile_type`` is not a known tile id.
    """
    if 0 <= tile_type < len(_all_tile_type_data):
        return _all_tile_type_data[tile_type]
    raise IndexError(
        f"Invalid tile type: {tile_type}. "
        f"Known ids are 0 to {len(_all_tile_type_data) - 1}."
    )
