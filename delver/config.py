"""
Configuration constants.

Centralizes the magic numbers used by map generation.
Organized by functional area for easy maintenance.
"""

from delver.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# None gives a different dungeon every run. Set an int or str to make
# every level reproducible.
RANDOM_SEED: RandomSeed = None

# =============================================================================
# MAP DIMENSIONS
# =============================================================================

MAP_WIDTH = 80
MAP_HEIGHT = 50

# =============================================================================
# ROOMS AND CORRIDORS
# =============================================================================

MAX_ROOMS = 30  # Candidate rooms tried per level, not rooms placed
ROOM_MIN_SIZE = 6
ROOM_MAX_SIZE = 10

# When True, candidates sharing any floor cell with an accepted room are
# rejected. When False, the classic intersect() rule decides.
SEPARATE_ROOMS = False

# =============================================================================
# LEVEL LIFECYCLE
# =============================================================================

# Key into delver.environment.generators.MAP_BUILDERS
DEFAULT_MAP_BUILDER = "rooms_and_corridors"
