"""Map generation algorithms for Delver.

- new_map_rooms_and_corridors: classic dungeon of rooms chained by corridors
- new_map_all_open: one room filling the map, handy for tests
- MapBuilder subclasses wrap these so the level lifecycle can pick one by name
"""

from .base import MapBuilder
from .dungeon import dungeon_rng, new_map_all_open, new_map_rooms_and_corridors
from .factory import MAP_BUILDERS, build_level, create_builder
from .simple import AllOpenMapBuilder, RoomsAndCorridorsBuilder, SimpleMapBuilder

__all__ = [
    "MAP_BUILDERS",
    "AllOpenMapBuilder",
    "MapBuilder",
    "RoomsAndCorridorsBuilder",
    "SimpleMapBuilder",
    "build_level",
    "create_builder",
    "dungeon_rng",
    "new_map_all_open",
    "new_map_rooms_and_corridors",
]
