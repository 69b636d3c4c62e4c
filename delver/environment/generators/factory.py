"""Builder selection and the per-level entry point.

Builders are looked up by name so the choice can live in ``config``:
- "simple": all wall (SimpleMapBuilder)
- "all_open": one big room (AllOpenMapBuilder)
- "rooms_and_corridors": the classic dungeon (RoomsAndCorridorsBuilder)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from delver import config

from .base import MapBuilder
from .simple import AllOpenMapBuilder, RoomsAndCorridorsBuilder, SimpleMapBuilder

if TYPE_CHECKING:
    from delver.environment.map import Map
    from delver.types import Depth

logger = logging.getLogger(__name__)

MAP_BUILDERS: dict[str, Callable[[], MapBuilder]] = {
    "simple": SimpleMapBuilder,
    "all_open": AllOpenMapBuilder,
    "rooms_and_corridors": RoomsAndCorridorsBuilder,
}


def create_builder(name: str) -> MapBuilder:
    """Create a builder by registered name.

    Raises:
        ValueError: If the name is not registered.
    """
    try:
        factory = MAP_BUILDERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown map builder: {name!r}. Known builders: {sorted(MAP_BUILDERS)}"
        ) from None
    return factory()


def build_level(depth: Depth, builder_name: str | None = None) -> Map:
    """Build the map for a dungeon level.

    Args:
        depth: Dungeon level to build.
        builder_name: Registered builder to use. Defaults to
            config.DEFAULT_MAP_BUILDER.

    Returns:
        The finished map, ready to hand to renderers and FOV code.
    """
    if builder_name is None:
        builder_name = config.DEFAULT_MAP_BUILDER

    builder = create_builder(builder_name)
    game_map = builder.build(depth)

    logger.info(
        "Built depth %d with %r: %d rooms, %d floor tiles",
        depth,
        builder_name,
        len(game_map.rooms),
        game_map.floor_count(),
    )
    return game_map
