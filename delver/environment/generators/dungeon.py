"""Dungeon-style map generation with rooms and corridors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delver import config
from delver.environment.map import Map
from delver.util import dice, rng
from delver.util.coordinates import Rect

if TYPE_CHECKING:
    from delver.types import Depth, TileCoord
    from delver.util.rng import RNG

logger = logging.getLogger(__name__)


def dungeon_rng(depth: Depth) -> RNG:
    """The stream a level at ``depth`` draws from when no RNG is injected."""
    return rng.get(f"map.dungeon.{depth}")


def new_map_all_open(depth: Depth) -> Map:
    """One big room covering everything inside the outer wall."""
    game_map = Map.new(depth)

    room = Rect(0, 0, game_map.width - 2, game_map.height - 2)
    game_map.apply_room_to_map(room)
    game_map.rooms.append(room)

    return game_map


def new_map_rooms_and_corridors(
    depth: Depth,
    *,
    rng: RNG | None = None,
    width: TileCoord | None = None,
    height: TileCoord | None = None,
    max_rooms: int | None = None,
    min_room_size: int | None = None,
    max_room_size: int | None = None,
    separate_rooms: bool | None = None,
) -> Map:
    """Scatter random rooms and join each one to the previous by an L corridor.

    Random draws happen in a fixed order: width, height, x, y for every
    candidate, then one coin flip for every accepted room after the first.

    Args:
        depth: Dungeon level. Picks the RNG stream when ``rng`` is None.
        rng: Injected random source. Anything with ``randint`` and
            ``getrandbits``.
        width, height: Map size. Defaults to config.MAP_WIDTH/MAP_HEIGHT.
        max_rooms: Candidates to try. Defaults to config.MAX_ROOMS.
        min_room_size, max_room_size: Inclusive range for room width and
            height. Default to config.ROOM_MIN_SIZE/ROOM_MAX_SIZE.
        separate_rooms: Reject candidates sharing a cell with any accepted
            room instead of applying ``Rect.intersect``. Defaults to
            config.SEPARATE_ROOMS.

    Returns:
        A map whose ``rooms`` are in acceptance order.

    Raises:
        ValueError: If the room size range is empty or below 2, or the largest room
            cannot fit inside the map with a wall on every side.
    """
    width = config.MAP_WIDTH if width is None else width
    height = config.MAP_HEIGHT if height is None else height
    max_rooms = config.MAX_ROOMS if max_rooms is None else max_rooms
    min_size = config.ROOM_MIN_SIZE if min_room_size is None else min_room_size
    max_size = config.ROOM_MAX_SIZE if max_room_size is None else max_room_size
    if separate_rooms is None:
        separate_rooms = config.SEPARATE_ROOMS
    _rng = dungeon_rng(depth) if rng is None else rng

    # Below 2 a room's center can sit on its wall corner, and a tunnel dug
    # from it could reach the map border.
    if not 2 <= min_size <= max_size:
        raise ValueError(f"Invalid room size range {min_size}..{max_size}")
    # x is rolled as 1d(width - w - 1) - 1, which needs at least one side.
    if width - max_size - 1 < 1 or height - max_size - 1 < 1:
        raise ValueError(
            f"A {max_size}x{max_size} room does not fit in a {width}x{height} map"
        )

    game_map = Map.new_with_dimensions(width, height, depth)
    rejected = 0

    for _ in range(max_rooms):
        w = _rng.randint(min_size, max_size)
        h = _rng.randint(min_size, max_size)
        x = dice.roll_dice(_rng, 1, game_map.width - w - 1) - 1
        y = dice.roll_dice(_rng, 1, game_map.height - h - 1) - 1
        new_room = Rect(x, y, w, h)

        if separate_rooms:
            blocked = any(new_room.overlaps(other) for other in game_map.rooms)
        else:
            blocked = any(new_room.intersect(other) for other in game_map.rooms)
        if blocked:
            rejected += 1
            continue

        game_map.apply_room_to_map(new_room)

        if game_map.rooms:
            new_x, new_y = new_room.center()
            prev_x, prev_y = game_map.rooms[-1].center()
            if dice.coin_flip(_rng):
                game_map.apply_horizontal_tunnel(prev_x, new_x, prev_y)
                game_map.apply_vertical_tunnel(prev_y, new_y, new_x)
            else:
                game_map.apply_vertical_tunnel(prev_y, new_y, prev_x)
                game_map.apply_horizontal_tunnel(prev_x, new_x, new_y)

        game_map.rooms.append(new_room)

    logger.debug(
        "Depth %d: placed %d rooms, rejected %d of %d candidates",
        depth,
        len(game_map.rooms),
        rejected,
        max_rooms,
    )
    return game_map
