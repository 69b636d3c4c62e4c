"""The map's opacity and walkability contract, as seen by tcod."""

from __future__ import annotations

import numpy as np
import tcod.constants
import tcod.map
import tcod.path

from delver.environment.generators import (
    new_map_all_open,
    new_map_rooms_and_corridors,
)
from delver.environment.map import Map
from delver.environment.tile_types import TileType


def _reachable_from(game_map: Map, start: tuple[int, int]) -> np.ndarray:
    cost = game_map.walkable.astype(np.int8)
    dist = tcod.path.maxarray(cost.shape, dtype=np.int32)
    dist[start] = 0
    dist = tcod.path.dijkstra2d(dist, cost, cardinal=1, diagonal=0, out=dist)
    return dist != np.iinfo(np.int32).max


def test_transparent_agrees_with_is_opaque() -> None:
    game_map = new_map_rooms_and_corridors(0)
    transparent = game_map.transparent
    for y in range(game_map.height):
        for x in range(game_map.width):
            idx = game_map.xy_idx(x, y)
            assert transparent[x, y] == (not game_map.is_opaque(idx))


def test_fov_result_fits_the_flat_visibility_arrays() -> None:
    game_map = new_map_all_open(0)
    origin = game_map.rooms[0].center()

    visible = tcod.map.compute_fov(
        game_map.transparent,
        origin,
        radius=0,
        light_walls=True,
        algorithm=tcod.constants.FOV_SYMMETRIC_SHADOWCAST,
    )
    # An exploration system copies the (width, height) result back.
    game_map.visible_tiles[:] = visible.ravel(order="F")
    game_map.revealed_tiles |= game_map.visible_tiles

    floor = game_map.tiles == TileType.FLOOR
    assert np.all(game_map.visible_tiles[floor])
    assert game_map.visible_tiles[game_map.xy_idx(*origin)]
    assert game_map.revealed_tiles[game_map.xy_idx(1, 1)]


def test_walls_block_fov() -> None:
    game_map = Map.new_with_dimensions(10, 5, 0)
    game_map.apply_horizontal_tunnel(1, 8, 2)
    game_map.tiles[game_map.xy_idx(5, 2)] = TileType.WALL

    visible = tcod.map.compute_fov(
        game_map.transparent, (2, 2), radius=0, light_walls=True
    )
    assert visible[4, 2]
    assert visible[5, 2]  # the wall itself is lit
    assert not visible[7, 2]


def test_all_floor_is_reachable_from_the_first_room() -> None:
    for separate in (False, True):
        for _ in range(10):
            game_map = new_map_rooms_and_corridors(0, separate_rooms=separate)
            reachable = _reachable_from(game_map, game_map.rooms[0].center())
            assert np.all(reachable[game_map.walkable])
