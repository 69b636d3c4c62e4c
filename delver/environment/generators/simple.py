"""Builders that delegate straight to a map constructor or algorithm."""

from __future__ import annotations

from typing import TYPE_CHECKING

from delver.environment.map import Map

from .base import MapBuilder
from .dungeon import new_map_all_open, new_map_rooms_and_corridors

if TYPE_CHECKING:
    from delver.types import Depth
    from delver.util.rng import RNG


class SimpleMapBuilder(MapBuilder):
    """Solid rock. The baseline every other builder starts from."""

    def build(self, depth: Depth) -> Map:
        return Map.new(depth)


class AllOpenMapBuilder(MapBuilder):
    """A single room filling the map inside its outer wall."""

    def build(self, depth: Depth) -> Map:
        return new_map_all_open(depth)


class RoomsAndCorridorsBuilder(MapBuilder):
    """Random rooms chained together by L-shaped corridors.

    Any argument left as None falls back to the matching ``config`` value
    when ``build`` runs.
    """

    def __init__(
        self,
        *,
        rng: RNG | None = None,
        max_rooms: int | None = None,
        min_room_size: int | None = None,
        max_room_size: int | None = None,
        separate_rooms: bool | None = None,
    ) -> None:
        self.rng = rng
        self.max_rooms = max_rooms
        self.min_room_size = min_room_size
        self.max_room_size = max_room_size
        self.separate_rooms = separate_rooms

    def build(self, depth: Depth) -> Map:
        return new_map_rooms_and_corridors(
            depth,
            rng=self.rng,
            max_rooms=self.max_rooms,
            min_room_size=self.min_room_size,
            max_room_size=self.max_room_size,
            separate_rooms=self.separate_rooms,
        )
