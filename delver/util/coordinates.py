"""Room shapes in tile coordinates."""

from __future__ import annotations

import abc

from delver.types import TileCoord, WorldTilePos


class Room(abc.ABC):
    """Anything that occupies a set of grid cells and has a center."""

    @abc.abstractmethod
    def center(self) -> WorldTilePos:
        """Return the (x, y) center of the room."""
        raise NotImplementedError

    @abc.abstractmethod
    def spaces(self) -> list[WorldTilePos]:
        """Return the (x, y) cells the room occupies, row by row."""
        raise NotImplementedError

    def intersect(self, other: Room) -> bool:
        """Return True when this room and ``other`` share no cell.

        The name reads the other way round. Map generation relies on this
        exact result, so it is kept as is; use ``overlaps`` for the plain
        "do they share a cell" question.
        """
        own_spaces = set(self.spaces())
        return not any(space in own_spaces for space in other.spaces())

    def overlaps(self, other: Room) -> bool:
        """Return True when this room and ``other`` share at least one cell."""
        return not self.intersect(other)


class Rect(Room):
    """Rectangle/bounding box in tile coordinates.

    The floor of a Rect is every cell strictly right of x1 and below y1, up
    to and including x2 and y2. The row at y1 and column at x1 stay wall.
    """

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        if w <= 0 or h <= 0:
            raise ValueError(f"Rect needs a positive size, got {w}x{h}")
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @classmethod
    def from_bounds(
        cls, x1: TileCoord, y1: TileCoord, x2: TileCoord, y2: TileCoord
    ) -> Rect:
        """Create a Rect from corner coordinates (x1, y1, x2, y2)."""
        return cls(x1, y1, x2 - x1, y2 - y1)

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    def center(self) -> WorldTilePos:
        # Truncates, so odd extents lean toward (x1, y1)
        return (int((self.x1 + self.x2) / 2), int((self.y1 + self.y2) / 2))

    def spaces(self) -> list[WorldTilePos]:
        return [
            (x, y)
            for y in range(self.y1 + 1, self.y2 + 1)
            for x in range(self.x1 + 1, self.x2 + 1)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"
