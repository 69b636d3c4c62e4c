from __future__ import annotations

import numpy as np

from delver import config
from delver.environment import tile_types
from delver.environment.tile_types import TileType
from delver.types import Depth, TileCoord, TileIndex, WorldTilePos
from delver.util.coordinates import Room


class Map:
    """A dungeon level: a row-major grid of tiles plus exploration state.

    ``tiles``, ``revealed_tiles`` and ``visible_tiles`` are flat arrays of
    length ``width * height`` where cell (x, y) lives at ``y * width + x``.
    Generation only ever touches ``tiles`` and ``rooms``. The two
    visibility arrays belong to whatever exploration/FOV code consumes the
    map.
    """

    def __init__(self, width: TileCoord, height: TileCoord, depth: Depth) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map needs a positive size, got {width}x{height}")

        self.width: TileCoord = width
        self.height: TileCoord = height
        self.depth: Depth = depth
        self.rooms: list[Room] = []

        size = width * height
        self.tiles = np.full(size, fill_value=TileType.WALL, dtype=np.uint8)

        # Which tiles are currently visible.
        self.visible_tiles = np.full(size, fill_value=False, dtype=bool)
        # Which tiles have been seen at least once.
        self.revealed_tiles = np.full(size, fill_value=False, dtype=bool)

    @classmethod
    def new(cls, depth: Depth) -> Map:
        """An all-wall map of the default dungeon size."""
        return cls(config.MAP_WIDTH, config.MAP_HEIGHT, depth)

    @classmethod
    def new_with_dimensions(
        cls, width: TileCoord, height: TileCoord, depth: Depth
    ) -> Map:
        """An all-wall map of the given size."""
        return cls(width, height, depth)

    # -------------------------------------------------------------------------
    # Indexing
    # -------------------------------------------------------------------------

    def xy_idx(self, x: TileCoord, y: TileCoord) -> TileIndex:
        """Convert (x, y) to an index into the flat tile arrays.

        Raises:
            IndexError: If (x, y) is outside the map.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Tile ({x}, {y}) is outside the {self.width}x{self.height} map"
            )
        return y * self.width + x

    def idx_xy(self, idx: TileIndex) -> WorldTilePos:
        """Inverse of ``xy_idx``."""
        self._check_idx(idx)
        return (idx % self.width, idx // self.width)

    def in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_idx(self, idx: TileIndex) -> None:
        if not 0 <= idx < self.tiles.size:
            raise IndexError(
                f"Tile index {idx} is outside the {self.width}x{self.height} map"
            )

    # -------------------------------------------------------------------------
    # Carving
    # -------------------------------------------------------------------------

    def apply_room_to_map(self, room: Room) -> None:
        """Dig out every cell the room occupies.

        The room must lie inside the map; a cell outside raises IndexError
        and nothing is carved.
        """
        indices = [self.xy_idx(x, y) for x, y in room.spaces()]
        self.tiles[indices] = TileType.FLOOR

    def apply_horizontal_tunnel(
        self, x1: TileCoord, x2: TileCoord, y: TileCoord
    ) -> None:
        """Dig a corridor along row ``y`` from x1 to x2, inclusive.

        Cells whose index falls outside the map are skipped.
        """
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self._dig_clipped(y * self.width + x)

    def apply_vertical_tunnel(
        self, y1: TileCoord, y2: TileCoord, x: TileCoord
    ) -> None:
        """Dig a corridor along column ``x`` from y1 to y2, inclusive.

        Cells whose index falls outside the map are skipped.
        """
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self._dig_clipped(y * self.width + x)

    def _dig_clipped(self, idx: TileIndex) -> None:
        if 0 <= idx < self.tiles.size:
            self.tiles[idx] = TileType.FLOOR

    # -------------------------------------------------------------------------
    # Spatial queries
    # -------------------------------------------------------------------------

    def dimensions(self) -> tuple[TileCoord, TileCoord]:
        return (self.width, self.height)

    def is_opaque(self, idx: TileIndex) -> bool:
        """True if the tile at ``idx`` blocks line of sight."""
        self._check_idx(idx)
        return bool(self.tiles[idx] == TileType.WALL)

    @property
    def grid(self) -> np.ndarray:
        """The tiles as a (width, height) view, indexed ``grid[x, y]``.

        Fortran order makes this a view of ``tiles``, not a copy.
        """
        return self.tiles.reshape((self.width, self.height), order="F")

    @property
    def transparent(self) -> np.ndarray:
        """Boolean (width, height) array, True where light passes (for FOV)."""
        return tile_types.get_transparent_map(self.grid)

    @property
    def walkable(self) -> np.ndarray:
        """Boolean (width, height) array, True where actors can walk."""
        return tile_types.get_walkable_map(self.grid)

    def floor_count(self) -> int:
        return int(np.count_nonzero(self.tiles == TileType.FLOOR))

    def __repr__(self) -> str:
        return (
            f"Map(width={self.width}, height={self.height}, depth={self.depth}, "
            f"rooms={len(self.rooms)})"
        )
