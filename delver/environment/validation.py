"""Structural invariant checks shared by every map generation algorithm.

Every generator must leave the outer ring of the map as wall, and every
construction path must keep the tile and visibility arrays the same size.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from delver.environment.tile_types import TileType

if TYPE_CHECKING:
    from delver.environment.map import Map
    from delver.types import WorldTilePos


class BorderViolationError(ValueError):
    """Raised when a border cell of a map is not a wall."""


class DimensionMismatchError(ValueError):
    """Raised when a map's arrays disagree with its width and height."""


def border_mask(width: int, height: int) -> np.ndarray:
    """Boolean (width, height) array, True on the outer ring."""
    mask = np.zeros((width, height), dtype=bool)
    mask[0, :] = True
    mask[-1, :] = True
    mask[:, 0] = True
    mask[:, -1] = True
    return mask


def find_border_violations(game_map: Map) -> list[WorldTilePos]:
    """Return every border (x, y) that is not a wall, in x-major order."""
    bad = border_mask(game_map.width, game_map.height) & (
        game_map.grid != TileType.WALL
    )
    return [(int(x), int(y)) for x, y in np.argwhere(bad)]


def check_borders(game_map: Map) -> None:
    """Raise BorderViolationError if any border cell is not a wall."""
    violations = find_border_violations(game_map)
    if violations:
        raise BorderViolationError(
            f"Border has non-wall tile(s) at {violations[:5]}"
            + (f" and {len(violations) - 5} more" if len(violations) > 5 else "")
        )


def check_dimensions(game_map: Map) -> None:
    """Raise DimensionMismatchError if any state array has the wrong length."""
    expected = game_map.width * game_map.height
    for name in ("tiles", "revealed_tiles", "visible_tiles"):
        actual = len(getattr(game_map, name))
        if actual != expected:
            raise DimensionMismatchError(
                f"{name} has {actual} entries, expected {expected}"
            )
