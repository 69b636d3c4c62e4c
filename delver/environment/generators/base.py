"""Base class for map builders."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delver.environment.map import Map
    from delver.types import Depth


class MapBuilder(abc.ABC):
    """A strategy that produces a complete Map for one dungeon level.

    The level lifecycle picks one builder per level and calls ``build``.
    New algorithms plug in by subclassing this and registering in
    ``MAP_BUILDERS``; callers do not change.
    """

    @abc.abstractmethod
    def build(self, depth: Depth) -> Map:
        """Generate the map for ``depth``."""
        raise NotImplementedError
