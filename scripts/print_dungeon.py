#!/usr/bin/env python3
"""Print a generated dungeon level as plain text.

Walls print as ``#`` and floor as ``.``, one line per map row.

Usage:
    uv run python scripts/print_dungeon.py --seed burrito --depth 3
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from delver import config
from delver.environment import tile_types
from delver.environment.generators import MAP_BUILDERS, build_level
from delver.environment.map import Map
from delver.util import rng


def render_rows(game_map: Map) -> list[str]:
    """One string per map row, using each tile type's glyph."""
    glyphs = tile_types.get_glyph_map(game_map.grid)
    return [
        "".join(chr(glyphs[x, y]) for x in range(game_map.width))
        for y in range(game_map.height)
    ]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print a generated dungeon map.")
    parser.add_argument(
        "--builder",
        choices=sorted(MAP_BUILDERS),
        default=config.DEFAULT_MAP_BUILDER,
        help="Map builder to run.",
    )
    parser.add_argument("--depth", type=int, default=1, help="Dungeon level.")
    parser.add_argument(
        "--seed",
        default=config.RANDOM_SEED,
        help="Master seed. Omit for a different map every run.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log generation details."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng.init(args.seed)
    game_map = build_level(args.depth, args.builder)

    print("\n".join(render_rows(game_map)))
    print(f"{game_map!r}")


if __name__ == "__main__":
    main()
