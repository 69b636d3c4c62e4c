"""
Dice-style rolls for map generation.

The generator places rooms with rolls like ``1d(width - w - 1)``. These
helpers take the RNG explicitly so callers can pass a seeded stream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delver.util.rng import RNG


def roll_dice(rng: RNG, num_dice: int, sides: int) -> int:
    """Roll ``num_dice`` dice with ``sides`` faces each and return the sum.

    Args:
        rng: Source of randomness (``random.Random`` or an ``RNGStream``).
        num_dice: How many dice to roll. Must be at least 1.
        sides: Faces per die. Must be at least 1.

    Returns:
        An integer between ``num_dice`` and ``num_dice * sides``, inclusive.

    Raises:
        ValueError: If ``num_dice`` or ``sides`` is not a positive integer.
    """
    if not isinstance(num_dice, int) or num_dice <= 0:
        raise ValueError("Number of dice must be a positive integer.")
    if not isinstance(sides, int) or sides <= 0:
        raise ValueError("Number of sides must be a positive integer.")

    return sum(rng.randint(1, sides) for _ in range(num_dice))


def roll_d(rng: RNG, sides: int) -> int:
    """Roll a single die with the specified number of sides."""
    return roll_dice(rng, 1, sides)


def coin_flip(rng: RNG) -> bool:
    """Fair coin. True for heads."""
    return bool(rng.getrandbits(1))
