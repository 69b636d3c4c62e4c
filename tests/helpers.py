from __future__ import annotations

from collections.abc import Iterable


class ScriptedRNG:
    """Stand-in RNG that replays fixed values.

    ``randint`` pops from ``ints`` and checks the value is inside the
    requested range; ``getrandbits`` pops from ``bits``. Every call is
    recorded so tests can assert on draw order.
    """

    def __init__(self, ints: Iterable[int], bits: Iterable[int] = ()) -> None:
        self.ints = list(ints)
        self.bits = list(bits)
        self.calls: list[tuple[str, int, int]] = []

    def randint(self, a: int, b: int) -> int:
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside randint({a}, {b})"
        self.calls.append(("randint", a, b))
        return value

    def getrandbits(self, k: int) -> int:
        value = self.bits.pop(0)
        self.calls.append(("getrandbits", k, value))
        return value
