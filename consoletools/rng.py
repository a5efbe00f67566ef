"""Random-number helpers over uniform distributions.

Generators use a Mersenne Twister (``random.Random``) seeded from the OS
entropy source unless an explicit seed is given.
"""

from __future__ import annotations

import random
import sys
from collections.abc import MutableSequence
from numbers import Real
from typing import Any

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_ENTROPY = random.SystemRandom()


def _seeded_generator(seed: int | None) -> random.Random:
    if seed is None:
        seed = _ENTROPY.getrandbits(64)
    return random.Random(seed)


def shuffle(items: MutableSequence[Any], rng: random.Random | None = None) -> None:
    """Shuffle ``items`` in place."""
    (rng or _seeded_generator(None)).shuffle(items)


class IntGenerator:
    """Uniform integer source over the closed range ``[minimum, maximum]``."""

    def __init__(self, minimum: int = INT32_MIN, maximum: int = INT32_MAX, *, seed: int | None = None) -> None:
        for bound in (minimum, maximum):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise TypeError("Incorrect type")
        if minimum > maximum:
            raise ValueError("Incorrect argument")
        self.minimum = minimum
        self.maximum = maximum
        self._rng = _seeded_generator(seed)

    def get_random_value(self) -> int:
        return self._rng.randint(self.minimum, self.maximum)


class RealGenerator:
    """Uniform float source over ``[minimum, maximum]``.

    The default range runs from the smallest positive normal float to the
    largest finite one.
    """

    def __init__(
        self,
        minimum: float = sys.float_info.min,
        maximum: float = sys.float_info.max,
        *,
        seed: int | None = None,
    ) -> None:
        for bound in (minimum, maximum):
            if isinstance(bound, bool) or not isinstance(bound, Real):
                raise TypeError("Incorrect type")
        if minimum > maximum:
            raise ValueError("Incorrect argument")
        self.minimum = float(minimum)
        self.maximum = float(maximum)
        self._rng = _seeded_generator(seed)

    def get_random_value(self) -> float:
        value = self._rng.uniform(self.minimum, self.maximum)
        # uniform() may round past the upper bound for very wide ranges.
        return min(max(value, self.minimum), self.maximum)


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "IntGenerator",
    "RealGenerator",
    "shuffle",
]
