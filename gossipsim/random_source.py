from __future__ import annotations

import math
import random

from .types import Distribution


class RandomSource:
    """Uniform [0, 1) distribution from which integer draws are derived."""

    def __init__(self, distribution: Distribution | None = None) -> None:
        if distribution is None:
            raise ValueError("A distribution is required")
        self._distribution = distribution

    @classmethod
    def from_seed(cls, seed: int | None = None) -> RandomSource:
        return cls(random.Random(seed).random)

    @classmethod
    def from_rng(cls, rng: random.Random) -> RandomSource:
        return cls(rng.random)

    def sample_float(self) -> float:
        return self._distribution()

    def sample_int(self, max_value: int) -> int:
        """Return an int in [0, max_value)."""

        if max_value <= 0:
            raise ValueError("max_value must be greater than 0")
        return int(math.floor(self.sample_float() * max_value))
