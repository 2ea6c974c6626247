"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random that owns the battle's seed.

    Every probabilistic outcome (status infliction and status expiry) is a
    single ``random()`` draw, so one seed plus one decision script replays a
    battle exactly.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._random = Random(seed)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()
