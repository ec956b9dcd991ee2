"""Random sources consumed by the stochastic operators.

Operators never reach for a global generator: every call receives an object
honouring :class:`RandomSource`, so a run can be replayed by seeding a fresh
source and repeating the same call sequence.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

__all__ = ["RandomSource", "NumpyRandomSource", "random_source"]


@runtime_checkable
class RandomSource(Protocol):
    def next_uniform(self) -> float:
        """Return a draw from the half-open interval ``[0, 1)``."""
        ...


class NumpyRandomSource:
    """:class:`RandomSource` backed by a :class:`numpy.random.Generator`."""

    __slots__ = ("_rng",)

    def __init__(self, rng: np.random.Generator) -> None:
        self._rng = rng

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    def next_uniform(self) -> float:
        return float(self._rng.random())

    def __repr__(self) -> str:
        return f"NumpyRandomSource({self._rng.bit_generator.__class__.__name__})"


def random_source(seed: int | None = None) -> NumpyRandomSource:
    """Build a fresh source from ``numpy.random.default_rng(seed)``."""

    return NumpyRandomSource(np.random.default_rng(seed))
