"""Random sources for the pipeline's randomized draws.

Every random decision the pipeline makes (missed offsets, scale ranges,
mirroring, rotation, file variants) goes through a ``RandomSource`` so tests
can inject a controllable one.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    def uniform_float(self, lo: float, hi: float) -> float:
        """Uniformly distributed float in [lo, hi]."""
        ...

    def uniform_bool(self) -> bool:
        """Fair coin flip."""
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy Generator. Same seed, same draws."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform_float(self, lo: float, hi: float) -> float:
        return float(self._rng.uniform(lo, hi))

    def uniform_bool(self) -> bool:
        return bool(self._rng.random() < 0.5)


def random_element(rng: RandomSource, items: Sequence[T]) -> T:
    """Pick one element uniformly using only the RandomSource contract."""
    if not items:
        raise ValueError("cannot pick from an empty sequence")
    index = int(rng.uniform_float(0, len(items)))
    # uniform_float is closed on hi
    return items[min(index, len(items) - 1)]
