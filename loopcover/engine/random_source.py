"""Injectable randomness for seeding and pulling.

Usage:
    rng = NumpyRandomSource(seed=7)
    state = LoopState(5, 15, rng=rng)

Anything with ``uniform_point``, ``shuffle`` and ``choice`` satisfies the
protocol, so tests can script the choices outright.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar

import numpy as np

from loopcover.engine.grid import GridPoint, GridTopology

T = TypeVar("T")


class RandomSource(Protocol):
    """Capability supplying the three random draws the engine needs."""

    def uniform_point(self, grid: GridTopology) -> GridPoint:
        """Return a point drawn uniformly from the grid."""

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a new list holding a uniform random permutation of ``items``."""

    def choice(self, items: Sequence[T]) -> T:
        """Return one element of a non-empty sequence, uniformly."""


class NumpyRandomSource:
    """RandomSource backed by ``numpy.random.Generator``.

    Not thread-safe; give each concurrently driven LoopState its own instance.
    """

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        if isinstance(seed, np.random.Generator):
            self._rng = seed
        else:
            self._rng = np.random.default_rng(seed)

    def uniform_point(self, grid: GridTopology) -> GridPoint:
        angular = int(self._rng.integers(grid.radial_divisions))
        radial = int(self._rng.integers(grid.concentric_divisions))
        return GridPoint(angular, radial)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        order = self._rng.permutation(len(items))
        return [items[int(i)] for i in order]

    def choice(self, items: Sequence[T]) -> T:
        if len(items) == 0:
            raise ValueError("choice from an empty sequence")
        return items[int(self._rng.integers(len(items)))]

    def spawn(self) -> NumpyRandomSource:
        """Independent child stream, for handing to a clone driven elsewhere."""
        return NumpyRandomSource(self._rng.spawn(1)[0])


def default_random_source(seed: int | None = None) -> RandomSource:
    return NumpyRandomSource(seed)
