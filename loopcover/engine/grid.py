"""Annular grid topology: R spokes (periodic) by C rings (bounded).

Leaf module. No engine imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple


class GridPoint(NamedTuple):
    """A grid vertex: angular index (mod R) and radial index (ring, 0 = center)."""

    angular: int
    radial: int


@dataclass(frozen=True)
class GridTopology:
    """The parameter pair (R, C) and the arithmetic rules derived from it.

    The angular dimension wraps, the radial one does not: the grid is a
    finite cylinder, not a torus.
    """

    radial_divisions: int
    concentric_divisions: int

    def __post_init__(self) -> None:
        if self.radial_divisions < 1:
            raise ValueError(f"radial_divisions must be >= 1, got {self.radial_divisions}")
        if self.concentric_divisions < 1:
            raise ValueError(
                f"concentric_divisions must be >= 1, got {self.concentric_divisions}"
            )

    def wrap(self, angular: int) -> int:
        return angular % self.radial_divisions

    def is_inner_ring(self, radial: int) -> bool:
        return radial == 0

    def is_outer_ring(self, radial: int) -> bool:
        return radial == self.concentric_divisions - 1

    def is_boundary_ring(self, radial: int) -> bool:
        return self.is_inner_ring(radial) or self.is_outer_ring(radial)

    def contains(self, point: tuple[int, int]) -> bool:
        angular, radial = point
        return 0 <= angular < self.radial_divisions and 0 <= radial < self.concentric_divisions

    def are_adjacent(self, a: int, b: int) -> bool:
        """True if angular indices a and b are one step apart around the disk."""
        return self.wrap(a + 1) == self.wrap(b) or self.wrap(b + 1) == self.wrap(a)

    def points(self) -> Iterator[GridPoint]:
        for angular in range(self.radial_divisions):
            for radial in range(self.concentric_divisions):
                yield GridPoint(angular, radial)

    @property
    def size(self) -> int:
        return self.radial_divisions * self.concentric_divisions
