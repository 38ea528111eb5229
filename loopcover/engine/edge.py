"""Grid edges: radial or concentric, never oblique.

An Edge is an immutable value. Equality and hashing ignore orientation, so
``Edge(a, b, grid) == Edge(b, a, grid)``; orientation is still kept because a
loop's edge sequence is walked start -> end and pulls preserve that walk.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from loopcover.engine.errors import InvalidEdgeKind, LoopcoverError, PinnedEdgeError
from loopcover.engine.grid import GridPoint, GridTopology
from loopcover.engine.random_source import RandomSource, default_random_source


class EdgeKind(enum.Enum):
    RADIAL = "radial"  # along a spoke
    CONCENTRIC = "concentric"  # along a ring


def touched_vertices(loop: Iterable[Edge]) -> set[GridPoint]:
    """Every endpoint of every edge in ``loop``."""
    touched: set[GridPoint] = set()
    for edge in loop:
        touched.add(edge.start)
        touched.add(edge.end)
    return touched


@dataclass(frozen=True, eq=False)
class Edge:
    start: GridPoint
    end: GridPoint
    grid: GridTopology = field(repr=False)

    def __post_init__(self) -> None:
        start = GridPoint(*self.start)
        end = GridPoint(*self.end)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

        for p in (start, end):
            if not self.grid.contains(p):
                raise ValueError(
                    f"Point {tuple(p)} lies outside the "
                    f"{self.grid.radial_divisions}x{self.grid.concentric_divisions} grid"
                )
        if start == end:
            raise InvalidEdgeKind(f"Degenerate edge at {tuple(start)}")
        if not (self._radial_aligned(start, end) or self._concentric_aligned(start, end)):
            raise InvalidEdgeKind(f"Oblique edge {tuple(start)} -> {tuple(end)}")

    def _radial_aligned(self, start: GridPoint, end: GridPoint) -> bool:
        return start.angular == end.angular

    def _concentric_aligned(self, start: GridPoint, end: GridPoint) -> bool:
        return start.radial == end.radial and self.grid.are_adjacent(start.angular, end.angular)

    # --- Classification ---

    @property
    def is_radial(self) -> bool:
        return self._radial_aligned(self.start, self.end)

    @property
    def is_concentric(self) -> bool:
        return not self.is_radial

    @property
    def kind(self) -> EdgeKind:
        return EdgeKind.RADIAL if self.is_radial else EdgeKind.CONCENTRIC

    @property
    def vertices(self) -> tuple[GridPoint, GridPoint]:
        return (self.start, self.end)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.start == other.start and self.end == other.end) or (
            self.start == other.end and self.end == other.start
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.start, self.end)))

    def intersects(self, other: Edge) -> bool:
        """Lax comparison: True if the two edges share at least one endpoint."""
        return self.start in other.vertices or self.end in other.vertices

    def reversed(self) -> Edge:
        return Edge(self.end, self.start, self.grid)

    # --- Neighborhood ---

    def _shifted(self, d_angular: int, d_radial: int) -> Edge:
        wrap = self.grid.wrap
        return Edge(
            GridPoint(wrap(self.start.angular + d_angular), self.start.radial + d_radial),
            GridPoint(wrap(self.end.angular + d_angular), self.end.radial + d_radial),
            self.grid,
        )

    def neighbors(self) -> tuple[Edge, ...]:
        """Same-axis edges one step away, orientation preserved.

        Radial edges move around the disk to both adjacent spokes. Concentric
        edges move between rings, and the innermost and outermost rings only
        have the one ring next to them.
        """
        if self.is_radial:
            shifts = [(1, 0), (-1, 0)]
        else:
            ring = self.start.radial
            shifts = []
            if not self.grid.is_outer_ring(ring):
                shifts.append((0, 1))
            if not self.grid.is_inner_ring(ring):
                shifts.append((0, -1))

        found: list[Edge] = []
        for d_angular, d_radial in shifts:
            candidate = self._shifted(d_angular, d_radial)
            # R <= 2 folds both spokes onto one edge (or onto this edge)
            if candidate != self and candidate not in found:
                found.append(candidate)
        return tuple(found)

    def open_neighbors(self, touched: set[GridPoint]) -> list[Edge]:
        """Neighbors with no endpoint in ``touched``."""
        return [
            n for n in self.neighbors() if n.start not in touched and n.end not in touched
        ]

    def is_free(self, loop: Iterable[Edge]) -> bool:
        """True if some neighbor shares no endpoint with any edge of ``loop``."""
        return bool(self.open_neighbors(touched_vertices(loop)))

    # --- Deformation ---

    def pull(self, loop: Sequence[Edge], rng: RandomSource | None = None) -> list[Edge]:
        """Replace this edge in ``loop`` with a three-edge detour through a neighbor.

        Returns a new list two edges longer. The loop's own copy of the edge
        sets the orientation, so the walk stays start -> end.
        """
        edges = list(loop)
        try:
            index = edges.index(self)
        except ValueError:
            raise LoopcoverError(f"{self!r} is not part of the loop") from None

        member = edges[index]
        targets = member.open_neighbors(touched_vertices(edges))
        if not targets:
            raise PinnedEdgeError(f"Pull called on pinned edge {member!r}")

        if rng is None:
            rng = default_random_source()
        target = rng.choice(targets)

        detour = [
            Edge(member.start, target.start, self.grid),
            target,
            Edge(target.end, member.end, self.grid),
        ]
        return edges[:index] + detour + edges[index + 1 :]

    def __repr__(self) -> str:
        return f"Edge({tuple(self.start)} -> {tuple(self.end)})"
