"""Loop invariants: a single simple closed cycle on one grid.

``loop_violations`` reports, ``check_loop`` raises. Both are linear in the
loop length.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Sequence

from loopcover.engine.edge import Edge
from loopcover.engine.errors import LoopInvariantError
from loopcover.engine.grid import GridPoint, GridTopology

# Smallest simple cycle on the grid graph.
MIN_LOOP_LENGTH = 3


def vertex_degrees(edges: Sequence[Edge]) -> Counter[GridPoint]:
    degrees: Counter[GridPoint] = Counter()
    for edge in edges:
        degrees[edge.start] += 1
        degrees[edge.end] += 1
    return degrees


def _cyclically_adjacent(i: int, k: int, n: int) -> bool:
    return (i - k) % n in (1, n - 1)


def loop_violations(edges: Sequence[Edge], grid: GridTopology | None = None) -> list[str]:
    """Every way ``edges`` fails to be a simple closed cycle. Empty list = valid."""
    n = len(edges)
    if n == 0:
        return ["loop is empty"]

    problems: list[str] = []

    if grid is not None:
        foreign = [i for i, e in enumerate(edges) if e.grid != grid]
        if foreign:
            problems.append(f"edges {foreign} belong to a different grid")

    if n < MIN_LOOP_LENGTH:
        problems.append(f"loop has {n} edges, a cycle needs at least {MIN_LOOP_LENGTH}")

    if len(set(edges)) != n:
        dupes = [e for e, c in Counter(edges).items() if c > 1]
        problems.append(f"duplicate edges {dupes}")

    # Closure: every vertex used exactly twice
    for vertex, degree in vertex_degrees(edges).items():
        if degree != 2:
            problems.append(f"vertex {tuple(vertex)} has degree {degree}")

    # Continuity: consecutive edges meet
    for i in range(n):
        if not edges[i].intersects(edges[(i + 1) % n]):
            problems.append(f"edges {i} and {(i + 1) % n} do not meet")

    # Self-avoidance: only cyclic neighbors in the sequence may share a vertex
    if n >= MIN_LOOP_LENGTH:
        owners: dict[GridPoint, list[int]] = defaultdict(list)
        for i, edge in enumerate(edges):
            owners[edge.start].append(i)
            owners[edge.end].append(i)
        for vertex, indices in owners.items():
            for a in range(len(indices)):
                for b in range(a + 1, len(indices)):
                    i, k = indices[a], indices[b]
                    if i != k and not _cyclically_adjacent(i, k, n):
                        problems.append(
                            f"non-adjacent edges {i} and {k} share vertex {tuple(vertex)}"
                        )

    return problems


def is_simple_cycle(edges: Sequence[Edge], grid: GridTopology | None = None) -> bool:
    return not loop_violations(edges, grid)


def check_loop(edges: Sequence[Edge], grid: GridTopology | None = None) -> None:
    """Raise LoopInvariantError listing every violation, if any."""
    problems = loop_violations(edges, grid)
    if problems:
        raise LoopInvariantError("; ".join(problems))
