"""Tests for the closure and self-avoidance checks."""

import pytest

from loopcover.engine.edge import Edge
from loopcover.engine.errors import LoopInvariantError
from loopcover.engine.grid import GridTopology
from loopcover.engine.invariants import check_loop, is_simple_cycle, loop_violations, vertex_degrees


def _ring(grid, radial):
    r = grid.radial_divisions
    return [Edge((i, radial), ((i + 1) % r, radial), grid) for i in range(r)]


def test_ring_is_simple_cycle(grid43):
    ring = _ring(grid43, 1)
    assert loop_violations(ring, grid43) == []
    assert all(d == 2 for d in vertex_degrees(ring).values())
    check_loop(ring, grid43)


def test_empty_loop_is_invalid():
    assert loop_violations([]) == ["loop is empty"]


def test_open_path_is_invalid(grid43):
    path = _ring(grid43, 0)[:-1]
    problems = loop_violations(path, grid43)
    assert any("degree 1" in p for p in problems)
    assert any("do not meet" in p for p in problems)
    with pytest.raises(LoopInvariantError):
        check_loop(path, grid43)


def test_two_disjoint_rings_are_invalid(grid43):
    both = _ring(grid43, 0) + _ring(grid43, 2)
    problems = loop_violations(both, grid43)
    # Every vertex has degree 2, but the sequence jumps between rings
    assert not any("degree" in p for p in problems)
    assert any("do not meet" in p for p in problems)


def test_figure_eight_is_invalid():
    grid = GridTopology(6, 3)
    figure_eight = [
        Edge((0, 0), (1, 0), grid),
        Edge((1, 0), (1, 1), grid),
        Edge((1, 1), (2, 1), grid),
        Edge((2, 1), (2, 2), grid),
        Edge((2, 2), (1, 2), grid),
        Edge((1, 2), (1, 1), grid),
        Edge((1, 1), (0, 1), grid),
        Edge((0, 1), (0, 0), grid),
    ]
    problems = loop_violations(figure_eight, grid)
    assert any("degree 4" in p for p in problems)
    assert any("non-adjacent" in p for p in problems)
    assert not is_simple_cycle(figure_eight, grid)


def test_two_spoke_ring_is_invalid():
    grid = GridTopology(2, 1)
    doubled = [Edge((0, 0), (1, 0), grid), Edge((1, 0), (0, 0), grid)]
    problems = loop_violations(doubled, grid)
    assert any("at least 3" in p for p in problems)
    assert any("duplicate" in p for p in problems)


def test_foreign_grid_is_reported(grid43):
    ring = _ring(grid43, 1)
    problems = loop_violations(ring, GridTopology(4, 4))
    assert any("different grid" in p for p in problems)
