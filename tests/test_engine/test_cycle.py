"""Tests for LoopState: seed, free set, pull, cover, clone."""

import pytest

from loopcover.engine.config import EngineConfig
from loopcover.engine.cycle import LoopState
from loopcover.engine.edge import Edge, EdgeKind
from loopcover.engine.errors import LoopInvariantError, LoopcoverError, PinnedEdgeError
from loopcover.engine.grid import GridPoint
from loopcover.engine.invariants import is_simple_cycle
from loopcover.engine.random_source import NumpyRandomSource
from tests.conftest import ScriptedRandomSource


def _brute_force_free(edge, loop):
    return any(all(not n.intersects(other) for other in loop) for n in edge.neighbors())


# --- Unseeded ---


def test_starts_unseeded():
    state = LoopState(5, 4)
    assert not state.is_seeded
    assert state.loop == ()
    assert state.free_set() == []
    assert state.pull() == ()
    assert state.pull_count == 0


def test_grid_parameters_are_exposed():
    state = LoopState(7, 3)
    assert state.radial_divisions == 7
    assert state.concentric_divisions == 3


# --- Seed ---


def test_seed_at_point_builds_ring():
    state = LoopState(5, 4)
    loop = state.seed((2, 1))
    assert len(loop) == 5
    assert all(e.kind is EdgeKind.CONCENTRIC for e in loop)
    assert all(e.start.radial == 1 and e.end.radial == 1 for e in loop)
    assert loop[0].start == GridPoint(2, 1)
    assert is_simple_cycle(loop, state.grid)
    assert state.is_seeded


def test_seed_at_point_ignores_random_source():
    a = LoopState(6, 3, rng=NumpyRandomSource(1)).seed((0, 2))
    b = LoopState(6, 3, rng=NumpyRandomSource(99)).seed((0, 2))
    assert a == b


def test_seed_without_point_draws_from_random_source():
    state = LoopState(5, 4, rng=ScriptedRandomSource(point=(3, 2)))
    loop = state.seed()
    assert loop[0].start == GridPoint(3, 2)
    assert {e.start.radial for e in loop} == {2}


def test_seed_replaces_existing_loop(rng):
    state = LoopState(5, 4, rng=rng)
    state.seed((0, 1))
    state.pull()
    assert len(state) == 7
    state.seed((0, 3))
    assert len(state) == 5
    assert state.pull_count == 0


def test_seed_needs_three_spokes():
    with pytest.raises(ValueError):
        LoopState(2, 3).seed((0, 0))


def test_seed_point_outside_grid():
    with pytest.raises(ValueError):
        LoopState(4, 3).seed((0, 3))


# --- Free set ---


def test_fresh_ring_is_entirely_free():
    state = LoopState(4, 3)
    ring = state.seed((0, 0))
    assert set(state.free_set()) == set(ring)


def test_free_set_matches_definition(rng):
    state = LoopState(6, 5, rng=rng)
    state.seed((0, 2))
    for _ in range(12):
        state.pull()
        loop = state.loop
        expected = {e for e in loop if _brute_force_free(e, loop)}
        assert set(state.free_set()) == expected


def test_single_ring_grid_is_stuck_at_once():
    state = LoopState(3, 1)
    state.seed((0, 0))
    assert state.free_set() == []


# --- Pull ---


def test_pull_grows_by_two(rng):
    state = LoopState(5, 6, rng=rng)
    state.seed((1, 3))
    before = len(state)
    state.pull()
    assert len(state) == before + 2
    assert state.pull_count == 1


def test_pull_with_no_candidates_is_noop(rng):
    state = LoopState(5, 6, rng=rng)
    before = state.seed((1, 3))
    assert state.pull([]) == before
    assert state.pull_count == 0


def test_pull_takes_first_candidate():
    state = LoopState(4, 3, rng=ScriptedRandomSource())
    ring = state.seed((0, 0))
    loop = state.pull([ring[2]])
    assert ring[2] not in loop
    assert Edge((2, 1), (3, 1), state.grid) in loop


def _pulled_once() -> LoopState:
    # Inner ring of a 4x2 grid, edge (1,0)->(2,0) detoured through the outer ring
    state = LoopState(4, 2, rng=ScriptedRandomSource())
    ring = state.seed((0, 0))
    state.pull([ring[1]])
    return state


def test_failed_pull_on_pinned_edge_leaves_state_alone():
    state = _pulled_once()
    before = state.loop
    pinned = Edge((1, 1), (2, 1), state.grid)
    assert pinned in before

    with pytest.raises(PinnedEdgeError):
        state.pull([pinned])

    assert state.loop == before
    assert state.pull_count == 1


def test_failed_pull_on_foreign_edge_leaves_state_alone():
    state = _pulled_once()
    before = state.loop
    foreign = Edge((3, 1), (0, 1), state.grid)

    with pytest.raises(LoopcoverError):
        state.pull([foreign])

    assert state.loop == before
    assert state.pull_count == 1
    assert is_simple_cycle(state.loop, state.grid)


def test_invariants_hold_until_stuck(rng):
    state = LoopState(5, 4, rng=rng)
    state.seed((0, 1))
    for _ in range(200):
        if not state.free_set():
            break
        before = len(state)
        state.pull()
        assert len(state) == before + 2
        assert is_simple_cycle(state.loop, state.grid)
    assert state.free_set() == []


def test_pull_without_invariant_checks(rng):
    state = LoopState(5, 4, rng=rng, config=EngineConfig(check_invariants=False))
    state.seed((0, 1))
    state.pull()
    assert is_simple_cycle(state.loop, state.grid)


# --- Cover ---


def test_cover_zero_returns_fresh_ring(rng):
    state = LoopState(5, 4, rng=rng)
    loop = state.cover(0)
    assert len(loop) == 5
    assert state.pull_count == 0
    assert all(e.kind is EdgeKind.CONCENTRIC for e in loop)


def test_cover_respects_budget(rng):
    state = LoopState(6, 10, rng=rng)
    loop = state.cover(7)
    assert state.pull_count <= 7
    assert len(loop) == 6 + 2 * state.pull_count
    assert is_simple_cycle(loop, state.grid)


def test_cover_runs_to_quiescence(rng):
    state = LoopState(5, 5, rng=rng)
    loop = state.cover()
    assert state.free_set() == []
    assert is_simple_cycle(loop, state.grid)
    assert len(loop) == 5 + 2 * state.pull_count


def test_cover_rejects_negative_budget():
    with pytest.raises(ValueError):
        LoopState(5, 5).cover(-1)


def test_cover_is_reproducible_with_seeded_source():
    a = LoopState(6, 6, rng=NumpyRandomSource(7)).cover(30)
    b = LoopState(6, 6, rng=NumpyRandomSource(7)).cover(30)
    assert [(e.start, e.end) for e in a] == [(e.start, e.end) for e in b]


# --- Snapshot / clone ---


def test_loop_is_read_only_snapshot(rng):
    state = LoopState(5, 4, rng=rng)
    snapshot = state.seed((0, 1))
    state.pull()
    assert len(snapshot) == 5
    assert isinstance(state.loop, tuple)


def test_clone_is_independent(rng):
    state = LoopState(5, 6, rng=rng)
    state.seed((0, 2))
    state.pull()
    original = state.loop

    twin = state.clone()
    assert twin.loop == original
    assert twin.pull_count == state.pull_count

    twin.pull()
    twin.pull()
    assert state.loop == original
    assert len(twin) == len(original) + 4


def test_clone_of_unseeded_is_unseeded():
    assert not LoopState(4, 4).clone().is_seeded


def test_clone_uses_given_random_source(rng):
    state = LoopState(4, 4, rng=rng)
    other = NumpyRandomSource(5)
    assert state.clone().rng is rng
    assert state.clone(rng=other).rng is other


# --- Initial loop ---


def test_initial_loop_starts_seeded():
    seeded = LoopState(4, 3)
    ring = seeded.seed((1, 1))
    state = LoopState(4, 3, initial=ring)
    assert state.is_seeded
    assert state.loop == ring


def test_invalid_initial_loop_rejected():
    ring = LoopState(4, 3).seed((1, 1))
    with pytest.raises(LoopInvariantError):
        LoopState(4, 3, initial=ring[:-1])
