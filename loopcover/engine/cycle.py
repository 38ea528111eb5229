"""LoopState: a continuously deformable loop embedded in an annular grid.

The loop starts as a full ring and grows by pulls: each pull swaps one free
edge for a three-edge detour through a neighboring edge, so the loop gains
two edges and stays a simple closed cycle.

Usage:
    state = LoopState(5, 15, rng=NumpyRandomSource(seed=3))
    state.seed()
    while state.free_set():
        state.pull()
"""

from __future__ import annotations

import logging
import time
from typing import Sequence

from loopcover.engine.config import EngineConfig
from loopcover.engine.edge import Edge, touched_vertices
from loopcover.engine.grid import GridPoint, GridTopology
from loopcover.engine.invariants import MIN_LOOP_LENGTH, check_loop
from loopcover.engine.random_source import RandomSource, default_random_source

logger = logging.getLogger(__name__)


class LoopState:
    """Owns one loop's ordered edge sequence on a fixed R x C grid.

    Unseeded until ``seed`` runs or an ``initial`` loop is supplied. Unseeded
    states have an empty loop, an empty free set, and treat ``pull`` as a no-op.
    """

    def __init__(
        self,
        radial_divisions: int,
        concentric_divisions: int,
        initial: Sequence[Edge] | None = None,
        *,
        rng: RandomSource | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.grid = GridTopology(radial_divisions, concentric_divisions)
        self.rng = rng or default_random_source()
        self.config = config or EngineConfig()
        # Pulls applied since the last seed
        self.pull_count = 0
        self._edges: list[Edge] = []

        if initial:
            edges = list(initial)
            check_loop(edges, self.grid)
            self._edges = edges

    # --- Read-only surface ---

    @property
    def radial_divisions(self) -> int:
        return self.grid.radial_divisions

    @property
    def concentric_divisions(self) -> int:
        return self.grid.concentric_divisions

    @property
    def loop(self) -> tuple[Edge, ...]:
        """Current edges in walk order. Stable until the next seed or pull."""
        return tuple(self._edges)

    @property
    def is_seeded(self) -> bool:
        return bool(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    # --- Transitions ---

    def seed(self, point: tuple[int, int] | None = None) -> tuple[Edge, ...]:
        """Replace the loop with the full ring through ``point`` (random if omitted)."""
        if self.grid.radial_divisions < MIN_LOOP_LENGTH:
            raise ValueError(
                f"A ring needs at least {MIN_LOOP_LENGTH} radial divisions, "
                f"grid has {self.grid.radial_divisions}"
            )
        if point is None:
            point = self.rng.uniform_point(self.grid)
        origin = GridPoint(*point)
        if not self.grid.contains(origin):
            raise ValueError(f"Seed point {tuple(origin)} lies outside the grid")

        wrap = self.grid.wrap
        self._edges = [
            Edge(
                GridPoint(wrap(origin.angular + i), origin.radial),
                GridPoint(wrap(origin.angular + i + 1), origin.radial),
                self.grid,
            )
            for i in range(self.grid.radial_divisions)
        ]
        self.pull_count = 0
        logger.debug("Seeded ring at %s (%d edges)", tuple(origin), len(self._edges))
        return self.loop

    def free_set(self) -> list[Edge]:
        """Loop edges with at least one open neighbor, in random order."""
        touched = touched_vertices(self._edges)
        free = [edge for edge in self._edges if edge.open_neighbors(touched)]
        return self.rng.shuffle(free)

    def pull(self, candidates: Sequence[Edge] | None = None) -> tuple[Edge, ...]:
        """Deform the loop at the first candidate (``free_set()`` by default).

        No candidates means the loop is stuck; it is returned unchanged.
        """
        if candidates is None:
            candidates = self.free_set()
        if not candidates:
            return self.loop

        selected = candidates[0]
        edges = selected.pull(self._edges, self.rng)
        if self.config.check_invariants:
            check_loop(edges, self.grid)

        self._edges = edges
        self.pull_count += 1
        logger.debug("Pulled %r, loop length %d", selected, len(edges))
        return self.loop

    def cover(self, max_iterations: int | None = None) -> tuple[Edge, ...]:
        """Reseed at a random point, then pull until stuck or out of budget.

        ``None`` means no budget. ``0`` returns the fresh ring.
        """
        if max_iterations is not None and max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {max_iterations}")

        start = time.perf_counter()
        self.seed()

        iteration = 0
        stuck = False
        while max_iterations is None or iteration < max_iterations:
            candidates = self.free_set()
            if not candidates:
                stuck = True
                break
            self.pull(candidates)
            iteration += 1

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Cover: %d pulls, %d edges, %s in %.1fms",
            iteration,
            len(self._edges),
            "stuck" if stuck else "budget spent",
            elapsed,
        )
        return self.loop

    def clone(self, rng: RandomSource | None = None) -> LoopState:
        """Independent copy. Shares this state's random source unless given one."""
        twin = LoopState(
            self.grid.radial_divisions,
            self.grid.concentric_divisions,
            rng=rng or self.rng,
            config=self.config,
        )
        # Edges are immutable values, so a list copy is a full copy
        twin._edges = list(self._edges)
        twin.pull_count = self.pull_count
        return twin

    def __repr__(self) -> str:
        return (
            f"LoopState(R={self.grid.radial_divisions}, C={self.grid.concentric_divisions}, "
            f"edges={len(self._edges)}, pulls={self.pull_count})"
        )
