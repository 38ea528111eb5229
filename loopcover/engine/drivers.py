"""Snapshot drivers for multi-instance displays.

progression: one snapshot per deformation step of a single loop.
series:      independent fully covered loops, one per display cell.
"""

from __future__ import annotations

import logging

from loopcover.engine.cycle import LoopState

logger = logging.getLogger(__name__)


def progression(state: LoopState, count: int | None = None) -> list[LoopState]:
    """Seed ``state`` and record ``count`` successive pulls.

    Snapshot k is the loop after k pulls. Once the loop is stuck, the
    remaining snapshots repeat the fixed point. ``state`` is left one pull
    past the last snapshot.
    """
    if count is None:
        count = state.config.progression_count
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    state.seed()
    snapshots: list[LoopState] = []
    for _ in range(count):
        snapshots.append(state.clone())
        state.pull()

    logger.info(
        "Progression: %d snapshots, final length %d",
        len(snapshots),
        len(snapshots[-1]) if snapshots else len(state),
    )
    return snapshots


def series(
    state: LoopState,
    count: int | None = None,
    iterations: int | None = None,
) -> list[LoopState]:
    """Return ``count`` clones of ``state``, each covered for ``iterations`` pulls."""
    if count is None:
        count = state.config.series_count
    if iterations is None:
        iterations = state.config.series_iterations
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    instances: list[LoopState] = []
    for _ in range(count):
        current = state.clone()
        current.cover(iterations)
        instances.append(current)

    logger.info("Series: %d instances covered (budget %d pulls each)", count, iterations)
    return instances
