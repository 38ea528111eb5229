"""LoopContext: the single mutable state object flowing through all measures.

Per-edge results -> EdgeData.features
Whole-loop results -> LoopContext.features
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loopcover.engine.cycle import LoopState
from loopcover.engine.edge import Edge
from loopcover.engine.grid import GridTopology


@dataclass
class EdgeData:
    """One loop edge and what the measures found out about it."""

    index: int
    edge: Edge
    features: dict[str, Any] = field(default_factory=dict)


@dataclass
class LoopContext:
    """Shared state flowing through the analysis pipeline."""

    grid: GridTopology
    # Loop edges in walk order
    edges: list[EdgeData] = field(default_factory=list)
    # Pulls applied since the loop was seeded
    pull_count: int = 0
    # Whole-loop features keyed by feature name
    features: dict[str, Any] = field(default_factory=dict)

    # --- Pipeline metadata ---
    completed_measures: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_state(cls, state: LoopState) -> LoopContext:
        return cls(
            grid=state.grid,
            edges=[EdgeData(index=i, edge=e) for i, e in enumerate(state.loop)],
            pull_count=state.pull_count,
        )

    @property
    def loop(self) -> tuple[Edge, ...]:
        return tuple(ed.edge for ed in self.edges)

    @property
    def length(self) -> int:
        return len(self.edges)
