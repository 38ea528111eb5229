"""Serializable loop snapshot: grid parameters plus the ordered edge sequence."""

from __future__ import annotations

from pydantic import BaseModel, Field

from loopcover.engine.config import EngineConfig
from loopcover.engine.cycle import LoopState
from loopcover.engine.edge import Edge, EdgeKind, touched_vertices
from loopcover.engine.errors import InvalidEdgeKind
from loopcover.engine.grid import GridTopology
from loopcover.engine.random_source import RandomSource


class EdgeModel(BaseModel):
    start: tuple[int, int]  # (angular, radial)
    end: tuple[int, int]
    kind: EdgeKind
    free: bool = False


class LoopSnapshot(BaseModel):
    """One LoopState frozen for a drawing layer or a replay.

    Edge order is walk order; restoring keeps it.
    """

    radial_divisions: int = Field(ge=1)
    concentric_divisions: int = Field(ge=1)
    pull_count: int = Field(default=0, ge=0)
    edges: list[EdgeModel] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: LoopState) -> LoopSnapshot:
        loop = state.loop
        touched = touched_vertices(loop)
        return cls(
            radial_divisions=state.radial_divisions,
            concentric_divisions=state.concentric_divisions,
            pull_count=state.pull_count,
            edges=[
                EdgeModel(
                    start=tuple(e.start),
                    end=tuple(e.end),
                    kind=e.kind,
                    free=bool(e.open_neighbors(touched)),
                )
                for e in loop
            ],
        )

    def to_state(
        self,
        rng: RandomSource | None = None,
        config: EngineConfig | None = None,
    ) -> LoopState:
        """Rebuild a LoopState. Raises InvalidEdgeKind / LoopInvariantError on bad data.

        ``free`` flags are not trusted; the restored state recomputes them.
        """
        grid = GridTopology(self.radial_divisions, self.concentric_divisions)
        edges: list[Edge] = []
        for i, model in enumerate(self.edges):
            edge = Edge(model.start, model.end, grid)
            if edge.kind is not model.kind:
                raise InvalidEdgeKind(
                    f"Edge {i} {edge!r} is {edge.kind.value}, snapshot says {model.kind.value}"
                )
            edges.append(edge)
        state = LoopState(
            self.radial_divisions,
            self.concentric_divisions,
            initial=edges,
            rng=rng,
            config=config,
        )
        state.pull_count = self.pull_count
        return state
