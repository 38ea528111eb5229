"""loopcover deformation engine."""

from loopcover.engine.config import EngineConfig
from loopcover.engine.cycle import LoopState
from loopcover.engine.drivers import progression, series
from loopcover.engine.edge import Edge, EdgeKind, touched_vertices
from loopcover.engine.errors import (
    InvalidEdgeKind,
    LoopcoverError,
    LoopInvariantError,
    PinnedEdgeError,
)
from loopcover.engine.grid import GridPoint, GridTopology
from loopcover.engine.invariants import check_loop, is_simple_cycle, loop_violations
from loopcover.engine.random_source import NumpyRandomSource, RandomSource

__all__ = [
    "EngineConfig",
    "LoopState",
    "progression",
    "series",
    "Edge",
    "EdgeKind",
    "touched_vertices",
    "InvalidEdgeKind",
    "LoopcoverError",
    "LoopInvariantError",
    "PinnedEdgeError",
    "GridPoint",
    "GridTopology",
    "check_loop",
    "is_simple_cycle",
    "loop_violations",
    "NumpyRandomSource",
    "RandomSource",
]
