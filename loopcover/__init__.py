"""loopcover: a self-avoiding loop deforming on an annular grid until it is stuck."""

__version__ = "0.1.0"

from loopcover.engine import (
    Edge,
    EdgeKind,
    EngineConfig,
    GridPoint,
    GridTopology,
    InvalidEdgeKind,
    LoopcoverError,
    LoopInvariantError,
    LoopState,
    NumpyRandomSource,
    PinnedEdgeError,
    RandomSource,
    progression,
    series,
)

__all__ = [
    "Edge",
    "EdgeKind",
    "EngineConfig",
    "GridPoint",
    "GridTopology",
    "InvalidEdgeKind",
    "LoopcoverError",
    "LoopInvariantError",
    "LoopState",
    "NumpyRandomSource",
    "PinnedEdgeError",
    "RandomSource",
    "progression",
    "series",
]
