"""Read-only loop analysis: measures registered per stage, run by a pipeline."""

from loopcover.analysis.context import EdgeData, LoopContext
from loopcover.analysis.pipeline import AnalysisPipeline, analyze
from loopcover.analysis.registry import Stage, get_registry, measure, register_measures

__all__ = [
    "EdgeData",
    "LoopContext",
    "AnalysisPipeline",
    "analyze",
    "Stage",
    "get_registry",
    "measure",
    "register_measures",
]
