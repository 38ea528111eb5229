"""Analysis pipeline: runs loop measures in dependency order."""

from __future__ import annotations

import logging
import time

from loopcover.analysis.context import LoopContext
from loopcover.analysis.registry import MeasureRegistry, get_registry, register_measures
from loopcover.engine.cycle import LoopState

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Orchestrates the measure pipeline. A failing measure never stops the run."""

    def __init__(self, registry: MeasureRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: LoopContext, requested: set[str] | None = None) -> LoopContext:
        """Run every measure (or ``requested`` plus their dependencies) on ``ctx``."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order(requested)

        for spec in ordered:
            if any(dep in ctx.errors for dep in spec.dependencies):
                ctx.errors[spec.id] = "skipped: dependency failed"
                continue
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_measures.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Analysis complete: %d/%d measures on %d edges in %.0fms",
            len(ctx.completed_measures),
            len(ordered),
            ctx.length,
            total,
        )
        return ctx


def analyze(state: LoopState, requested: set[str] | None = None) -> LoopContext:
    """Run the registered measures over a snapshot of ``state``."""
    # Re-importing is a no-op, so this only registers on first use
    register_measures()
    return AnalysisPipeline().run(LoopContext.from_state(state), requested)
