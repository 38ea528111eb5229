"""M3.01: Loop Invariants.

Closure and self-avoidance report. Never raises; violations are listed.
"""

from __future__ import annotations

from loopcover.analysis.context import LoopContext
from loopcover.analysis.registry import Stage, measure
from loopcover.engine.invariants import loop_violations


@measure(
    id="M3.01",
    stage=Stage.VALIDATION,
    description="Check the loop is a single simple closed cycle",
)
def invariants(ctx: LoopContext) -> None:
    violations = loop_violations(ctx.loop, ctx.grid)
    ctx.features["violations"] = violations
    ctx.features["is_simple_cycle"] = not violations
