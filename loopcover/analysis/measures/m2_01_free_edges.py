"""M2.01: Free Edges.

Which loop edges can still be pulled (free) and which cannot (pinned).
A loop with no free edge is at its fixed point.
"""

from __future__ import annotations

from loopcover.analysis.context import LoopContext
from loopcover.analysis.registry import Stage, measure
from loopcover.engine.edge import touched_vertices


@measure(
    id="M2.01",
    stage=Stage.MOBILITY,
    dependencies=["M1.01"],
    description="Split loop edges into free and pinned",
)
def free_edges(ctx: LoopContext) -> None:
    touched = touched_vertices(ctx.loop)

    free: list[int] = []
    pinned: list[int] = []
    for ed in ctx.edges:
        is_free = bool(ed.edge.open_neighbors(touched))
        ed.features["free"] = is_free
        (free if is_free else pinned).append(ed.index)

    ctx.features["free_indices"] = free
    ctx.features["pinned_indices"] = pinned
    ctx.features["free_count"] = len(free)
    ctx.features["free_fraction"] = round(len(free) / ctx.length, 4) if ctx.length else 0.0
    ctx.features["stuck"] = ctx.length > 0 and not free
