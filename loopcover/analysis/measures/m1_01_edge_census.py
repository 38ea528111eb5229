"""M1.01: Edge Census.

Loop length split by edge kind.
"""

from __future__ import annotations

from loopcover.analysis.context import LoopContext
from loopcover.analysis.registry import Stage, measure
from loopcover.engine.edge import EdgeKind


@measure(
    id="M1.01",
    stage=Stage.STRUCTURE,
    description="Count loop edges by kind",
)
def edge_census(ctx: LoopContext) -> None:
    radial = 0
    for ed in ctx.edges:
        ed.features["kind"] = ed.edge.kind.value
        if ed.edge.kind is EdgeKind.RADIAL:
            radial += 1

    ctx.features["length"] = ctx.length
    ctx.features["radial_edges"] = radial
    ctx.features["concentric_edges"] = ctx.length - radial
