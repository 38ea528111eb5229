"""M2.02: Free Neighbors.

For each loop edge, the neighbor edges that are themselves free against the
loop. These are the ghost positions a drawing layer highlights around a loop.
"""

from __future__ import annotations

from loopcover.analysis.context import LoopContext
from loopcover.analysis.registry import Stage, measure
from loopcover.engine.edge import touched_vertices


@measure(
    id="M2.02",
    stage=Stage.MOBILITY,
    dependencies=["M2.01"],
    description="Neighbors of each loop edge that are free against the loop",
)
def free_neighbors(ctx: LoopContext) -> None:
    touched = touched_vertices(ctx.loop)

    total = 0
    for ed in ctx.edges:
        ghosts = [n for n in ed.edge.neighbors() if n.open_neighbors(touched)]
        ed.features["free_neighbors"] = ghosts
        ed.features["neighbor_count"] = len(ed.edge.neighbors())
        total += len(ghosts)

    ctx.features["free_neighbor_total"] = total
