"""M1.02: Ring Occupancy.

How many loop vertices sit on each ring, and which band of rings the loop spans.
"""

from __future__ import annotations

import numpy as np

from loopcover.analysis.context import LoopContext
from loopcover.analysis.registry import Stage, measure
from loopcover.engine.edge import touched_vertices


@measure(
    id="M1.02",
    stage=Stage.STRUCTURE,
    description="Loop vertices per ring and the ring band the loop spans",
)
def ring_occupancy(ctx: LoopContext) -> None:
    vertices = touched_vertices(ctx.loop)
    if not vertices:
        return

    rings = np.fromiter((v.radial for v in vertices), dtype=np.int64, count=len(vertices))
    per_ring = np.bincount(rings, minlength=ctx.grid.concentric_divisions)

    ctx.features["vertex_count"] = len(vertices)
    ctx.features["ring_occupancy"] = per_ring.tolist()
    ctx.features["innermost_ring"] = int(rings.min())
    ctx.features["outermost_ring"] = int(rings.max())
    ctx.features["ring_span"] = int(rings.max() - rings.min()) + 1
    # Share of all grid vertices the loop passes through
    ctx.features["grid_coverage"] = round(len(vertices) / ctx.grid.size, 4)
