"""Loop analysis report: the structured output of the analysis pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field

from loopcover.analysis.context import LoopContext


class LoopReport(BaseModel):
    radial_divisions: int
    concentric_divisions: int
    pull_count: int = 0
    length: int = 0
    radial_edges: int = 0
    concentric_edges: int = 0
    free_count: int = 0
    free_fraction: float = 0.0
    stuck: bool = False
    ring_span: int = 0
    grid_coverage: float = 0.0
    is_simple_cycle: bool = False
    violations: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_context(cls, ctx: LoopContext) -> LoopReport:
        f = ctx.features
        return cls(
            radial_divisions=ctx.grid.radial_divisions,
            concentric_divisions=ctx.grid.concentric_divisions,
            pull_count=ctx.pull_count,
            length=f.get("length", ctx.length),
            radial_edges=f.get("radial_edges", 0),
            concentric_edges=f.get("concentric_edges", 0),
            free_count=f.get("free_count", 0),
            free_fraction=f.get("free_fraction", 0.0),
            stuck=f.get("stuck", False),
            ring_span=f.get("ring_span", 0),
            grid_coverage=f.get("grid_coverage", 0.0),
            is_simple_cycle=f.get("is_simple_cycle", False),
            violations=f.get("violations", []),
            errors=dict(ctx.errors),
        )

    def summary(self) -> str:
        state = "stuck" if self.stuck else f"{self.free_count} free"
        return (
            f"R={self.radial_divisions} C={self.concentric_divisions} "
            f"pulls={self.pull_count} length={self.length} "
            f"(radial {self.radial_edges}, concentric {self.concentric_edges}) "
            f"rings={self.ring_span} coverage={self.grid_coverage:.0%} {state}"
        )
