"""Measure registry: each loop measure registers itself with ``@measure``.

Usage:
    @measure(id="M2.01", stage=Stage.MOBILITY, dependencies=["M1.01"])
    def free_edges(ctx: LoopContext) -> None:
        ctx.features["free_count"] = ...

A measure may only depend on measures of its own or an earlier stage, so
structure is known before mobility, and mobility before validation.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from loopcover.analysis.context import LoopContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    STRUCTURE = 1  # what the loop is made of
    MOBILITY = 2  # where it can still move
    VALIDATION = 3


@dataclass
class MeasureSpec:
    id: str
    stage: Stage
    fn: Callable[["LoopContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def sort_key(self) -> tuple[Stage, str]:
        return (self.stage, self.id)


class MeasureRegistry:
    def __init__(self) -> None:
        self._measures: dict[str, MeasureSpec] = {}

    def __contains__(self, measure_id: object) -> bool:
        return measure_id in self._measures

    def __len__(self) -> int:
        return len(self._measures)

    def register(self, spec: MeasureSpec) -> None:
        if spec.id in self._measures:
            raise ValueError(f"Measure {spec.id} is already registered")
        self._measures[spec.id] = spec
        logger.debug("Registered measure %s (%s)", spec.id, spec.stage.name)

    def _lookup(self, measure_id: str, needed_by: str | None) -> MeasureSpec:
        spec = self._measures.get(measure_id)
        if spec is None:
            suffix = f" (needed by {needed_by})" if needed_by else ""
            raise ValueError(f"Unknown measure {measure_id}{suffix}")
        return spec

    def resolve_order(self, requested: Iterable[str] | None = None) -> list[MeasureSpec]:
        """Run order for ``requested`` (all when None) plus what they depend on.

        Stage then id order, except that a measure always follows its
        dependencies.
        """
        wanted = self._measures if requested is None else requested
        roots = sorted((self._lookup(mid, None) for mid in wanted), key=lambda s: s.sort_key)

        ordered: list[MeasureSpec] = []
        placed: set[str] = set()
        visiting: list[str] = []

        def place(spec: MeasureSpec) -> None:
            if spec.id in placed:
                return
            if spec.id in visiting:
                chain = " -> ".join(visiting[visiting.index(spec.id) :] + [spec.id])
                raise ValueError(f"Circular measure dependency: {chain}")
            visiting.append(spec.id)
            deps = [self._lookup(dep, spec.id) for dep in spec.dependencies]
            for dep in sorted(deps, key=lambda s: s.sort_key):
                if dep.stage > spec.stage:
                    raise ValueError(
                        f"{spec.id} ({spec.stage.name}) cannot depend on "
                        f"{dep.id} ({dep.stage.name})"
                    )
                place(dep)
            visiting.pop()
            placed.add(spec.id)
            ordered.append(spec)

        for spec in roots:
            place(spec)
        return ordered


_registry = MeasureRegistry()


def get_registry() -> MeasureRegistry:
    return _registry


def measure(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a loop measure."""

    def decorator(fn: Callable[["LoopContext"], None]):
        _registry.register(
            MeasureSpec(
                id=id,
                stage=stage,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator


def register_measures() -> None:
    """Import every module in ``measures/`` so their decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("loopcover.analysis.measures")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"loopcover.analysis.measures.{module_name}")
