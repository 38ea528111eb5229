"""Engine configuration: controls checking and driver defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loopcover.config import Settings


@dataclass
class EngineConfig:
    """Knobs for LoopState and the progression/series drivers."""

    # Re-validate closure and self-avoidance after every pull (O(n) per pull)
    check_invariants: bool = True

    # Pull budget for each covered instance in a series
    series_iterations: int = 200

    # Snapshot counts, one per cell of a 6x6 and a 5x5 display grid
    progression_count: int = 36
    series_count: int = 25

    @classmethod
    def from_settings(cls, settings: Settings) -> EngineConfig:
        return cls(
            check_invariants=settings.check_invariants,
            series_iterations=settings.series_iterations,
        )
