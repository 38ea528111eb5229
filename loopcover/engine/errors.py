"""Engine error taxonomy. All are precondition failures surfaced to the caller."""

from __future__ import annotations


class LoopcoverError(ValueError):
    """Base class for loop engine errors."""


class InvalidEdgeKind(LoopcoverError):
    """Two points that are neither radial- nor concentric-aligned."""


class PinnedEdgeError(LoopcoverError):
    """Pull requested on an edge whose every neighbor touches the loop."""


class LoopInvariantError(LoopcoverError):
    """An edge sequence that is not a single simple closed cycle."""
