"""Shared test fixtures."""

from __future__ import annotations

from typing import Sequence, TypeVar

import pytest

from loopcover.engine.grid import GridPoint, GridTopology
from loopcover.engine.random_source import NumpyRandomSource

T = TypeVar("T")


class ScriptedRandomSource:
    """Deterministic RandomSource: fixed point, identity shuffle, first choice."""

    def __init__(self, point: tuple[int, int] = (0, 0)) -> None:
        self.point = GridPoint(*point)
        self.choices: list[list] = []

    def uniform_point(self, grid: GridTopology) -> GridPoint:
        return self.point

    def shuffle(self, items: Sequence[T]) -> list[T]:
        return list(items)

    def choice(self, items: Sequence[T]) -> T:
        self.choices.append(list(items))
        return items[0]


@pytest.fixture
def rng() -> NumpyRandomSource:
    return NumpyRandomSource(1234)


@pytest.fixture
def scripted() -> ScriptedRandomSource:
    return ScriptedRandomSource()


@pytest.fixture
def grid43() -> GridTopology:
    """Four spokes, three rings: the smallest grid with an inner, middle and outer ring."""
    return GridTopology(4, 3)
