"""Shared fixtures for color quiz tests."""

from __future__ import annotations

from collections.abc import Callable
from itertools import cycle

import pytest

from color_quiz.core.color_generator import ColorGenerator


class SequenceRng:
    """Stand-in for random.Random that replays channel values in order."""

    def __init__(self, values: list[int]) -> None:
        self._values = cycle(values)

    def randint(self, low: int, high: int) -> int:
        value = next(self._values)
        assert low <= value <= high
        return value


@pytest.fixture
def fixed_generator() -> Callable[[list[int]], ColorGenerator]:
    """Build a ColorGenerator that yields the given r, g, b values cyclically."""

    def factory(values: list[int]) -> ColorGenerator:
        return ColorGenerator(SequenceRng(values))

    return factory
