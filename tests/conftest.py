"""Shared fixtures for shobergen tests."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable

import pytest


class ScriptedRandom(random.Random):
    """Random source whose ``random()`` returns a fixed script of values."""

    def __init__(self, values: Iterable[float]) -> None:
        super().__init__(0)
        self._values = list(values)

    def random(self) -> float:
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        return self._values.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._values)


@pytest.fixture
def scripted_rng() -> Callable[[Iterable[float]], ScriptedRandom]:
    """Factory for random sources that replay the given ``random()`` values."""
    return ScriptedRandom
