"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Sequence
from typing import TypeVar

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

_T = TypeVar("_T")


class ScriptedRandom:
    """Deterministic stand-in for :class:`random.Random`.

    ``random()`` pops pre-scripted floats (then returns 0.99), ``randint``
    always returns *jitter*, and ``choice`` picks the first element while
    recording every sequence it was offered.
    """

    def __init__(self, floats: Sequence[float] = (), jitter: int = 0) -> None:
        self.floats = list(floats)
        self.jitter = jitter
        self.offered: list[list[object]] = []

    def random(self) -> float:
        return self.floats.pop(0) if self.floats else 0.99

    def randint(self, a: int, b: int) -> int:
        assert a <= self.jitter <= b
        return self.jitter

    def choice(self, seq: Sequence[_T]) -> _T:
        self.offered.append(list(seq))
        return seq[0]


@pytest.fixture
def scripted_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)
