from __future__ import annotations

import os

import pytest

# Off-screen rendering for the drawing tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class FixedRange:
    """Always returns the same squeeze count and records the bounds asked for."""

    def __init__(self, value: int):
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def next(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def fixed_range():
    return FixedRange
