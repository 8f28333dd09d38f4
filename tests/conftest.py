from __future__ import annotations

import random

import pytest


class FixedRandom(random.Random):
    """A generator whose every draw is the same number."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom
