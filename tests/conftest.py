"""Pytest configuration for pathtracer tests.

Provides seeded generators and small shared scene pieces so every test is
deterministic.
"""

import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.materials.lambertian import Lambertian


class ScriptedRng:
    """Stands in for random.Random, replaying fixed values.

    random() always returns the same value; uniform() pops from a script and
    falls back to the midpoint of the range once the script runs out.
    """

    def __init__(self, value=0.5, script=None):
        self.value = value
        self.script = list(script or [])

    def random(self):
        return self.value

    def uniform(self, lo, hi):
        if self.script:
            return self.script.pop(0)
        return 0.5 * (lo + hi)


@pytest.fixture
def rng():
    """Seeded generator, fresh for each test."""
    return random.Random(42)


@pytest.fixture
def scripted_rng():
    """Factory for generators that return scripted values."""
    return ScriptedRng


@pytest.fixture
def grey():
    """Diffuse material used where the surface colour does not matter."""
    return Lambertian(Vector3(0.5, 0.5, 0.5))
