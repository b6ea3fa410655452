"""
Pytest fixtures and helpers shared by the path tracer tests.

Entropy providers here follow the renderer's contract: an object with a
``random()`` method returning a float in [0, 1).
"""

import itertools
import random

import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


class ConstantRandom:
    """Entropy source that always returns the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class SequenceRandom:
    """Entropy source that replays a fixed list of values, then repeats the last one."""

    def __init__(self, values):
        self._values = itertools.chain(values, itertools.repeat(values[-1]))

    def random(self):
        return next(self._values)


@pytest.fixture
def constant_rng():
    """Constant draws of 0.75; maps rejection-sampling candidates to (0.5, 0.5, 0.5)."""
    return ConstantRandom(0.75)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def small_scene(gray):
    """Ground sphere plus one sphere in front of a camera looking down -z."""
    return HittableList([
        Sphere(Vector3(0, -100.5, -1), 100, gray),
        Sphere(Vector3(0, 0, -1), 0.5, gray),
    ])


def assert_vec_close(actual, expected, abs_tol=1e-9):
    """Compare two Vector3 (or 3-sequences) component-wise."""
    assert tuple(actual) == pytest.approx(tuple(expected), abs=abs_tol), \
        f"{actual!r} != {expected!r}"
