"""Pytest configuration and shared fixtures for restartopt tests.

This module provides:
- Deterministic RNG fixtures for numpy
- Scripted bounds that replay a fixed sequence of sample points
- Small analytic problems reused across the optimizer tests
"""

import os
from typing import Iterable, List

import numpy as np
import pytest

from restartopt.problem import Box, Problem


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


class ScriptedBounds:
    """Bounds stand-in whose random_point() replays the given points in order."""

    def __init__(self, points: Iterable) -> None:
        self._points: List[np.ndarray] = [
            np.atleast_1d(np.asarray(p, dtype=float)) for p in points
        ]
        self.draws = 0

    @property
    def dim(self) -> int:
        return int(self._points[0].size)

    def random_point(self) -> np.ndarray:
        if self.draws >= len(self._points):
            raise AssertionError("ScriptedBounds ran out of points")
        point = self._points[self.draws].copy()
        self.draws += 1
        return point


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed numpy's global RNG so unseeded helpers stay reproducible."""
    np.random.seed(_seed())


@pytest.fixture
def scripted():
    """Factory fixture building ScriptedBounds from a list of points."""
    return ScriptedBounds


@pytest.fixture
def sphere_problem(rng: np.random.Generator) -> Problem:
    """f(x) = x.x on [-10, 10]^3 with exact gradient and inverse Hessian."""
    return Problem(
        fun=lambda x: float(x @ x),
        grad=lambda x: 2.0 * x,
        ihess=lambda x: 0.5 * np.eye(x.size),
        bounds=Box.cube(3, 10.0, rng=rng),
    )
