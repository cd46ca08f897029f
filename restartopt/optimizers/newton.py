"""Multi-restart Newton iteration driven by an inverse-Hessian oracle."""

from __future__ import annotations

from typing import Callable

import numpy as np

from ..logging import get_logger
from ..problem import Matrix, Problem, Vector
from .base import RestartOptimizer

logger = get_logger(__name__)


def newton_step(
    x: Vector,
    gradient: Callable[[Vector], Vector],
    ihessian: Callable[[Vector], Matrix],
) -> Vector:
    """Full Newton step ``x - H^-1(x) @ grad(x)``: no damping, no line search."""
    return x - ihessian(x) @ gradient(x)


class NewtonsMethod(RestartOptimizer):
    """
    Newton's method from several random starts.

    Every restart runs the full ``steps`` budget; there is no convergence
    check, so an ill-conditioned ``ihess`` or an iterate leaving the region
    where the derivatives are meaningful simply yields a poor (possibly
    non-finite) candidate. Such candidates lose against any finite incumbent.

    Args:
        restarts: Number of independent restarts, at least 1.
        steps: Newton steps per restart, at least 0.
    """

    label = "Newton's Method"

    def run_from(self, problem: Problem, x0: Vector) -> Vector:
        x = np.array(x0, dtype=float)
        for _ in range(self.steps):
            x = newton_step(x, problem.gradient, problem.ihessian)
        if not np.all(np.isfinite(x)):
            logger.debug("restart diverged to a non-finite iterate")
        return x


__all__ = ["NewtonsMethod", "newton_step"]
