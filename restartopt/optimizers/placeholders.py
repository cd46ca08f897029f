"""Placeholder strategies that only sample one feasible point.

They exist so that callers iterating over every available strategy get a
uniform interface. A real simulated annealing needs a temperature schedule
and Metropolis acceptance; a real interior point method needs a barrier
trajectory with a duality-gap test. Neither is implemented here.
"""

from __future__ import annotations

from ..logging import get_logger
from ..problem import Problem, Vector
from .base import Optimizer

logger = get_logger(__name__)


class _SingleSample(Optimizer):
    def optimize(self, problem: Problem) -> Vector:
        logger.debug("%s is a placeholder; returning one random sample", self.name)
        return problem.random_point()


class SimulatedAnnealing(_SingleSample):
    """Placeholder: returns a single random feasible point."""

    label = "Simulated Annealing"


class InteriorPointsMethod(_SingleSample):
    """Placeholder: returns a single random feasible point."""

    label = "Interior Points Method"


__all__ = ["InteriorPointsMethod", "SimulatedAnnealing"]
