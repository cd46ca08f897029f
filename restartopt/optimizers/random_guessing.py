"""Pure random search baseline."""

from __future__ import annotations

from ..logging import get_logger
from ..problem import Problem, Vector
from .base import Optimizer, check_count, select_best

logger = get_logger(__name__)


class RandomGuessing(Optimizer):
    """
    Sample ``count`` feasible points and keep the one with the lowest value.

    The first sample is the initial incumbent and later samples replace it
    only when strictly better, so ties resolve to the earliest draw.

    Args:
        count: Number of samples, at least 1.

    Raises:
        InvalidConfigurationError: If ``count`` is not an integer >= 1.
    """

    label = "Random Guessing"

    def __init__(self, count: int) -> None:
        self.count = check_count(count, "count", 1)

    def optimize(self, problem: Problem) -> Vector:
        logger.debug("%s: drawing %d sample(s)", self.name, self.count)
        samples = (problem.random_point() for _ in range(self.count))
        return select_best(problem, samples)

    def __repr__(self) -> str:
        return f"RandomGuessing(count={self.count})"


__all__ = ["RandomGuessing"]
