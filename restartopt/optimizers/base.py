"""Shared optimizer contract and the restart loop used by iterative strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import chain
from numbers import Integral
from typing import ClassVar, Iterable

from ..errors import InvalidConfigurationError
from ..logging import get_logger
from ..problem import Problem, Vector

logger = get_logger(__name__)


def check_count(value: object, label: str, minimum: int) -> int:
    """
    Validate an iteration or sample count.

    Args:
        value: The user-supplied count.
        label: Parameter name used in the error message.
        minimum: Smallest accepted value (1 for sample/restart counts, 0 for
            step budgets).

    Returns:
        The count as a plain ``int``.

    Raises:
        InvalidConfigurationError: If ``value`` is not an integer (bools are
            rejected too) or is below ``minimum``.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidConfigurationError(
            f"invalid configuration: {label} must be an integer, got {value!r}"
        )
    if value < minimum:
        raise InvalidConfigurationError(
            f"invalid configuration: {label} must be >= {minimum}, got {value}"
        )
    return int(value)


def select_best(problem: Problem, candidates: Iterable[Vector]) -> Vector:
    """
    Return the candidate with the smallest objective value.

    Candidates are consumed lazily and in order, so a generator that draws
    random points keeps its sampling sequence. Ties keep the earlier point
    (strict ``<``), and a NaN value never displaces the incumbent.

    Raises:
        ValueError: If ``candidates`` is empty.
    """
    iterator = iter(candidates)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("select_best() needs at least one candidate") from None
    best_value = problem.function(best)
    for index, candidate in enumerate(iterator, start=1):
        value = problem.function(candidate)
        improved = value < best_value
        logger.debug(
            "candidate %d: f=%.6g (incumbent f=%.6g)%s",
            index,
            value,
            best_value,
            " -> accepted" if improved else "",
        )
        if improved:
            best, best_value = candidate, value
    return best


class Optimizer(ABC):
    """
    Strategy that searches a problem's bounded domain for a minimizer.

    Subclasses set :attr:`label` and implement :meth:`optimize`. Instances hold
    only their hyperparameters, so repeated calls are independent apart from
    the random draws they consume from ``problem.bounds``.
    """

    label: ClassVar[str] = ""

    @property
    def name(self) -> str:
        """Human-readable identifier used when reporting results."""
        return self.label

    @abstractmethod
    def optimize(self, problem: Problem) -> Vector:
        """Return a point believed to approximately minimize ``problem.fun``."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class RestartOptimizer(Optimizer):
    """
    Template for strategies that refine several random starting points.

    :meth:`optimize` first draws an independent fallback point, then for each
    restart draws a start point and hands it to :meth:`run_from`. The best of
    the fallback and all restart results is returned.

    Args:
        restarts: Number of independent restarts, at least 1.
        steps: Iterations per restart, at least 0.
    """

    def __init__(self, restarts: int, steps: int) -> None:
        self.restarts = check_count(restarts, "restarts", 1)
        self.steps = check_count(steps, "steps", 0)

    @abstractmethod
    def run_from(self, problem: Problem, x0: Vector) -> Vector:
        """Run one restart from ``x0`` for :attr:`steps` iterations."""

    def optimize(self, problem: Problem) -> Vector:
        logger.debug(
            "%s: %d restart(s) x %d step(s)", self.name, self.restarts, self.steps
        )
        fallback = problem.random_point()
        restarts = (
            self.run_from(problem, problem.random_point())
            for _ in range(self.restarts)
        )
        return select_best(problem, chain([fallback], restarts))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(restarts={self.restarts}, steps={self.steps})"
        )


__all__ = ["Optimizer", "RestartOptimizer", "check_count", "select_best"]
