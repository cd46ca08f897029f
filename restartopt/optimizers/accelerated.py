"""Nesterov-accelerated gradient descent with momentum restarts.

Each restart iterates the pure transition :func:`accelerated_step` on a
:class:`MomentumState` ``(x, y, t)``::

    x'  = y - eta * grad(y)
    t'  = t * (sqrt(t**2 + 4) - t) / 2
    y'  = x' + t * (1 - t) / (t**2 + t') * (x' - x)

and resets ``t' = 1`` whenever ``(x' - x) . grad(y) > 0``, i.e. when the last
step went uphill along the gradient it was computed from. The reset only
affects the coefficient carried into the next step; ``y'`` keeps the
extrapolation computed with the un-reset ``t'``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, List

import numpy as np

from ..logging import get_logger
from ..problem import Problem, Vector
from .base import Optimizer, RestartOptimizer, check_count

logger = get_logger(__name__)

STEP_SIZE = 0.01


@dataclass(frozen=True)
class MomentumState:
    """
    Iterate of the accelerated recurrence.

    Attributes:
        x: Current gradient-step iterate (the restart's candidate).
        y: Extrapolated point where the next gradient is evaluated.
        t: Momentum coefficient.
        restarted: Whether the step that produced this state reset ``t``.
    """

    x: Vector
    y: Vector
    t: float = 1.0
    restarted: bool = False

    @classmethod
    def start(cls, x0: Vector) -> "MomentumState":
        x = np.array(x0, dtype=float)
        return cls(x=x, y=x, t=1.0)


def next_momentum(t: float) -> float:
    """Closed-form update of the momentum coefficient."""
    return 0.5 * t * (-t + math.sqrt(4.0 + t * t))


def accelerated_step(
    state: MomentumState, gradient: Callable[[Vector], Vector]
) -> MomentumState:
    """Advance the recurrence by one step; ``gradient`` is evaluated once, at ``y``."""
    t = state.t
    grad = np.asarray(gradient(state.y), dtype=float)
    x_new = state.y - STEP_SIZE * grad
    t_new = next_momentum(t)
    delta = x_new - state.x
    y_new = x_new + (t * (1.0 - t) / (t * t + t_new)) * delta
    restarted = bool(float(delta @ grad) > 0.0)
    if restarted:
        t_new = 1.0
    return MomentumState(x=x_new, y=y_new, t=t_new, restarted=restarted)


def momentum_trace(
    x0: Vector, gradient: Callable[[Vector], Vector], steps: int
) -> List[MomentumState]:
    """Return the states reached after each of ``steps`` accelerated steps."""
    state = MomentumState.start(x0)
    trace: List[MomentumState] = []
    for _ in range(check_count(steps, "steps", 0)):
        state = accelerated_step(state, gradient)
        trace.append(state)
    return trace


class AcceleratedGradientDescent(RestartOptimizer):
    """
    Multi-restart accelerated gradient descent with a fixed step size.

    Every restart starts from a fresh random feasible point and takes exactly
    ``steps`` accelerated steps; there is no line search and no tolerance
    based stopping. Iterates are not projected back into the bounds.

    Args:
        restarts: Number of independent restarts, at least 1.
        steps: Accelerated steps per restart, at least 0.
    """

    label = "Stochastic Gradient Descent"

    def run_from(self, problem: Problem, x0: Vector) -> Vector:
        state = MomentumState.start(x0)
        resets = 0
        for _ in range(self.steps):
            state = accelerated_step(state, problem.gradient)
            resets += state.restarted
        logger.debug(
            "restart finished after %d step(s), %d momentum reset(s)",
            self.steps,
            resets,
        )
        return state.x


class GradientDescent(Optimizer):
    """
    Single-start accelerated descent.

    Delegates to an :class:`AcceleratedGradientDescent` configured with one
    restart, so both produce identical points for identical random draws.

    Args:
        steps: Accelerated steps, at least 0.
    """

    label = "Gradient Descent"

    def __init__(self, steps: int) -> None:
        self._descent = AcceleratedGradientDescent(restarts=1, steps=steps)

    @property
    def steps(self) -> int:
        return self._descent.steps

    def optimize(self, problem: Problem) -> Vector:
        return self._descent.optimize(problem)

    def __repr__(self) -> str:
        return f"GradientDescent(steps={self.steps})"


__all__ = [
    "AcceleratedGradientDescent",
    "GradientDescent",
    "MomentumState",
    "STEP_SIZE",
    "accelerated_step",
    "momentum_trace",
    "next_momentum",
]
