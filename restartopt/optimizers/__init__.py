"""Optimization strategies sharing the :class:`Optimizer` contract.

Example
-------
>>> import numpy as np
>>> from restartopt.optimizers import AcceleratedGradientDescent
>>> from restartopt.problem import Box, Problem
>>> problem = Problem(
...     fun=lambda x: float(x @ x),
...     grad=lambda x: 2 * x,
...     bounds=Box.cube(3, 10.0, rng=np.random.default_rng(0)),
... )
>>> x = AcceleratedGradientDescent(restarts=5, steps=200).optimize(problem)
>>> problem.function(x) < 1e-3
True
"""

from .accelerated import (
    STEP_SIZE,
    AcceleratedGradientDescent,
    GradientDescent,
    MomentumState,
    accelerated_step,
    momentum_trace,
    next_momentum,
)
from .base import Optimizer, RestartOptimizer, check_count, select_best
from .factory import OptimizerConfig, available_optimizers, create_optimizer
from .newton import NewtonsMethod, newton_step
from .placeholders import InteriorPointsMethod, SimulatedAnnealing
from .random_guessing import RandomGuessing

__all__ = [
    "AcceleratedGradientDescent",
    "GradientDescent",
    "InteriorPointsMethod",
    "MomentumState",
    "NewtonsMethod",
    "Optimizer",
    "OptimizerConfig",
    "RandomGuessing",
    "RestartOptimizer",
    "STEP_SIZE",
    "SimulatedAnnealing",
    "accelerated_step",
    "available_optimizers",
    "check_count",
    "create_optimizer",
    "momentum_trace",
    "newton_step",
    "next_momentum",
    "select_best",
]
