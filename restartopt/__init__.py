"""restartopt - restart-based optimizers over bounded search boxes."""

__version__ = "0.1.0"

from .errors import InvalidConfigurationError, InvalidProblemError, RestartOptError
from .logging import configure_logging, get_logger, set_log_level
from .optimizers import (
    AcceleratedGradientDescent,
    GradientDescent,
    InteriorPointsMethod,
    MomentumState,
    NewtonsMethod,
    Optimizer,
    OptimizerConfig,
    RandomGuessing,
    RestartOptimizer,
    SimulatedAnnealing,
    accelerated_step,
    available_optimizers,
    create_optimizer,
    momentum_trace,
    newton_step,
)
from .problem import Box, Problem

__all__ = [
    "AcceleratedGradientDescent",
    "Box",
    "GradientDescent",
    "InteriorPointsMethod",
    "InvalidConfigurationError",
    "InvalidProblemError",
    "MomentumState",
    "NewtonsMethod",
    "Optimizer",
    "OptimizerConfig",
    "Problem",
    "RandomGuessing",
    "RestartOptError",
    "RestartOptimizer",
    "SimulatedAnnealing",
    "__version__",
    "accelerated_step",
    "available_optimizers",
    "configure_logging",
    "create_optimizer",
    "get_logger",
    "momentum_trace",
    "newton_step",
    "set_log_level",
]
