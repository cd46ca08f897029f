"""Factory for building optimizers from a declarative configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..errors import InvalidConfigurationError
from .accelerated import AcceleratedGradientDescent, GradientDescent
from .base import Optimizer
from .newton import NewtonsMethod
from .placeholders import InteriorPointsMethod, SimulatedAnnealing
from .random_guessing import RandomGuessing

_SUPPORTED = [
    "random_guessing",
    "accelerated_gradient_descent",
    "gradient_descent",
    "newtons_method",
    "simulated_annealing",
    "interior_points_method",
]


@dataclass(frozen=True)
class OptimizerConfig:
    """
    Configuration for creating an optimizer.

    Fields that a strategy does not use are ignored, so one config type can
    describe every entry of :func:`available_optimizers`.

    Args:
        name: Strategy name, see :func:`available_optimizers`. Matching is
            case-insensitive and treats ``-`` and spaces like ``_``.
        count: Sample count for random guessing, restart count for the
            accelerated and Newton strategies. Defaults to 1.
        steps: Iterations per restart for the accelerated, plain gradient
            and Newton strategies. Defaults to 100.
    """

    name: str
    count: int = 1
    steps: int = 100


def available_optimizers() -> List[str]:
    """Return the canonical names accepted by :func:`create_optimizer`."""
    return list(_SUPPORTED)


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def create_optimizer(config: OptimizerConfig) -> Optimizer:
    """
    Create an optimizer from a configuration.

    Args:
        config: Optimizer configuration.

    Returns:
        A freshly constructed :class:`Optimizer`.

    Raises:
        InvalidConfigurationError: If the name is not supported or the counts
            are invalid for the selected strategy.
    """
    key = _normalize(config.name)

    if key == "random_guessing":
        return RandomGuessing(count=config.count)
    elif key == "accelerated_gradient_descent":
        return AcceleratedGradientDescent(restarts=config.count, steps=config.steps)
    elif key == "gradient_descent":
        return GradientDescent(steps=config.steps)
    elif key == "newtons_method":
        return NewtonsMethod(restarts=config.count, steps=config.steps)
    elif key == "simulated_annealing":
        return SimulatedAnnealing()
    elif key == "interior_points_method":
        return InteriorPointsMethod()
    else:
        raise InvalidConfigurationError(
            f"Unsupported optimizer name '{config.name}'. "
            f"Supported names: {_SUPPORTED}"
        )


__all__ = ["OptimizerConfig", "available_optimizers", "create_optimizer"]
