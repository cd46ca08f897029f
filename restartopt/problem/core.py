"""Problem description consumed by every optimizer in this package.

A problem bundles the objective, its first and (inverse) second derivative
oracles, and the feasible box from which starting points are drawn. Shapes
are checked once at construction so that the optimizers themselves never
validate dimensions inside their loops.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import numpy as np

from ..errors import InvalidProblemError
from .utils import approx_grad, approx_ihessian

Vector = np.ndarray
Matrix = np.ndarray
Objective = Callable[[Vector], float]
Gradient = Callable[[Vector], Vector]
InverseHessian = Callable[[Vector], Matrix]


def _as_bound(values: Any, label: str) -> np.ndarray:
    arr = np.atleast_1d(np.asarray(values, dtype=float))
    if arr.ndim != 1:
        raise InvalidProblemError(f"{label} must be 1D, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidProblemError(f"{label} must be finite, got {arr}")
    return arr


class Box:
    """
    Axis-aligned feasible region ``lower <= x <= upper``.

    Args:
        lower: Lower corner; scalars are broadcast against ``upper``.
        upper: Upper corner.
        rng: Generator used by :meth:`random_point`. A fresh unseeded
            generator is created when omitted.

    Raises:
        InvalidProblemError: If the corners are not finite 1D arrays of one
            shape or if any ``lower`` entry exceeds its ``upper`` entry.
    """

    def __init__(
        self,
        lower: Any,
        upper: Any,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        lo = _as_bound(lower, "lower")
        hi = _as_bound(upper, "upper")
        try:
            lo, hi = np.broadcast_arrays(lo, hi)
        except ValueError as exc:
            raise InvalidProblemError(
                f"lower and upper have incompatible shapes {lo.shape} and {hi.shape}"
            ) from exc
        if np.any(lo > hi):
            raise InvalidProblemError("lower must not exceed upper in any coordinate")
        self.lower = lo.copy()
        self.upper = hi.copy()
        self.lower.flags.writeable = False
        self.upper.flags.writeable = False
        self._rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def cube(
        cls,
        dim: int,
        half_width: float,
        rng: Optional[np.random.Generator] = None,
    ) -> "Box":
        """Build the centred hypercube ``[-half_width, half_width]^dim``."""
        if dim < 1:
            raise InvalidProblemError(f"dim must be >= 1, got {dim}")
        if half_width < 0:
            raise InvalidProblemError(f"half_width must be >= 0, got {half_width}")
        edge = np.full(dim, float(half_width))
        return cls(-edge, edge, rng=rng)

    @property
    def dim(self) -> int:
        return int(self.lower.size)

    def random_point(self) -> Vector:
        """Draw one independent uniform sample from the box."""
        return self._rng.uniform(self.lower, self.upper)

    def contains(self, x: Vector) -> bool:
        point = np.asarray(x, dtype=float)
        if point.shape != self.lower.shape:
            return False
        return bool(np.all(point >= self.lower) and np.all(point <= self.upper))

    def __repr__(self) -> str:
        return f"Box(lower={self.lower.tolist()}, upper={self.upper.tolist()})"


@dataclass(frozen=True)
class Problem:
    """
    Objective plus derivative oracles over a bounded search space.

    ``grad`` and ``ihess`` are optional; missing oracles are replaced by
    central finite differences of ``fun``. ``bounds`` may be a :class:`Box`
    or any object with a ``random_point()`` method returning a vector.

    Attributes:
        fun: Objective ``f(x) -> float``; must be pure.
        grad: Gradient ``g(x) -> vector`` of the same dimension as ``x``.
        ihess: Inverse Hessian (or an approximation) ``H^-1(x) -> matrix``.
        bounds: Feasible region sampler.
        dim: Declared dimension; checked against ``bounds.dim`` when both
            are known, and inferred from the bounds when omitted.
    """

    fun: Objective
    grad: Optional[Gradient] = None
    ihess: Optional[InverseHessian] = None
    bounds: Any = field(default=None)
    dim: Optional[int] = None

    def __post_init__(self) -> None:
        if not callable(self.fun):
            raise InvalidProblemError("fun must be callable")
        for label in ("grad", "ihess"):
            oracle = getattr(self, label)
            if oracle is not None and not callable(oracle):
                raise InvalidProblemError(f"{label} must be callable or None")
        sampler = getattr(self.bounds, "random_point", None)
        if not callable(sampler):
            raise InvalidProblemError(
                f"bounds {type(self.bounds).__name__} does not have a random_point() "
                "method; optimizers need it to draw starting points."
            )
        box_dim = getattr(self.bounds, "dim", None)
        if self.dim is None:
            if box_dim is not None:
                object.__setattr__(self, "dim", int(box_dim))
        elif self.dim < 1:
            raise InvalidProblemError(f"dim must be >= 1, got {self.dim}")
        elif box_dim is not None and int(box_dim) != self.dim:
            raise InvalidProblemError(
                f"dim={self.dim} does not match bounds dimension {box_dim}"
            )

    def function(self, x: Vector) -> float:
        return float(self.fun(x))

    def gradient(self, x: Vector) -> Vector:
        if self.grad is None:
            return approx_grad(self.fun, x)
        return np.asarray(self.grad(x), dtype=float)

    def ihessian(self, x: Vector) -> Matrix:
        if self.ihess is None:
            return approx_ihessian(self.fun, x)
        return np.asarray(self.ihess(x), dtype=float)

    def random_point(self) -> Vector:
        """Shortcut for ``self.bounds.random_point()`` as a float array."""
        return np.asarray(self.bounds.random_point(), dtype=float)


__all__ = [
    "Box",
    "Gradient",
    "InverseHessian",
    "Matrix",
    "Objective",
    "Problem",
    "Vector",
]
