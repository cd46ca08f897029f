"""Finite-difference oracles used when a problem omits its derivatives.

Everything here is plain NumPy; the differences are central so the error is
second order in the perturbation size.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

Objective = Callable[[np.ndarray], float]


def _check_eps(eps: float) -> None:
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")


def approx_grad(fun: Objective, x: np.ndarray, eps: float = 1e-6) -> np.ndarray:
    """Central-difference gradient of ``fun`` at ``x``.

    Parameters
    ----------
    fun:
        Scalar objective.
    x:
        Evaluation point; it is copied, never modified.
    eps:
        Perturbation applied to one coordinate at a time.
    """
    _check_eps(eps)
    point = np.asarray(x, dtype=float)
    basis = np.eye(point.size) * eps
    return np.array(
        [(fun(point + step) - fun(point - step)) / (2.0 * eps) for step in basis],
        dtype=float,
    )


def approx_hessian(fun: Objective, x: np.ndarray, eps: float = 1e-4) -> np.ndarray:
    """Symmetric central-difference Hessian of ``fun`` at ``x``."""
    _check_eps(eps)
    point = np.asarray(x, dtype=float)
    n = point.size
    basis = np.eye(n) * eps
    center = fun(point)
    hess = np.empty((n, n), dtype=float)
    for i in range(n):
        ei = basis[i]
        hess[i, i] = (fun(point + ei) - 2.0 * center + fun(point - ei)) / eps**2
        for j in range(i + 1, n):
            ej = basis[j]
            mixed = (
                fun(point + ei + ej)
                - fun(point + ei - ej)
                - fun(point - ei + ej)
                + fun(point - ei - ej)
            ) / (4.0 * eps**2)
            hess[i, j] = mixed
            hess[j, i] = mixed
    return hess


def safe_solve(mat: np.ndarray, rhs: np.ndarray, reg: float = 1e-12) -> np.ndarray:
    """Solve ``mat @ sol = rhs``, adding a small ridge if ``mat`` is singular."""
    try:
        return np.linalg.solve(mat, rhs)
    except np.linalg.LinAlgError:
        ridge = reg * np.eye(mat.shape[0], dtype=float)
        return np.linalg.solve(mat + ridge, rhs)


def approx_ihessian(fun: Objective, x: np.ndarray, eps: float = 1e-4) -> np.ndarray:
    """Inverse of the finite-difference Hessian, via :func:`safe_solve`."""
    hess = approx_hessian(fun, x, eps=eps)
    return safe_solve(hess, np.eye(hess.shape[0]))


__all__ = [
    "Objective",
    "approx_grad",
    "approx_hessian",
    "approx_ihessian",
    "safe_solve",
]
