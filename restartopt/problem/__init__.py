"""Problem containers and derivative fallbacks.

Example
-------
>>> import numpy as np
>>> from restartopt.problem import Box, Problem
>>> box = Box.cube(2, 10.0, rng=np.random.default_rng(0))
>>> problem = Problem(fun=lambda x: float(x @ x), grad=lambda x: 2 * x, bounds=box)
>>> problem.dim
2
"""

from .core import Box, Gradient, InverseHessian, Matrix, Objective, Problem, Vector
from .utils import approx_grad, approx_hessian, approx_ihessian, safe_solve

__all__ = [
    "Box",
    "Gradient",
    "InverseHessian",
    "Matrix",
    "Objective",
    "Problem",
    "Vector",
    "approx_grad",
    "approx_hessian",
    "approx_ihessian",
    "safe_solve",
]
