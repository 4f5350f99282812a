"""Objective/gradient pairs used as oracles for the optimizer.

Example
-------
>>> from sr1opt.optimize.objectives import REFERENCE_MINIMIZER, reference_problem
>>> problem = reference_problem()
>>> float(problem.fun(REFERENCE_MINIMIZER))
-10.0
"""

from __future__ import annotations

import numpy as np

from .core import Array, Problem

REFERENCE_A = np.array([[3.0, 2.0], [2.0, 6.0]])
REFERENCE_B = np.array([2.0, -8.0])
REFERENCE_MINIMIZER = np.array([2.0, -2.0])


def quadratic(A: Array, b: Array) -> Problem:
    """Build ``f(x) = 0.5 x^T A x - b^T x`` and its gradient ``A x - b``.

    ``A`` is expected to be symmetric positive definite; only the shapes are
    validated. The arrays are copied once here and captured by the oracle.
    """
    A = np.array(A, dtype=float)
    b = np.array(b, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"A must be a square matrix, got shape {A.shape}.")
    if b.shape != (A.shape[0],):
        raise ValueError(
            f"b must have shape ({A.shape[0]},), got {b.shape}."
        )

    def fun(x: Array) -> float:
        return float(0.5 * x @ (A @ x) - b @ x)

    def grad(x: Array) -> Array:
        return A @ x - b

    return Problem(fun=fun, grad=grad, dim=A.shape[0])


def reference_problem() -> Problem:
    """The fixed 2-D reference quadratic with minimizer ``(2, -2)``."""
    return quadratic(REFERENCE_A, REFERENCE_B)


def rosenbrock(x: Array) -> float:
    return float((1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2)


def rosenbrock_grad(x: Array) -> Array:
    return np.array(
        [
            -2 * (1 - x[0]) - 400 * x[0] * (x[1] - x[0] ** 2),
            200 * (x[1] - x[0] ** 2),
        ]
    )


def rosenbrock_problem() -> Problem:
    return Problem(fun=rosenbrock, grad=rosenbrock_grad, dim=2)


__all__ = [
    "REFERENCE_A",
    "REFERENCE_B",
    "REFERENCE_MINIMIZER",
    "quadratic",
    "reference_problem",
    "rosenbrock",
    "rosenbrock_grad",
    "rosenbrock_problem",
]
