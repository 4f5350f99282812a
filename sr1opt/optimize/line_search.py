"""Optional step-length rule for the SR1 loop."""

from __future__ import annotations

import numpy as np

from .core import Array, Objective


def backtracking_armijo(
    f: Objective,
    x: Array,
    p: Array,
    grad_fx: Array,
    alpha0: float = 1.0,
    rho: float = 0.5,
    c: float = 1e-4,
    max_iter: int = 50,
) -> tuple[float, int]:
    """Classic Armijo backtracking line search.

    Returns the accepted step length and the number of objective evaluations.
    If no trial satisfies the sufficient-decrease condition within
    ``max_iter`` halvings, the last trial step is returned.
    """
    if not (0 < c < 1):
        raise ValueError("Armijo constant c must lie in (0, 1)")
    if not (0 < rho < 1):
        raise ValueError("rho must lie in (0, 1)")
    if alpha0 <= 0:
        raise ValueError("alpha0 must be positive")
    alpha = float(alpha0)
    fx = f(x)
    nfev = 1
    grad_dot = float(np.dot(grad_fx, p))
    for _ in range(max_iter):
        candidate = x + alpha * p
        f_new = f(candidate)
        nfev += 1
        if f_new <= fx + c * alpha * grad_dot:
            return alpha, nfev
        alpha *= rho
    return alpha, nfev


__all__ = ["backtracking_armijo"]
