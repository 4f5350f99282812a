"""
Example: SR1 quasi-Newton minimization of the reference quadratic.

Minimizes f(x) = 0.5 x^T A x - b^T x with A = [[3, 2], [2, 6]] and
b = (2, -8) from the origin using a fixed unit step, then repeats the run
with an Armijo backtracking line search.
"""

import numpy as np

from sr1opt import backtracking_armijo, minimize, reference_problem


def run(line_search=None) -> None:
    problem = reference_problem()
    result = minimize(
        problem,
        np.array([0.0, 0.0]),
        tol=1e-6,
        maxiter=100,
        line_search=line_search,
    )
    print(result.message)
    print(f"Optimal point: {result.x}")
    print(f"Objective function value: {result.fun}")
    print(f"Skipped updates: {result.nskip}")


def main() -> None:
    print("=" * 60)
    print("SR1 with unit step")
    print("=" * 60)
    run()
    print()
    print("=" * 60)
    print("SR1 with Armijo backtracking")
    print("=" * 60)
    run(line_search=backtracking_armijo)


if __name__ == "__main__":
    main()
