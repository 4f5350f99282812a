import numpy as np
import pytest

from sr1opt.optimize import (
    REFERENCE_MINIMIZER,
    Problem,
    Status,
    backtracking_armijo,
    minimize,
    quadratic,
    reference_problem,
    rosenbrock_problem,
    sr1,
    sr1_update,
)


def test_sr1_converges_on_reference_quadratic():
    problem = reference_problem()
    res = sr1(problem, np.array([0.0, 0.0]), tol=1e-6, maxiter=100)
    assert res.success
    assert res.status is Status.CONVERGED
    assert res.grad_norm < 1e-6
    assert np.linalg.norm(problem.grad(res.x)) < 1e-6
    assert np.allclose(res.x, REFERENCE_MINIMIZER, atol=1e-6)
    assert res.fun == pytest.approx(-10.0)
    assert res.nit <= 5
    assert res.message == f"Converged in {res.nit} iterations."


def test_minimize_uses_default_tolerance_and_budget():
    res = minimize(reference_problem(), np.zeros(2))
    assert res.success
    assert np.allclose(res.x, REFERENCE_MINIMIZER, atol=1e-6)


def test_inverse_hessian_matches_true_inverse_after_convergence():
    res = sr1(reference_problem(), np.zeros(2))
    A = np.array([[3.0, 2.0], [2.0, 6.0]])
    assert np.allclose(res.inv_hessian, np.linalg.inv(A), atol=1e-8)
    assert np.allclose(res.inv_hessian, res.inv_hessian.T)


def test_zero_budget_returns_initial_point_exhausted():
    x0 = np.array([0.0, 0.0])
    res = sr1(reference_problem(), x0, maxiter=0)
    assert not res.success
    assert res.status is Status.MAX_ITER
    assert res.message == "Reached max iterations."
    assert res.nit == 0
    assert np.array_equal(res.x, x0)
    assert res.fun == 0.0
    assert np.array_equal(res.inv_hessian, np.eye(2))


def test_small_budget_is_exhausted_not_raised():
    res = sr1(reference_problem(), np.zeros(2), maxiter=2, history=True)
    assert res.status is Status.MAX_ITER
    assert res.nit == 2
    assert len(res.history) == 3
    assert np.array_equal(res.history[-1], res.x)


def test_start_at_minimizer_converges_immediately():
    res = sr1(reference_problem(), REFERENCE_MINIMIZER.copy())
    assert res.success
    assert res.nit == 0
    assert res.njev == 1


def test_caller_array_is_not_mutated():
    x0 = np.array([0.0, 0.0])
    sr1(reference_problem(), x0)
    assert np.array_equal(x0, np.zeros(2))


def test_skipped_update_leaves_inverse_hessian_unchanged():
    # For f = 0.5 ||x||^2 the first step gives y = s = H y, so v = 0.
    problem = quadratic(np.eye(2), np.zeros(2))
    res = sr1(problem, np.array([3.0, -4.0]))
    assert res.success
    assert res.nit == 1
    assert res.nskip == 1
    assert np.array_equal(res.inv_hessian, np.eye(2))
    assert np.allclose(res.x, np.zeros(2))


def test_sr1_update_skips_when_correction_orthogonal_to_y():
    inv_hessian = np.eye(2)
    s = np.array([1.0, 1.0])
    y = np.array([1.0, 0.0])
    new_inv_hessian, updated = sr1_update(inv_hessian, s, y)
    assert not updated
    assert np.array_equal(new_inv_hessian, inv_hessian)


def test_sr1_update_skips_below_custom_threshold():
    inv_hessian = np.array([[2.0, 0.5], [0.5, 1.0]])
    s = np.array([1.0, 0.0])
    y = np.array([0.5, 1e-3])
    _, updated = sr1_update(inv_hessian, s, y)
    assert updated
    new_inv_hessian, updated = sr1_update(inv_hessian, s, y, eps=1.0)
    assert not updated
    assert np.array_equal(new_inv_hessian, inv_hessian)


def test_sr1_update_satisfies_secant_condition():
    inv_hessian = np.eye(2)
    s = np.array([1.0, 2.0])
    y = np.array([3.0, 1.0])
    new_inv_hessian, updated = sr1_update(inv_hessian, s, y)
    assert updated
    assert np.allclose(new_inv_hessian @ y, s)
    assert np.allclose(new_inv_hessian, new_inv_hessian.T)


def test_dimensions_are_preserved_in_higher_dimension():
    A = np.array([[4.0, 1.0, 0.0], [1.0, 3.0, 1.0], [0.0, 1.0, 2.0]])
    b = np.array([1.0, 2.0, 3.0])
    shapes = []

    def callback(x: np.ndarray, g: np.ndarray) -> None:
        shapes.append((x.shape, g.shape))

    res = sr1(quadratic(A, b), np.zeros(3), maxiter=5, callback=callback, history=True)
    assert res.x.shape == (3,)
    assert res.inv_hessian.shape == (3, 3)
    assert all(point.shape == (3,) for point in res.history)
    assert shapes == [((3,), (3,))] * res.nit


def test_dimension_follows_initial_point_when_problem_has_none():
    def fun(x: np.ndarray) -> float:
        return float(0.5 * x @ x)

    def grad(x: np.ndarray) -> np.ndarray:
        return x.copy()

    problem = Problem(fun=fun, grad=grad)
    res = sr1(problem, np.ones(4))
    assert res.success
    assert res.inv_hessian.shape == (4, 4)


def test_line_search_option_converges_on_reference_quadratic():
    res = sr1(
        reference_problem(),
        np.zeros(2),
        line_search=backtracking_armijo,
    )
    assert res.success
    assert np.allclose(res.x, REFERENCE_MINIMIZER, atol=1e-6)
    assert res.nfev > 1


def test_unit_step_on_rosenbrock_reports_a_status():
    with np.errstate(all="ignore"):
        res = sr1(rosenbrock_problem(), np.array([-1.2, 1.0]), maxiter=20)
    assert res.status in (Status.CONVERGED, Status.MAX_ITER)
    assert res.nit <= 20


def test_oracle_counts():
    res = sr1(reference_problem(), np.zeros(2))
    assert res.njev == res.nit + 1
    assert res.nfev == 1


@pytest.mark.parametrize("tol", [0.0, -1e-6, float("nan"), float("inf")])
def test_invalid_tolerance_raises(tol):
    with pytest.raises(ValueError, match="tol"):
        sr1(reference_problem(), np.zeros(2), tol=tol)


@pytest.mark.parametrize("maxiter", [-1, 2.5, True])
def test_invalid_budget_raises(maxiter):
    with pytest.raises(ValueError, match="maxiter"):
        sr1(reference_problem(), np.zeros(2), maxiter=maxiter)


@pytest.mark.parametrize(
    "x0",
    [np.zeros((2, 2)), np.zeros(0), np.array([np.nan, 0.0])],
)
def test_invalid_initial_point_raises(x0):
    with pytest.raises(ValueError, match="x0"):
        sr1(reference_problem(), x0)


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError, match="dimension 3"):
        sr1(reference_problem(), np.zeros(3))


def test_gradient_shape_mismatch_raises():
    problem = Problem(fun=lambda x: 0.0, grad=lambda x: np.zeros(3))
    with pytest.raises(ValueError, match="Gradient has shape"):
        sr1(problem, np.zeros(2))
