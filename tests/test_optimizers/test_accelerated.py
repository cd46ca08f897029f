import math

import numpy as np
import pytest

from restartopt.errors import InvalidConfigurationError
from restartopt.optimizers import (
    STEP_SIZE,
    AcceleratedGradientDescent,
    GradientDescent,
    MomentumState,
    accelerated_step,
    momentum_trace,
    next_momentum,
)
from restartopt.problem import Box, Problem


def sphere(x: np.ndarray) -> float:
    return float(x @ x)


def sphere_grad(x: np.ndarray) -> np.ndarray:
    return 2.0 * x


def constant(vector):
    value = np.asarray(vector, dtype=float)
    return lambda _: value


def test_next_momentum_from_one_is_inverse_golden_ratio():
    assert next_momentum(1.0) == pytest.approx((math.sqrt(5.0) - 1.0) / 2.0, rel=1e-15)


def test_step_size_is_fixed():
    assert STEP_SIZE == 0.01


def test_trace_matches_hand_computed_reference():
    x0 = np.array([0.5, 0.5])
    g = np.array([1.0, -2.0])
    eta = 0.01

    t1 = (math.sqrt(5.0) - 1.0) / 2.0
    t2 = 0.5 * t1 * (-t1 + math.sqrt(4.0 + t1 * t1))
    t3 = 0.5 * t2 * (-t2 + math.sqrt(4.0 + t2 * t2))
    beta2 = t1 * (1.0 - t1) / (t1 * t1 + t2)
    beta3 = t2 * (1.0 - t2) / (t2 * t2 + t3)

    x1 = x0 - eta * g
    y1 = x1
    x2 = x0 - 2.0 * eta * g
    y2 = x2 - beta2 * eta * g
    x3 = x0 - (3.0 + beta2) * eta * g
    y3 = x3 - beta3 * (1.0 + beta2) * eta * g
    expected = [(x1, y1, t1), (x2, y2, t2), (x3, y3, t3)]

    trace = momentum_trace(x0, constant(g), steps=3)
    assert len(trace) == 3
    for state, (x, y, t) in zip(trace, expected):
        np.testing.assert_allclose(state.x, x, rtol=1e-12, atol=1e-15)
        np.testing.assert_allclose(state.y, y, rtol=1e-12, atol=1e-15)
        assert state.t == pytest.approx(t, rel=1e-12)
        assert not state.restarted


def test_reversed_gradient_resets_momentum_after_extrapolation():
    state = MomentumState.start(np.array([0.0]))
    state = accelerated_step(state, constant([1.0]))
    state = accelerated_step(state, constant([1.0]))
    t2 = state.t
    x2 = state.x

    # A weak gradient pointing back along the momentum direction makes the
    # step go uphill, which must reset t to 1.
    reset = accelerated_step(state, constant([-0.1]))
    t3 = next_momentum(t2)
    x3 = state.y + STEP_SIZE * 0.1
    beta3 = t2 * (1.0 - t2) / (t2 * t2 + t3)

    assert reset.restarted
    assert reset.t == 1.0
    np.testing.assert_allclose(reset.x, x3, rtol=1e-12)
    np.testing.assert_allclose(reset.y, x3 + beta3 * (x3 - x2), rtol=1e-12)

    # With t back at 1 the next extrapolation coefficient is zero.
    after = accelerated_step(reset, constant([-0.1]))
    np.testing.assert_array_equal(after.y, after.x)


def test_step_does_not_mutate_state():
    x0 = np.array([1.0, 2.0])
    state = MomentumState.start(x0)
    accelerated_step(state, sphere_grad)
    np.testing.assert_array_equal(state.x, [1.0, 2.0])
    np.testing.assert_array_equal(state.y, [1.0, 2.0])
    assert state.t == 1.0


def test_start_copies_input():
    x0 = np.array([1.0])
    state = MomentumState.start(x0)
    x0[0] = 5.0
    assert state.x[0] == 1.0


def test_trace_zero_steps_and_validation():
    assert momentum_trace(np.zeros(2), sphere_grad, steps=0) == []
    with pytest.raises(InvalidConfigurationError):
        momentum_trace(np.zeros(2), sphere_grad, steps=-1)


def test_run_from_follows_trace():
    problem = Problem(fun=sphere, grad=sphere_grad, bounds=Box.cube(2, 1.0))
    x0 = np.array([0.7, -0.3])
    result = AcceleratedGradientDescent(restarts=1, steps=25).run_from(problem, x0)
    trace = momentum_trace(x0, sphere_grad, steps=25)
    np.testing.assert_array_equal(result, trace[-1].x)
    np.testing.assert_array_equal(x0, [0.7, -0.3])


@pytest.mark.parametrize("dim", [1, 3, 5])
def test_converges_on_convex_quadratic(dim: int, rng: np.random.Generator):
    problem = Problem(fun=sphere, grad=sphere_grad, bounds=Box.cube(dim, 10.0, rng=rng))
    x = AcceleratedGradientDescent(restarts=5, steps=200).optimize(problem)
    assert x.shape == (dim,)
    assert problem.function(x) < 1e-3


def test_zero_steps_returns_unmodified_draw(scripted):
    bounds = scripted([[3.0, 0.0], [1.0, 1.0], [-2.0, 2.0]])
    problem = Problem(fun=sphere, grad=sphere_grad, bounds=bounds)
    x = AcceleratedGradientDescent(restarts=2, steps=0).optimize(problem)
    np.testing.assert_array_equal(x, [1.0, 1.0])
    assert bounds.draws == 3


def test_best_of_restarts_is_no_worse_than_any_single_restart(scripted):
    starts = [[4.0, -3.0], [0.5, 0.5], [-1.0, 2.0]]
    fallback = [9.0, 9.0]
    problem = Problem(fun=sphere, grad=sphere_grad, bounds=scripted([fallback] + starts))
    optimizer = AcceleratedGradientDescent(restarts=3, steps=5)
    best = optimizer.optimize(problem)

    singles = [optimizer.run_from(problem, np.array(s)) for s in starts]
    values = [problem.function(x) for x in singles]
    assert all(problem.function(best) <= v for v in values)
    np.testing.assert_array_equal(best, singles[int(np.argmin(values))])


def test_fallback_kept_when_every_restart_diverges(scripted):
    problem = Problem(
        fun=sphere,
        grad=lambda x: -1e6 * x,
        bounds=scripted([[0.1], [1.0], [2.0]]),
    )
    best = AcceleratedGradientDescent(restarts=2, steps=10).optimize(problem)
    np.testing.assert_array_equal(best, [0.1])


def test_gradient_descent_matches_single_restart():
    def build() -> Problem:
        box = Box.cube(3, 10.0, rng=np.random.default_rng(11))
        return Problem(fun=sphere, grad=sphere_grad, bounds=box)

    plain = GradientDescent(steps=40).optimize(build())
    accelerated = AcceleratedGradientDescent(restarts=1, steps=40).optimize(build())
    np.testing.assert_array_equal(plain, accelerated)


def test_repeated_calls_are_independent(scripted):
    points = [[2.0], [1.5], [3.0]]
    optimizer = AcceleratedGradientDescent(restarts=2, steps=7)
    first = optimizer.optimize(Problem(fun=sphere, grad=sphere_grad, bounds=scripted(points)))
    second = optimizer.optimize(Problem(fun=sphere, grad=sphere_grad, bounds=scripted(points)))
    np.testing.assert_array_equal(first, second)
    assert (optimizer.restarts, optimizer.steps) == (2, 7)


@pytest.mark.parametrize(
    "restarts, steps",
    [(0, 10), (-1, 10), (1, -1), (1.0, 10), (2, None), (True, 3)],
)
def test_invalid_configuration(restarts, steps):
    with pytest.raises(InvalidConfigurationError, match="invalid configuration"):
        AcceleratedGradientDescent(restarts=restarts, steps=steps)


def test_gradient_descent_validates_steps():
    with pytest.raises(InvalidConfigurationError):
        GradientDescent(steps=-5)
    assert GradientDescent(steps=0).steps == 0


def test_names_and_repr():
    accelerated = AcceleratedGradientDescent(restarts=3, steps=10)
    plain = GradientDescent(steps=10)
    assert accelerated.name == "Stochastic Gradient Descent"
    assert plain.name == "Gradient Descent"
    assert accelerated.name != plain.name
    assert repr(accelerated) == "AcceleratedGradientDescent(restarts=3, steps=10)"
    assert repr(plain) == "GradientDescent(steps=10)"
