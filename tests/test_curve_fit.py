import warnings

import numpy as np
import pytest
from scipy import optimize

from labfit import ConvergenceWarning, CurveFit, LengthMismatchError, SingularHessianWarning, curve_fit
from labfit.models import exponential_decay, linear

X = [0.042, 0.2, 0.33, 0.6]
Y = [1.6, 1.25, 0.8, 0.34]


def decay(x, params):
    return params[0] * np.exp(-x * params[1])


def test_exponential_decay_reference_values():
    a, b = CurveFit(decay, X, Y).initial_zeros(2).fit()
    assert a.values[0] == pytest.approx(1.8368313871324062, abs=1e-2)
    assert b.values[0] == pytest.approx(2.4591460197698325, abs=1e-2)
    assert a.errors[0] == pytest.approx(0.1339378128643651, rel=2e-2)
    assert b.errors[0] == pytest.approx(0.35963907104421394, rel=2e-2)


def test_matches_scipy_curve_fit():
    params = curve_fit(exponential_decay, X, Y, initial_point=[1.0, 1.0])
    popt, _ = optimize.curve_fit(
        lambda x, a, b: a * np.exp(-b * x), np.array(X), np.array(Y), p0=[1.0, 1.0]
    )
    assert [p.values[0] for p in params] == pytest.approx(popt, abs=1e-2)


def test_weighted_fit_runs_with_y_errors():
    a, b = CurveFit(decay, X, Y).initial_ones(2).y_error([0.05, 0.05, 0.05, 0.05]).fit()
    # constant weights do not move the minimum
    assert a.values[0] == pytest.approx(1.8368, abs=1e-2)
    assert b.values[0] == pytest.approx(2.4591, abs=1e-2)


def test_r_value():
    r = CurveFit(decay, X, Y).initial_zeros(2).r_value()
    assert 0.95 < r <= 1.0


def test_fit_result():
    result = (
        CurveFit(decay, X, Y)
        .initial_zeros(2)
        .parameter_names("a", "b")
        .fit_result()
    )
    assert result.names == ["a", "b"]
    assert result.dof == 2
    assert result.converged
    assert result.covariance.shape == (2, 2)
    assert result.errors == pytest.approx(np.sqrt(np.diag(result.covariance)))
    assert result.values[0] == pytest.approx(1.8368, abs=1e-2)


def test_singular_hessian_gives_zero_errors():
    # the second parameter never enters the model
    with pytest.warns(SingularHessianWarning):
        slope, unused = curve_fit(lambda x, p: p[0] * x, [1.0, 2.0, 3.0], [2.0, 4.1, 5.9], initial_point=[0.0, 0.0])
    assert slope.values[0] == pytest.approx(2.0, abs=0.1)
    assert slope.errors[0] == 0.0
    assert unused.errors[0] == 0.0


def test_iteration_cap_warns():
    with pytest.warns(ConvergenceWarning):
        CurveFit(decay, X, Y).initial_zeros(2).max_iterations(1).fit()


def test_no_degrees_of_freedom_warns():
    with pytest.warns(ConvergenceWarning):
        m, c = curve_fit(linear, [1.0, 2.0], [3.0, 5.0], initial_point=[0.0, 0.0])
    assert m.values[0] == pytest.approx(2.0, abs=1e-2)
    assert np.isnan(m.errors[0])


def test_converged_fit_is_quiet():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        CurveFit(decay, X, Y).initial_zeros(2).fit()


def test_missing_initial_point():
    with pytest.raises(ValueError):
        CurveFit(decay, X, Y).fit()
    with pytest.raises(ValueError):
        curve_fit(decay, X, Y, initial_point=[])


def test_wrong_number_of_names():
    with pytest.raises(ValueError):
        CurveFit(decay, X, Y).initial_zeros(2).parameter_names("a").fit_result()


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        CurveFit(decay, X, Y[:3]).initial_zeros(2).fit()
    with pytest.raises(LengthMismatchError):
        CurveFit(decay, X, Y).initial_zeros(2).y_error([0.1, 0.1]).fit()
