import numpy as np
import pytest
from scipy import stats

from labfit import LengthMismatchError, LinearFit, linear_fit, measure, weighted_linear_fit
from labfit.fitting import correlation_coefficient

X = [0.7, 1.8, 2.7, 4.3]
Y = [4.6, 5.4, 6.9, 8.1]
YERR = [0.1, 0.3, 0.4, 0.7]


def test_linear_fit_reference_values():
    slope, intercept = LinearFit(X, Y).fit()
    assert slope[0] == pytest.approx((1.0111550917596268, 0.1158958350259736), rel=1e-9)
    assert intercept[0] == pytest.approx((3.8485066570708875, 0.31479109479486966), rel=1e-9)


def test_weighted_linear_fit_reference_values():
    slope, intercept = LinearFit(X, Y).y_error(YERR).fit()
    assert slope[0] == pytest.approx((0.9963598861989915, 0.13329751086990216), rel=1e-9)
    assert intercept[0] == pytest.approx((3.8896028985935134, 0.15825404095614476), rel=1e-9)


def test_linear_fit_matches_scipy():
    slope, intercept = linear_fit(X, Y)
    reference = stats.linregress(X, Y)
    assert slope.values[0] == pytest.approx(reference.slope)
    assert intercept.values[0] == pytest.approx(reference.intercept)
    assert slope.errors[0] == pytest.approx(reference.stderr)
    assert intercept.errors[0] == pytest.approx(reference.intercept_stderr)
    assert correlation_coefficient(X, Y) == pytest.approx(reference.rvalue)
    assert LinearFit(X, Y).r_value() == pytest.approx(reference.rvalue)


def test_exact_line_has_zero_errors():
    slope, intercept = linear_fit([0.0, 1.0, 2.0], [1.0, 3.0, 5.0])
    assert slope[0] == pytest.approx((2.0, 0.0), abs=1e-12)
    assert intercept[0] == pytest.approx((1.0, 0.0), abs=1e-12)


def test_two_points_give_non_finite_errors():
    slope, _ = linear_fit([0.0, 1.0], [1.0, 2.0])
    assert slope.values[0] == pytest.approx(1.0)
    assert not np.isfinite(slope.errors[0])


def test_results_are_not_approximated():
    slope, _ = linear_fit(X, Y)
    assert slope.values[0] == pytest.approx(1.0111550917596268, rel=1e-12)


def test_from_measures_uses_y_errors_as_weights():
    x = measure(X, 0.0, auto_approximate=False)
    y = measure(Y, YERR, auto_approximate=False)
    weighted = LinearFit.from_measures(x, y).fit()
    plain = LinearFit.from_measures(x, y, weighted=False).fit()
    expected = weighted_linear_fit(X, Y, YERR)
    assert weighted[0] == expected[0]
    assert plain[0] == linear_fit(X, Y)[0]


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        linear_fit([1.0, 2.0, 3.0], [1.0, 2.0])
    with pytest.raises(LengthMismatchError):
        LinearFit(X, Y).y_error([0.1, 0.2]).fit()
