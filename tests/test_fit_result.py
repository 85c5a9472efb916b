import numpy as np
import pytest
from scipy import stats

from labfit import CurveFit, FitResult, Measure
from labfit.utils.stats_utils import confidence_interval, round_to_sigfigs, t_quantile


@pytest.fixture
def result():
    return FitResult(
        params=[Measure([1.5], [0.1]), Measure([-2.0], [0.4])],
        names=["a", "b"],
        covariance=np.array([[0.01, 0.002], [0.002, 0.16]]),
        rss=0.3,
        dof=3,
        r_value=0.99,
        iterations=42,
        converged=True,
    )


def test_tag_and_meta(result):
    assert result.tag() == "fit"
    assert result.meta["object_type"] == "fit"


def test_values_and_errors(result):
    assert result.values.tolist() == [1.5, -2.0]
    assert result.errors.tolist() == [0.1, 0.4]
    assert result.reduced_chi_square == pytest.approx(0.1)


def test_to_dataframe(result):
    df = result.to_dataframe()
    assert df["name"].tolist() == ["a", "b"]
    assert df["value"].tolist() == [1.5, -2.0]
    assert (df["dof"] == 3).all()


def test_to_dataset(result):
    ds = result.to_dataset()
    assert ds["covariance"].dims == ("param", "param_j")
    assert ds["covariance"].sel(param="a", param_j="b").item() == pytest.approx(0.002)
    assert ds.attrs["iterations"] == 42
    assert ds.attrs["converged"] == 1


def test_confidence_intervals(result):
    df = result.confidence_intervals(0.95)
    margin = stats.t.ppf(0.975, 3) * 0.1
    assert df.loc[0, "lower"] == pytest.approx(1.5 - margin)
    assert df.loc[0, "upper"] == pytest.approx(1.5 + margin)


def test_confidence_interval_without_dof():
    lower, upper = confidence_interval(1.0, 0.1, 0)
    assert np.isnan(lower) and np.isnan(upper)


def test_t_quantile():
    assert t_quantile(0.95, 10) == pytest.approx(2.228, abs=1e-3)


def test_round_to_sigfigs():
    assert round_to_sigfigs(3.14159, 3) == 3.14
    assert round_to_sigfigs("n/a") == "n/a"


def test_summary(result):
    text = result.summary()
    assert "a = 1.5 ± 0.1" in text
    assert "b = -2.0 ± 0.4" in text
    assert "42 iterations, converged" in text


def test_fit_result_from_builder():
    fr = CurveFit(lambda x, p: p[0] * x + p[1], [0.0, 1.0, 2.0, 3.0], [1.1, 2.9, 5.2, 6.8]).initial_zeros(2).fit_result()
    assert fr.names == ["p0", "p1"]
    assert fr.meta["weighted"] is False
    assert fr.r_value > 0.99


def test_results_compare_by_identity(result):
    assert result == result
    assert (result == FitResult(**{**result.__dict__, "meta": {}})) is False


def test_fit_metrics_reach_the_result():
    x = [0.0, 1.0, 2.0, 3.0]
    y = [1.1, 2.9, 5.2, 6.8]
    fr = CurveFit(lambda xi, p: p[0] * xi + p[1], x, y).initial_zeros(2).fit_result()
    computed = fr.values[0] * np.array(x) + fr.values[1]
    assert fr.rmse == pytest.approx(np.sqrt(np.mean((np.array(y) - computed) ** 2)), rel=1e-3)
    assert fr.r_squared == pytest.approx(fr.r_value**2, rel=1e-9)
    assert "RMSE" in fr.summary()
    assert fr.to_dataset().attrs["r_squared"] == fr.r_squared
