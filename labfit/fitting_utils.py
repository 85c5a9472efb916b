import numpy as np

from labfit.errors import LengthMismatchError


def as_float_array(data):
    """Values of a Measure, or any sequence of numbers, as a 1-D float array."""
    values = getattr(data, "values", data)
    return np.atleast_1d(np.asarray(values, dtype=float))


def check_same_length(**vectors):
    r"""Raise LengthMismatchError unless every keyword vector has the same length."""
    lengths = {name: len(vec) for name, vec in vectors.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"len({name}) = {n}" for name, n in lengths.items())
        raise LengthMismatchError(f"Expected {', '.join(lengths)} to be the same length, got {detail}")


def residuals(y_observed, model, x, params):
    with np.errstate(all="ignore"):
        y_computed = np.array([model(xi, params) for xi in x], dtype=float)
    return y_observed - y_computed


def weighted_rss(y_observed, model, x, params, yerr):
    with np.errstate(all="ignore"):
        return float(np.sum((residuals(y_observed, model, x, params) / yerr) ** 2))


def calculate_fit_metrics(y_observed, y_computed):
    rmse = np.sqrt(np.nanmean((y_observed - y_computed) ** 2))
    ss_res = np.nansum((y_observed - y_computed) ** 2)
    ss_tot = np.nansum((y_observed - np.nanmean(y_observed)) ** 2)
    r_squared = 1 - (ss_res / ss_tot) if ss_tot > 0 else np.nan
    return float(rmse), float(r_squared)


def r_value_from_residuals(y_observed, y_computed):
    """sqrt(1 - SS_res / SS_tot) on the unweighted sums of squares."""
    ss_res = np.sum((y_observed - y_computed) ** 2)
    ss_tot = np.sum((y_observed - np.mean(y_observed)) ** 2)
    with np.errstate(all="ignore"):
        return float(np.sqrt(1.0 - ss_res / ss_tot))
