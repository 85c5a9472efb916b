"""
Closed-form least-squares straight-line fits.

``linear_fit`` is ordinary least squares; its parameter errors are scaled
by the residual standard deviation. ``weighted_linear_fit`` weights each
point by ``1 / yerr**2`` and takes the weights as the full description of
the noise, so its errors carry no residual scale factor.
"""

import numpy as np

from labfit.fitting.base_fit import BaseFit
from labfit.fitting_utils import as_float_array, check_same_length
from labfit.measure import Measure


def linear_fit(x, y):
    """
    Ordinary least-squares fit of ``y = slope * x + intercept``.

    Parameters
    ----------
    x, y : array-like or Measure
        Data points; for Measures only the values are used.

    Returns
    -------
    tuple of Measure
        ``(slope, intercept)``, each of length 1 and not approximated. With
        fewer than 3 points the errors are NaN or inf.

    Raises
    ------
    LengthMismatchError
        If ``x`` and ``y`` differ in length.
    """
    x, y = as_float_array(x), as_float_array(y)
    check_same_length(x=x, y=y)

    n = float(len(x))
    sum_x = np.sum(x)
    sum_y = np.sum(y)
    sum_xy = np.sum(x * y)
    sum_x2 = np.sum(x**2)

    with np.errstate(all="ignore"):
        denominator = n * sum_x2 - sum_x**2
        slope = (n * sum_xy - sum_x * sum_y) / denominator
        intercept = (sum_y * sum_x2 - sum_x * sum_xy) / denominator

        sigma_y = np.sqrt(np.sum((y - (slope * x + intercept)) ** 2) / (n - 2.0))
        sigma_slope = sigma_y * np.sqrt(n / denominator)
        sigma_intercept = sigma_y * np.sqrt(sum_x2 / denominator)

    return (
        Measure([slope], [sigma_slope], auto_approximate=False),
        Measure([intercept], [sigma_intercept], auto_approximate=False),
    )


def weighted_linear_fit(x, y, yerr):
    """
    Weighted least-squares fit with weights ``1 / yerr**2``.

    Returns
    -------
    tuple of Measure
        ``(slope, intercept)``; errors are ``sqrt(sum_w / D)`` and
        ``sqrt(sum_x2w / D)`` with ``D = sum_w * sum_x2w - sum_xw**2``.

    Raises
    ------
    LengthMismatchError
        If ``x``, ``y`` and ``yerr`` differ in length.
    """
    x, y, yerr = as_float_array(x), as_float_array(y), as_float_array(yerr)
    check_same_length(x=x, y=y, yerr=yerr)

    with np.errstate(all="ignore"):
        w = 1.0 / yerr**2
        sum_w = np.sum(w)
        sum_xw = np.sum(x * w)
        sum_x2w = np.sum(x**2 * w)
        sum_yw = np.sum(y * w)
        sum_xyw = np.sum(x * y * w)

        denominator = sum_w * sum_x2w - sum_xw**2
        slope = (sum_w * sum_xyw - sum_xw * sum_yw) / denominator
        intercept = (sum_yw * sum_x2w - sum_xw * sum_xyw) / denominator
        sigma_slope = np.sqrt(sum_w / denominator)
        sigma_intercept = np.sqrt(sum_x2w / denominator)

    return (
        Measure([slope], [sigma_slope], auto_approximate=False),
        Measure([intercept], [sigma_intercept], auto_approximate=False),
    )


def correlation_coefficient(x, y):
    """Pearson's r over the mean-centred deviations of x and y."""
    x, y = as_float_array(x), as_float_array(y)
    check_same_length(x=x, y=y)
    dx = x - np.mean(x)
    dy = y - np.mean(y)
    with np.errstate(all="ignore"):
        return float(np.sum(dx * dy) / np.sqrt(np.sum(dx**2) * np.sum(dy**2)))


class LinearFit(BaseFit):
    """
    Builder for straight-line fits.

    >>> slope, intercept = LinearFit([0.7, 1.8, 2.7, 4.3], [4.6, 5.4, 6.9, 8.1]).fit()
    >>> LinearFit(x, y).y_error([0.1, 0.3, 0.4, 0.7]).fit()  # weighted
    """

    def __init__(self, x_values, y_values):
        self.x_values = as_float_array(x_values)
        self.y_values = as_float_array(y_values)
        self.yerr = None

    @classmethod
    def from_measures(cls, x: Measure, y: Measure, weighted=True):
        """Fit two Measures; with ``weighted`` the y errors become the weights."""
        builder = cls(x.values, y.values)
        if weighted:
            builder.y_error(y.errors)
        return builder

    def y_error(self, yerr):
        """Switch to the weighted fit with per-point y errors."""
        self.yerr = as_float_array(yerr)
        return self

    def fit(self):
        if self.yerr is not None:
            return weighted_linear_fit(self.x_values, self.y_values, self.yerr)
        return linear_fit(self.x_values, self.y_values)

    def r_value(self) -> float:
        return correlation_coefficient(self.x_values, self.y_values)
