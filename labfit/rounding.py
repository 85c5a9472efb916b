"""
Significant-figure rounding of value/error pairs.

The tie policy is ``ceil(x * 10**d - 0.5)``, so exact halves go towards
negative infinity: ``round_value(-1.5, 0) == -2.0``.
"""

import math

import numpy as np


def round_value(value, decimals):
    """Round ``value`` (scalar or array) to ``decimals`` decimal places."""
    multiplier = 10.0 ** decimals
    return np.ceil(value * multiplier - 0.5) / multiplier


def truncate(value, decimals):
    """Truncate ``value`` towards zero at ``decimals`` decimal places."""
    multiplier = 10.0 ** decimals
    return np.trunc(value * multiplier) / multiplier


def approximate(value, error):
    r"""
    Round ``value`` and ``error`` to the first significant figure of the error.

    When the error starts with a 1 that does not round up to the next power
    of ten, one more digit is kept (``0.15 -> 0.15`` but ``0.151 -> 0.2``).

    Parameters
    ----------
    value : float
        Measured value.
    error : float
        Its uncertainty.

    Returns
    -------
    tuple of float
        ``(value, error)`` rounded to the same decimal position.

    Examples
    --------
    >>> approximate(10.14, 0.22)
    (10.1, 0.2)
    >>> approximate(10.05, 0.1)
    (10.05, 0.1)
    """
    value = float(value)
    error = float(error)

    if math.isfinite(value) and math.isfinite(error) and error != 0.0:
        decimals = -math.floor(math.log10(abs(error)))
        truncated = float(truncate(error, decimals))
        leading_one = truncated > 0 and math.log10(truncated) == math.floor(
            math.log10(truncated)
        )
        if leading_one and float(round_value(error, decimals)) == 10.0 ** -decimals:
            decimals += 1
        return float(round_value(value, decimals)), float(round_value(error, decimals))

    if error == 0.0 or math.isnan(error):
        return value, error
    if math.isnan(value):
        return value, approximate(1.0, error)[1]
    if math.isinf(error):
        return 0.0, error
    # only an infinite value is left
    return value, approximate(1.0, error)[1]
