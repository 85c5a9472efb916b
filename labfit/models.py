"""
Ready-made model functions for `CurveFit`.

Every model has the signature ``model(x, params) -> y`` for a single
abscissa ``x`` and a parameter sequence ``params``, and also works on
numpy arrays of ``x``.
"""

import numpy as np


def linear(x, params):
    r"""``m * x + c`` with ``params = [m, c]``."""
    m, c = params
    return m * x + c


def polynomial(x, params):
    r"""``params[0] + params[1] * x + params[2] * x**2 + ...``."""
    return sum(coef * x**power for power, coef in enumerate(params))


def exponential_decay(x, params):
    r"""``a * exp(-b * x)`` with ``params = [a, b]``."""
    a, b = params
    return a * np.exp(-b * x)


def gaussian(x, params):
    r"""``a * exp(-(x - mu)**2 / (2 * sigma**2))`` with ``params = [a, mu, sigma]``."""
    a, mu, sigma = params
    return a * np.exp(-((x - mu) ** 2) / (2.0 * sigma**2))


def power_law(x, params):
    r"""``a * x**k`` with ``params = [a, k]``."""
    a, k = params
    return a * np.power(x, k)


def damped_oscillation(x, params):
    r"""``a * exp(-gamma * x) * cos(omega * x + phi)`` with ``params = [a, gamma, omega, phi]``."""
    a, gamma, omega, phi = params
    return a * np.exp(-gamma * x) * np.cos(omega * x + phi)
