import numpy as np
from scipy.stats import t


def t_quantile(level, dof):
    """Two-sided Student-t critical value for confidence ``level`` and ``dof`` degrees of freedom."""
    if dof <= 0:
        return np.nan
    return float(t.ppf(0.5 + level / 2.0, dof))


def confidence_interval(value, error, dof, level=0.95):
    margin = error * t_quantile(level, dof)
    return value - margin, value + margin


def round_to_sigfigs(value, sigfigs=4):
    if isinstance(value, (int, float, np.floating)):
        return float(f"{value:.{sigfigs}g}")
    return value
