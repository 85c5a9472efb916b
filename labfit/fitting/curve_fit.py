"""
Nonlinear least-squares fitting with the Nelder–Mead simplex.

The objective is the (weighted) residual sum of squares
``sum(((y - model(x, p)) / yerr) ** 2)``. Once the simplex has converged,
the parameter covariance is estimated from the numerical Hessian ``H`` of
the objective at the best point::

    cov = inverse(H / 2) * RSS / (n_points - n_params)

and the parameter errors are the square roots of its diagonal.
"""

import warnings
from typing import Callable, List, Optional, Sequence

import numpy as np

from labfit.config import FIT_DEFAULTS
from labfit.errors import ConvergenceWarning, SingularHessianWarning
from labfit.fitting.base_fit import BaseFit
from labfit.fitting.linalg import calculate_hessian_matrix, invert_matrix
from labfit.fitting.simplex import nelder_mead
from labfit.fitting_utils import (
    as_float_array,
    calculate_fit_metrics,
    check_same_length,
    r_value_from_residuals,
    weighted_rss,
)
from labfit.io.fit_result import FitResult
from labfit.measure import Measure

Model = Callable[[float, np.ndarray], float]


def _evaluate(model: Model, x, params) -> np.ndarray:
    with np.errstate(all="ignore"):
        return np.array([model(xi, params) for xi in x], dtype=float)


def _covariance(objective, point, rss, dof):
    n_params = len(point)
    hessian = calculate_hessian_matrix(objective, point)
    inverse = invert_matrix(hessian / 2.0)
    if inverse is None:
        warnings.warn(
            "Hessian of the objective is singular; parameter errors are set to zero.",
            SingularHessianWarning,
        )
        return np.zeros((n_params, n_params))

    if dof <= 0:
        warnings.warn(
            f"No degrees of freedom left ({dof}); parameter errors are NaN.",
            ConvergenceWarning,
        )
        return inverse * np.nan
    return inverse * (rss / dof)


def _run(model, x, y, yerr, initial_point, tolerance, max_iterations, initial_simplex_scale, verbose=False):
    x, y = as_float_array(x), as_float_array(y)
    yerr = np.ones(len(y)) if yerr is None else as_float_array(yerr)
    check_same_length(x=x, y=y, yerr=yerr)

    initial_point = np.atleast_1d(np.asarray(initial_point, dtype=float))
    if initial_point.size == 0:
        raise ValueError("The initial point needs at least one parameter.")

    def objective(params):
        return weighted_rss(y, model, x, params, yerr)

    if verbose:
        print(f"Fitting {len(initial_point)} parameters to {len(x)} points")

    result = nelder_mead(
        objective,
        initial_point,
        max_iterations=max_iterations,
        tol=tolerance,
        scale=initial_simplex_scale,
    )
    if not result.converged:
        warnings.warn(
            f"Simplex stopped after {result.iterations} iterations without reaching "
            f"the tolerance {tolerance}.",
            ConvergenceWarning,
        )
    if verbose:
        print(f"Simplex finished after {result.iterations} iterations, RSS = {result.value:.6g}")

    dof = len(x) - len(result.point)
    covariance = _covariance(objective, result.point, result.value, dof)
    with np.errstate(invalid="ignore"):
        errors = np.sqrt(np.diag(covariance))
    return x, y, result, covariance, errors, dof


def curve_fit(
    model: Model,
    x,
    y,
    yerr=None,
    initial_point: Optional[Sequence[float]] = None,
    tolerance=FIT_DEFAULTS["tolerance"],
    max_iterations=FIT_DEFAULTS["max_iterations"],
    initial_simplex_scale=FIT_DEFAULTS["initial_simplex_scale"],
) -> List[Measure]:
    """
    Fit ``model(x, params)`` to the data points.

    Parameters
    ----------
    model : callable
        ``model(x_i, params) -> float`` evaluated point by point.
    x, y : array-like or Measure
        Data points; for Measures only the values are used.
    yerr : array-like, optional
        Per-point y errors used as weights; all ones when omitted.
    initial_point : sequence of float
        Starting parameters; its length fixes the number of parameters.
    tolerance : float
        Stop once the objective spread across the simplex is below this.
    max_iterations : int or None
        Iteration cap; None runs until the tolerance is met.
    initial_simplex_scale : float
        Edge length of the initial simplex.

    Returns
    -------
    list of Measure
        One length-1 Measure per parameter, not approximated.

    Raises
    ------
    LengthMismatchError
        If ``x``, ``y`` and ``yerr`` differ in length.
    ValueError
        If ``initial_point`` is missing or empty.

    Warns
    -----
    SingularHessianWarning
        If the Hessian cannot be inverted (errors become zero).
    ConvergenceWarning
        If the iteration cap is reached, or there are no degrees of freedom.
    """
    if initial_point is None:
        raise ValueError("An initial point is required.")
    _, _, result, _, errors, _ = _run(
        model, x, y, yerr, initial_point, tolerance, max_iterations, initial_simplex_scale
    )
    return [Measure([value], [error]) for value, error in zip(result.point, errors)]


class CurveFit(BaseFit):
    """
    Builder for nonlinear fits.

    >>> a, b = (
    ...     CurveFit(lambda x, p: p[0] * np.exp(-p[1] * x), x, y)
    ...     .initial_zeros(2)
    ...     .fit()
    ... )
    """

    def __init__(self, model: Model, x_values, y_values, verbose=False):
        self.model = model
        self.x_values = as_float_array(x_values)
        self.y_values = as_float_array(y_values)
        self.yerr = None
        self.verbose = verbose
        self._initial_point = None
        self._names = None
        self._tolerance = FIT_DEFAULTS["tolerance"]
        self._max_iterations = FIT_DEFAULTS["max_iterations"]
        self._initial_simplex_scale = FIT_DEFAULTS["initial_simplex_scale"]

    def initial_point(self, point):
        self._initial_point = np.atleast_1d(np.asarray(point, dtype=float))
        return self

    def initial_zeros(self, n: int):
        return self.initial_point(np.zeros(n))

    def initial_ones(self, n: int):
        return self.initial_point(np.ones(n))

    def y_error(self, yerr):
        self.yerr = as_float_array(yerr)
        return self

    def tolerance(self, tolerance: float):
        self._tolerance = tolerance
        return self

    def max_iterations(self, max_iterations: Optional[int]):
        self._max_iterations = max_iterations
        return self

    def initial_simplex_scale(self, scale: float):
        self._initial_simplex_scale = scale
        return self

    def parameter_names(self, *names):
        """Label the parameters in `fit_result` (default ``p0, p1, ...``)."""
        if len(names) == 1 and not isinstance(names[0], str):
            names = tuple(names[0])
        self._names = list(names)
        return self

    def _names_for(self, n_params):
        if self._names is None:
            return [f"p{i}" for i in range(n_params)]
        if len(self._names) != n_params:
            raise ValueError(f"Expected {n_params} parameter names, got {len(self._names)}.")
        return list(self._names)

    def _solve(self):
        if self._initial_point is None:
            raise ValueError("Set an initial point (initial_point, initial_zeros or initial_ones) before fitting.")
        return _run(
            self.model,
            self.x_values,
            self.y_values,
            self.yerr,
            self._initial_point,
            self._tolerance,
            self._max_iterations,
            self._initial_simplex_scale,
            verbose=self.verbose,
        )

    def fit(self) -> List[Measure]:
        _, _, result, _, errors, _ = self._solve()
        return [Measure([value], [error]) for value, error in zip(result.point, errors)]

    def fit_result(self) -> FitResult:
        """Run the fit and collect parameters, covariance and statistics."""
        x, y, result, covariance, errors, dof = self._solve()
        names = self._names_for(len(result.point))
        y_computed = _evaluate(self.model, x, result.point)
        rmse, r_squared = calculate_fit_metrics(y, y_computed)
        return FitResult(
            params=[Measure([value], [error]) for value, error in zip(result.point, errors)],
            names=names,
            covariance=covariance,
            rss=result.value,
            dof=dof,
            r_value=r_value_from_residuals(y, y_computed),
            iterations=result.iterations,
            converged=result.converged,
            meta={"weighted": self.yerr is not None},
            rmse=rmse,
            r_squared=r_squared,
        )

    def r_value(self) -> float:
        """Fit again and return ``sqrt(1 - SS_res / SS_tot)``."""
        x, y, result, _, _, _ = self._solve()
        return r_value_from_residuals(y, _evaluate(self.model, x, result.point))
