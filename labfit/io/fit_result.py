"""
Container for nonlinear curve-fit outputs.

This module defines the FitResult dataclass, which stores the fitted
parameters as Measures together with the covariance matrix and the
goodness-of-fit statistics of one `CurveFit` run. Provides DataFrame and
xarray.Dataset views and Student-t confidence intervals.

Classes
-------
FitResult : Serializable
    Stores curve-fit results.

Examples
--------
>>> fr = CurveFit(model, x, y).initial_zeros(2).fit_result()
>>> df = fr.to_dataframe()
>>> ds = fr.to_dataset()
>>> print(fr.summary())
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np
import pandas as pd
import xarray as xr

from labfit.measure import Measure
from labfit.utils.stats_utils import confidence_interval, round_to_sigfigs

from .base import Serializable


@dataclass(frozen=True, eq=False)
class FitResult(Serializable):
    """
    Stores curve-fit outputs, including parameters, statistics, and metadata.

    See module docstring for usage examples.
    """

    params: List[Measure]
    names: List[str]
    covariance: np.ndarray
    rss: float
    dof: int
    r_value: float
    iterations: int
    converged: bool
    meta: dict = field(default_factory=dict)
    rmse: float = float("nan")
    r_squared: float = float("nan")

    def __post_init__(self):
        object.__setattr__(self, "meta", {**self.meta, "object_type": self.tag()})

    def tag(self) -> str:
        """
        Return the object type tag for this result.

        Returns
        -------
        str
            The string 'fit'.
        """
        return "fit"

    @property
    def values(self) -> np.ndarray:
        return np.array([p.values[0] for p in self.params])

    @property
    def errors(self) -> np.ndarray:
        return np.array([p.errors[0] for p in self.params])

    @property
    def reduced_chi_square(self) -> float:
        with np.errstate(all="ignore"):
            return float(np.float64(self.rss) / self.dof) if self.dof > 0 else float("nan")

    def to_dataframe(self) -> pd.DataFrame:
        """
        Return a DataFrame with one row per fitted parameter.

        Returns
        -------
        pandas.DataFrame
            Columns ``name``, ``value``, ``error`` plus the fit statistics.
        """
        df = pd.DataFrame({"name": self.names, "value": self.values, "error": self.errors})
        df["rss"] = self.rss
        df["dof"] = self.dof
        df["r_value"] = self.r_value
        df["rmse"] = self.rmse
        df["r_squared"] = self.r_squared
        return df

    def to_dataset(self) -> xr.Dataset:
        """
        Return the fitted parameters and covariance as an xarray.Dataset.

        Returns
        -------
        xarray.Dataset
            ``value`` and ``error`` along ``param``; ``covariance`` along
            ``(param, param_j)``.
        """
        return xr.Dataset(
            {
                "value": ("param", self.values),
                "error": ("param", self.errors),
                "covariance": (("param", "param_j"), np.asarray(self.covariance)),
            },
            coords={"param": list(self.names), "param_j": list(self.names)},
            attrs={
                **self.meta,
                "rss": self.rss,
                "dof": self.dof,
                "r_value": self.r_value,
                "rmse": self.rmse,
                "r_squared": self.r_squared,
                "iterations": self.iterations,
                "converged": int(self.converged),
            },
        )

    def confidence_intervals(self, level=0.95) -> pd.DataFrame:
        """
        Two-sided Student-t confidence interval of every parameter.

        Parameters
        ----------
        level : float
            Confidence level, e.g. 0.95.

        Returns
        -------
        pandas.DataFrame
            Columns ``name``, ``lower``, ``upper`` (NaN without degrees of freedom).
        """
        bounds = [
            confidence_interval(value, error, self.dof, level)
            for value, error in zip(self.values, self.errors)
        ]
        return pd.DataFrame(
            {
                "name": self.names,
                "lower": [lo for lo, _ in bounds],
                "upper": [hi for _, hi in bounds],
            }
        )

    def summary(self) -> str:
        lines = ["Curve fit results:"]
        for name, param in zip(self.names, self.params):
            value, error = param.approximate()[0]
            lines.append(f"  {name} = {value} ± {error}")
        lines.append(f"  RSS = {round_to_sigfigs(self.rss)}  (dof = {self.dof})")
        lines.append(f"  r = {round_to_sigfigs(self.r_value)}  (R² = {round_to_sigfigs(self.r_squared)})")
        lines.append(f"  RMSE = {round_to_sigfigs(self.rmse)}")
        status = "converged" if self.converged else "stopped at the iteration cap"
        lines.append(f"  {self.iterations} iterations, {status}")
        return "\n".join(lines)
