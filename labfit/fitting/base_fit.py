"""
Base class for the fit builders in labfit.fitting.
Defines the interface shared by `LinearFit` and `CurveFit`.
"""
import abc


class BaseFit(abc.ABC):
    """Abstract base class for fit builders."""

    @abc.abstractmethod
    def fit(self):
        """Run the fit and return the fitted parameters as Measures."""
        pass

    @abc.abstractmethod
    def r_value(self) -> float:
        """Return the correlation coefficient of the fit."""
        pass
