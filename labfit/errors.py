"""
Exceptions and warning categories raised by labfit.

Construction problems and caller contract violations are exceptions;
numerical degeneracies found during a fit are warnings, so the fit still
returns its point estimates.
"""


class LabfitError(Exception):
    """Base class for all labfit exceptions."""


class InvalidErrorLength(LabfitError, ValueError):
    """Raised when a Measure gets an error vector whose length is neither 1 nor len(values)."""

    def __init__(self, n_values, n_errors):
        self.n_values = n_values
        self.n_errors = n_errors
        super().__init__(
            "You're only allowed to assign either one error for all values or one "
            f"error for each value (got {n_values} values and {n_errors} errors)."
        )


class LengthMismatchError(LabfitError, ValueError):
    """Raised when paired vectors (x/y/yerr, or two Measures) have incompatible lengths."""


class SingularHessianWarning(UserWarning):
    """The Hessian of the objective could not be inverted; parameter errors are zeroed."""


class ConvergenceWarning(UserWarning):
    """The simplex search stopped on the iteration cap, or the covariance has no degrees of freedom."""
