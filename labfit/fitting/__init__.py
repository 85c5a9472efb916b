"""
Fitting routines: closed-form straight lines and Nelder–Mead curve fits.
"""

from .base_fit import BaseFit
from .curve_fit import CurveFit, curve_fit
from .linalg import calculate_gradient, calculate_hessian_matrix, finite_difference_step, invert_matrix
from .linear_fit import LinearFit, correlation_coefficient, linear_fit, weighted_linear_fit
from .simplex import SimplexResult, generate_initial_simplex, nelder_mead

__all__ = [
    "BaseFit",
    "CurveFit",
    "LinearFit",
    "SimplexResult",
    "calculate_gradient",
    "calculate_hessian_matrix",
    "correlation_coefficient",
    "curve_fit",
    "finite_difference_step",
    "generate_initial_simplex",
    "invert_matrix",
    "linear_fit",
    "nelder_mead",
    "weighted_linear_fit",
]
