"""
Finite-difference derivatives and Gauss–Jordan matrix inversion used to
turn a converged simplex into a parameter covariance matrix.
"""

from typing import Callable, Optional

import numpy as np

from labfit.config import FINITE_DIFFERENCE


def finite_difference_step(params, relative_step=None, fallback_step=None) -> float:
    """
    Step ``relative_step * min(|p_i|)``.

    The relative step is zero as soon as one parameter is exactly zero; the
    fallback step is used then (and for non-finite parameters).
    """
    if relative_step is None:
        relative_step = FINITE_DIFFERENCE["relative_step"]
    if fallback_step is None:
        fallback_step = FINITE_DIFFERENCE["fallback_step"]

    params = np.asarray(params, dtype=float)
    if params.size == 0:
        return fallback_step
    h = relative_step * float(np.min(np.abs(params)))
    if h == 0.0 or not np.isfinite(h):
        return fallback_step
    return h


def calculate_gradient(f: Callable[[np.ndarray], float], params, h: float) -> np.ndarray:
    """Central-difference gradient of ``f`` at ``params``."""
    params = np.asarray(params, dtype=float)
    gradient = np.empty(len(params))
    for i in range(len(params)):
        forward = params.copy()
        backward = params.copy()
        forward[i] += h
        backward[i] -= h
        gradient[i] = (f(forward) - f(backward)) / (2.0 * h)
    return gradient


def calculate_hessian_matrix(f: Callable[[np.ndarray], float], params, h: Optional[float] = None) -> np.ndarray:
    """
    Hessian of ``f`` at ``params``.

    Row ``i`` is the central difference, along coordinate ``i``, of the
    central-difference gradient.
    """
    params = np.asarray(params, dtype=float)
    if h is None:
        h = finite_difference_step(params)

    n = len(params)
    hessian = np.zeros((n, n))
    with np.errstate(all="ignore"):
        for i in range(n):
            forward = params.copy()
            backward = params.copy()
            forward[i] += h
            backward[i] -= h
            hessian[i] = (calculate_gradient(f, forward, h) - calculate_gradient(f, backward, h)) / (2.0 * h)
    return hessian


def invert_matrix(matrix) -> Optional[np.ndarray]:
    """
    Invert a square matrix by Gauss–Jordan elimination with partial pivoting.

    In each column the row with the largest absolute candidate is swapped
    into the pivot position before eliminating.

    Parameters
    ----------
    matrix : array-like
        Matrix given as a sequence of rows.

    Returns
    -------
    numpy.ndarray or None
        The inverse, or None if the matrix is not square or is singular.
    """
    rows = [np.asarray(row, dtype=float) for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        return None

    augmented = np.hstack([np.array(rows, dtype=float).reshape(n, n), np.eye(n)])

    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(augmented[i:, i])))
        if augmented[pivot_row, i] == 0.0 or not np.isfinite(augmented[pivot_row, i]):
            return None
        if pivot_row != i:
            augmented[[i, pivot_row]] = augmented[[pivot_row, i]]

        augmented[i] /= augmented[i, i]
        for k in range(n):
            if k != i:
                augmented[k] -= augmented[k, i] * augmented[i]

    return augmented[:, n:]
