"""
Nelder–Mead simplex minimisation.

A derivative-free local minimiser: the simplex of ``n + 1`` vertices moves
through parameter space by reflection, expansion, contraction and shrink
steps until the spread of objective values across the vertices drops below
the tolerance.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np


@dataclass(frozen=True)
class SimplexResult:
    """Outcome of one `nelder_mead` run."""

    point: np.ndarray
    value: float
    iterations: int
    converged: bool


def generate_initial_simplex(initial_point, scale):
    """The starting point plus one copy per coordinate shifted by ``+scale``."""
    initial_point = np.asarray(initial_point, dtype=float)
    n = len(initial_point)
    return np.vstack([initial_point, initial_point + scale * np.eye(n)])


def nelder_mead(
    f: Callable[[np.ndarray], float],
    initial_point,
    max_iterations: Optional[int] = None,
    tol: float = 1e-6,
    scale: float = 0.5,
) -> SimplexResult:
    """
    Minimise ``f`` starting from ``initial_point``.

    Parameters
    ----------
    f : callable
        Objective, ``f(point) -> float``.
    initial_point : array-like
        Starting coordinates.
    max_iterations : int or None
        Iteration cap. With None the search runs until
        ``|f_best - f_worst| < tol``; an objective that never flattens out
        then keeps the loop running forever.
    tol : float
        Convergence threshold on the objective spread.
    scale : float
        Edge length of the initial simplex.

    Returns
    -------
    SimplexResult
        Best vertex, its objective value, iterations used and whether the
        tolerance was met.
    """
    simplex = generate_initial_simplex(initial_point, scale)
    n = simplex.shape[1]
    values = np.array([f(point) for point in simplex], dtype=float)

    iterations = 0
    converged = False
    while True:
        order = np.argsort(values, kind="stable")
        simplex, values = simplex[order], values[order]

        if n == 0 or abs(values[0] - values[-1]) < tol:
            converged = True
            break
        if max_iterations is not None and iterations >= max_iterations:
            break
        iterations += 1

        best, second_worst, worst = values[0], values[-2], values[-1]
        centroid = simplex[:-1].mean(axis=0)

        reflection = 2.0 * centroid - simplex[-1]
        reflection_value = f(reflection)

        if best <= reflection_value < second_worst:
            simplex[-1], values[-1] = reflection, reflection_value
        elif reflection_value < best:
            expansion = centroid + 2.0 * (reflection - centroid)
            expansion_value = f(expansion)
            if expansion_value < reflection_value:
                simplex[-1], values[-1] = expansion, expansion_value
            else:
                simplex[-1], values[-1] = reflection, reflection_value
        else:
            contraction = 0.5 * (centroid + simplex[-1])
            contraction_value = f(contraction)
            if contraction_value < worst:
                simplex[-1], values[-1] = contraction, contraction_value
            else:
                # shrink every vertex halfway towards the best one
                simplex[1:] = 0.5 * (simplex[0] + simplex[1:])
                values[1:] = [f(point) for point in simplex[1:]]

    return SimplexResult(
        point=simplex[0].copy(),
        value=float(values[0]),
        iterations=iterations,
        converged=converged,
    )
