"""Gaussian elimination with partial pivoting.

Forward elimination swaps in the row with the largest magnitude in the pivot
column (lowest index on ties), then back substitution recovers the solution.
A pivot whose magnitude does not exceed ``pivot_tolerance`` aborts the solve
with :class:`SingularSystemError` instead of letting NaN/Inf leak into the
coefficients.  Pivot size scales with the spacing of the x-values, so the
default only rejects exact zeros; a repeated x keeps two rows identical
through elimination and always leaves an exact zero pivot.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from .errors import InvalidArgument, SingularSystemError
from .linear_system import LinearSystem
from .points import FloatArray

logger = logging.getLogger(__name__)

DEFAULT_PIVOT_TOLERANCE: float = 0.0


def gaussian_solve(
    matrix: ArrayLike,
    rhs: ArrayLike,
    *,
    pivot_tolerance: float = DEFAULT_PIVOT_TOLERANCE,
    overwrite: bool = False,
) -> FloatArray:
    """Solve ``matrix @ c = rhs``.

    Parameters
    ----------
    matrix, rhs : array_like
        Square n x n matrix and length-n right-hand side.
    pivot_tolerance : float
        Pivots with ``abs(p) <= pivot_tolerance`` are treated as zero.
    overwrite : bool
        When True and the inputs are already float64 ndarrays they are
        reordered and overwritten in place; otherwise working copies are used.
    """
    a = np.asarray(matrix, dtype=np.float64)
    b = np.asarray(rhs, dtype=np.float64)
    if not overwrite:
        a = a.copy()
        b = b.copy()

    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise InvalidArgument(f"matrix must be square, got shape {a.shape}")
    n = a.shape[0]
    if n == 0:
        raise InvalidArgument("cannot solve an empty system")
    if b.shape != (n,):
        raise InvalidArgument(f"rhs must have shape ({n},), got {b.shape}")

    for i in range(n):
        # argmax returns the first maximum, so ties keep the lowest row index
        pivot_row = i + int(np.argmax(np.abs(a[i:, i])))
        if pivot_row != i:
            a[[i, pivot_row], :] = a[[pivot_row, i], :]
            b[[i, pivot_row]] = b[[pivot_row, i]]

        pivot = a[i, i]
        if not abs(pivot) > pivot_tolerance:
            raise SingularSystemError(
                f"zero pivot in column {i}: the system is singular "
                f"(are two points sharing the same x?)"
            )
        logger.debug("column %d: pivot row %d, pivot %.6g", i, pivot_row, pivot)

        if i + 1 < n:
            factors = a[i + 1:, i] / pivot
            a[i + 1:, i:] -= np.outer(factors, a[i, i:])
            b[i + 1:] -= factors * b[i]

    solution = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        tail = float(np.dot(a[i, i + 1:], solution[i + 1:])) if i + 1 < n else 0.0
        solution[i] = (b[i] - tail) / a[i, i]

    if not np.all(np.isfinite(solution)):
        raise SingularSystemError("elimination overflowed; the system is numerically singular")
    return solution


def solve_system(
    system: LinearSystem, *, pivot_tolerance: float = DEFAULT_PIVOT_TOLERANCE
) -> FloatArray:
    """Solve a :class:`LinearSystem`, consuming its buffers."""
    logger.debug("solving %dx%d system", system.size, system.size)
    return gaussian_solve(
        system.matrix, system.rhs, pivot_tolerance=pivot_tolerance, overwrite=True
    )
