from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .points import FloatArray, Point, as_point_set


@dataclass(frozen=True, slots=True)
class LinearSystem:
    """Dense system ``matrix @ c = rhs`` for the interpolation coefficients."""

    matrix: FloatArray
    rhs: FloatArray

    @property
    def size(self) -> int:
        return int(self.rhs.shape[0])


def build_linear_system(points: Iterable[Point]) -> LinearSystem:
    """Vandermonde system for the given points.

    Row i holds ``x_i ** j`` for j = 0..n-1, so ``c`` comes out in ascending
    power order.  Distinct x-values are not checked here; a repeated x shows
    up later as a zero pivot.
    """
    point_set = as_point_set(points)
    matrix = np.vander(point_set.xs, len(point_set), increasing=True)
    return LinearSystem(matrix=matrix, rhs=point_set.ys)
