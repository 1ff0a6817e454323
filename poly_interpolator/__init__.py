"""Exact polynomial interpolation through a set of (x, y) points.

The coefficient vector comes from the Vandermonde system solved by Gaussian
elimination with partial pivoting, in ascending power order.
"""

from .errors import (
    InsufficientPointsError,
    InterpolationError,
    InvalidArgument,
    NotCalculatedError,
    ParseError,
    SelectionError,
    SingularSystemError,
)
from .export import PlotExporter
from .linear_system import LinearSystem, build_linear_system
from .points import Point, PointSet, parse_number
from .polynomial import (
    derivative,
    differentiate,
    evaluate,
    format_number,
    format_polynomial,
    polynomial_to_latex,
)
from .session import InterpolationSession
from .settings import InterpolationSettings
from .solver import gaussian_solve, solve_system

__all__ = [
    "InsufficientPointsError",
    "InterpolationError",
    "InterpolationSession",
    "InterpolationSettings",
    "InvalidArgument",
    "LinearSystem",
    "NotCalculatedError",
    "ParseError",
    "PlotExporter",
    "Point",
    "PointSet",
    "SelectionError",
    "SingularSystemError",
    "build_linear_system",
    "derivative",
    "differentiate",
    "evaluate",
    "format_number",
    "format_polynomial",
    "gaussian_solve",
    "parse_number",
    "polynomial_to_latex",
    "solve_system",
]
