"""Interpolation session.

Holds the point set being edited, the current selection and the last
computed coefficients.  Coefficients remember the point-set revision they
were solved from; once the points change they are stale and every
operation that needs them asks for a new calculation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .errors import InsufficientPointsError, NotCalculatedError, SelectionError
from .export import PlotExporter
from .linear_system import build_linear_system
from .points import FloatArray, Point, PointSet, parse_number
from .polynomial import derivative, evaluate, format_number
from .settings import InterpolationSettings
from .solver import solve_system

logger = logging.getLogger(__name__)

MIN_POINTS: int = 2


class InterpolationSession:

    def __init__(self, settings: Optional[InterpolationSettings] = None) -> None:
        self._settings = settings if settings is not None else InterpolationSettings()
        self._points = PointSet()
        self._selected: Optional[int] = None
        self._coefficients: Optional[FloatArray] = None
        self._solved_revision: Optional[int] = None

    @property
    def settings(self) -> InterpolationSettings:
        return self._settings

    @property
    def points(self) -> PointSet:
        return self._points

    # ------------------------------------------------------------------
    # Point editing
    # ------------------------------------------------------------------

    def add_point(self, x_text: str, y_text: str) -> Point:
        point = Point.parse(x_text, y_text)
        self.add(point)
        return point

    def add(self, point: Point) -> None:
        self._points.add(point)
        logger.debug("added point %s (%d total)", point, len(self._points))

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected

    def select(self, index: int) -> Point:
        if not 0 <= index < len(self._points):
            raise SelectionError(f"no point at index {index}")
        self._selected = index
        return self._points[index]

    def clear_selection(self) -> None:
        self._selected = None

    def remove_selected(self) -> Point:
        if self._selected is None:
            raise SelectionError("No point selected. Please select a point to remove.")
        point = self._points.remove_at(self._selected)
        self._selected = None
        logger.debug("removed point %s", point)
        return point

    def remove(self, point: Point) -> None:
        self._points.remove(point)
        self._selected = None

    # ------------------------------------------------------------------
    # Calculation
    # ------------------------------------------------------------------

    @property
    def coefficients(self) -> Optional[FloatArray]:
        return self._coefficients

    @property
    def is_calculated(self) -> bool:
        return self._coefficients is not None and not self.is_stale

    @property
    def is_stale(self) -> bool:
        """True when coefficients exist but the points changed since."""
        return self._coefficients is not None and self._solved_revision != self._points.revision

    def calculate(self) -> FloatArray:
        n = len(self._points)
        if n < MIN_POINTS:
            raise InsufficientPointsError(
                f"At least {MIN_POINTS} points are required for interpolation, got {n}."
            )
        system = build_linear_system(self._points)
        coefficients = solve_system(system, pivot_tolerance=self._settings.pivot_tolerance)
        coefficients.setflags(write=False)

        self._coefficients = coefficients
        self._solved_revision = self._points.revision
        logger.info("interpolated %d points, degree %d", n, n - 1)
        return coefficients

    def require_coefficients(self) -> FloatArray:
        if self._coefficients is None:
            raise NotCalculatedError("Please calculate the interpolation polynomial first.")
        if self.is_stale:
            raise NotCalculatedError(
                "The points changed since the last calculation. "
                "Please calculate the interpolation polynomial again."
            )
        return self._coefficients

    def evaluate(self, x: Union[str, float]) -> float:
        coefficients = self.require_coefficients()
        value = parse_number(x) if isinstance(x, str) else float(x)
        return float(evaluate(coefficients, value))

    def derivative(self, order: int = 1) -> FloatArray:
        result = derivative(self.require_coefficients(), order)
        result.setflags(write=False)
        return result

    def first_derivative(self) -> FloatArray:
        return self.derivative(1)

    def second_derivative(self) -> FloatArray:
        return self.derivative(2)

    def export(self, exporter: Optional[PlotExporter] = None, path: Optional[Path] = None) -> Path:
        coefficients = self.require_coefficients()
        exporter = exporter if exporter is not None else PlotExporter(self._settings)
        return exporter.write(self._points, coefficients, path)

    @staticmethod
    def format_result(x: float, y: float) -> str:
        return f"P({format_number(x)}) = {format_number(y)}"
