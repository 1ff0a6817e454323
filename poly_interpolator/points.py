from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidArgument, ParseError, SelectionError

FloatArray = NDArray[np.floating[Any]]


def parse_number(text: str) -> float:
    """Read a finite real number from user text.

    Accepts ``.`` or a single ``,`` as the decimal separator so that input
    typed under a comma-decimal locale still parses.
    """
    cleaned = str(text).strip()
    if cleaned.count(",") == 1 and "." not in cleaned:
        cleaned = cleaned.replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError:
        raise ParseError(f"{text!r} is not a valid number") from None
    if not math.isfinite(value):
        raise ParseError(f"{text!r} is not a finite number")
    return value


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ParseError(f"point coordinates must be finite, got ({self.x}, {self.y})")

    @classmethod
    def parse(cls, x_text: str, y_text: str) -> Point:
        return cls(parse_number(x_text), parse_number(y_text))

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


class PointSet:
    """Ordered collection of sample points.

    Insertion order is kept for display only.  Every mutation bumps
    ``revision`` so derived results can tell they are out of date.
    Distinct x-values are not enforced.
    """

    def __init__(self, points: Optional[Iterable[Point]] = None) -> None:
        self._points: list[Point] = list(points) if points is not None else []
        self._revision = 0

    @property
    def revision(self) -> int:
        return self._revision

    def add(self, point: Point) -> None:
        if not isinstance(point, Point):
            raise InvalidArgument(f"expected a Point, got {type(point).__name__}")
        self._points.append(point)
        self._revision += 1

    def remove(self, point: Point) -> None:
        try:
            self._points.remove(point)
        except ValueError:
            raise SelectionError(f"point {point} is not in the set") from None
        self._revision += 1

    def remove_at(self, index: int) -> Point:
        if not 0 <= index < len(self._points):
            raise SelectionError(f"no point at index {index}")
        point = self._points.pop(index)
        self._revision += 1
        return point

    def clear(self) -> None:
        if self._points:
            self._points.clear()
            self._revision += 1

    @property
    def xs(self) -> FloatArray:
        return np.array([p.x for p in self._points], dtype=np.float64)

    @property
    def ys(self) -> FloatArray:
        return np.array([p.y for p in self._points], dtype=np.float64)

    def x_range(self) -> tuple[float, float]:
        if not self._points:
            raise InvalidArgument("empty point set has no x range")
        xs = [p.x for p in self._points]
        return min(xs), max(xs)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __repr__(self) -> str:
        return f"PointSet({self._points!r})"


def as_point_set(points: Iterable[Point]) -> PointSet:
    """Return *points* itself when it already is a PointSet, else wrap it."""
    return points if isinstance(points, PointSet) else PointSet(points)
