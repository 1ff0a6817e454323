"""Exception hierarchy for the interpolation engine and its session."""

from __future__ import annotations

import numpy as np


class InterpolationError(Exception):
    """Base class for every recoverable, user-facing failure."""


class ParseError(InterpolationError, ValueError):
    """Text could not be read as a finite real number."""


class SelectionError(InterpolationError, LookupError):
    """An operation needed a selected point and there was none."""


class InsufficientPointsError(InterpolationError, ValueError):
    """Fewer than two points were available for interpolation."""


class SingularSystemError(InterpolationError, np.linalg.LinAlgError):
    """Zero pivot during elimination (duplicate x-values or otherwise singular)."""


class NotCalculatedError(InterpolationError):
    """Evaluation or differentiation requested without a current polynomial."""


class InvalidArgument(InterpolationError, ValueError):
    """Malformed input to an engine call: empty coefficients, non-square system, bad setting."""
