import sys
from pathlib import Path

import pytest

# Make the package importable when the tests run from a source checkout
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from poly_interpolator.points import Point, PointSet  # noqa: E402
from poly_interpolator.session import InterpolationSession  # noqa: E402
from poly_interpolator.settings import InterpolationSettings  # noqa: E402


@pytest.fixture
def quadratic_points():
    """Three points on 1 + x + x^2."""
    return PointSet([Point(0.0, 1.0), Point(1.0, 3.0), Point(2.0, 7.0)])


@pytest.fixture
def settings(tmp_path: Path):
    """Settings that export into the test's temporary directory."""
    return InterpolationSettings(export_dir=tmp_path)


@pytest.fixture
def session(settings):
    return InterpolationSession(settings)
