"""Tests for settings.InterpolationSettings."""

import logging
from pathlib import Path

import pytest

from poly_interpolator.errors import InvalidArgument
from poly_interpolator.settings import InterpolationSettings, default_export_dir


class TestInterpolationSettings:

    def test_defaults(self):
        settings = InterpolationSettings()

        assert settings.pivot_tolerance == 0.0
        assert settings.export_filename == "interpolation.tex"
        assert settings.samples == 100
        assert settings.logging_level == logging.INFO

    def test_export_path_when_dir_given(self, tmp_path):
        settings = InterpolationSettings(export_dir=tmp_path)
        assert settings.export_path == tmp_path / "interpolation.tex"

    def test_export_path_when_no_dir_then_desktop_or_home(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert default_export_dir() == tmp_path

        (tmp_path / "Desktop").mkdir()
        assert InterpolationSettings().export_path == tmp_path / "Desktop" / "interpolation.tex"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"pivot_tolerance": -1.0},
            {"pivot_tolerance": float("nan")},
            {"export_filename": ""},
            {"export_filename": "sub/plot.tex"},
            {"samples": 1},
            {"latex_decimals": 11},
            {"log_level": "chatty"},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(InvalidArgument):
            InterpolationSettings(**kwargs)

    def test_settings_are_frozen(self):
        settings = InterpolationSettings()
        with pytest.raises(AttributeError):
            settings.samples = 5  # type: ignore[misc]
