from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import InvalidArgument

DEFAULT_EXPORT_FILENAME: str = "interpolation.tex"


def default_export_dir() -> Path:
    """The user's Desktop when it exists, otherwise the home directory."""
    home = Path.home()
    desktop = home / "Desktop"
    return desktop if desktop.is_dir() else home


@dataclass(frozen=True, slots=True)
class InterpolationSettings:
    pivot_tolerance: float = 0.0     # |pivot| at or below this is treated as zero
    export_dir: Optional[Path] = None
    export_filename: str = DEFAULT_EXPORT_FILENAME
    samples: int = 100               # pgfplots sampling of the curve
    latex_approx: bool = True        # decimal approximations in displayed LaTeX
    latex_decimals: int = 3
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.pivot_tolerance >= 0:
            raise InvalidArgument(f"pivot_tolerance must be >= 0, got {self.pivot_tolerance}")
        if not self.export_filename or Path(self.export_filename).name != self.export_filename:
            raise InvalidArgument(f"export_filename must be a bare file name, got {self.export_filename!r}")
        if self.samples < 2:
            raise InvalidArgument(f"samples must be at least 2, got {self.samples}")
        if not (0 <= self.latex_decimals <= 10):
            raise InvalidArgument(f"latex_decimals must be in [0, 10], got {self.latex_decimals}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidArgument(f"unknown log level {self.log_level!r}")

    @property
    def export_path(self) -> Path:
        base = self.export_dir if self.export_dir is not None else default_export_dir()
        return Path(base) / self.export_filename

    @property
    def logging_level(self) -> int:
        return int(logging.getLevelName(self.log_level.upper()))
