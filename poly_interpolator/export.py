from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from numpy.typing import ArrayLike

from .errors import InvalidArgument
from .points import Point, as_point_set
from .polynomial import as_coefficients, format_number, format_polynomial
from .settings import InterpolationSettings

logger = logging.getLogger(__name__)


class PlotExporter:
    """Builds a pgfplots document showing the points and the fitted curve.

    All numbers go through :func:`format_number`, so the output uses ``.``
    as the decimal separator whatever the host locale is.
    """

    _PREAMBLE: tuple[str, ...] = (
        r"\documentclass[11pt]{article}",
        r"\usepackage{tikz}",
        r"\usepackage{pgfplots}",
        r"\pgfplotsset{compat=1.12}",
        r"\usepgfplotslibrary{fillbetween}",
        r"\begin{document}",
        "\t" + r"\begin{tikzpicture}",
        "\t\t" + r"\pgfplotsset{scale only axis,}",
    )

    _CLOSING: tuple[str, ...] = (
        "\t\t" + r"\end{axis}",
        "\t" + r"\end{tikzpicture}",
        r"\end{document}",
    )

    def __init__(self, settings: Optional[InterpolationSettings] = None) -> None:
        self._settings = settings if settings is not None else InterpolationSettings()

    @property
    def settings(self) -> InterpolationSettings:
        return self._settings

    def render(self, points: Iterable[Point], coefficients: ArrayLike) -> str:
        point_set = as_point_set(points)
        coef = as_coefficients(coefficients)
        if not len(point_set):
            raise InvalidArgument("cannot export an empty point set")
        if coef.size == 0:
            raise InvalidArgument("cannot export an empty polynomial")

        x_min, x_max = point_set.x_range()

        lines = list(self._PREAMBLE)
        lines.append("\t\t" + rf"\begin{{axis}}[xlabel=$x$, ylabel=$y$, samples={self._settings.samples}]")
        # first coordinate pair shares the line with the opening brace
        rows = [f"{format_number(p.x)} {format_number(p.y)}" for p in point_set]
        rows[0] = r"\addplot [only marks] table {" + rows[0]
        lines.extend(rows)
        lines.append("};")
        lines.append(
            rf"\addplot[][domain={format_number(x_min)}:{format_number(x_max)}]"
            f"{{{format_polynomial(coef)}}};"
        )
        lines.extend(self._CLOSING)
        return "\n".join(lines) + "\n"

    def write(
        self, points: Iterable[Point], coefficients: ArrayLike, path: Optional[Path] = None
    ) -> Path:
        target = Path(path) if path is not None else self._settings.export_path
        document = self.render(points, coefficients)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(document, encoding="utf-8")
        logger.info("plot document written to %s", target)
        return target
