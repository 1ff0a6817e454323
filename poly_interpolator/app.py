from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QRadioButton,
    QSpinBox,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from .errors import InterpolationError
from .points import FloatArray, parse_number
from .polynomial import format_polynomial, polynomial_to_latex
from .session import InterpolationSession
from .settings import InterpolationSettings

logger = logging.getLogger(__name__)


# ===========================================================================
# Settings dialog
# ===========================================================================

class SettingsDialog(QDialog):

    def __init__(self, settings: InterpolationSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Interpolation Settings")
        self._settings = settings
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QGridLayout(self)

        self._tolerance_edit = QLineEdit(repr(self._settings.pivot_tolerance))
        self._export_dir_edit = QLineEdit(str(self._settings.export_path.parent))
        self._filename_edit = QLineEdit(self._settings.export_filename)

        self._samples_sb = QSpinBox()
        self._samples_sb.setRange(2, 10000)
        self._samples_sb.setValue(self._settings.samples)

        # coefficients of P(x) and its derivatives in the LaTeX panel
        coeff_group = QGroupBox("Displayed coefficients")
        coeff_layout = QGridLayout()
        self._decimal_rb = QRadioButton("Rounded decimals")
        self._fraction_rb = QRadioButton("Fractions (denominator up to 1000)")
        self._decimal_rb.setChecked(self._settings.latex_approx)
        self._fraction_rb.setChecked(not self._settings.latex_approx)
        self._places_sb = QSpinBox()
        self._places_sb.setRange(0, 10)
        self._places_sb.setValue(self._settings.latex_decimals)
        self._places_sb.setEnabled(self._settings.latex_approx)
        self._decimal_rb.toggled.connect(self._places_sb.setEnabled)
        coeff_layout.addWidget(self._decimal_rb, 0, 0)
        coeff_layout.addWidget(self._places_sb, 0, 1)
        coeff_layout.addWidget(self._fraction_rb, 1, 0, 1, 2)
        coeff_group.setLayout(coeff_layout)

        fields: list[tuple[str, QWidget]] = [
            ("Pivot tolerance:", self._tolerance_edit),
            ("Export folder:", self._export_dir_edit),
            ("Export file name:", self._filename_edit),
            ("Plot samples:", self._samples_sb),
        ]
        for row, (label, widget) in enumerate(fields):
            layout.addWidget(QLabel(label), row, 0)
            layout.addWidget(widget, row, 1)

        group_row = len(fields)
        layout.addWidget(coeff_group, group_row, 0, 1, 2)

        btn_row = QHBoxLayout()
        ok_btn = QPushButton("OK")
        cancel_btn = QPushButton("Cancel")
        ok_btn.clicked.connect(self.accept)
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(ok_btn)
        btn_row.addWidget(cancel_btn)
        layout.addLayout(btn_row, group_row + 1, 0, 1, 2)

    def get_settings(self) -> InterpolationSettings:
        """Raises ValueError (or InvalidArgument) on unusable input."""
        return dataclasses.replace(
            self._settings,
            pivot_tolerance=float(self._tolerance_edit.text()),
            export_dir=Path(self._export_dir_edit.text().strip()).expanduser(),
            export_filename=self._filename_edit.text().strip(),
            samples=int(self._samples_sb.value()),
            latex_approx=bool(self._decimal_rb.isChecked()),
            latex_decimals=int(self._places_sb.value()),
        )


# ===========================================================================
# Main window
# ===========================================================================

class InterpolationWindow(QMainWindow):

    def __init__(self, session: Optional[InterpolationSession] = None) -> None:
        super().__init__()
        self.setWindowTitle("Polynomial Interpolation")
        self.setGeometry(100, 100, 820, 560)
        self._session = session if session is not None else InterpolationSession()
        self._build_ui()

    @property
    def session(self) -> InterpolationSession:
        return self._session

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)

        # ── point entry and list ───────────────────────────────────────
        left = QVBoxLayout()
        entry_group = QGroupBox("Points")
        entry = QGridLayout()
        self._x_input = QLineEdit()
        self._y_input = QLineEdit()
        self._x_input.setPlaceholderText("x")
        self._y_input.setPlaceholderText("y")
        self._add_btn = QPushButton("Add Point")
        self._remove_btn = QPushButton("Remove Point")
        entry.addWidget(QLabel("X:"), 0, 0)
        entry.addWidget(self._x_input, 0, 1)
        entry.addWidget(QLabel("Y:"), 1, 0)
        entry.addWidget(self._y_input, 1, 1)
        entry.addWidget(self._add_btn, 2, 0, 1, 2)
        entry_group.setLayout(entry)
        left.addWidget(entry_group)

        self._points_list = QListWidget()
        left.addWidget(self._points_list)
        left.addWidget(self._remove_btn)
        root.addLayout(left, 1)

        # ── calculation and results ────────────────────────────────────
        right = QVBoxLayout()
        btn_row = QHBoxLayout()
        self._calculate_btn = QPushButton("Calculate")
        self._settings_btn = QPushButton("Settings")
        btn_row.addWidget(self._calculate_btn)
        btn_row.addWidget(self._settings_btn)
        right.addLayout(btn_row)

        eval_row = QHBoxLayout()
        self._eval_input = QLineEdit()
        self._eval_input.setPlaceholderText("x")
        self._evaluate_btn = QPushButton("Evaluate")
        eval_row.addWidget(QLabel("x ="))
        eval_row.addWidget(self._eval_input)
        eval_row.addWidget(self._evaluate_btn)
        right.addLayout(eval_row)

        deriv_row = QHBoxLayout()
        self._first_btn = QPushButton("First Derivative")
        self._second_btn = QPushButton("Second Derivative")
        deriv_row.addWidget(self._first_btn)
        deriv_row.addWidget(self._second_btn)
        right.addLayout(deriv_row)

        self._result_lbl = QLabel("")
        self._result_lbl.setWordWrap(True)
        right.addWidget(self._result_lbl)

        right.addWidget(QLabel("LaTeX Output:"))
        self._latex_output = QTextEdit()
        self._latex_output.setReadOnly(True)
        self._latex_output.setFontFamily("Courier New")
        right.addWidget(self._latex_output)

        self._status_lbl = QLabel("Ready")
        self._status_lbl.setStyleSheet("color: gray; font-style: italic;")
        right.addWidget(self._status_lbl)
        root.addLayout(right, 2)

        self._add_btn.clicked.connect(self.add_point)
        self._remove_btn.clicked.connect(self.remove_point)
        self._calculate_btn.clicked.connect(self.calculate)
        self._evaluate_btn.clicked.connect(self.evaluate)
        self._first_btn.clicked.connect(self.show_first_derivative)
        self._second_btn.clicked.connect(self.show_second_derivative)
        self._settings_btn.clicked.connect(self.show_settings)
        self._points_list.currentRowChanged.connect(self._on_row_changed)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _report(self, title: str, exc: Exception) -> None:
        logger.warning("%s: %s", title, exc)
        QMessageBox.warning(self, title, str(exc))

    def _refresh_points(self) -> None:
        self._points_list.blockSignals(True)
        self._points_list.clear()
        for point in self._session.points:
            self._points_list.addItem(str(point))
        self._points_list.blockSignals(False)
        self._session.clear_selection()
        stale = " (recalculate)" if self._session.is_stale else ""
        self._status_lbl.setText(f"{len(self._session.points)} points{stale}")

    def _on_row_changed(self, row: int) -> None:
        if row < 0:
            self._session.clear_selection()
            return
        try:
            self._session.select(row)
        except InterpolationError as exc:
            self._report("Selection Error", exc)

    def _show_polynomial(self, label: str, coefficients: FloatArray) -> None:
        settings = self._session.settings
        self._result_lbl.setText(f"{label}: {format_polynomial(coefficients, separator=' ')}")
        self._latex_output.setPlainText(
            polynomial_to_latex(coefficients, settings.latex_approx, settings.latex_decimals)
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add_point(self) -> None:
        try:
            self._session.add_point(self._x_input.text(), self._y_input.text())
        except InterpolationError as exc:
            self._report("Invalid Input", exc)
            return
        self._x_input.clear()
        self._y_input.clear()
        self._refresh_points()

    def remove_point(self) -> None:
        try:
            self._session.remove_selected()
        except InterpolationError as exc:
            self._report("No Selection", exc)
            return
        self._refresh_points()

    def calculate(self) -> None:
        try:
            coefficients = self._session.calculate()
            path = self._session.export()
        except InterpolationError as exc:
            self._report("Calculation Error", exc)
            return
        except OSError as exc:
            self._report("Export Error", exc)
            return
        self._show_polynomial("P(x)", coefficients)
        self._status_lbl.setText(f"Degree {len(coefficients) - 1}, saved to {path}")
        QMessageBox.information(
            self, "Calculation complete", f"Calculation complete. LaTeX file saved to {path}."
        )

    def evaluate(self) -> None:
        try:
            x = parse_number(self._eval_input.text())
            y = self._session.evaluate(x)
        except InterpolationError as exc:
            self._report("Evaluation Error", exc)
            return
        self._result_lbl.setText(self._session.format_result(x, y))

    def show_first_derivative(self) -> None:
        try:
            self._show_polynomial("First Derivative", self._session.first_derivative())
        except InterpolationError as exc:
            self._report("Derivative Error", exc)

    def show_second_derivative(self) -> None:
        try:
            self._show_polynomial("Second Derivative", self._session.second_derivative())
        except InterpolationError as exc:
            self._report("Derivative Error", exc)

    def show_settings(self) -> None:
        dlg = SettingsDialog(self._session.settings, self)
        if not dlg.exec():
            return
        try:
            new_settings = dlg.get_settings()
        except ValueError as exc:
            QMessageBox.critical(self, "Invalid Settings", str(exc))
            return
        # settings are frozen; carry the points over into a fresh session
        session = InterpolationSession(new_settings)
        for point in self._session.points:
            session.add(point)
        self._session = session
        self._refresh_points()
