"""Tests for polynomial evaluation, differentiation and formatting."""

import numpy as np
import pytest
from numpy.polynomial import polynomial as npp

from poly_interpolator.errors import InvalidArgument
from poly_interpolator.polynomial import (
    derivative,
    differentiate,
    evaluate,
    format_number,
    format_polynomial,
    polynomial_to_latex,
)


class TestEvaluate:

    def test_evaluate_quadratic_at_two(self):
        # 1 + 2x + 3x^2 at x = 2
        assert evaluate([1.0, 2.0, 3.0], 2.0) == 17.0

    def test_evaluate_when_scalar_then_returns_float(self):
        assert isinstance(evaluate([1.0, 2.0], 3), float)

    def test_evaluate_when_array_then_elementwise(self):
        result = evaluate([1.0, 2.0, 3.0], np.array([0.0, 1.0, 2.0]))
        np.testing.assert_array_equal(result, [1.0, 6.0, 17.0])

    def test_evaluate_when_empty_then_zero(self):
        assert evaluate([], 5.0) == 0.0

    def test_evaluate_matches_numpy_polyval(self):
        coef = [0.5, -1.25, 3.0, 0.75]
        xs = np.linspace(-2.0, 2.0, 9)
        np.testing.assert_allclose(evaluate(coef, xs), npp.polyval(xs, coef), rtol=1e-12)

    def test_evaluate_when_matrix_coefficients_then_raises(self):
        with pytest.raises(InvalidArgument):
            evaluate([[1.0, 2.0]], 1.0)


class TestDifferentiate:

    def test_differentiate_cubic(self):
        np.testing.assert_array_equal(differentiate([0.0, 0.0, 0.0, 1.0]), [0.0, 0.0, 3.0])

    def test_differentiate_twice(self):
        np.testing.assert_array_equal(differentiate([0.0, 0.0, 3.0]), [0.0, 6.0])

    def test_differentiate_when_constant_then_empty(self):
        result = differentiate([4.0])
        assert result.shape == (0,)

    def test_differentiate_when_empty_then_raises(self):
        with pytest.raises(InvalidArgument, match="nothing to differentiate"):
            differentiate([])

    def test_differentiate_does_not_modify_input(self):
        coef = np.array([1.0, 2.0, 3.0])
        differentiate(coef)
        np.testing.assert_array_equal(coef, [1.0, 2.0, 3.0])

    def test_derivative_order(self):
        coef = [1.0, 1.0, 1.0, 1.0]
        np.testing.assert_array_equal(derivative(coef, 0), coef)
        np.testing.assert_array_equal(derivative(coef, 2), npp.polyder(coef, 2))
        assert derivative(coef, 4).shape == (0,)

    def test_derivative_when_past_empty_then_raises(self):
        with pytest.raises(InvalidArgument):
            derivative([1.0], 2)

    def test_derivative_when_negative_order_then_raises(self):
        with pytest.raises(InvalidArgument):
            derivative([1.0, 2.0], -1)


class TestFormatNumber:

    @pytest.mark.parametrize(
        "value, expected",
        [(1.0, "1"), (0.0, "0"), (-0.0, "0"), (-2.5, "-2.5"), (0.1, "0.1"), (1e-7, "0.0000001")],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected


class TestFormatPolynomial:

    def test_format_descending_with_signs(self):
        assert format_polynomial([1.0, -2.0, 3.0]) == "3*x^2-2*x^1+1*x^0"

    def test_format_keeps_x_to_the_zero(self):
        assert format_polynomial([5.0]) == "5*x^0"

    def test_format_when_leading_negative_then_no_plus(self):
        assert format_polynomial([0.5, -1.0]) == "-1*x^1+0.5*x^0"

    def test_format_with_separator(self):
        assert format_polynomial([1.0, 1.0, 2.0], separator=" ") == "2*x^2 +1*x^1 +1*x^0"

    def test_format_when_empty_then_zero(self):
        assert format_polynomial([]) == "0"


class TestPolynomialToLatex:

    def test_latex_exact_mode(self):
        assert polynomial_to_latex([1.0, 1.0, 2.0], approx=False) == "$$P(x) = 2 x^{2} + x + 1$$"

    def test_latex_approx_mode_rounds(self):
        latex = polynomial_to_latex([0.123456, 2.0], approx=True, decimals=2)

        assert latex.startswith("$$P(x) = ")
        assert "0.12" in latex
        assert "0.123" not in latex

    def test_latex_when_empty_then_zero(self):
        assert polynomial_to_latex([], name="Q") == "$$Q(x) = 0$$"
