"""Operations on coefficient vectors.

A coefficient vector ``c`` stores ``P(x) = c[0] + c[1]*x + ... + c[n-1]*x**(n-1)``
in ascending power order.
"""

from __future__ import annotations

from typing import Union

import numpy as np
import sympy as sp
from numpy.typing import ArrayLike

from .errors import InvalidArgument
from .points import FloatArray

Number = Union[float, int]


def as_coefficients(coefficients: ArrayLike) -> FloatArray:
    coef = np.asarray(coefficients, dtype=np.float64)
    if coef.ndim != 1:
        raise InvalidArgument(f"coefficients must be one-dimensional, got shape {coef.shape}")
    return coef


def evaluate(coefficients: ArrayLike, x: Union[Number, ArrayLike]) -> Union[float, FloatArray]:
    """Sum ``c[i] * x**i`` in ascending i.

    A scalar ``x`` gives a float, an array gives an element-wise array.
    """
    coef = as_coefficients(coefficients)
    x_arr = np.asarray(x, dtype=np.float64)
    result = np.zeros_like(x_arr)
    for i, c in enumerate(coef):
        result = result + c * x_arr ** i
    if result.ndim == 0:
        return float(result)
    return result


def differentiate(coefficients: ArrayLike) -> FloatArray:
    coef = as_coefficients(coefficients)
    if coef.size == 0:
        raise InvalidArgument("nothing to differentiate")
    return coef[1:] * np.arange(1, coef.size, dtype=np.float64)


def derivative(coefficients: ArrayLike, order: int = 1) -> FloatArray:
    if order < 0:
        raise InvalidArgument(f"derivative order must be >= 0, got {order}")
    coef = as_coefficients(coefficients).copy()
    for _ in range(order):
        coef = differentiate(coef)
    return coef


def format_number(value: Number) -> str:
    """Locale-independent positional decimal text.

    Always ``.`` as separator, never an exponent, no trailing ``.0`` on
    integral values, and ``-0`` printed as ``0``.
    """
    v = float(value) + 0.0
    return np.format_float_positional(v, trim="-")


def format_polynomial(coefficients: ArrayLike, separator: str = "") -> str:
    """Render as ``c*x^k`` terms in descending powers.

    Non-negative coefficients after the leading term get an explicit ``+``;
    the ``x^0`` term is written out like the others.
    """
    coef = as_coefficients(coefficients)
    if coef.size == 0:
        return "0"
    last = coef.size - 1
    terms: list[str] = []
    for k in range(last, -1, -1):
        c = float(coef[k])
        sign = "+" if k < last and c >= 0 else ""
        terms.append(f"{sign}{format_number(c)}*x^{k}")
    return separator.join(terms)


# ---------------------------------------------------------------------------
# LaTeX display
# ---------------------------------------------------------------------------

def _power_term(c: float, k: int, x: sp.Symbol, approx: bool, decimals: int) -> sp.Expr:
    """One ``c * x**k`` term with a decimal or fractional coefficient."""
    if approx:
        coefficient: sp.Expr = sp.Float(f"{c:.{decimals}f}")
    else:
        coefficient = sp.Rational(c).limit_denominator(1000)
    return coefficient * x ** k


def _fix_decimals(expr: sp.Expr, decimals: int) -> sp.Expr:
    """Re-round every Float atom to *decimals* places."""
    return expr.xreplace(
        {f: sp.Float(f"{float(f):.{decimals}f}") for f in expr.atoms(sp.Float)}
    )


def polynomial_to_latex(
    coefficients: ArrayLike, approx: bool = True, decimals: int = 3, name: str = "P"
) -> str:
    """Display-math LaTeX for the polynomial, highest power first.

    Approx mode shows coefficients rounded to *decimals* places; exact mode
    uses fractions with denominators up to 1000.
    """
    coef = as_coefficients(coefficients)
    decimals = max(0, min(10, int(decimals)))
    x = sp.Symbol("x")
    expr: sp.Expr = sp.Add(
        *[_power_term(float(c), k, x, approx, decimals) for k, c in enumerate(coef)]
    )
    if approx:
        expr = _fix_decimals(expr, decimals)
    return f"$${name}(x) = {sp.latex(expr)}$$"
