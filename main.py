"""
Polynomial Interpolation — desktop entry point.

Enter points, calculate the unique interpolating polynomial of degree n-1,
evaluate it, show its first and second derivatives, and export a pgfplots
document (interpolation.tex) with the points and the curve.

Method
------
Vandermonde system  M[i][j] = x_i ** j,  b[i] = y_i
Gaussian elimination with partial pivoting, then back substitution.
"""

from poly_interpolator.main import main

if __name__ == "__main__":
    main()
