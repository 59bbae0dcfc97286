"""Numeric tolerances shared by the symbolic layer and the network analyses."""

#: Coefficients with magnitude at or below this are never stored in a Polynomial.
EPSILON: float = 1e-15

#: Tolerance when comparing two coefficients of the same monomial.
COEFFICIENT_TOLERANCE: float = 1e-12

#: Tolerance when checking that two polynomials are scalar multiples.
RATIO_TOLERANCE: float = 1e-10

#: Distance from the nearest integer under which a float is reduced as an integer.
INTEGER_TOLERANCE: float = 1e-10

#: Coefficients below this are trimmed from univariate coefficient vectors.
TRIM_TOLERANCE: float = 1e-12

#: Numeric currents with magnitude below this have no direction.
DIRECTION_TOLERANCE: float = 1e-10

#: Significant digits used when displaying a non-integral number.
DISPLAY_PRECISION: int = 10
