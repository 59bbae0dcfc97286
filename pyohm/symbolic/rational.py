"""Rational expressions: ratios of two polynomials.

RationalExpr is the value type for every resistance, potential and current.
Division by zero is not an error but a value: n/0 is INFINITY, and 0/0 is
folded to ZERO. Every instance is stored in simplified form:

    1. denominator zero   -> INFINITY (or ZERO for 0/0)
    2. numerator zero     -> 0/1
    3. both constant      -> reduced fraction, positive denominator
    4. sign normalized so the denominator's leading coefficient is positive,
       and a numerator that is a scalar multiple of the denominator collapses
       to that scalar
    5. single-variable ratios have their polynomial GCD cancelled
    6. a factor common to every term (shared variables, integer content)
       is cancelled

Each step assumes the earlier ones did not apply.
"""

from __future__ import annotations

import logging
import math
import re
from collections import Counter
from typing import Mapping

from ..constants import (
    EPSILON,
    RATIO_TOLERANCE,
    INTEGER_TOLERANCE,
    TRIM_TOLERANCE,
)
from .polynomial import Polynomial, format_number

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_INFINITY_TOKENS = ("Infinity", "+Infinity", "-Infinity", "∞", "-∞", "inf")

# A binary + or - (a leading sign or the sign of a number's exponent does not count)
_EXPONENT_RE = re.compile(r"(?<![A-Za-z_\d.])(\d+\.?\d*|\.\d+)[eE][+-]?\d+")
_BINARY_SIGN_RE = re.compile(r"(?<=.)[+-]")


class NotNumericError(ValueError):
    """Raised when a numeric value is requested from an expression with free variables."""


class RationalExpr:
    """
    Immutable ratio of two polynomials in canonical form.

    Example:
        r = RationalExpr.parse("r")
        parallel = (r.reciprocal() + r.reciprocal()).reciprocal()
        str(parallel)  # "r/2"
    """

    __slots__ = ("num", "den")
    __hash__ = None

    ZERO: RationalExpr
    ONE: RationalExpr
    INFINITY: RationalExpr

    def __init__(self, numerator: Polynomial, denominator: Polynomial):
        self.num, self.den = _simplify(numerator, denominator)

    # ----- factories -----

    @classmethod
    def from_number(cls, n: float) -> RationalExpr:
        if not math.isfinite(n):
            return cls.INFINITY
        return cls(Polynomial.constant(n), Polynomial.constant(1.0))

    @classmethod
    def from_string(cls, s: str) -> RationalExpr:
        s = s.strip()
        if s in _INFINITY_TOKENS:
            return cls.INFINITY
        if _NUMBER_RE.match(s):
            return cls.from_number(float(s))
        return cls(Polynomial.parse(s), Polynomial.constant(1.0))

    @classmethod
    def parse(cls, value) -> RationalExpr:
        """
        Parse a circuit value: a number (zero, negative and infinite included),
        "Infinity" / "∞", a symbol ("r", "V") or an expression ("2r+10").
        """
        if isinstance(value, RationalExpr):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.from_number(float(value))

    # ----- arithmetic -----

    def add(self, other: RationalExpr) -> RationalExpr:
        # a/b + c/d = (ad + cb) / bd
        if self.is_infinity() or other.is_infinity():
            return RationalExpr.INFINITY
        n = self.num * other.den + other.num * self.den
        d = self.den * other.den
        return RationalExpr(n, d)

    def subtract(self, other: RationalExpr) -> RationalExpr:
        return self.add(other.negate())

    def multiply(self, other: RationalExpr) -> RationalExpr:
        # infinity * 0 is taken to be 0 (a convention, not a limit)
        if self.is_infinity():
            return RationalExpr.ZERO if other.is_zero() else RationalExpr.INFINITY
        if other.is_infinity():
            return RationalExpr.ZERO if self.is_zero() else RationalExpr.INFINITY
        return RationalExpr(self.num * other.num, self.den * other.den)

    def divide(self, other: RationalExpr) -> RationalExpr:
        return self.multiply(other.reciprocal())

    def reciprocal(self) -> RationalExpr:
        if self.is_zero():
            return RationalExpr.INFINITY
        if self.is_infinity():
            return RationalExpr.ZERO
        return RationalExpr(self.den, self.num)

    def negate(self) -> RationalExpr:
        return RationalExpr(-self.num, self.den)

    def __add__(self, other) -> RationalExpr:
        return self.add(RationalExpr.parse(other))

    def __radd__(self, other) -> RationalExpr:
        return RationalExpr.parse(other).add(self)

    def __sub__(self, other) -> RationalExpr:
        return self.subtract(RationalExpr.parse(other))

    def __rsub__(self, other) -> RationalExpr:
        return RationalExpr.parse(other).subtract(self)

    def __mul__(self, other) -> RationalExpr:
        return self.multiply(RationalExpr.parse(other))

    def __rmul__(self, other) -> RationalExpr:
        return RationalExpr.parse(other).multiply(self)

    def __truediv__(self, other) -> RationalExpr:
        return self.divide(RationalExpr.parse(other))

    def __rtruediv__(self, other) -> RationalExpr:
        return RationalExpr.parse(other).divide(self)

    def __neg__(self) -> RationalExpr:
        return self.negate()

    # ----- queries -----

    def is_zero(self) -> bool:
        return self.num.is_zero() and not self.den.is_zero()

    def is_infinity(self) -> bool:
        return not self.num.is_zero() and self.den.is_zero()

    def is_numeric(self) -> bool:
        return self.num.is_constant() and self.den.is_constant()

    def get_variables(self) -> set[str]:
        return self.num.get_variables() | self.den.get_variables()

    def to_number(self) -> float:
        if self.is_infinity():
            return math.inf
        if self.is_zero():
            return 0.0
        if not self.is_numeric():
            names = ", ".join(sorted(self.get_variables()))
            raise NotNumericError(
                f"Cannot convert symbolic expression {self} to a number (free variables: {names})"
            )
        return self.num.constant_value() / self.den.constant_value()

    def __float__(self) -> float:
        return self.to_number()

    def equals(self, other: RationalExpr) -> bool:
        # a/b == c/d  iff  ad == cb
        return (self.num * other.den).equals(other.num * self.den)

    def __eq__(self, other) -> bool:
        if isinstance(other, (int, float, str)):
            other = RationalExpr.parse(other)
        if not isinstance(other, RationalExpr):
            return NotImplemented
        return self.equals(other)

    # ----- substitution -----

    def substitute(self, values: Mapping[str, float]) -> RationalExpr:
        """Replace the given variables by numbers and re-simplify."""
        if self.is_infinity():
            return self
        return RationalExpr(self.num.substitute(values), self.den.substitute(values))

    def evaluate(self, values: Mapping[str, float]) -> float:
        """Numeric value with every variable supplied; a zero denominator gives inf."""
        if self.is_infinity():
            return math.inf
        n = self.num.evaluate(values)
        d = self.den.evaluate(values)
        if d == 0:
            return math.inf if n != 0 else 0.0
        return n / d

    # ----- display -----

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        if self.is_infinity():
            return "Infinity"

        num_str = str(self.num)
        den_str = str(self.den)

        if self.den.is_constant() and abs(self.den.constant_value() - 1) < EPSILON:
            return num_str

        if self.is_numeric():
            return format_number(self.to_number())

        if _has_binary_sign(num_str):
            num_str = f"({num_str})"
        if _has_binary_sign(den_str):
            den_str = f"({den_str})"
        return f"{num_str}/{den_str}"

    def to_display_string(self, unit: str = "") -> str:
        if self.is_zero():
            return f"0{unit}"
        if self.is_infinity():
            return "∞"
        if self.is_numeric():
            return f"{format_number(self.to_number())}{unit}"
        return f"{self}{unit}"

    def __repr__(self) -> str:
        return f"RationalExpr({str(self)!r})"


def _has_binary_sign(text: str) -> bool:
    return _BINARY_SIGN_RE.search(_EXPONENT_RE.sub("0", text)) is not None


# ----- simplification -----


def _simplify(num: Polynomial, den: Polynomial) -> tuple[Polynomial, Polynomial]:
    if den.is_zero():
        if num.is_zero():
            return Polynomial.zero(), Polynomial.constant(1.0)
        return Polynomial.constant(1.0), den

    if num.is_zero():
        return num, Polynomial.constant(1.0)

    if num.is_constant() and den.is_constant():
        return _reduce_constants(num.constant_value(), den.constant_value())

    n, d = num, den
    if d.leading_coefficient() < 0:
        n, d = -n, -d

    ratio = _scalar_ratio(n, d)
    if ratio is not None:
        return _reduce_constants(*ratio)

    variables = n.get_variables() | d.get_variables()
    if len(variables) == 1:
        (name,) = variables
        n, d = _cancel_univariate_gcd(n, d, name)
        if d.leading_coefficient() < 0:
            n, d = -n, -d

    return _cancel_content(n, d)


def _is_near_integer(x: float) -> bool:
    return math.isfinite(x) and abs(x - round(x)) < INTEGER_TOLERANCE


def _gcd(a: float, b: float) -> float:
    a, b = abs(a), abs(b)
    if a < EPSILON:
        return b
    if b < EPSILON:
        return a
    if _is_near_integer(a) and _is_near_integer(b):
        return float(math.gcd(round(a), round(b)))
    return 1.0


def _reduce_constants(nv: float, dv: float) -> tuple[Polynomial, Polynomial]:
    g = _gcd(nv, dv)
    sign = -1.0 if dv < 0 else 1.0
    return Polynomial.constant(nv / g * sign), Polynomial.constant(dv / g * sign)


def _scalar_ratio(a: Polynomial, b: Polynomial) -> tuple[float, float] | None:
    """If a == k*b for a scalar k, return k as a (numerator, denominator) pair."""
    a_terms = a.terms
    b_terms = b.terms
    if len(a_terms) != len(b_terms) or not a_terms:
        return None

    first = None
    ratio = None
    for key, a_coef in a_terms.items():
        b_coef = b_terms.get(key)
        if b_coef is None:
            return None
        r = a_coef / b_coef
        if ratio is None:
            ratio = r
            first = (a_coef, b_coef)
        elif abs(r - ratio) > RATIO_TOLERANCE:
            return None
    return first


def _cancel_content(n: Polynomial, d: Polynomial) -> tuple[Polynomial, Polynomial]:
    """
    Divide out the factor shared by every term of n and d: the variables
    common to all monomials, and the integer GCD of the coefficients when
    every coefficient is integral.
    """
    n_terms = n.terms
    d_terms = d.terms

    common = None
    for key in list(n_terms) + list(d_terms):
        common = Counter(key) if common is None else common & Counter(key)

    coefs = list(n_terms.values()) + list(d_terms.values())
    g = 1
    if all(_is_near_integer(c) for c in coefs):
        g = 0
        for c in coefs:
            g = math.gcd(g, round(abs(c)))
        g = max(g, 1)

    if not common and g <= 1:
        return n, d

    def reduce(terms):
        return Polynomial({
            tuple(sorted((Counter(key) - common).elements())): c / g
            for key, c in terms.items()
        })

    return reduce(n_terms), reduce(d_terms)


# ----- univariate GCD on ascending coefficient lists -----


def _to_coefficients(p: Polynomial, name: str) -> list[float]:
    """3r^2 + 2r + 1 -> [1, 2, 3]"""
    terms = p.terms
    coefs = [0.0] * (p.degree() + 1)
    for key, coef in terms.items():
        coefs[key.count(name)] += coef
    return coefs


def _from_coefficients(coefs: list[float], name: str) -> Polynomial:
    return Polynomial({(name,) * power: c for power, c in enumerate(coefs)})


def _trim(coefs: list[float]) -> list[float]:
    coefs = list(coefs)
    while coefs and abs(coefs[-1]) < TRIM_TOLERANCE:
        coefs.pop()
    return coefs


def _remainder(a: list[float], b: list[float]) -> list[float]:
    result = list(a)
    lead = b[-1]
    while result and len(result) >= len(b):
        if abs(result[-1]) < TRIM_TOLERANCE:
            result.pop()
            continue
        factor = result[-1] / lead
        shift = len(result) - len(b)
        for i, c in enumerate(b):
            result[i + shift] -= factor * c
        result.pop()
    return result


def _quotient(a: list[float], b: list[float]) -> list[float]:
    a, b = _trim(a), _trim(b)
    if not b:
        return a
    if len(a) < len(b):
        return [0.0]
    lead = b[-1]
    deg_b = len(b) - 1
    quotient = [0.0] * (len(a) - deg_b)
    rem = list(a)
    for i in range(len(quotient) - 1, -1, -1):
        coef = rem[i + deg_b] / lead
        quotient[i] = coef
        for j, c in enumerate(b):
            rem[i + j] -= coef * c
    return quotient


def _univariate_gcd(a: list[float], b: list[float]) -> list[float]:
    """Monic GCD by the Euclidean algorithm."""
    a, b = _trim(a), _trim(b)
    if not a:
        return b
    if not b:
        return a
    if len(a) < len(b):
        a, b = b, a
    while b:
        a, b = b, _trim(_remainder(a, b))
    lead = a[-1]
    return [c / lead for c in a]


def _cancel_univariate_gcd(
    num: Polynomial, den: Polynomial, name: str
) -> tuple[Polynomial, Polynomial]:
    n_coefs = _to_coefficients(num, name)
    d_coefs = _to_coefficients(den, name)

    g = _univariate_gcd(n_coefs, d_coefs)
    if len(g) <= 1:
        return num, den

    logger.debug("Cancelling common factor of degree %d in %s", len(g) - 1, name)
    return (
        _from_coefficients(_trim(_quotient(n_coefs, g)), name),
        _from_coefficients(_trim(_quotient(d_coefs, g)), name),
    )


RationalExpr.ZERO = RationalExpr(Polynomial.zero(), Polynomial.constant(1.0))
RationalExpr.ONE = RationalExpr(Polynomial.constant(1.0), Polynomial.constant(1.0))
RationalExpr.INFINITY = RationalExpr(Polynomial.constant(1.0), Polynomial.zero())
