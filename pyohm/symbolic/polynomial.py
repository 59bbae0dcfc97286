"""Multivariate polynomials with real coefficients.

A polynomial is a mapping from monomial keys to coefficients. A monomial key
is a sorted tuple of variable names with repetition, so ``("r", "r", "s")``
is r^2*s and ``()`` is the constant term:

    3r^2 + 2rs - 5   ->   {("r", "r"): 3.0, ("r", "s"): 2.0, (): -5.0}

Coefficients with magnitude at or below EPSILON are never stored, which makes
the empty mapping the one and only zero polynomial.
"""

from __future__ import annotations

import ast
import keyword
import logging
import math
import re
from typing import Iterable, Mapping

from ..constants import (
    EPSILON,
    COEFFICIENT_TOLERANCE,
    DISPLAY_PRECISION,
)

logger = logging.getLogger(__name__)

Monomial = tuple[str, ...]

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

# "2r" -> "2*r", "2(r+1)" -> "2*(r+1)", "(a)(b)" -> "(a)*(b)", "(a)b" -> "(a)*b".
# A digit inside an identifier ("r1a") is not a coefficient.
_IMPLICIT_MUL = (
    (re.compile(r"(?<![A-Za-z_\d.])(\d+\.?\d*|\.\d+)([A-Za-z_(])"), r"\1*\2"),
    (re.compile(r"\)([A-Za-z_\d(])"), r")*\1"),
)

_IDENTIFIER_RE = re.compile(r"(?<![A-Za-z_\d.])[A-Za-z_][A-Za-z_\d]*")
_KEYWORD_PREFIX = "__kw_"


def _prune(terms: Iterable[tuple[Monomial, float]]) -> dict[Monomial, float]:
    return {key: coef for key, coef in terms if abs(coef) > EPSILON}


def _merge_keys(a: Monomial, b: Monomial) -> Monomial:
    return tuple(sorted(a + b))


def _term_order(item: tuple[Monomial, float]):
    key = item[0]
    return (-len(key), key)


def format_number(value: float) -> str:
    """
    Format a coefficient for display.

    Integral values print without decimals; anything else prints with
    DISPLAY_PRECISION significant digits and no trailing zeros, so 20/3
    shows as "6.666666667" and 2/6 and 1/3 both show as "0.3333333333".
    """
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{DISPLAY_PRECISION}g}"


def format_monomial(key: Monomial) -> str:
    """Render a monomial key: ("r",) -> "r", ("r", "r") -> "r^2", ("r1", "r2") -> "r1r2"."""
    counts: dict[str, int] = {}
    for name in key:
        counts[name] = counts.get(name, 0) + 1
    parts = []
    for name in sorted(counts):
        power = counts[name]
        parts.append(name if power == 1 else f"{name}^{power}")
    return "".join(parts)


class Polynomial:
    """
    Immutable multivariate polynomial.

    Build with the factories or by parsing:
        p = Polynomial.parse("3.5r+5")
        q = Polynomial.variable("r") * Polynomial.constant(2)
        str(p + q)  # "5.5r+5"
    """

    __slots__ = ("_terms",)
    __hash__ = None

    def __init__(self, terms: Mapping[Monomial, float] | None = None):
        self._terms = _prune(terms.items()) if terms else {}

    # ----- factories -----

    @classmethod
    def zero(cls) -> Polynomial:
        return cls()

    @classmethod
    def constant(cls, value: float) -> Polynomial:
        return cls({(): float(value)})

    @classmethod
    def variable(cls, name: str) -> Polynomial:
        return cls({(name,): 1.0})

    @classmethod
    def parse(cls, expr) -> Polynomial:
        """
        Parse an expression such as "r", "2r", "-r", "3.5r+5", "2r1+r2" or "r^2".

        Non-strings are taken as numeric constants. Implicit multiplication
        after a number or a closing parenthesis is supported.

        Parsing is best effort: text that is not a valid expression becomes a
        single opaque variable named by the whole (whitespace-free) input, and
        a sub-expression using an unsupported operation (division, function
        calls, non-integer powers) becomes an opaque variable named by its
        source text. This keeps every user-entered value representable.
        Variable names that are Python keywords ("in", "if") are ordinary
        variables.
        """
        if not isinstance(expr, str):
            return cls.constant(float(expr))

        expr = re.sub(r"\s", "", expr)
        if expr in ("", "0"):
            return cls.zero()
        if expr in ("Infinity", "+Infinity"):
            return cls.constant(math.inf)
        if expr == "-Infinity":
            return cls.constant(-math.inf)
        if _NUMBER_RE.match(expr):
            return cls.constant(float(expr))

        prepared = expr.replace("^", "**")
        for pattern, replacement in _IMPLICIT_MUL:
            prepared = pattern.sub(replacement, prepared)

        # Keywords are not valid Python names: parse them under an alias
        aliases: dict[str, str] = {}

        def _alias(match: re.Match) -> str:
            name = match.group(0)
            if not keyword.iskeyword(name):
                return name
            alias = _KEYWORD_PREFIX + name
            aliases[alias] = name
            return alias

        prepared = _IDENTIFIER_RE.sub(_alias, prepared)

        try:
            tree = ast.parse(prepared, mode="eval")
        except (SyntaxError, ValueError):
            logger.debug("Unparseable expression %r kept as an opaque symbol", expr)
            return cls.variable(expr)
        return cls._from_ast(tree.body, prepared, aliases)

    @classmethod
    def _from_ast(cls, node: ast.AST, source: str, aliases: Mapping[str, str]) -> Polynomial:
        def walk(child):
            return cls._from_ast(child, source, aliases)

        if isinstance(node, ast.Constant):
            if isinstance(node.value, (int, float)) and not isinstance(node.value, bool):
                return cls.constant(node.value)

        elif isinstance(node, ast.Name):
            return cls.variable(aliases.get(node.id, node.id))

        elif isinstance(node, ast.UnaryOp):
            if isinstance(node.op, ast.USub):
                return -walk(node.operand)
            if isinstance(node.op, ast.UAdd):
                return walk(node.operand)

        elif isinstance(node, ast.BinOp):
            if isinstance(node.op, ast.Add):
                return walk(node.left) + walk(node.right)
            if isinstance(node.op, ast.Sub):
                return walk(node.left) - walk(node.right)
            if isinstance(node.op, ast.Mult):
                return walk(node.left) * walk(node.right)
            if isinstance(node.op, ast.Pow):
                exponent = node.right
                if (
                    isinstance(exponent, ast.Constant)
                    and isinstance(exponent.value, (int, float))
                    and not isinstance(exponent.value, bool)
                    and float(exponent.value).is_integer()
                    and exponent.value >= 0
                ):
                    return walk(node.left).pow(int(exponent.value))

        # Unsupported construct: keep its text as one symbol
        text = ast.get_source_segment(source, node) or ast.unparse(node)
        for alias, name in aliases.items():
            text = text.replace(alias, name)
        logger.debug("Unsupported sub-expression %r kept as an opaque symbol", text)
        return cls.variable(text)

    # ----- arithmetic -----

    def add(self, other: Polynomial) -> Polynomial:
        out = dict(self._terms)
        for key, coef in other._terms.items():
            out[key] = out.get(key, 0.0) + coef
        return Polynomial(out)

    def subtract(self, other: Polynomial) -> Polynomial:
        return self.add(other.negate())

    def negate(self) -> Polynomial:
        return Polynomial({key: -coef for key, coef in self._terms.items()})

    def scale(self, s: float) -> Polynomial:
        if abs(s) <= EPSILON:
            return Polynomial.zero()
        return Polynomial({key: coef * s for key, coef in self._terms.items()})

    def multiply(self, other: Polynomial) -> Polynomial:
        out: dict[Monomial, float] = {}
        for ka, ca in self._terms.items():
            for kb, cb in other._terms.items():
                key = _merge_keys(ka, kb)
                out[key] = out.get(key, 0.0) + ca * cb
        return Polynomial(out)

    def pow(self, n: int) -> Polynomial:
        """Raise to a non-negative integer power."""
        if n < 0:
            raise ValueError(f"Polynomial power must be non-negative, got {n}")
        result = Polynomial.constant(1.0)
        for _ in range(n):
            result = result.multiply(self)
        return result

    def __add__(self, other: Polynomial) -> Polynomial:
        return self.add(other)

    def __sub__(self, other: Polynomial) -> Polynomial:
        return self.subtract(other)

    def __mul__(self, other: Polynomial) -> Polynomial:
        return self.multiply(other)

    def __neg__(self) -> Polynomial:
        return self.negate()

    def __pow__(self, n: int) -> Polynomial:
        return self.pow(n)

    # ----- queries -----

    def is_zero(self) -> bool:
        return not self._terms

    def is_constant(self) -> bool:
        return not self._terms or (len(self._terms) == 1 and () in self._terms)

    def constant_value(self) -> float:
        return self._terms.get((), 0.0)

    def degree(self) -> int:
        return max((len(key) for key in self._terms), default=0)

    def get_variables(self) -> set[str]:
        return {name for key in self._terms for name in key}

    @property
    def terms(self) -> dict[Monomial, float]:
        """Copy of the monomial -> coefficient mapping."""
        return dict(self._terms)

    def sorted_terms(self) -> list[tuple[Monomial, float]]:
        """Terms in canonical order: descending degree, then by key; constant last."""
        return sorted(self._terms.items(), key=_term_order)

    def leading_coefficient(self) -> float:
        ordered = self.sorted_terms()
        return ordered[0][1] if ordered else 0.0

    def equals(self, other: Polynomial) -> bool:
        if len(self._terms) != len(other._terms):
            return False
        for key, coef in self._terms.items():
            other_coef = other._terms.get(key)
            if other_coef is None or abs(coef - other_coef) > COEFFICIENT_TOLERANCE:
                return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.equals(other)

    # ----- substitution -----

    def substitute(self, values: Mapping[str, float]) -> Polynomial:
        """Replace the given variables by numbers; others are kept."""
        out: dict[Monomial, float] = {}
        for key, coef in self._terms.items():
            rest = []
            for name in key:
                if name in values:
                    coef *= values[name]
                else:
                    rest.append(name)
            key = tuple(rest)
            out[key] = out.get(key, 0.0) + coef
        return Polynomial(out)

    def evaluate(self, values: Mapping[str, float]) -> float:
        """Numeric value with every variable supplied (KeyError otherwise)."""
        total = 0.0
        for key, coef in self._terms.items():
            term = coef
            for name in key:
                term *= values[name]
            total += term
        return total

    # ----- display -----

    def __str__(self) -> str:
        if not self._terms:
            return "0"

        parts = []
        for key, coef in self.sorted_terms():
            if not key:
                continue
            monomial = format_monomial(key)
            if coef == 1:
                parts.append(monomial)
            elif coef == -1:
                parts.append(f"-{monomial}")
            else:
                parts.append(f"{format_number(coef)}{monomial}")

        constant = self.constant_value()
        if constant != 0 or not parts:
            parts.append(format_number(constant))

        return "+".join(parts).replace("+-", "-")

    def __repr__(self) -> str:
        return f"Polynomial({str(self)!r})"
