"""Compile symbolic expressions into JAX functions.

A symbolic result such as the equivalent resistance "r/2" can be turned into
a function of its variables that JAX can trace, so it can be swept with
``jax.vmap`` or differentiated with ``jax.grad``:

    compiled = compile_expression(RationalExpr.parse("r") / 2)
    grad(lambda r: compiled.evaluate({"r": r}))(10.0)  # 0.5
"""

from __future__ import annotations

from typing import NamedTuple, Callable
import jax.numpy as jnp
from jax import Array

from .polynomial import Polynomial
from .rational import RationalExpr


class CompiledExpression(NamedTuple):
    """An expression bound to its variables and default values."""
    expr: RationalExpr
    variables: tuple[str, ...]  # sorted variable names
    defaults: dict  # {variable_name: default_value}
    evaluate: Callable  # (params) -> Array


def polynomial_to_jax(poly: Polynomial, params: dict) -> Array:
    """Evaluate a polynomial with jnp arithmetic (traceable)."""
    total = jnp.asarray(0.0)
    for key, coef in poly.terms.items():
        term = jnp.asarray(coef)
        for name in key:
            term = term * params[name]
        total = total + term
    return total


def compile_expression(expr, defaults: dict | None = None) -> CompiledExpression:
    """
    Compile an expression into a parameter-driven function.

    Args:
        expr: RationalExpr (or anything RationalExpr.parse accepts)
        defaults: Values used for variables missing from params

    Returns:
        CompiledExpression whose evaluate(params) merges params over defaults
    """
    expr = RationalExpr.parse(expr)
    variables = tuple(sorted(expr.get_variables()))
    if defaults is None:
        defaults = {}

    def evaluate(params: dict | None = None) -> Array:
        """
        Evaluate the expression.

        Args:
            params: Variable values (merged over defaults)

        Returns:
            Scalar JAX array; inf for an infinite expression
        """
        if params is None:
            params = {}
        merged = {**defaults, **params}

        missing = [name for name in variables if name not in merged]
        if missing:
            raise ValueError(f"Missing values for variables: {', '.join(missing)}")

        if expr.is_infinity():
            return jnp.asarray(jnp.inf)

        return polynomial_to_jax(expr.num, merged) / polynomial_to_jax(expr.den, merged)

    return CompiledExpression(
        expr=expr,
        variables=variables,
        defaults=dict(defaults),
        evaluate=evaluate,
    )
