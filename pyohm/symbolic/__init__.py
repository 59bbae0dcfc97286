"""PyOhm Symbolic Algebra Module.

This module provides exact arithmetic for resistor network values:

    - Polynomial: multivariate polynomial over real coefficients
    - RationalExpr: canonical ratio of polynomials, with exact 0 and infinity
    - solve_linear_system: Gaussian elimination over RationalExpr entries
    - compile_expression: JAX evaluation of symbolic results
"""

from .polynomial import Polynomial, format_number
from .rational import RationalExpr, NotNumericError
from .gauss import solve_linear_system
from .evaluate import CompiledExpression, compile_expression, polynomial_to_jax

__all__ = [
    # Algebra
    "Polynomial",
    "RationalExpr",
    "NotNumericError",
    "format_number",
    # Linear systems
    "solve_linear_system",
    # Evaluation
    "CompiledExpression",
    "compile_expression",
    "polynomial_to_jax",
]
