"""Gaussian elimination over RationalExpr entries.

Solves A * x = b where every entry is a RationalExpr, so the same code path
handles numeric and symbolic systems. A singular system is reported by
returning None rather than raising; the network analyses translate that into
an infinite resistance or an undetermined potential.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .rational import RationalExpr

logger = logging.getLogger(__name__)


def solve_linear_system(
    A: Sequence[Sequence[RationalExpr]],
    b: Sequence[RationalExpr],
) -> list[RationalExpr] | None:
    """
    Solve A * x = b by elimination with partial pivoting.

    Among the nonzero candidates in a column, a numeric pivot is preferred
    over a symbolic one: it keeps the symbolic expressions produced by the
    elimination small. The result is the same either way.

    Args:
        A: n x n coefficient matrix (entries anything RationalExpr.parse accepts)
        b: right-hand side of length n

    Returns:
        Solution vector x, or None if the system is singular.
        An empty system gives an empty solution.
    """
    n = len(b)
    if len(A) != n or any(len(row) != n for row in A):
        raise ValueError(f"Expected a {n}x{n} matrix for a right-hand side of length {n}")
    if n == 0:
        return []

    # Augmented working copy [A | b]; the caller's data is never touched
    aug = [
        [RationalExpr.parse(entry) for entry in row] + [RationalExpr.parse(rhs)]
        for row, rhs in zip(A, b)
    ]

    # Forward elimination
    for col in range(n):
        pivot_row = None
        for row in range(col, n):
            entry = aug[row][col]
            if entry.is_zero():
                continue
            if pivot_row is None or (entry.is_numeric() and not aug[pivot_row][col].is_numeric()):
                pivot_row = row

        if pivot_row is None:
            logger.debug("No pivot in column %d of %d: singular system", col, n)
            return None

        if pivot_row != col:
            aug[col], aug[pivot_row] = aug[pivot_row], aug[col]

        pivot = aug[col][col]
        for row in range(col + 1, n):
            if aug[row][col].is_zero():
                continue
            factor = aug[row][col].divide(pivot)
            for j in range(col, n + 1):
                aug[row][j] = aug[row][j].subtract(factor.multiply(aug[col][j]))

    # Back substitution
    x: list[RationalExpr] = [RationalExpr.ZERO] * n
    for row in range(n - 1, -1, -1):
        if aug[row][row].is_zero():
            logger.debug("Zero pivot on row %d during back substitution", row)
            return None
        total = aug[row][n]
        for col in range(row + 1, n):
            total = total.subtract(aug[row][col].multiply(x[col]))
        x[row] = total.divide(aug[row][row])

    return x
