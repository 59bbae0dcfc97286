"""
Test: Gaussian elimination over rational expressions.

The same solver handles numeric and symbolic systems; a singular system
returns None instead of raising.
"""
import pytest


def test_numeric_system():
    """2x + y = 3, x + 3y = 5  ->  x = 4/5, y = 7/5"""
    from pyohm.symbolic import solve_linear_system

    x = solve_linear_system([[2, 1], [1, 3]], [3, 5])
    assert x is not None
    assert x[0] == 0.8, f"Expected 4/5, got {x[0]}"
    assert x[1] == 1.4, f"Expected 7/5, got {x[1]}"
    assert str(x[0]) == "0.8"


def test_symbolic_single_equation():
    """r * x = 1  ->  x = 1/r"""
    from pyohm.symbolic import RationalExpr, solve_linear_system

    x = solve_linear_system([[RationalExpr.parse("r")]], [RationalExpr.ONE])
    assert str(x[0]) == "1/r", f"Got {x[0]}"


def test_symbolic_system_prefers_numeric_pivot():
    """r*x0 + x1 = 1, x0 + x1 = 0  ->  x0 = 1/(r-1), x1 = -1/(r-1)"""
    from pyohm.symbolic import RationalExpr, solve_linear_system

    r = RationalExpr.parse("r")
    x = solve_linear_system([[r, 1], [1, 1]], [1, 0])
    expected = RationalExpr.ONE / RationalExpr.parse("r-1")

    assert x[0] == expected, f"Got {x[0]}"
    assert x[1] == -expected, f"Got {x[1]}"
    assert str(x[0]) == "1/(r-1)"


def test_singular_system_returns_none():
    from pyohm.symbolic import solve_linear_system

    assert solve_linear_system([[1, 2], [2, 4]], [1, 2]) is None
    assert solve_linear_system([[0]], [1]) is None


def test_empty_system():
    from pyohm.symbolic import solve_linear_system

    assert solve_linear_system([], []) == []


def test_shape_mismatch_raises():
    from pyohm.symbolic import solve_linear_system

    with pytest.raises(ValueError):
        solve_linear_system([[1, 2]], [1])
    with pytest.raises(ValueError):
        solve_linear_system([[1]], [1, 2])


def test_inputs_not_modified():
    from pyohm.symbolic import solve_linear_system

    A = [[2, 1], [1, 3]]
    b = [3, 5]
    solve_linear_system(A, b)
    assert A == [[2, 1], [1, 3]]
    assert b == [3, 5]


def test_three_by_three_symbolic_chain():
    """Back substitution with symbolic entries in every row."""
    from pyohm.symbolic import RationalExpr, solve_linear_system

    g = RationalExpr.parse("g")
    # Chain of three equal conductances to ground, unit current at the top
    A = [
        [g, -g, 0],
        [-g, 2 * g, -g],
        [0, -g, 2 * g],
    ]
    x = solve_linear_system(A, [1, 0, 0])
    assert x is not None
    expected = RationalExpr.parse(3) / g
    assert x[0] == expected, f"Expected 3/g, got {x[0]}"
    assert str(x[0]) == "3/g"
