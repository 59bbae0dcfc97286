"""PyOhm - symbolic resistor network analysis.

This package provides two layers:
    - symbolic: exact polynomial / rational arithmetic and a generic linear solver
    - dc: resistor networks, equivalent resistance and branch currents

Usage:
    from pyohm.symbolic import Polynomial, RationalExpr, solve_linear_system
    from pyohm.dc import Circuit, R, calculate_equivalent_resistance, ...
"""

__version__ = "0.1.0"
__all__ = ["symbolic", "dc", "__version__"]
