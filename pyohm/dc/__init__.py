"""PyOhm DC Resistor Network Module.

This module provides analysis of resistor networks whose resistances and
potentials may be numbers, zero, infinite, or symbolic expressions, using
nodal analysis over exact rational expressions.

Components:
    - R: Resistor (numeric, symbolic, zero or infinite)
    - Short, Open: Zero and infinite resistance edges

Subcircuits:
    - Series, Parallel, WheatstoneBridge

Analyses:
    - calculate_equivalent_resistance: resistance between two nodes
    - calculate_currents / analyze_currents: branch currents from known potentials
"""

from .network import Circuit, Node, Edge
from .components import R, Short, Open
from .subcircuits import Series, Parallel, WheatstoneBridge
from .union_find import UnionFind
from .resistance import calculate_equivalent_resistance
from .currents import (
    CurrentSolution,
    analyze_currents,
    calculate_currents,
    solve_node_potentials,
    current_direction,
)

__all__ = [
    # Circuit building
    "Circuit",
    "Node",
    "Edge",
    # Components
    "R",
    "Short",
    "Open",
    # Subcircuits
    "Series",
    "Parallel",
    "WheatstoneBridge",
    # Analysis
    "UnionFind",
    "calculate_equivalent_resistance",
    "CurrentSolution",
    "analyze_currents",
    "calculate_currents",
    "solve_node_potentials",
    "current_direction",
]
