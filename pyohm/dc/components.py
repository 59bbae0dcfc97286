"""Resistor factory functions (functional style)."""

from __future__ import annotations

from .network import Circuit, Node, Edge


def R(
    circuit: Circuit,
    node_a: Node,
    node_b: Node,
    *,
    name: str,
    value: float | str,
) -> tuple[Circuit, Edge]:
    """
    Create a resistor.

    Args:
        circuit: Circuit to add to
        node_a: First terminal (current is positive flowing from a to b)
        node_b: Second terminal
        name: Edge id (required, used as key in current results)
        value: Resistance: a number, "Infinity", a symbol ("r") or an expression ("2r+10")

    Returns:
        (new_circuit, edge)

    Example:
        circuit, r1 = R(circuit, a, b, name="R1", value=1000.0)
        circuit, r2 = R(circuit, b, c, name="R2", value="r")
    """
    return circuit.add_edge(Edge(name, node_a.id, node_b.id, value))


def Short(circuit: Circuit, node_a: Node, node_b: Node, *, name: str) -> tuple[Circuit, Edge]:
    """Create a zero-resistance wire."""
    return R(circuit, node_a, node_b, name=name, value=0)


def Open(circuit: Circuit, node_a: Node, node_b: Node, *, name: str) -> tuple[Circuit, Edge]:
    """Create an infinite-resistance (open) edge."""
    return R(circuit, node_a, node_b, name=name, value="Infinity")
