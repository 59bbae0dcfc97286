"""Reusable resistor subcircuit building blocks (functional style)."""

from __future__ import annotations

from typing import Sequence

from .network import Circuit, Node
from .components import R


def Series(
    circuit: Circuit,
    n1: Node,
    n2: Node,
    values: Sequence[float | str],
    prefix: str = "ser",
) -> tuple[Circuit, tuple]:
    """
    Connect resistors in series between two nodes.

    Topology:
        n1 ──[R0]──(mid1)──[R1]──(mid2)── ... ──[Rk]── n2

    Args:
        circuit: Circuit to add to
        n1: Input terminal
        n2: Output terminal
        values: Resistances, in order from n1 to n2 (at least one)
        prefix: Name prefix for internal nodes and edges

    Returns:
        (new_circuit, (edges, internal_nodes))

    Example:
        circuit, (edges, mids) = Series(circuit, a, c, [10, 20], prefix="chain")
        calculate_equivalent_resistance(circuit, "a", "c")  # 30
    """
    if not values:
        raise ValueError("Series needs at least one resistance")

    edges = []
    internal = []
    current = n1
    for i, value in enumerate(values):
        if i == len(values) - 1:
            nxt = n2
        else:
            circuit, nxt = circuit.node(f"{prefix}_mid{i + 1}")
            internal.append(nxt)
        circuit, edge = R(circuit, current, nxt, name=f"{prefix}_R{i}", value=value)
        edges.append(edge)
        current = nxt
    return circuit, (tuple(edges), tuple(internal))


def Parallel(
    circuit: Circuit,
    n1: Node,
    n2: Node,
    values: Sequence[float | str],
    prefix: str = "par",
) -> tuple[Circuit, tuple]:
    """
    Connect resistors in parallel between two nodes.

    Topology:
        n1 ──┬──[R0]──┬── n2
             ├──[R1]──┤
             └──[Rk]──┘

    Each resistor is its own edge, so parallel resistors keep separate
    currents.

    Returns:
        (new_circuit, edges)
    """
    edges = []
    for i, value in enumerate(values):
        circuit, edge = R(circuit, n1, n2, name=f"{prefix}_R{i}", value=value)
        edges.append(edge)
    return circuit, tuple(edges)


def WheatstoneBridge(
    circuit: Circuit,
    top: Node,
    bottom: Node,
    values: Sequence[float | str],
    prefix: str = "wb",
) -> tuple[Circuit, tuple]:
    """
    Five-resistor bridge between two nodes.

    Topology:
                 ┌──[R0]──(left)──[R2]──┐
            top ─┤           │          ├─ bottom
                 │         [R4]         │
                 └──[R1]──(right)─[R3]──┘

    Args:
        values: (R0, R1, R2, R3, R4); R4 is the bridge resistor

    Returns:
        (new_circuit, (edges, (left, right)))

    Example:
        circuit, _ = WheatstoneBridge(circuit, a, d, [10] * 5)
        calculate_equivalent_resistance(circuit, "a", "d")  # 10
    """
    if len(values) != 5:
        raise ValueError(f"WheatstoneBridge needs 5 resistances, got {len(values)}")
    r0, r1, r2, r3, r4 = values

    circuit, left = circuit.node(f"{prefix}_left")
    circuit, right = circuit.node(f"{prefix}_right")

    circuit, e0 = R(circuit, top, left, name=f"{prefix}_R0", value=r0)
    circuit, e1 = R(circuit, top, right, name=f"{prefix}_R1", value=r1)
    circuit, e2 = R(circuit, left, bottom, name=f"{prefix}_R2", value=r2)
    circuit, e3 = R(circuit, right, bottom, name=f"{prefix}_R3", value=r3)
    circuit, e4 = R(circuit, left, right, name=f"{prefix}_R4", value=r4)
    return circuit, ((e0, e1, e2, e3, e4), (left, right))
