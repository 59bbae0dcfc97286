"""Equivalent resistance between two nodes by current injection.

A unit current is injected at node A and drawn out at node B (the ground).
Solving the nodal system Y * V = I then gives V(A) = R_eq * 1, which is
correct for any topology, bridges included, and for symbolic resistances.
"""

from __future__ import annotations

import logging

from ..symbolic import RationalExpr, solve_linear_system
from .network import Circuit
from .admittance import (
    parse_resistances,
    is_connected,
    merge_shorts,
    conducting_edges,
    zero_system,
    stamp_admittance,
)
from .union_find import UnionFind

logger = logging.getLogger(__name__)


def calculate_equivalent_resistance(
    circuit: Circuit,
    node_a_id: str,
    node_b_id: str,
) -> RationalExpr | None:
    """
    Equivalent resistance seen between two nodes.

    Args:
        circuit: Resistor network
        node_a_id: Id of the first terminal
        node_b_id: Id of the second terminal

    Returns:
        RationalExpr (ZERO for the same node or a shorted pair, INFINITY when no
        current can flow), or None if either node id is not in the circuit.
    """
    if not circuit.has_node(node_a_id) or not circuit.has_node(node_b_id):
        return None

    if node_a_id == node_b_id:
        return RationalExpr.ZERO

    if not is_connected(circuit, node_a_id, node_b_id):
        return RationalExpr.INFINITY

    resistances = parse_resistances(circuit)
    uf = merge_shorts(circuit, resistances)

    rep_a = uf.find(node_a_id)
    ground = uf.find(node_b_id)
    if rep_a == ground:
        return RationalExpr.ZERO

    edges = conducting_edges(resistances, uf)

    # Only the part of the reduced network that conducts to A takes part:
    # nodes hanging off open edges would otherwise leave empty rows.
    reach = UnionFind(uf.representatives())
    for _, _, ra, rb in edges:
        reach.union(ra, rb)
    if not reach.connected(rep_a, ground):
        logger.debug("%s and %s connected only through open edges", node_a_id, node_b_id)
        return RationalExpr.INFINITY

    live = [
        rep for rep in uf.representatives()
        if rep != ground and reach.connected(rep, rep_a)
    ]
    index = {rep: i for i, rep in enumerate(live)}

    Y, I = zero_system(len(index))
    for _, g, ra, rb in edges:
        if reach.connected(ra, rep_a):
            stamp_admittance(Y, index.get(ra), index.get(rb), g)

    # Unit test current into A
    I[index[rep_a]] = RationalExpr.ONE

    logger.debug("Solving %dx%d admittance system for R(%s, %s)", len(index), len(index), node_a_id, node_b_id)
    solution = solve_linear_system(Y, I)
    if solution is None:
        return RationalExpr.INFINITY

    return solution[index[rep_a]]
