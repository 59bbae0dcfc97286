"""Branch currents from a partial assignment of node potentials (nodal analysis).

Nodes with a set potential are the boundary; all other nodes are unknowns.
Kirchhoff's current law at every unknown reduced node gives
    Y * V = I
where I collects the currents pushed in by conductances to boundary nodes.
Once V is known, every edge current follows from Ohm's law:
    I_edge = (V_a - V_b) / R
and is positive when it flows from node_a to node_b.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from ..constants import DIRECTION_TOLERANCE
from ..symbolic import RationalExpr, solve_linear_system
from .network import Circuit, Edge
from .admittance import (
    all_node_ids,
    parse_resistances,
    merge_shorts,
    conducting_edges,
    zero_system,
    stamp_admittance,
)
from .union_find import UnionFind

logger = logging.getLogger(__name__)


class CurrentSolution(NamedTuple):
    """Result of a current analysis."""
    currents: dict  # {edge_id: RationalExpr}, only for determined edges
    potentials: dict  # {node_id: RationalExpr}, boundary and solved nodes


def analyze_currents(circuit: Circuit) -> CurrentSolution:
    """
    Solve node potentials and branch currents.

    Args:
        circuit: Resistor network with potentials on some nodes

    Returns:
        CurrentSolution. Both mappings are empty when fewer than two nodes
        have a potential or the circuit has no edges. Edges whose current
        cannot be determined are absent from `currents`.
    """
    boundary = {
        n.id: RationalExpr.parse(n.potential) for n in circuit.nodes if n.has_potential
    }
    if len(boundary) < 2 or not circuit.edges:
        return CurrentSolution(currents={}, potentials={})

    resistances = parse_resistances(circuit)
    uf = merge_shorts(circuit, resistances)

    # Potential of each reduced node that holds boundary nodes
    group_potential: dict[str, RationalExpr] = {}
    conflicting: set[str] = set()
    for node_id, potential in boundary.items():
        rep = uf.find(node_id)
        if rep in conflicting:
            continue
        known = group_potential.get(rep)
        if known is None:
            group_potential[rep] = potential
        elif not known.equals(potential):
            logger.debug("Short circuit between different potentials at %s", node_id)
            conflicting.add(rep)
            del group_potential[rep]

    currents: dict[str, RationalExpr] = {}
    for edge, resistance in resistances:
        if resistance.is_zero() and uf.find(edge.node_a) in conflicting:
            currents[edge.id] = RationalExpr.INFINITY

    # Unknowns are the reduced nodes that conduct to at least one boundary group
    edges = conducting_edges(resistances, uf, excluded=conflicting)
    live = [rep for rep in uf.representatives() if rep not in conflicting]
    reach = UnionFind(live)
    for _, _, ra, rb in edges:
        reach.union(ra, rb)
    anchored = {reach.find(rep) for rep in group_potential}
    unknowns = [
        rep for rep in live
        if rep not in group_potential and reach.find(rep) in anchored
    ]
    index = {rep: i for i, rep in enumerate(unknowns)}

    resolved = dict(group_potential)
    if unknowns:
        Y, I = zero_system(len(unknowns))
        for _, g, ra, rb in edges:
            ia = index.get(ra)
            ib = index.get(rb)
            if ia is None and ib is None:
                continue
            stamp_admittance(Y, ia, ib, g)
            if ib is None:
                I[ia] = I[ia] + g * resolved[rb]
            elif ia is None:
                I[ib] = I[ib] + g * resolved[ra]

        logger.debug("Solving %d unknown potentials", len(unknowns))
        solution = solve_linear_system(Y, I)
        if solution is None:
            logger.debug("Singular nodal system; interior potentials left undetermined")
        else:
            for rep, value in zip(unknowns, solution):
                resolved[rep] = value

    for edge, resistance in resistances:
        if edge.id in currents:
            continue
        if resistance.is_infinity():
            currents[edge.id] = RationalExpr.ZERO
            continue

        va = resolved.get(uf.find(edge.node_a))
        vb = resolved.get(uf.find(edge.node_b))
        if va is None or vb is None:
            continue

        if resistance.is_zero():
            currents[edge.id] = RationalExpr.ZERO if va.equals(vb) else RationalExpr.INFINITY
        else:
            currents[edge.id] = (va - vb) / resistance

    potentials = {}
    for node_id in all_node_ids(circuit):
        rep = uf.find(node_id)
        if rep in resolved:
            potentials[node_id] = resolved[rep]

    return CurrentSolution(currents=currents, potentials=potentials)


def calculate_currents(circuit: Circuit) -> dict[str, RationalExpr]:
    """
    Current on every determined edge, keyed by edge id.

    Absent keys mean "undetermined"; present values are fully resolved
    (INFINITY for a short between different potentials, ZERO for open edges).
    """
    return analyze_currents(circuit).currents


def solve_node_potentials(circuit: Circuit) -> dict[str, RationalExpr]:
    """Potential of every node that is fixed or could be solved for."""
    return analyze_currents(circuit).potentials


def current_direction(edge: Edge, current: RationalExpr) -> str:
    """
    Direction of a branch current.

    Returns "A->B" (from edge.node_a to edge.node_b), "B->A", or "none" for a
    numeric current that is zero within tolerance. Symbolic and infinite
    currents are reported as "A->B".
    """
    if current.is_infinity() or not current.is_numeric():
        return "A->B"
    value = current.to_number()
    if abs(value) < DIRECTION_TOLERANCE:
        return "none"
    return "A->B" if value > 0 else "B->A"
