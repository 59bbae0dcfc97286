"""Shared steps of the nodal analyses: value parsing, short merging, admittance stamping.

The reduced system is
    Y * V = I
where:
    Y is the conductance matrix over reduced (short-merged) nodes
    V is the vector of unknown node potentials
    I is the vector of injected currents

Every conducting edge stamps its conductance G = 1/R into Y; an endpoint
with a known potential (or the ground) has no row or column, and its
contribution moves to the right-hand side.
"""

from __future__ import annotations

import logging
from collections import deque

from ..symbolic import RationalExpr
from .network import Circuit, Edge
from .union_find import UnionFind

logger = logging.getLogger(__name__)


def parse_resistances(circuit: Circuit) -> list[tuple[Edge, RationalExpr]]:
    """Pair every edge with its parsed resistance."""
    return [(edge, RationalExpr.parse(edge.resistance)) for edge in circuit.edges]


def all_node_ids(circuit: Circuit) -> list[str]:
    """Ids of declared nodes followed by any edge endpoint not declared as a node."""
    ids = dict.fromkeys(circuit.node_ids)
    for edge in circuit.edges:
        ids.setdefault(edge.node_a, None)
        ids.setdefault(edge.node_b, None)
    return list(ids)


def is_connected(circuit: Circuit, start: str, end: str) -> bool:
    """Breadth-first search over all edges, whatever their resistance."""
    adjacency: dict[str, set[str]] = {node_id: set() for node_id in all_node_ids(circuit)}
    for edge in circuit.edges:
        adjacency[edge.node_a].add(edge.node_b)
        adjacency[edge.node_b].add(edge.node_a)

    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return True
        for neighbor in adjacency[current]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return False


def merge_shorts(circuit: Circuit, resistances: list[tuple[Edge, RationalExpr]]) -> UnionFind:
    """Union-find with the endpoints of every zero-resistance edge merged."""
    uf = UnionFind(all_node_ids(circuit))
    for edge, resistance in resistances:
        if resistance.is_zero() and uf.union(edge.node_a, edge.node_b):
            logger.debug("Short %s merges %s and %s", edge.id, edge.node_a, edge.node_b)
    return uf


def conducting_edges(
    resistances: list[tuple[Edge, RationalExpr]],
    uf: UnionFind,
    excluded: frozenset[str] | set[str] = frozenset(),
) -> list[tuple[Edge, RationalExpr, str, str]]:
    """
    Edges that carry a finite, nonzero conductance between two different reduced nodes.

    Returns (edge, conductance, rep_a, rep_b) tuples. Edges touching a
    representative in `excluded` are dropped.
    """
    out = []
    for edge, resistance in resistances:
        if resistance.is_zero() or resistance.is_infinity():
            continue
        rep_a = uf.find(edge.node_a)
        rep_b = uf.find(edge.node_b)
        if rep_a == rep_b or rep_a in excluded or rep_b in excluded:
            continue
        out.append((edge, resistance.reciprocal(), rep_a, rep_b))
    return out


def zero_system(n: int) -> tuple[list[list[RationalExpr]], list[RationalExpr]]:
    Y = [[RationalExpr.ZERO] * n for _ in range(n)]
    I = [RationalExpr.ZERO] * n
    return Y, I


def stamp_admittance(Y: list[list[RationalExpr]], i: int | None, j: int | None, g: RationalExpr):
    """Stamp conductance g between rows i and j (None = ground or known potential)."""
    if i is not None:
        Y[i][i] = Y[i][i] + g
    if j is not None:
        Y[j][j] = Y[j][j] + g
    if i is not None and j is not None:
        Y[i][j] = Y[i][j] - g
        Y[j][i] = Y[j][i] - g
