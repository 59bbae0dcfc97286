"""Circuit, Node and Edge types for resistor networks (immutable/functional style)."""

from __future__ import annotations
from typing import NamedTuple, Iterable, Mapping


class Node(NamedTuple):
    """A node in the circuit, optionally held at a known potential."""
    id: str
    potential: float | str | None = None  # number, "Infinity", symbol or expression

    @property
    def has_potential(self) -> bool:
        return self.potential is not None and self.potential != ""


class Edge(NamedTuple):
    """A resistor between two nodes."""
    id: str
    node_a: str  # node id
    node_b: str  # node id
    resistance: float | str  # number (0 and negative allowed), "Infinity", or expression


class Circuit(NamedTuple):
    """
    Immutable resistor network.

    Build using functional style:
        circuit = Circuit()
        circuit, a = circuit.node("a", potential=12)
        circuit, b = circuit.node("b")
        circuit, r1 = R(circuit, a, b, name="R1", value="2r")
    """
    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    @classmethod
    def from_dicts(
        cls,
        nodes: Iterable[Mapping],
        edges: Iterable[Mapping] = (),
    ) -> Circuit:
        """
        Build a circuit from plain mappings.

        Nodes need "id" and may carry "potential"; edges need "id",
        "nodeA"/"node_a", "nodeB"/"node_b" and "resistance". Other keys
        (positions, labels) are ignored.
        """
        return cls(
            nodes=tuple(Node(str(n["id"]), n.get("potential")) for n in nodes),
            edges=tuple(
                Edge(
                    str(e["id"]),
                    str(e["nodeA"] if "nodeA" in e else e["node_a"]),
                    str(e["nodeB"] if "nodeB" in e else e["node_b"]),
                    e["resistance"],
                )
                for e in edges
            ),
        )

    @property
    def node_ids(self) -> tuple[str, ...]:
        return tuple(n.id for n in self.nodes)

    def get_node(self, node_id: str) -> Node | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def has_node(self, node_id: str) -> bool:
        return self.get_node(node_id) is not None

    def node(self, node_id: str, potential: float | str | None = None) -> tuple[Circuit, Node]:
        """
        Create a new node.

        Returns (new_circuit, node). An existing node with the same id is
        returned unchanged.
        """
        existing = self.get_node(node_id)
        if existing is not None:
            return self, existing

        new_node = Node(node_id, potential)
        return self._replace(nodes=self.nodes + (new_node,)), new_node

    def with_potential(self, node_id: str, potential: float | str | None) -> Circuit:
        """Return a circuit where node_id is held at potential (None clears it)."""
        if not self.has_node(node_id):
            raise ValueError(f"Node {node_id} not found")
        return self._replace(
            nodes=tuple(n._replace(potential=potential) if n.id == node_id else n for n in self.nodes)
        )

    def add_edge(self, edge: Edge) -> tuple[Circuit, Edge]:
        """
        Add an edge.

        Returns (new_circuit, edge).
        """
        if any(e.id == edge.id for e in self.edges):
            raise ValueError(f"Edge {edge.id} already exists")
        return self._replace(edges=self.edges + (edge,)), edge
