"""Union-find over node ids, used to merge nodes joined by zero-resistance edges."""

from __future__ import annotations

from typing import Iterable


class UnionFind:
    """
    Disjoint sets of node ids with path compression and union by rank.

    Built fresh for every analysis call and thrown away afterwards.
    """

    def __init__(self, ids: Iterable[str]):
        self._index: dict[str, int] = {}
        self._ids: list[str] = []
        for node_id in ids:
            if node_id not in self._index:
                self._index[node_id] = len(self._ids)
                self._ids.append(node_id)
        self._parent = list(range(len(self._ids)))
        self._rank = [0] * len(self._ids)

    def _root(self, i: int) -> int:
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def find(self, node_id: str) -> str:
        """Representative id of the group containing node_id."""
        return self._ids[self._root(self._index[node_id])]

    def union(self, a: str, b: str) -> bool:
        """Merge the groups of a and b. Returns False if already merged."""
        ra = self._root(self._index[a])
        rb = self._root(self._index[b])
        if ra == rb:
            return False
        if self._rank[ra] < self._rank[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        if self._rank[ra] == self._rank[rb]:
            self._rank[ra] += 1
        return True

    def connected(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)

    def representatives(self) -> list[str]:
        """Distinct representative ids, in first-seen order of their members."""
        seen: dict[str, None] = {}
        for node_id in self._ids:
            seen.setdefault(self.find(node_id), None)
        return list(seen)

