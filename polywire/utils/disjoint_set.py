from __future__ import annotations


class DisjointSet:
    """Union-find over ``0..size-1`` with union by rank and path compression."""

    def __init__(self, size: int):
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        parent = self._parent
        root = item
        while parent[root] != root:
            root = parent[root]
        # second pass: point the whole path at the root
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, a: int, b: int) -> int:
        """Merge the sets holding ``a`` and ``b`` and return the new root."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return root_a
        if self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
            return root_a
        self._parent[root_a] = root_b
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_b] += 1
        return root_b

    def groups(self) -> dict[int, list[int]]:
        """Members of every set keyed by representative."""
        out: dict[int, list[int]] = {}
        for item in range(len(self._parent)):
            out.setdefault(self.find(item), []).append(item)
        return out
