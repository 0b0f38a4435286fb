from __future__ import annotations

from typing import Dict, Hashable, Iterable, List


class DisjointSet:
    """Union-find over node ids.

    `union(a, b)` always hangs the root of `a` under the root of `b` (no rank or
    size balancing). The component snapshots shown by the Kruskal visualization
    depend on that exact attachment rule, so keep it even though union-by-rank
    would give shallower trees. Path compression in `find` keeps lookups cheap
    at visualization scale.
    """

    def __init__(self, ids: Iterable[Hashable] = ()) -> None:
        self._order: List[Hashable] = []
        self._parent: Dict[Hashable, Hashable] = {}
        self.make_set(ids)

    def make_set(self, ids: Iterable[Hashable]) -> None:
        ids = list(ids)
        if len(set(ids)) != len(ids):
            raise ValueError(f"Disjoint-set ids must be unique (got {ids!r})")
        for i in ids:
            if i in self._parent:
                raise ValueError(f"Id already present in disjoint set: {i!r}")
        for i in ids:
            self._parent[i] = i
            self._order.append(i)

    def find(self, x: Hashable) -> Hashable:
        try:
            root = self._parent[x]
        except KeyError as e:
            raise KeyError(f"Unknown disjoint-set id: {x!r}") from e
        while self._parent[root] != root:
            root = self._parent[root]

        # Second pass: point everything on the path straight at the root.
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False
        self._parent[ra] = rb
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def components(self) -> List[List[Hashable]]:
        groups: Dict[Hashable, List[Hashable]] = {}
        for i in self._order:
            groups.setdefault(self.find(i), []).append(i)
        return list(groups.values())

    def parents(self) -> Dict[Hashable, Hashable]:
        return dict(self._parent)

    def copy(self) -> "DisjointSet":
        other = DisjointSet()
        other._order = list(self._order)
        other._parent = dict(self._parent)
        return other

    def __contains__(self, x: object) -> bool:
        return x in self._parent

    def __len__(self) -> int:
        return len(self._parent)
