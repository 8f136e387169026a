"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List


class UnknownNodeError(KeyError):
    """Raised when a node was never registered with a :class:DisjointSet."""


@dataclass
class Subset:
    """Parent pointer and rank for one node."""

    parent: Hashable
    rank: int = 0


@dataclass
class DisjointSet:
    """Union-find over arbitrary hashable nodes, with path compression and union by rank."""

    nodes: Iterable[Hashable]
    subsets: Dict[Hashable, Subset] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.nodes = list(self.nodes)
        self.subsets = {}
        for node in self.nodes:
            if node in self.subsets:
                raise ValueError(f"duplicate node {node!r}")
            self.subsets[node] = Subset(parent=node)

    def __len__(self) -> int:
        return len(self.subsets)

    def __contains__(self, node: Hashable) -> bool:
        return node in self.subsets

    def _subset(self, node: Hashable) -> Subset:
        try:
            return self.subsets[node]
        except KeyError:
            raise UnknownNodeError(node) from None

    def find(self, node: Hashable) -> Hashable:
        subset = self._subset(node)
        path: List[Subset] = []
        while subset.parent != node:
            path.append(subset)
            node = subset.parent
            subset = self.subsets[node]
        for visited in path:
            visited.parent = node
        return node

    def union(self, left: Hashable, right: Hashable) -> None:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return
        subset_left = self.subsets[root_left]
        subset_right = self.subsets[root_right]
        if subset_left.rank < subset_right.rank:
            subset_left.parent = root_right
        elif subset_left.rank > subset_right.rank:
            subset_right.parent = root_left
        else:
            subset_right.parent = root_left
            subset_left.rank += 1
