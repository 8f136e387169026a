"""Edge list container used by the spanning tree builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, List, Set


@dataclass(frozen=True)
class Edge:
    """Undirected link between two panoramas; `bearing` points from `v1` toward `v2`."""

    v1: Hashable
    v2: Hashable
    weight: float = 0.0
    bearing: float = 0.0


class Graph:
    """Accumulate edges and the distinct nodes they reference."""

    def __init__(self, node_count: int, edge_count: int) -> None:
        self.node_count = node_count
        self.edge_count = edge_count
        self._edges: List[Edge] = []
        self._nodes: List[Hashable] = []
        self._seen: Set[Hashable] = set()

    def add_edge(self, edge: Edge) -> None:
        self._edges.append(edge)
        for node in (edge.v1, edge.v2):
            if node not in self._seen:
                self._seen.add(node)
                self._nodes.append(node)

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def nodes(self) -> List[Hashable]:
        return list(self._nodes)
