"""Kruskal's minimum spanning tree over panorama links."""

from __future__ import annotations

from operator import attrgetter
from typing import Hashable, Iterable, List, Sequence

from .graph import Edge, Graph
from .structures import DisjointSet


class InputShapeError(ValueError):
    """Raised when the declared counts do not match the supplied edge arrays."""


def _validate(
    node_count: int,
    edge_count: int,
    from_nodes: Sequence[Hashable],
    to_nodes: Sequence[Hashable],
    weights: Sequence[float],
    bearings: Sequence[float],
) -> None:
    if node_count < 0:
        raise InputShapeError(f"node_count must be non-negative, got {node_count}")
    if edge_count < 0:
        raise InputShapeError(f"edge_count must be non-negative, got {edge_count}")

    columns = {
        "from_nodes": from_nodes,
        "to_nodes": to_nodes,
        "weights": weights,
        "bearings": bearings,
    }
    for name, values in columns.items():
        if len(values) != edge_count:
            raise InputShapeError(f"{name} has {len(values)} entries, expected edge_count={edge_count}")

    distinct = len(set(from_nodes) | set(to_nodes))
    if distinct > node_count:
        raise InputShapeError(f"edges reference {distinct} distinct nodes but node_count={node_count}")


def compute_mst(
    node_count: int,
    edge_count: int,
    from_nodes: Sequence[Hashable],
    to_nodes: Sequence[Hashable],
    weights: Sequence[float],
    bearings: Sequence[float],
) -> List[Edge]:
    """Return the minimum spanning forest of the given edges in acceptance order.

    Edges are accepted lightest first until `node_count - 1` of them are taken
    or the candidates run out; a disconnected input therefore yields fewer
    edges. Equal weights are accepted in no guaranteed relative order.
    """

    _validate(node_count, edge_count, from_nodes, to_nodes, weights, bearings)

    graph = Graph(node_count, edge_count)
    for index in range(edge_count):
        graph.add_edge(Edge(from_nodes[index], to_nodes[index], weights[index], bearings[index]))

    sorted_edges = sorted(graph.edges(), key=attrgetter("weight"))
    subsets = DisjointSet(graph.nodes())

    limit = node_count - 1
    result: List[Edge] = []
    for edge in sorted_edges:
        if len(result) >= limit:
            break
        root1 = subsets.find(edge.v1)
        root2 = subsets.find(edge.v2)
        if root1 == root2:
            continue
        result.append(edge)
        subsets.union(root1, root2)
    return result


def total_weight(edges: Iterable[Edge]) -> float:
    return sum(edge.weight for edge in edges)


__all__ = ["InputShapeError", "compute_mst", "total_weight"]
