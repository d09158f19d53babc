"""Finding the edge that closes a cycle in an undirected graph."""

from __future__ import annotations

from typing import Sequence


def _root(parents: list[int], i: int) -> int:
    while parents[i - 1] != i:
        i = parents[i - 1]
    return i


def _endpoints(edge: Sequence[int], node_count: int) -> tuple[int, int]:
    if len(edge) < 2:
        raise ValueError(f"edge needs two endpoints: {edge!r}")
    a, b = edge[0], edge[1]
    for node in (a, b):
        if not 1 <= node <= node_count:
            raise ValueError(f"node {node} outside 1..{node_count}")
    return a, b


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the first edge whose endpoints are already connected, else ``[0, 0]``.

    Nodes are numbered from 1 up to the number of edges.
    """
    parents = list(range(1, len(edges) + 1))
    for edge in edges:
        a, b = _endpoints(edge, len(parents))
        p0 = _root(parents, a)
        p1 = _root(parents, b)
        if p0 == p1:
            return [a, b]
        if p0 != a:
            parents[p1 - 1] = parents[p0 - 1]
        else:
            parents[p0 - 1] = parents[p1 - 1]
    return [0, 0]