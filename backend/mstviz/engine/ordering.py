"""Deterministic edge ordering shared by every Kruskal variant."""
from collections.abc import Iterable

from .graph import Edge


def edge_sort_key(edge: Edge) -> tuple[float, str]:
    return (edge.weight, edge.id)


def sort_edges(edges: Iterable[Edge]) -> list[Edge]:
    """Return a new list sorted by weight, ties broken by edge id."""
    return sorted(edges, key=edge_sort_key)
