"""Untraced Kruskal variants used to cross-check the trace builders."""
from dataclasses import dataclass

from .dsu import DisjointSet
from .graph import Graph
from .ordering import sort_edges
from .reachability import add_edge, empty_adjacency, has_path


@dataclass(frozen=True)
class MstResult:
    weight: float
    edge_ids: tuple[str, ...]


def kruskal_dsu(graph: Graph, compression: bool = True) -> MstResult:
    dsu = DisjointSet(graph.n)
    weight: float = 0
    chosen: list[str] = []
    for edge in sort_edges(graph.edges):
        root_u = dsu.find(edge.u, compress=compression)
        root_v = dsu.find(edge.v, compress=compression)
        if dsu.union(root_u, root_v).merged:
            weight += edge.weight
            chosen.append(edge.id)
    return MstResult(weight, tuple(chosen))


def kruskal_dfs(graph: Graph) -> MstResult:
    adjacency = empty_adjacency(graph.n)
    weight: float = 0
    chosen: list[str] = []
    for edge in sort_edges(graph.edges):
        if not has_path(adjacency, edge.u, edge.v).exists:
            add_edge(adjacency, edge)
            weight += edge.weight
            chosen.append(edge.id)
    return MstResult(weight, tuple(chosen))


def all_variants(graph: Graph) -> dict[str, MstResult]:
    return {
        "dsu_compressed": kruskal_dsu(graph, compression=True),
        "dsu_plain": kruskal_dsu(graph, compression=False),
        "dfs": kruskal_dfs(graph),
    }
