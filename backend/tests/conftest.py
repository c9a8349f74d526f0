"""Shared test fixtures for MSTViz backend tests."""
import random
import sys
from pathlib import Path

import pytest

# Ensure mstviz package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from mstviz.engine.graph import Edge, Graph


def make_graph(n, triples, prefix="e"):
    """Graph from ``(u, v, w)`` triples with ids e0, e1, ... in input order."""
    edges = [
        Edge(id=f"{prefix}{i}", u=u, v=v, weight=w)
        for i, (u, v, w) in enumerate(triples)
    ]
    return Graph(n=n, edges=edges)


def random_graph(seed, n=8, m=14, max_weight=6):
    rng = random.Random(seed)
    triples = [
        (rng.randint(1, n), rng.randint(1, n), rng.randint(1, max_weight))
        for _ in range(m)
    ]
    return make_graph(n, triples)


@pytest.fixture
def five_node_graph():
    """n=5 graph whose MST weighs 7."""
    return make_graph(5, [
        (1, 2, 1), (1, 3, 4), (1, 5, 1), (2, 4, 2),
        (2, 5, 1), (3, 4, 3), (3, 5, 3), (4, 5, 2),
    ])


@pytest.fixture
def tie_graph():
    """Triangle with equal weights; ids out of input order to exercise tie-breaks."""
    return Graph(n=3, edges=[
        Edge(id="c", u=1, v=2, weight=5),
        Edge(id="a", u=2, v=3, weight=5),
        Edge(id="b", u=1, v=3, weight=5),
    ])


@pytest.fixture
def forest_graph():
    return make_graph(4, [(1, 2, 1), (3, 4, 1)])


@pytest.fixture
def single_node_graph():
    return Graph(n=1, edges=[])


@pytest.fixture
def triangle_graph():
    """Path 1-2-3 plus the closing edge 1-3, processed in that order."""
    return Graph(n=3, edges=[
        Edge(id="x", u=1, v=2, weight=1),
        Edge(id="y", u=2, v=3, weight=2),
        Edge(id="z", u=1, v=3, weight=3),
    ])


@pytest.fixture
def deep_find_graph():
    """Two rank-1 trees merged so node 4 sits two hops below the root.

    The last edge ``d`` forces ``find(4)`` to walk 4 -> 3 -> 1.
    """
    return Graph(n=4, edges=[
        Edge(id="a", u=1, v=2, weight=1),
        Edge(id="b", u=3, v=4, weight=1),
        Edge(id="c", u=1, v=3, weight=2),
        Edge(id="d", u=2, v=4, weight=3),
    ])
