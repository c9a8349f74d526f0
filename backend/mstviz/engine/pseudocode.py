"""Reference listings shown beside the trace, and which lines each step lights up.

Line numbers are 1-based and index into the listing tuples below.
"""
from .step import StepKind

KRUSKAL_DSU_CODE: tuple[str, ...] = (
    "class DSU:",
    "    def __init__(self, n):",
    "        self.parent = list(range(n + 1))",
    "        self.rank = [0] * (n + 1)",
    "",
    "    def find(self, u):",
    "        root = u",
    "        while self.parent[root] != root:",
    "            root = self.parent[root]",
    "        while self.parent[u] != root:  # path compression",
    "            self.parent[u], u = root, self.parent[u]",
    "        return root",
    "",
    "    def union(self, a, b):",
    "        if a == b:",
    "            return False",
    "        if self.rank[a] < self.rank[b]:",
    "            a, b = b, a",
    "        self.parent[b] = a",
    "        if self.rank[a] == self.rank[b]:",
    "            self.rank[a] += 1",
    "        return True",
    "",
    "def kruskal(n, edges):",
    "    edges.sort(key=lambda e: (e.weight, e.id))",
    "    dsu = DSU(n)",
    "    mst_weight, mst_edges = 0, []",
    "    for e in edges:",
    "        if dsu.union(dsu.find(e.u), dsu.find(e.v)):",
    "            mst_weight += e.weight",
    "            mst_edges.append(e)",
    "    return mst_weight, mst_edges",
)

KRUSKAL_DFS_CODE: tuple[str, ...] = (
    "def has_path(u, target, adj, visited):",
    "    if u == target:",
    "        return True",
    "    visited.add(u)",
    "    for x in adj[u]:",
    "        if x not in visited:",
    "            if has_path(x, target, adj, visited):",
    "                return True",
    "    return False",
    "",
    "def kruskal(n, edges):",
    "    edges.sort(key=lambda e: (e.weight, e.id))",
    "    adj = {i: [] for i in range(1, n + 1)}",
    "    mst_weight, mst_edges = 0, []",
    "    for e in edges:",
    "        if not has_path(e.u, e.v, adj, set()):",
    "            adj[e.u].append(e.v)",
    "            adj[e.v].append(e.u)",
    "            mst_weight += e.weight",
    "            mst_edges.append(e)",
    "    return mst_weight, mst_edges",
)

DSU_HIGHLIGHTS: dict[StepKind, tuple[int, ...]] = {
    StepKind.START: (25, 26, 27),
    StepKind.CONSIDER: (28,),
    StepKind.FIND_START: (6, 7),
    StepKind.FIND_HOP: (8, 9),
    StepKind.FIND_ROOT: (8,),
    StepKind.FIND_COMPRESS: (10, 11),
    StepKind.FIND_EQUIVALENT: (12,),
    StepKind.FIND_TRUNCATED: (8, 9, 12),
    StepKind.ACCEPT: (19, 20, 21, 29, 30, 31),
    StepKind.REJECT: (15, 16, 29),
    StepKind.END: (32,),
}

DFS_HIGHLIGHTS: dict[StepKind, tuple[int, ...]] = {
    StepKind.START: (12, 13, 14),
    StepKind.CONSIDER: (15,),
    StepKind.DFS_ENTER: (4,),
    StepKind.DFS_EXPLORE: (5, 6),
    StepKind.DFS_DESCEND: (7,),
    StepKind.DFS_BACKTRACK: (9,),
    StepKind.DFS_FOUND: (2, 3),
    StepKind.DFS_TRUNCATED: (7, 9),
    StepKind.ACCEPT: (16, 17, 18, 19, 20),
    StepKind.REJECT: (16,),
    StepKind.END: (21,),
}
