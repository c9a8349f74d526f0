"""Disjoint-set (union-find) engine with a hop-by-hop traced ``find``."""
import logging
from collections.abc import Generator
from dataclasses import dataclass

from .step import NodeMark, StepKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnionResult:
    """How a merge happened. Only used to narrate the step."""
    merged: bool
    root: int
    attached: int | None = None
    swapped: bool = False
    rank_increased: bool = False


@dataclass(frozen=True)
class FindEvent:
    kind: StepKind
    start: int
    node: int
    node_overlay: dict[int, NodeMark]
    explanation: str


class DisjointSet:
    """``parent``/``rank`` arrays indexed 0..n; index 0 is unused."""

    def __init__(self, n: int):
        self.parent: list[int] = list(range(n + 1))
        self.rank: list[int] = [0] * (n + 1)

    def parent_snapshot(self) -> tuple[int, ...]:
        return tuple(self.parent)

    def rank_snapshot(self) -> tuple[int, ...]:
        return tuple(self.rank)

    def _chain(self, u: int) -> list[int]:
        """Nodes from ``u`` up to, but excluding, its root."""
        chain = []
        while self.parent[u] != u:
            chain.append(u)
            u = self.parent[u]
        return chain

    def _compress(self, nodes: list[int], root: int) -> list[int]:
        rewritten = []
        for node in nodes:
            if self.parent[node] != root:
                self.parent[node] = root
                rewritten.append(node)
        return rewritten

    def find(self, u: int, compress: bool = False) -> int:
        root = u
        while self.parent[root] != root:
            root = self.parent[root]
        if compress:
            self._compress(self._chain(u), root)
        return root

    def trace_find(
        self, u: int, compress: bool = True, max_hops: int = 8,
    ) -> Generator[FindEvent, None, int]:
        """Yield one event per phase of ``find(u)`` and return the root.

        At most ``max_hops`` hop events are yielded. A longer chain is
        finished by the untraced ``find`` and reported in a single
        ``FIND_TRUNCATED`` event carrying the true final state.
        """
        yield FindEvent(
            StepKind.FIND_START, u, u, {u: NodeMark.START},
            f"Start find({u}): follow parent pointers until a node is its own parent.",
        )

        visited = [u]
        node = u
        hops = 0
        while self.parent[node] != node:
            if hops == max_hops:
                summary = self._truncate(u, node, hops, compress)
                yield summary
                return summary.node
            parent = self.parent[node]
            hops += 1
            visited.append(parent)
            yield FindEvent(
                StepKind.FIND_HOP, u, parent, {u: NodeMark.START, parent: NodeMark.WALK},
                f"Hop {hops}: parent[{node}] = {parent}, move up to {parent}.",
            )
            node = parent

        root = node
        if root == u:
            text = f"parent[{u}] = {u}: node {u} is already the root of its set."
        else:
            text = f"parent[{root}] = {root}: the root of {u} is {root} after {hops} hop(s)."
        yield FindEvent(
            StepKind.FIND_ROOT, u, root, {u: NodeMark.START, root: NodeMark.ROOT}, text,
        )

        if compress:
            rewritten = self._compress(visited[:-1], root)
            if rewritten:
                overlay = {node: NodeMark.COMPRESSED for node in rewritten}
                overlay[root] = NodeMark.ROOT
                yield FindEvent(
                    StepKind.FIND_COMPRESS, u, root, overlay,
                    "Path compression: parent of "
                    f"{', '.join(map(str, rewritten))} now points directly to {root}.",
                )

        yield FindEvent(
            StepKind.FIND_EQUIVALENT, u, root,
            {u: NodeMark.EQUIVALENT, root: NodeMark.ROOT},
            f"find({u}) = {root}: {u} belongs to the set represented by {root}.",
        )
        return root

    def _truncate(self, u: int, reached: int, hops: int, compress: bool) -> FindEvent:
        chain = self._chain(u)
        root = self.find(u)
        rewritten = self._compress(chain, root) if compress else []
        logger.debug(
            "find(%d) truncated after %d hops at %d; true root %d", u, hops, reached, root,
        )
        overlay = {node: NodeMark.COMPRESSED for node in rewritten}
        overlay[u] = NodeMark.EQUIVALENT
        overlay[root] = NodeMark.ROOT
        return FindEvent(
            StepKind.FIND_TRUNCATED, u, root, overlay,
            f"... the walk continues similarly past {reached} ... "
            f"final state: find({u}) = {root}"
            + (", path compressed." if compress else "."),
        )

    def union(self, root_a: int, root_b: int) -> UnionResult:
        if root_a == root_b:
            return UnionResult(merged=False, root=root_a)
        swapped = False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
            swapped = True
        self.parent[root_b] = root_a
        rank_increased = self.rank[root_a] == self.rank[root_b]
        if rank_increased:
            self.rank[root_a] += 1
        return UnionResult(
            merged=True, root=root_a, attached=root_b,
            swapped=swapped, rank_increased=rank_increased,
        )
