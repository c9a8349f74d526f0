"""Depth-first reachability over the MST built so far.

The search keeps an explicit frame stack instead of recursing, so its depth
is limited by memory only. Events come out in the same order as the
recursive formulation::

    def has_path(u, target):
        if u == target: return True        # FOUND
        visited.add(u)                      # ENTER
        for x in unvisited neighbours:      # EXPLORE
            if has_path(x, target):         # DESCEND
                return True
            ...                             # BACKTRACK
        return False
"""
import logging
from collections.abc import Generator, Iterator
from dataclasses import dataclass, field

from .graph import Edge
from .step import EdgeMark, StepKind

logger = logging.getLogger(__name__)

# node -> [(neighbour, edge id)], in acceptance order
Adjacency = dict[int, list[tuple[int, str]]]


def empty_adjacency(n: int) -> Adjacency:
    return {node: [] for node in range(1, n + 1)}


def add_edge(adjacency: Adjacency, edge: Edge) -> None:
    adjacency.setdefault(edge.u, []).append((edge.v, edge.id))
    adjacency.setdefault(edge.v, []).append((edge.u, edge.id))


@dataclass(frozen=True)
class ReachabilityResult:
    exists: bool
    visited: tuple[int, ...]


@dataclass(frozen=True)
class SearchEvent:
    kind: StepKind
    current: int | None
    neighbors: tuple[int, ...]
    visited: tuple[int, ...]
    stack: tuple[int, ...]
    edge_overlay: dict[str, EdgeMark]
    explanation: str


@dataclass
class _Frame:
    node: int
    neighbor: int | None = None
    edge_id: str | None = None


@dataclass
class _Search:
    adjacency: Adjacency
    start: int
    target: int
    trace: bool = True
    visited: list[int] = field(default_factory=list)
    frames: list[_Frame] = field(default_factory=list)
    overlay: dict[str, EdgeMark] = field(default_factory=dict)
    exists: bool = False

    @property
    def stack(self) -> tuple[int, ...]:
        return tuple(frame.node for frame in self.frames)

    def event(
        self,
        kind: StepKind,
        current: int | None,
        explanation: str,
        neighbors: tuple[int, ...] = (),
        overlay: dict[str, EdgeMark] | None = None,
    ) -> SearchEvent:
        return SearchEvent(
            kind=kind,
            current=current,
            neighbors=neighbors,
            visited=tuple(self.visited),
            stack=self.stack,
            edge_overlay=dict(self.overlay if overlay is None else overlay),
            explanation=explanation,
        )

    def _emit(self, kind: StepKind, current: int | None, explanation: str,
              **extra) -> Iterator[SearchEvent]:
        if self.trace:
            yield self.event(kind, current, explanation, **extra)

    def _enter(self, node: int) -> Iterator[SearchEvent]:
        self.visited.append(node)
        self.frames.append(_Frame(node))
        yield from self._emit(
            StepKind.DFS_ENTER, node, f"Enter node {node}: mark it visited.",
        )

    def walk(self) -> Generator[SearchEvent, None, bool]:
        if self.start == self.target:
            self.exists = True
            yield from self._emit(
                StepKind.DFS_FOUND, self.start,
                f"Node {self.start} is the target itself: a path trivially exists.",
            )
            return True

        seen: set[int] = set()
        yield from self._enter(self.start)
        seen.add(self.start)

        while self.frames:
            frame = self.frames[-1]
            candidates = [
                (node, edge_id)
                for node, edge_id in self.adjacency.get(frame.node, ())
                if node not in seen
            ]
            if not candidates:
                self.frames.pop()
                if self.frames:
                    parent = self.frames[-1]
                    self.overlay[parent.edge_id] = EdgeMark.DEAD
                    yield from self._emit(
                        StepKind.DFS_BACKTRACK, parent.node,
                        f"Backtrack: branch {parent.node} -> {parent.neighbor} "
                        f"does not lead to {self.target}.",
                    )
                continue

            explore = dict(self.overlay)
            for _, edge_id in candidates:
                explore[edge_id] = EdgeMark.CANDIDATE
            names = ", ".join(str(node) for node, _ in candidates)
            yield from self._emit(
                StepKind.DFS_EXPLORE, frame.node,
                f"Explore unvisited neighbours of {frame.node}: {{ {names} }}.",
                neighbors=tuple(node for node, _ in candidates),
                overlay=explore,
            )

            neighbor, edge_id = candidates[0]
            frame.neighbor, frame.edge_id = neighbor, edge_id
            self.overlay[edge_id] = EdgeMark.ACTIVE
            yield from self._emit(
                StepKind.DFS_DESCEND, frame.node,
                f"Descend along edge {edge_id}: {frame.node} -> {neighbor}.",
            )

            if neighbor == self.target:
                self.exists = True
                yield from self._emit(
                    StepKind.DFS_FOUND, neighbor,
                    f"Reached {self.target}: {self.start} and {self.target} "
                    "are already connected in the tree.",
                )
                return True
            yield from self._enter(neighbor)
            seen.add(neighbor)

        return False

    def result(self) -> ReachabilityResult:
        return ReachabilityResult(self.exists, tuple(self.visited))


def has_path(adjacency: Adjacency, start: int, target: int) -> ReachabilityResult:
    """Untraced search; ground truth for the traced variant."""
    search = _Search(adjacency, start, target, trace=False)
    for _ in search.walk():
        pass
    return search.result()


def trace_path(
    adjacency: Adjacency, start: int, target: int, max_steps: int = 200,
) -> Generator[SearchEvent, None, ReachabilityResult]:
    """Yield at most ``max_steps`` search events, plus one summary if cut short."""
    search = _Search(adjacency, start, target)
    walk = search.walk()
    emitted = 0
    for event in walk:
        if emitted == max_steps:
            walk.close()
            return (yield from _summarize(adjacency, start, target, max_steps))
        emitted += 1
        yield event
    return search.result()


def _summarize(
    adjacency: Adjacency, start: int, target: int, max_steps: int,
) -> Generator[SearchEvent, None, ReachabilityResult]:
    full = _Search(adjacency, start, target, trace=False)
    for _ in full.walk():
        pass
    logger.debug(
        "DFS %d -> %d truncated after %d steps; rerun found path=%s",
        start, target, max_steps, full.exists,
    )
    outcome = "found" if full.exists else "did not find"
    stack = full.stack
    yield full.event(
        StepKind.DFS_TRUNCATED,
        stack[-1] if stack else start,
        f"... the search continues similarly ... final state: DFS {outcome} "
        f"a path from {start} to {target}.",
    )
    return full.result()
