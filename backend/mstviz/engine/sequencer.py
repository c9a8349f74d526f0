"""Step numbering, hierarchical labels and snapshot bookkeeping.

Both trace builders drive the same top-level loop through a
``StepSequencer``. Labels are plain immutable values that the builder
advances explicitly and hands to every ``emit`` call:

    "3"      top-level step of major 3 (e.g. "consider edge")
    "3.1"    opening step of phase 1 (start of find(u))
    "3.1.2"  major 3, phase 1 (find of u), second hop
    "3.3"    the accept/reject step that closes major 3
"""
from collections.abc import Generator, Mapping
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .graph import Edge
from .step import DfsSnapshot, DsuSnapshot, EdgeStatus, Step, StepKind

E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class StepLabel:
    major: int = 0
    phase: int = 0
    hop: int = 0

    def next_major(self) -> "StepLabel":
        return StepLabel(self.major + 1)

    def next_phase(self) -> "StepLabel":
        return StepLabel(self.major, self.phase + 1)

    def next_hop(self) -> "StepLabel":
        return StepLabel(self.major, self.phase, self.hop + 1)

    def __str__(self) -> str:
        if self.phase == 0:
            return str(self.major)
        if self.hop == 0:
            return f"{self.major}.{self.phase}"
        return f"{self.major}.{self.phase}.{self.hop}"


class StepSequencer:
    """Owns the running MST snapshot and appends immutable steps."""

    def __init__(
        self,
        sorted_edges: list[Edge],
        highlights: Mapping[StepKind, tuple[int, ...]],
    ):
        self._highlights = highlights
        self.sorted_edge_ids: tuple[str, ...] = tuple(e.id for e in sorted_edges)
        self.edge_status: dict[str, EdgeStatus] = {
            e.id: EdgeStatus.NORMAL for e in sorted_edges
        }
        self.mst_edge_ids: list[str] = []
        self.mst_weight: float = 0
        self.current_edge: Edge | None = None
        self.steps: list[Step] = []

    def consider(self, edge: Edge) -> None:
        for edge_id, status in self.edge_status.items():
            if status is EdgeStatus.CURRENT:
                self.edge_status[edge_id] = EdgeStatus.NORMAL
        self.edge_status[edge.id] = EdgeStatus.CURRENT
        self.current_edge = edge

    def accept(self, edge: Edge) -> None:
        self.edge_status[edge.id] = EdgeStatus.CHOSEN
        self.mst_edge_ids.append(edge.id)
        self.mst_weight += edge.weight

    def reject(self, edge: Edge) -> None:
        self.edge_status[edge.id] = EdgeStatus.REJECTED

    def release(self) -> None:
        self.current_edge = None

    def emit(
        self,
        label: StepLabel,
        kind: StepKind,
        explanation: str,
        dsu: DsuSnapshot | None = None,
        dfs: DfsSnapshot | None = None,
    ) -> Step:
        step = Step(
            sequence_id=len(self.steps) + 1,
            label=str(label),
            kind=kind,
            current_edge=self.current_edge,
            edge_status=dict(self.edge_status),
            sorted_edge_ids=self.sorted_edge_ids,
            mst_edge_ids=tuple(self.mst_edge_ids),
            mst_weight=self.mst_weight,
            explanation=explanation,
            highlighted_lines=self._highlights.get(kind, ()),
            dsu=dsu,
            dfs=dfs,
        )
        self.steps.append(step)
        return step


def drain(
    events: Generator[E, Any, R],
    phase: StepLabel,
    handle: Callable[[StepLabel, E], Any],
    headed: bool = False,
) -> R:
    """Hand each event of a traced engine call to ``handle`` with its hop label.

    Hops are numbered from 1 within ``phase``. With ``headed`` the first event
    opens the phase and carries the bare phase label, so the hop numbers
    that follow count from the first real hop. Returns the engine result.
    """
    label = phase
    first = True
    while True:
        try:
            event = next(events)
        except StopIteration as stop:
            return stop.value
        if not (headed and first):
            label = label.next_hop()
        first = False
        handle(label, event)
