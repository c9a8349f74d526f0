"""Kruskal trace builder using depth-first reachability for cycle checks."""
import logging

from .graph import Edge, Graph
from .options import TraceOptions, resolve_options
from .ordering import sort_edges
from .pseudocode import DFS_HIGHLIGHTS, KRUSKAL_DFS_CODE
from .reachability import (
    Adjacency, ReachabilityResult, SearchEvent,
    add_edge, empty_adjacency, has_path, trace_path,
)
from .registry import TraceRegistry
from .sequencer import StepLabel, StepSequencer, drain
from .step import DfsSnapshot, Step, StepKind

logger = logging.getLogger(__name__)


def _check_edge(
    seq: StepSequencer,
    adjacency: Adjacency,
    edge: Edge,
    label: StepLabel,
    options: TraceOptions,
) -> tuple[ReachabilityResult, StepLabel]:
    if not options.detailed:
        return has_path(adjacency, edge.u, edge.v), label

    def handle(hop: StepLabel, event: SearchEvent) -> None:
        seq.emit(
            hop, event.kind, event.explanation,
            dfs=DfsSnapshot(
                source=edge.u,
                target=edge.v,
                current=event.current,
                neighbors=event.neighbors,
                visited=event.visited,
                stack=event.stack,
                edge_overlay=event.edge_overlay,
            ),
        )

    phase = label.next_phase()
    events = trace_path(adjacency, edge.u, edge.v, options.max_dfs_steps)
    return drain(events, phase, handle), phase


@TraceRegistry.register(
    "dfs",
    display_name="Kruskal + DFS",
    code=KRUSKAL_DFS_CODE,
    options=("detailed", "max_dfs_steps"),
)
def build_dfs_trace(
    graph: Graph, options: TraceOptions | dict | None = None,
) -> list[Step]:
    """Kruskal's algorithm with DFS cycle detection, as a step sequence."""
    options = resolve_options(options)
    ordered = sort_edges(graph.edges)
    seq = StepSequencer(ordered, DFS_HIGHLIGHTS)
    adjacency = empty_adjacency(graph.n)

    label = StepLabel().next_major()
    seq.emit(
        label, StepKind.START,
        "Start Kruskal (DFS variant): sort the edges by weight (ties by id) "
        "and start from an empty adjacency list.",
    )

    for edge in ordered:
        label = label.next_major()
        seq.consider(edge)
        seq.emit(
            label, StepKind.CONSIDER,
            f"Consider edge {edge.id} ({edge.u}, {edge.v}) with weight {edge.weight}.",
            dfs=DfsSnapshot(source=edge.u, target=edge.v, edge_overlay={}),
        )

        result, phase = _check_edge(seq, adjacency, edge, label, options)
        terminal = phase.next_phase()
        snapshot = DfsSnapshot(
            source=edge.u, target=edge.v, visited=result.visited, edge_overlay={},
        )
        if result.exists:
            seq.reject(edge)
            seq.emit(
                terminal, StepKind.REJECT,
                f"DFS found a path from {edge.u} to {edge.v} in the current tree; "
                "adding the edge would close a cycle, so it is rejected.",
                dfs=snapshot,
            )
        else:
            add_edge(adjacency, edge)
            seq.accept(edge)
            seq.emit(
                terminal, StepKind.ACCEPT,
                f"DFS found no path from {edge.u} to {edge.v}, so the edge creates no "
                f"cycle and joins the tree. MST weight is now {seq.mst_weight}.",
                dfs=snapshot,
            )

    label = label.next_major()
    seq.release()
    forest = graph.n > 0 and len(seq.mst_edge_ids) < graph.n - 1
    seq.emit(
        label, StepKind.END,
        f"Kruskal (DFS variant) finished. Total weight of the minimum spanning "
        f"{'forest' if forest else 'tree'}: {seq.mst_weight}.",
    )

    logger.debug(
        "dfs trace: %d edges, %d steps, weight %s (detailed=%s)",
        len(ordered), len(seq.steps), seq.mst_weight, options.detailed,
    )
    return seq.steps
