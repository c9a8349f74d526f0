"""Kruskal trace builder using the disjoint-set engine for cycle checks."""
import logging

from .dsu import DisjointSet, FindEvent, UnionResult
from .graph import Edge, Graph
from .options import TraceOptions, resolve_options
from .ordering import sort_edges
from .pseudocode import DSU_HIGHLIGHTS, KRUSKAL_DSU_CODE
from .registry import TraceRegistry
from .sequencer import StepLabel, StepSequencer, drain
from .step import DsuSnapshot, NodeMark, Step, StepKind

logger = logging.getLogger(__name__)


def _snapshot(
    dsu: DisjointSet,
    focus: tuple[int, ...] = (),
    overlay: dict[int, NodeMark] | None = None,
) -> DsuSnapshot:
    return DsuSnapshot(
        parent=dsu.parent_snapshot(),
        rank=dsu.rank_snapshot(),
        focus=focus,
        node_overlay=dict(overlay or {}),
    )


def _describe_union(result: UnionResult, rank: list[int]) -> str:
    root, attached = result.root, result.attached
    if result.rank_increased:
        return (
            f"Ranks are equal, so {attached} is attached under {root} "
            f"and rank[{root}] grows to {rank[root]}."
        )
    if result.swapped:
        return (
            f"rank[{root}] > rank[{attached}], so the roots are swapped "
            f"and {attached} is attached under {root}."
        )
    return f"rank[{root}] > rank[{attached}], so {attached} is attached under {root}."


def _find_roots(
    seq: StepSequencer,
    dsu: DisjointSet,
    edge: Edge,
    label: StepLabel,
    options: TraceOptions,
) -> tuple[int, int, StepLabel]:
    """Run the two ``find`` calls for ``edge``; return both roots and the last phase."""
    if not options.detailed:
        root_u = dsu.find(edge.u, compress=options.compression)
        root_v = dsu.find(edge.v, compress=options.compression)
        return root_u, root_v, label

    def handle(hop: StepLabel, event: FindEvent) -> None:
        seq.emit(
            hop, event.kind, event.explanation,
            dsu=_snapshot(dsu, (event.start, event.node), event.node_overlay),
        )

    roots = []
    phase = label
    for endpoint in (edge.u, edge.v):
        phase = phase.next_phase()
        events = dsu.trace_find(endpoint, options.compression, options.max_find_hops)
        roots.append(drain(events, phase, handle, headed=True))
    return roots[0], roots[1], phase


@TraceRegistry.register(
    "dsu",
    display_name="Kruskal + Disjoint Set",
    code=KRUSKAL_DSU_CODE,
    options=("detailed", "compression", "max_find_hops"),
)
def build_dsu_trace(
    graph: Graph, options: TraceOptions | dict | None = None,
) -> list[Step]:
    """Kruskal's algorithm with union-find cycle detection, as a step sequence."""
    options = resolve_options(options)
    ordered = sort_edges(graph.edges)
    seq = StepSequencer(ordered, DSU_HIGHLIGHTS)
    dsu = DisjointSet(graph.n)

    label = StepLabel().next_major()
    seq.emit(
        label, StepKind.START,
        "Start Kruskal: sort the edges by weight (ties by id) and make every "
        "node the root of its own set.",
        dsu=_snapshot(dsu),
    )

    for edge in ordered:
        label = label.next_major()
        seq.consider(edge)
        seq.emit(
            label, StepKind.CONSIDER,
            f"Consider edge {edge.id} ({edge.u}, {edge.v}) with weight {edge.weight}.",
            dsu=_snapshot(dsu, (edge.u, edge.v)),
        )

        root_u, root_v, phase = _find_roots(seq, dsu, edge, label, options)
        terminal = phase.next_phase()
        result = dsu.union(root_u, root_v)
        if result.merged:
            seq.accept(edge)
            seq.emit(
                terminal, StepKind.ACCEPT,
                f"find({edge.u}) = {root_u} and find({edge.v}) = {root_v} differ, "
                f"so the edge joins two components. {_describe_union(result, dsu.rank)} "
                f"MST weight is now {seq.mst_weight}.",
                dsu=_snapshot(
                    dsu, (result.root, result.attached),
                    {result.root: NodeMark.ROOT, result.attached: NodeMark.EQUIVALENT},
                ),
            )
        else:
            seq.reject(edge)
            seq.emit(
                terminal, StepKind.REJECT,
                f"find({edge.u}) = find({edge.v}) = {root_u}: both ends are already "
                "in the same set, so the edge would close a cycle and is rejected.",
                dsu=_snapshot(dsu, (root_u,), {root_u: NodeMark.ROOT}),
            )

    label = label.next_major()
    seq.release()
    forest = graph.n > 0 and len(seq.mst_edge_ids) < graph.n - 1
    seq.emit(
        label, StepKind.END,
        f"Kruskal finished. Total weight of the minimum spanning "
        f"{'forest' if forest else 'tree'}: {seq.mst_weight}.",
        dsu=_snapshot(dsu),
    )

    logger.debug(
        "dsu trace: %d edges, %d steps, weight %s (detailed=%s, compression=%s)",
        len(ordered), len(seq.steps), seq.mst_weight,
        options.detailed, options.compression,
    )
    return seq.steps
