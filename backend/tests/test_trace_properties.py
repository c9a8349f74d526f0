"""Cross-engine properties that hold for every graph and option combination."""
import json

import pytest

from mstviz.engine.kruskal_dfs import build_dfs_trace
from mstviz.engine.kruskal_dsu import build_dsu_trace
from mstviz.engine.options import TraceOptions
from mstviz.engine.reference import all_variants, kruskal_dfs, kruskal_dsu
from mstviz.engine.step import EdgeStatus, StepKind

from conftest import random_graph

BUILDERS = [build_dsu_trace, build_dfs_trace]

OPTION_GRID = [
    TraceOptions(detailed=detailed, compression=compression)
    for detailed in (False, True)
    for compression in (False, True)
]

SEEDS = list(range(12))


def _all_traces(graph):
    for builder in BUILDERS:
        for options in OPTION_GRID:
            yield builder, options, builder(graph, options)


class TestScenarios:
    def test_five_node_weight(self, five_node_graph):
        for _, _, steps in _all_traces(five_node_graph):
            assert steps[-1].mst_weight == 7

    def test_ties_follow_id_order(self, tie_graph):
        for _, _, steps in _all_traces(tie_graph):
            assert steps[-1].mst_weight == 10
            assert steps[-1].mst_edge_ids == ("a", "b")
            assert steps[-1].edge_status["c"] == EdgeStatus.REJECTED

    def test_disconnected_forest(self, forest_graph):
        for _, _, steps in _all_traces(forest_graph):
            assert steps[-1].mst_weight == 2
            assert len(steps[-1].mst_edge_ids) == 2
            assert "forest" in steps[-1].explanation

    def test_single_node_no_edges(self, single_node_graph):
        for _, _, steps in _all_traces(single_node_graph):
            assert [s.kind for s in steps] == [StepKind.START, StepKind.END]
            assert [s.label for s in steps] == ["1", "2"]
            assert steps[-1].mst_weight == 0

    def test_empty_graph(self):
        from mstviz.engine.graph import Graph
        for _, _, steps in _all_traces(Graph(n=0, edges=[])):
            assert len(steps) == 2
            assert steps[-1].mst_weight == 0


class TestInvariants:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_engines_agree_with_reference(self, seed):
        graph = random_graph(seed)
        expected = kruskal_dsu(graph)
        for _, _, steps in _all_traces(graph):
            assert steps[-1].mst_weight == expected.weight
            assert steps[-1].mst_edge_ids == expected.edge_ids

    @pytest.mark.parametrize("seed", SEEDS)
    def test_weight_increases_exactly_on_accept(self, seed):
        graph = random_graph(seed)
        for _, _, steps in _all_traces(graph):
            for prev, step in zip(steps, steps[1:]):
                delta = step.mst_weight - prev.mst_weight
                if step.kind == StepKind.ACCEPT:
                    assert delta == step.current_edge.weight
                    assert step.edge_status[step.current_edge.id] == EdgeStatus.CHOSEN
                else:
                    assert delta == 0

    @pytest.mark.parametrize("seed", SEEDS)
    def test_at_most_one_current_edge(self, seed):
        graph = random_graph(seed)
        for _, _, steps in _all_traces(graph):
            for step in steps:
                current = [k for k, v in step.edge_status.items() if v == EdgeStatus.CURRENT]
                assert len(current) <= 1

    @pytest.mark.parametrize("seed", SEEDS[:4])
    def test_deterministic(self, seed):
        for builder in BUILDERS:
            for options in OPTION_GRID:
                first = [s.to_dict() for s in builder(random_graph(seed), options)]
                second = [s.to_dict() for s in builder(random_graph(seed), options)]
                assert json.dumps(first) == json.dumps(second)

    def test_sequence_ids_are_monotonic(self, five_node_graph):
        for _, _, steps in _all_traces(five_node_graph):
            assert [s.sequence_id for s in steps] == list(range(1, len(steps) + 1))

    def test_steps_share_no_containers(self, five_node_graph):
        for _, _, steps in _all_traces(five_node_graph):
            ids = [id(s.edge_status) for s in steps]
            assert len(set(ids)) == len(ids)
            steps[1].edge_status["e0"] = EdgeStatus.REJECTED
            assert steps[2].edge_status["e0"] != EdgeStatus.REJECTED


class TestTruncationAgreement:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_small_budgets_match_large(self, seed):
        graph = random_graph(seed, n=12, m=30)
        for compression in (False, True):
            short = build_dsu_trace(graph, TraceOptions(
                detailed=True, compression=compression, max_find_hops=1,
            ))
            full = build_dsu_trace(graph, TraceOptions(
                detailed=True, compression=compression, max_find_hops=100,
            ))
            assert short[-1].mst_edge_ids == full[-1].mst_edge_ids
        short = build_dfs_trace(graph, TraceOptions(detailed=True, max_dfs_steps=1))
        full = build_dfs_trace(graph, TraceOptions(detailed=True, max_dfs_steps=10_000))
        assert short[-1].mst_edge_ids == full[-1].mst_edge_ids

    def test_find_steps_bounded_per_call(self):
        graph = random_graph(99, n=30, m=80)
        max_hops = 2
        steps = build_dsu_trace(graph, TraceOptions(
            detailed=True, compression=False, max_find_hops=max_hops,
        ))
        per_phase: dict[str, int] = {}
        for step in steps:
            parts = step.label.split(".")
            if len(parts) == 3:
                key = ".".join(parts[:2])
                per_phase[key] = per_phase.get(key, 0) + 1
        assert per_phase
        assert max(per_phase.values()) <= max_hops + 4

    def test_dfs_steps_bounded_per_call(self):
        graph = random_graph(7, n=30, m=80)
        max_steps = 4
        steps = build_dfs_trace(graph, TraceOptions(detailed=True, max_dfs_steps=max_steps))
        per_phase: dict[str, int] = {}
        for step in steps:
            parts = step.label.split(".")
            if len(parts) == 3:
                key = ".".join(parts[:2])
                per_phase[key] = per_phase.get(key, 0) + 1
        assert max(per_phase.values()) <= max_steps + 1


class TestReference:
    def test_variants_agree(self, five_node_graph):
        results = all_variants(five_node_graph)
        assert {r.weight for r in results.values()} == {7}
        assert kruskal_dfs(five_node_graph).edge_ids == ("e0", "e2", "e3", "e5")

    @pytest.mark.parametrize("seed", SEEDS)
    def test_variants_agree_on_random_graphs(self, seed):
        results = all_variants(random_graph(seed))
        assert len({r.edge_ids for r in results.values()}) == 1
