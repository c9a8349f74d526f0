"""Tests for the disjoint-set engine: find, traced find, truncation and union."""
from mstviz.engine.dsu import DisjointSet
from mstviz.engine.sequencer import StepLabel, drain
from mstviz.engine.step import NodeMark, StepKind


def _chain_dsu():
    """4 -> 3 -> 2 -> 1, built by hand so the chain is longer than rank allows."""
    dsu = DisjointSet(4)
    dsu.parent = [0, 1, 1, 2, 3]
    return dsu


def _run(dsu, node, compress=True, max_hops=8):
    events = []
    root = drain(
        dsu.trace_find(node, compress, max_hops),
        StepLabel(1, 1),
        lambda label, event: events.append(event),
    )
    return root, events


class TestFind:
    def test_initial_roots(self):
        dsu = DisjointSet(3)
        assert dsu.parent == [0, 1, 2, 3]
        assert dsu.rank == [0, 0, 0, 0]
        assert all(dsu.find(u) == u for u in range(1, 4))

    def test_find_without_compression_leaves_parents(self):
        dsu = _chain_dsu()
        assert dsu.find(4) == 1
        assert dsu.parent == [0, 1, 1, 2, 3]

    def test_find_with_compression_points_chain_at_root(self):
        dsu = _chain_dsu()
        assert dsu.find(4, compress=True) == 1
        assert dsu.parent == [0, 1, 1, 1, 1]

    def test_snapshots_are_copies(self):
        dsu = DisjointSet(2)
        snap = dsu.parent_snapshot()
        dsu.parent[2] = 1
        assert snap == (0, 1, 2)
        assert isinstance(dsu.rank_snapshot(), tuple)


class TestTracedFind:
    def test_root_node_emits_start_root_equivalent(self):
        dsu = DisjointSet(3)
        root, events = _run(dsu, 2)
        assert root == 2
        assert [e.kind for e in events] == [
            StepKind.FIND_START, StepKind.FIND_ROOT, StepKind.FIND_EQUIVALENT,
        ]

    def test_hops_and_compression(self):
        dsu = _chain_dsu()
        root, events = _run(dsu, 4, compress=True)
        assert root == 1
        assert [e.kind for e in events] == [
            StepKind.FIND_START,
            StepKind.FIND_HOP, StepKind.FIND_HOP, StepKind.FIND_HOP,
            StepKind.FIND_ROOT,
            StepKind.FIND_COMPRESS,
            StepKind.FIND_EQUIVALENT,
        ]
        assert [e.node for e in events if e.kind == StepKind.FIND_HOP] == [3, 2, 1]
        compress = events[5]
        assert compress.node_overlay == {
            4: NodeMark.COMPRESSED, 3: NodeMark.COMPRESSED, 1: NodeMark.ROOT,
        }
        assert dsu.parent == [0, 1, 1, 1, 1]

    def test_hop_overlay_marks_start_and_walked_node(self):
        dsu = _chain_dsu()
        _, events = _run(dsu, 4)
        first_hop = events[1]
        assert first_hop.node_overlay == {4: NodeMark.START, 3: NodeMark.WALK}

    def test_no_compress_step_when_disabled(self):
        dsu = _chain_dsu()
        root, events = _run(dsu, 4, compress=False)
        assert root == 1
        assert StepKind.FIND_COMPRESS not in [e.kind for e in events]
        assert dsu.parent == [0, 1, 1, 2, 3]

    def test_no_compress_step_when_already_flat(self):
        dsu = DisjointSet(3)
        dsu.parent = [0, 1, 1, 1]
        _, events = _run(dsu, 3, compress=True)
        assert StepKind.FIND_COMPRESS not in [e.kind for e in events]

    def test_equivalent_marks_start_against_root(self):
        dsu = _chain_dsu()
        _, events = _run(dsu, 4)
        assert events[-1].node_overlay == {4: NodeMark.EQUIVALENT, 1: NodeMark.ROOT}


class TestFindTruncation:
    def test_truncated_walk_reports_true_root(self):
        dsu = _chain_dsu()
        root, events = _run(dsu, 4, compress=False, max_hops=2)
        assert root == 1
        assert [e.kind for e in events] == [
            StepKind.FIND_START, StepKind.FIND_HOP, StepKind.FIND_HOP,
            StepKind.FIND_TRUNCATED,
        ]
        assert events[-1].node == 1
        assert "continues similarly" in events[-1].explanation

    def test_truncation_applies_compression(self):
        dsu = _chain_dsu()
        root, events = _run(dsu, 4, compress=True, max_hops=1)
        assert root == 1
        assert dsu.parent == [0, 1, 1, 1, 1]
        assert events[-1].node_overlay[1] == NodeMark.ROOT
        assert events[-1].node_overlay[4] == NodeMark.EQUIVALENT

    def test_exact_budget_is_not_truncated(self):
        dsu = _chain_dsu()
        _, events = _run(dsu, 4, max_hops=3)
        assert StepKind.FIND_TRUNCATED not in [e.kind for e in events]

    def test_event_count_bounded_by_budget(self):
        n = 40
        dsu = DisjointSet(n)
        dsu.parent = [0, 1] + list(range(1, n))  # i -> i - 1
        for max_hops in (1, 3, 10):
            root, events = _run(dsu, n, compress=False, max_hops=max_hops)
            assert root == 1
            assert len(events) == max_hops + 2


class TestUnion:
    def test_same_root_is_noop(self):
        dsu = DisjointSet(2)
        result = dsu.union(1, 1)
        assert not result.merged
        assert dsu.parent == [0, 1, 2]

    def test_equal_rank_attaches_second_under_first(self):
        dsu = DisjointSet(2)
        result = dsu.union(1, 2)
        assert result.merged
        assert (result.root, result.attached) == (1, 2)
        assert result.rank_increased and not result.swapped
        assert dsu.parent[2] == 1
        assert dsu.rank[1] == 1

    def test_lower_rank_is_swapped_under_higher(self):
        dsu = DisjointSet(3)
        dsu.union(1, 2)
        result = dsu.union(3, 1)
        assert result.swapped
        assert (result.root, result.attached) == (1, 3)
        assert not result.rank_increased
        assert dsu.parent[3] == 1
        assert dsu.rank[1] == 1

    def test_higher_rank_first_keeps_order(self):
        dsu = DisjointSet(3)
        dsu.union(1, 2)
        result = dsu.union(1, 3)
        assert not result.swapped
        assert result.root == 1
