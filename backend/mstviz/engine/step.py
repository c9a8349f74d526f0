"""Immutable step records emitted by the trace builders.

A ``Step`` is a self-contained snapshot: every container it holds is a fresh
copy (tuples, or dicts built for that step alone), so a renderer can jump to
any position in the sequence without replaying the ones before it.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .graph import Edge


class EdgeStatus(str, Enum):
    NORMAL = "normal"
    CURRENT = "current"
    CHOSEN = "chosen"
    REJECTED = "rejected"


class NodeMark(str, Enum):
    """Overlay colours for nodes touched by a traced ``find``."""
    START = "start"
    WALK = "walk"
    ROOT = "root"
    COMPRESSED = "compressed"
    EQUIVALENT = "equivalent"


class EdgeMark(str, Enum):
    """Overlay colours for MST edges touched by a traced DFS."""
    CANDIDATE = "candidate"
    ACTIVE = "active"
    DEAD = "dead"


class StepKind(str, Enum):
    START = "start"
    CONSIDER = "consider"
    ACCEPT = "accept"
    REJECT = "reject"
    END = "end"
    # Disjoint-set micro-steps
    FIND_START = "find_start"
    FIND_HOP = "find_hop"
    FIND_ROOT = "find_root"
    FIND_COMPRESS = "find_compress"
    FIND_EQUIVALENT = "find_equivalent"
    FIND_TRUNCATED = "find_truncated"
    # Reachability micro-steps
    DFS_ENTER = "dfs_enter"
    DFS_EXPLORE = "dfs_explore"
    DFS_DESCEND = "dfs_descend"
    DFS_BACKTRACK = "dfs_backtrack"
    DFS_FOUND = "dfs_found"
    DFS_TRUNCATED = "dfs_truncated"


@dataclass(frozen=True)
class DsuSnapshot:
    parent: tuple[int, ...]
    rank: tuple[int, ...]
    focus: tuple[int, ...] = ()
    node_overlay: dict[int, NodeMark] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "parent": list(self.parent),
            "rank": list(self.rank),
            "focus": list(self.focus),
            "node_overlay": {
                str(node): mark.value
                for node, mark in (self.node_overlay or {}).items()
            },
        }


@dataclass(frozen=True)
class DfsSnapshot:
    source: int
    target: int
    current: int | None = None
    neighbors: tuple[int, ...] = ()
    visited: tuple[int, ...] = ()
    stack: tuple[int, ...] = ()
    edge_overlay: dict[str, EdgeMark] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "current": self.current,
            "neighbors": list(self.neighbors),
            "visited": list(self.visited),
            "stack": list(self.stack),
            "edge_overlay": {
                edge_id: mark.value
                for edge_id, mark in (self.edge_overlay or {}).items()
            },
        }


@dataclass(frozen=True)
class Step:
    sequence_id: int
    label: str
    kind: StepKind
    current_edge: Edge | None
    edge_status: dict[str, EdgeStatus]
    sorted_edge_ids: tuple[str, ...]
    mst_edge_ids: tuple[str, ...]
    mst_weight: float
    explanation: str
    highlighted_lines: tuple[int, ...] = ()
    dsu: DsuSnapshot | None = None
    dfs: DfsSnapshot | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready rendering; enum members become their string values."""
        return {
            "sequence_id": self.sequence_id,
            "label": self.label,
            "kind": self.kind.value,
            "current_edge": self.current_edge.to_dict() if self.current_edge else None,
            "edge_status": {k: v.value for k, v in self.edge_status.items()},
            "sorted_edge_ids": list(self.sorted_edge_ids),
            "mst_edge_ids": list(self.mst_edge_ids),
            "mst_weight": self.mst_weight,
            "explanation": self.explanation,
            "highlighted_lines": list(self.highlighted_lines),
            "dsu": self.dsu.to_dict() if self.dsu else None,
            "dfs": self.dfs.to_dict() if self.dfs else None,
        }
