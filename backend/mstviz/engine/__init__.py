"""Register the trace builders on import."""
from .graph import Edge, Graph
from .kruskal_dfs import build_dfs_trace
from .kruskal_dsu import build_dsu_trace
from .options import TraceOptions
from .registry import TraceRegistry
from .step import Step

__all__ = [
    "Edge", "Graph", "Step", "TraceOptions", "TraceRegistry",
    "build_dfs_trace", "build_dsu_trace",
]
