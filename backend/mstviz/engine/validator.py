"""Graph validation: node count, edge ids, endpoints and weights."""
import math
from numbers import Real

from .graph import Graph


class ValidationError(Exception):
    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Graph validation failed: {errors}")


def validate_graph(graph: Graph) -> list[str]:
    """Validate a graph, returning a list of error messages (empty = valid)."""
    if not isinstance(graph.n, int) or graph.n < 0:
        return [f"Node count must be a non-negative integer, got {graph.n!r}"]
    errors: list[str] = []
    errors.extend(_check_ids(graph))
    errors.extend(_check_endpoints(graph))
    errors.extend(_check_weights(graph))
    return errors


def ensure_valid(graph: Graph) -> Graph:
    errors = validate_graph(graph)
    if errors:
        raise ValidationError(errors)
    return graph


def _check_ids(graph: Graph) -> list[str]:
    errors: list[str] = []
    seen: set[str] = set()
    for edge in graph.edges:
        if not edge.id:
            errors.append("Edge with empty id")
        elif edge.id in seen:
            errors.append(f"Duplicate edge id: {edge.id}")
        seen.add(edge.id)
    return errors


def _check_endpoints(graph: Graph) -> list[str]:
    errors: list[str] = []
    for edge in graph.edges:
        for end in edge.endpoints():
            if not isinstance(end, int) or not 1 <= end <= graph.n:
                errors.append(
                    f"Edge {edge.id}: endpoint {end!r} out of range [1, {graph.n}]"
                )
    return errors


def _check_weights(graph: Graph) -> list[str]:
    errors: list[str] = []
    for edge in graph.edges:
        w = edge.weight
        if isinstance(w, bool) or not isinstance(w, Real) or not math.isfinite(w):
            errors.append(f"Edge {edge.id}: weight {w!r} is not a finite number")
    return errors
