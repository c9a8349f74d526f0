"""Parse the plain-text graph format.

Line 1 holds ``N M``; each of the next ``M`` non-empty lines holds ``u v w``.
Edges get ids ``e0`` .. ``e{M-1}`` in input order.
"""
import math
import re

from .graph import Edge, Graph

# Plain ASCII decimal literals: no digit separators, no "inf" or "nan".
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class GraphParseError(ValueError):
    pass


def _to_int(token: str) -> int | None:
    if not _INT_RE.fullmatch(token):
        return None
    return int(token)


def _to_number(token: str) -> float | None:
    value = _to_int(token)
    if value is not None:
        return value
    if not _NUMBER_RE.fullmatch(token):
        return None
    number = float(token)
    return number if math.isfinite(number) else None


def parse_graph_text(text: str) -> Graph:
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise GraphParseError("Input is empty.")

    header = lines[0].split()
    if len(header) < 2:
        raise GraphParseError("Line 1 must contain N and M.")
    n, m = _to_int(header[0]), _to_int(header[1])
    if n is None or m is None or n <= 0 or m < 0:
        raise GraphParseError("N must be a positive integer and M a non-negative integer.")

    if len(lines) - 1 < m:
        raise GraphParseError(
            f"Missing edge lines: expected {m}, found {len(lines) - 1}."
        )

    edges: list[Edge] = []
    for i in range(m):
        line_no = i + 2
        parts = lines[i + 1].split()
        if len(parts) < 3:
            raise GraphParseError(f"Edge on line {line_no} must have the form 'u v w'.")
        u, v, w = _to_int(parts[0]), _to_int(parts[1]), _to_number(parts[2])
        if u is None or v is None or w is None:
            raise GraphParseError(f"Edge on line {line_no} has an invalid u, v or w.")
        if not (1 <= u <= n and 1 <= v <= n):
            raise GraphParseError(f"Endpoints on line {line_no} must lie in [1, {n}].")
        edges.append(Edge(id=f"e{i}", u=u, v=v, weight=w))

    return Graph(n=n, edges=edges)
