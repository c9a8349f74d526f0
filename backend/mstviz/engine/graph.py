"""Graph data structures for the tracing engine."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Edge:
    id: str
    u: int
    v: int
    weight: float

    def endpoints(self) -> tuple[int, int]:
        return self.u, self.v

    def to_dict(self) -> dict:
        return {"id": self.id, "u": self.u, "v": self.v, "weight": self.weight}


@dataclass
class Graph:
    n: int = 0
    edges: list[Edge] = field(default_factory=list)
