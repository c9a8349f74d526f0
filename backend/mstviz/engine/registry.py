"""Registry mapping algorithm names to trace builders."""
from dataclasses import dataclass
from typing import Callable

from .step import Step

TraceBuilder = Callable[..., list[Step]]


@dataclass(frozen=True)
class TracerDefinition:
    """Serializable tracer description sent to the frontend."""
    name: str
    display_name: str
    description: str
    code: tuple[str, ...]
    options: tuple[str, ...]


class TraceRegistry:
    """Class-level registry of ``build_*_trace`` functions."""

    _builders: dict[str, TraceBuilder] = {}
    _definitions: dict[str, TracerDefinition] = {}

    @classmethod
    def register(
        cls,
        name: str,
        display_name: str = "",
        description: str = "",
        code: tuple[str, ...] = (),
        options: tuple[str, ...] = ("detailed",),
    ):
        """Decorator to register a trace builder.

        Usage:
            @TraceRegistry.register("dsu", display_name="Kruskal + DSU")
            def build_dsu_trace(graph, options=None):
                ...
        """
        def decorator(builder: TraceBuilder) -> TraceBuilder:
            cls._builders[name] = builder
            cls._definitions[name] = TracerDefinition(
                name=name,
                display_name=display_name or name,
                description=description or (builder.__doc__ or "").strip().split("\n")[0],
                code=code,
                options=options,
            )
            return builder
        return decorator

    @classmethod
    def get(cls, name: str) -> TraceBuilder:
        if name not in cls._builders:
            raise KeyError(f"Unknown algorithm: {name}")
        return cls._builders[name]

    @classmethod
    def all_definitions(cls) -> dict[str, TracerDefinition]:
        return dict(cls._definitions)
