"""Validated trace configuration, resolved once per trace invocation."""
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_FIND_HOPS = 8
DEFAULT_MAX_DFS_STEPS = 200


class TraceOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    detailed: bool = False
    compression: bool = True          # DSU only
    max_find_hops: int = Field(default=DEFAULT_MAX_FIND_HOPS, ge=1)   # DSU only
    max_dfs_steps: int = Field(default=DEFAULT_MAX_DFS_STEPS, ge=1)   # DFS only


def resolve_options(options: TraceOptions | dict | None) -> TraceOptions:
    """Accept an options value, a plain mapping of overrides, or nothing."""
    if options is None:
        return TraceOptions()
    if isinstance(options, TraceOptions):
        return options
    return TraceOptions(**options)
