"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings

from .engine.options import DEFAULT_MAX_DFS_STEPS, DEFAULT_MAX_FIND_HOPS


class Settings(BaseSettings):
    app_name: str = "MSTViz"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    log_level: str = "INFO"
    # Trace defaults applied when a request leaves an option unset
    default_max_find_hops: int = DEFAULT_MAX_FIND_HOPS
    default_max_dfs_steps: int = DEFAULT_MAX_DFS_STEPS
    # Request size guards
    max_nodes: int = 500
    max_edges: int = 2000

    model_config = {"env_prefix": "MSTVIZ_"}

    def trace_defaults(self) -> dict[str, int]:
        return {
            "max_find_hops": self.default_max_find_hops,
            "max_dfs_steps": self.default_max_dfs_steps,
        }


settings = Settings()
