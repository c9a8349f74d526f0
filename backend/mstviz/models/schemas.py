"""Pydantic schemas for API request/response models."""
from typing import Any
from pydantic import BaseModel


class EdgeSchema(BaseModel):
    id: str
    u: int
    v: int
    weight: int | float


class GraphSchema(BaseModel):
    n: int
    edges: list[EdgeSchema] = []


class TraceOptionsSchema(BaseModel):
    detailed: bool | None = None
    compression: bool | None = None
    max_find_hops: int | None = None
    max_dfs_steps: int | None = None


class TraceRequest(BaseModel):
    algorithm: str = "dsu"
    graph: GraphSchema
    options: TraceOptionsSchema = TraceOptionsSchema()


class TraceResponse(BaseModel):
    algorithm: str
    options: dict[str, Any]
    step_count: int
    mst_weight: int | float
    mst_edge_ids: list[str]
    steps: list[dict[str, Any]]


class ParseRequest(BaseModel):
    text: str


class ParseResponse(BaseModel):
    graph: GraphSchema


class AlgorithmInfo(BaseModel):
    name: str
    display_name: str
    description: str
    options: list[str]
    code: list[str]


class MstVariant(BaseModel):
    weight: int | float
    edge_ids: list[str]


class MstSummary(BaseModel):
    variants: dict[str, MstVariant]
    consistent: bool
