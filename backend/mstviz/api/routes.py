"""REST API routes."""
import logging

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError as OptionsError

from ..config import settings
from ..engine.graph import Edge, Graph
from ..engine.options import TraceOptions
from ..engine.parser import GraphParseError, parse_graph_text
from ..engine.reference import all_variants
from ..engine.registry import TraceRegistry
from ..engine.validator import ValidationError, ensure_valid
from ..models.schemas import (
    AlgorithmInfo, EdgeSchema, GraphSchema, MstSummary, MstVariant,
    ParseRequest, ParseResponse, TraceOptionsSchema, TraceRequest, TraceResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _schema_to_graph(schema: GraphSchema) -> Graph:
    edges = [Edge(id=e.id, u=e.u, v=e.v, weight=e.weight) for e in schema.edges]
    return Graph(n=schema.n, edges=edges)


def _graph_to_schema(graph: Graph) -> GraphSchema:
    return GraphSchema(
        n=graph.n,
        edges=[EdgeSchema(id=e.id, u=e.u, v=e.v, weight=e.weight) for e in graph.edges],
    )


def _checked_graph(schema: GraphSchema) -> Graph:
    """Convert and validate; the tracer assumes a well-formed graph."""
    if schema.n > settings.max_nodes or len(schema.edges) > settings.max_edges:
        raise HTTPException(
            status_code=400,
            detail=[
                f"Graph too large: at most {settings.max_nodes} nodes and "
                f"{settings.max_edges} edges are accepted"
            ],
        )
    try:
        return ensure_valid(_schema_to_graph(schema))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors)


def _resolve_options(schema: TraceOptionsSchema) -> TraceOptions:
    values = {**settings.trace_defaults(), **schema.model_dump(exclude_none=True)}
    try:
        return TraceOptions(**values)
    except OptionsError as e:
        raise HTTPException(
            status_code=422,
            detail=[f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()],
        )


@router.get("/algorithms")
async def list_algorithms():
    """Return all registered tracer definitions."""
    return {
        name: AlgorithmInfo(
            name=defn.name,
            display_name=defn.display_name,
            description=defn.description,
            options=list(defn.options),
            code=list(defn.code),
        )
        for name, defn in TraceRegistry.all_definitions().items()
    }


@router.post("/parse", response_model=ParseResponse)
async def parse_graph(request: ParseRequest):
    try:
        graph = parse_graph_text(request.text)
    except GraphParseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ParseResponse(graph=_graph_to_schema(graph))


@router.post("/trace", response_model=TraceResponse)
async def trace(request: TraceRequest):
    """Build the full step sequence for one algorithm run."""
    try:
        builder = TraceRegistry.get(request.algorithm)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    graph = _checked_graph(request.graph)
    options = _resolve_options(request.options)

    steps = builder(graph, options)
    final = steps[-1]
    logger.info(
        "trace %s: n=%d m=%d -> %d steps, weight %s",
        request.algorithm, graph.n, len(graph.edges), len(steps), final.mst_weight,
    )
    return TraceResponse(
        algorithm=request.algorithm,
        options=options.model_dump(),
        step_count=len(steps),
        mst_weight=final.mst_weight,
        mst_edge_ids=list(final.mst_edge_ids),
        steps=[step.to_dict() for step in steps],
    )


@router.post("/mst", response_model=MstSummary)
async def mst_summary(schema: GraphSchema):
    """Untraced MST for every variant, to confirm they agree."""
    graph = _checked_graph(schema)
    variants = {
        name: MstVariant(weight=result.weight, edge_ids=list(result.edge_ids))
        for name, result in all_variants(graph).items()
    }
    weights = {v.weight for v in variants.values()}
    return MstSummary(variants=variants, consistent=len(weights) == 1)
