from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Allow running `python backend/app.py` from repo root.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from mst_visualizer.errors import MSTVisualizerError
from mst_visualizer.graph import Graph
from mst_visualizer.spaces import GraphParams, build_random_circle_graph
from mst_visualizer.steps import ALGORITHM_CHOICES, generate

log = logging.getLogger(__name__)

MAX_NODES = 60


class NodePayload(BaseModel):
    id: int = Field(ge=0)
    x: float = 0.0
    y: float = 0.0
    label: Optional[str] = None


class EdgePayload(BaseModel):
    id: Optional[str] = None
    source: int = Field(ge=0)
    target: int = Field(ge=0)
    weight: int
    status: str = "unvisited"


class GraphPayload(BaseModel):
    nodes: List[NodePayload] = Field(default_factory=list, max_length=MAX_NODES)
    edges: List[EdgePayload] = Field(default_factory=list)


class GraphParamsRequest(BaseModel):
    node_count: int = Field(default=6, ge=1, le=MAX_NODES)
    density: float = Field(default=0.5, ge=0.0, le=1.0)
    min_weight: int = Field(default=1, ge=1)
    max_weight: int = Field(default=20, ge=1)
    width: float = Field(default=500.0, gt=0)
    height: float = Field(default=400.0, gt=0)
    seed: Optional[int] = None


class StepsRequest(BaseModel):
    graph: GraphPayload
    algorithm: str = Field(default="prims")


def _to_graph(payload: GraphPayload) -> Graph:
    return Graph.from_dict(payload.model_dump(exclude_none=True))


app = FastAPI(title="MST Visualizer API", version="0.1.0")

cors_raw = os.environ.get("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
cors_list = [c.strip() for c in cors_raw.split(",") if c.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_list or ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/algorithms")
def list_algorithms() -> Dict[str, Any]:
    return {"algorithms": list(ALGORITHM_CHOICES)}


@app.post("/graph/random")
def random_graph(req: GraphParamsRequest) -> Dict[str, Any]:
    try:
        params = GraphParams(
            node_count=req.node_count,
            density=req.density,
            min_weight=req.min_weight,
            max_weight=req.max_weight,
        )
        graph = build_random_circle_graph(params, width=req.width, height=req.height, seed=req.seed)
        return {"graph": graph.to_dict()}
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@app.post("/steps")
def build_steps(req: StepsRequest) -> Dict[str, Any]:
    try:
        graph = _to_graph(req.graph)
        result = generate(graph, req.algorithm)  # type: ignore[arg-type]
    except (MSTVisualizerError, ValueError, KeyError) as e:
        log.info("Rejected /steps request: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    out = result.to_dict()
    out["graph"] = graph.snapshot().to_dict()
    return out


@app.post("/components")
def components(req: GraphPayload) -> Dict[str, Any]:
    try:
        graph = _to_graph(req)
    except (MSTVisualizerError, ValueError, KeyError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    comps = graph.connected_components()
    return {"components": comps, "connected": len(comps) <= 1}
