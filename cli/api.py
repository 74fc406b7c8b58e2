from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse

from core.api import (
    DepthResponse,
    GraphPayload,
    ParallelGroupsResponse,
    ValidationResponse,
    build_validation_response,
    payload_to_graphdef,
)
from core.config import Settings, load_settings
from core.runtime.workflow_info import WorkflowInfo, load_and_validate
from workflow_graph.builder import build_nx_graph
from workflow_graph.depth import shortest_depth
from workflow_graph.parallel import find_parallel_groups
from workflow_graph.validator import validate_graph

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    logging.getLogger("workflow_graph").setLevel(settings.log_level)
    logger.setLevel(settings.log_level)

    startup_info: Optional[WorkflowInfo] = None
    if settings.workflow_document:
        startup_info = load_and_validate(settings.workflow_document)
        logger.info(
            f"Startup workflow '{startup_info.document.name}' valid={startup_info.report.valid}"
        )

    app = FastAPI(title="Workflow Graph Validator API")

    def _snapshot(body: GraphPayload):
        if len(body.nodes) > settings.max_nodes or len(body.edges) > settings.max_edges:
            logger.warning(
                f"Rejected graph with {len(body.nodes)} nodes / {len(body.edges)} edges "
                f"(limits {settings.max_nodes} / {settings.max_edges})"
            )
            raise HTTPException(status_code=413, detail="workflow graph exceeds configured size limits")
        return build_nx_graph(payload_to_graphdef(body))

    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        return RedirectResponse(url="/docs")

    @app.post("/validate", response_model=ValidationResponse, response_model_exclude_none=True)
    def validate(body: GraphPayload) -> ValidationResponse:
        report = validate_graph(_snapshot(body))
        logger.info(
            f"Validated {len(body.nodes)} nodes / {len(body.edges)} edges: valid={report.valid}, "
            f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
        )
        return build_validation_response(report)

    @app.post("/parallel-groups", response_model=ParallelGroupsResponse)
    def parallel_groups(body: GraphPayload) -> ParallelGroupsResponse:
        groups = [group.members for group in find_parallel_groups(_snapshot(body))]
        return ParallelGroupsResponse(groups=groups)

    @app.post("/depth/{node_id}", response_model=DepthResponse)
    def depth(node_id: str, body: GraphPayload) -> DepthResponse:
        return DepthResponse(node_id=node_id, depth=shortest_depth(_snapshot(body), node_id))

    @app.get("/workflow", response_model=ValidationResponse, response_model_exclude_none=True)
    def workflow() -> ValidationResponse:
        if startup_info is None:
            raise HTTPException(status_code=404, detail="no workflow document configured")
        return build_validation_response(startup_info.report)

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"ok": True}

    return app


app = create_app()
