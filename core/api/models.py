from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from workflow_graph.document import WorkflowEdgeModel, WorkflowNodeModel


class APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GraphPayload(APIModel):
    nodes: List[WorkflowNodeModel] = Field(default_factory=list)
    edges: List[WorkflowEdgeModel] = Field(default_factory=list)


class FindingItem(APIModel):
    message: str
    severity: str
    node_ids: Optional[List[str]] = Field(default=None, alias="nodeIds")
    edge_ids: Optional[List[str]] = Field(default=None, alias="edgeIds")


class ValidationResponse(APIModel):
    valid: bool
    errors: List[FindingItem] = Field(default_factory=list)
    warnings: List[FindingItem] = Field(default_factory=list)
    parallel_groups: List[List[str]] = Field(default_factory=list, alias="parallelGroups")


class ParallelGroupsResponse(APIModel):
    groups: List[List[str]] = Field(default_factory=list)


class DepthResponse(APIModel):
    node_id: str = Field(alias="nodeId")
    depth: int
