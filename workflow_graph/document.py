from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .schema import EdgeDef, EdgeKind, GraphDef, NodeDef, NodeKind


# ============================================================================
# Base Configuration
# ============================================================================

class BaseConfig(BaseModel):
    """Base configuration with common settings"""
    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
        validate_assignment=True,
        populate_by_name=True,
    )


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ============================================================================
# State Schema & Reducers
# ============================================================================

class StateField(BaseConfig):
    name: str
    type: str
    required: bool = False
    description: Optional[str] = None


class StateSchema(BaseConfig):
    fields: List[StateField] = Field(default_factory=list)


class ReducerKind(str, Enum):
    """How concurrent updates to one state field are merged"""
    APPEND = "append"
    OVERWRITE = "overwrite"
    MERGE = "merge"
    CUSTOM = "custom"


class Reducer(BaseConfig):
    type: ReducerKind
    custom_code: Optional[str] = Field(default=None, alias="customCode")


# ============================================================================
# Nodes & Edges
# ============================================================================

class Position(BaseConfig):
    x: float = 0.0
    y: float = 0.0


class WorkflowNodeModel(BaseConfig):
    id: str
    type: NodeKind
    position: Position = Field(default_factory=Position)
    data: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('type', mode='before')
    @classmethod
    def validate_type(cls, v):
        """Accept both current and legacy node type names"""
        if isinstance(v, str):
            return NodeKind.from_string(v)
        return v

    def to_node_def(self) -> NodeDef:
        return NodeDef(
            id=self.id,
            kind=self.type,
            payload=dict(self.data),
            position=(self.position.x, self.position.y),
        )


class WorkflowEdgeModel(BaseConfig):
    id: str
    source: str
    target: str
    type: EdgeKind = EdgeKind.PLAIN
    label: Optional[str] = None
    condition: Optional[str] = None

    @field_validator('type', mode='before')
    @classmethod
    def validate_type(cls, v):
        if isinstance(v, str):
            return EdgeKind.from_string(v)
        return v

    def to_edge_def(self) -> EdgeDef:
        return EdgeDef(
            id=self.id,
            source=self.source,
            target=self.target,
            kind=self.type,
            label=self.label,
            condition=self.condition,
        )


# ============================================================================
# Workflow Document
# ============================================================================

class DocumentMetadata(BaseConfig):
    version: str = "1.0.0"
    created: str = Field(default_factory=_utc_now)
    modified: str = Field(default_factory=_utc_now)


class WorkflowDocument(BaseConfig):
    """A saved workflow: state schema, reducers and the node/edge graph"""
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    description: Optional[str] = ""
    state_schema: StateSchema = Field(default_factory=StateSchema, alias="stateSchema")
    reducers: Dict[str, Reducer] = Field(default_factory=dict)
    nodes: List[WorkflowNodeModel] = Field(default_factory=list)
    edges: List[WorkflowEdgeModel] = Field(default_factory=list)
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)

    @classmethod
    def new(cls, name: str) -> "WorkflowDocument":
        """Create an empty workflow with a fresh id and timestamps"""
        return cls(name=name)

    def touch(self) -> None:
        """Mark the document as modified now"""
        self.metadata.modified = _utc_now()

    def orphan_reducers(self) -> List[str]:
        """Reducer names that do not match any state field"""
        field_names = {f.name for f in self.state_schema.fields}
        return [name for name in self.reducers if name not in field_names]

    def to_graph_def(self) -> GraphDef:
        return GraphDef(
            nodes=[n.to_node_def() for n in self.nodes],
            edges=[e.to_edge_def() for e in self.edges],
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
