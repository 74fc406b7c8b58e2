from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class NodeKind(str, Enum):
    """Node kinds understood by the validator"""
    ENTRY = "entry"
    EXIT = "exit"
    COMPUTE = "compute"
    MODEL_CALL = "modelCall"
    EXTERNAL_CALL = "externalCall"
    BRANCH = "branch"

    @classmethod
    def from_string(cls, kind_str: str) -> "NodeKind":
        """Convert string to NodeKind, accepting the editor's legacy type names"""
        try:
            return cls(kind_str)
        except ValueError:
            aliases = {
                "start": cls.ENTRY,
                "end": cls.EXIT,
                "function": cls.COMPUTE,
                "llm": cls.MODEL_CALL,
                "tool": cls.EXTERNAL_CALL,
                "conditional": cls.BRANCH,
            }
            if kind_str in aliases:
                return aliases[kind_str]
            raise ValueError(f"Unknown node kind: {kind_str!r}")


class EdgeKind(str, Enum):
    PLAIN = "plain"
    CONDITIONAL = "conditional"

    @classmethod
    def from_string(cls, kind_str: str) -> "EdgeKind":
        if kind_str == "default":
            return cls.PLAIN
        try:
            return cls(kind_str)
        except ValueError:
            raise ValueError(f"Unknown edge kind: {kind_str!r}") from None


@dataclass
class NodeDef:
    id: str
    kind: NodeKind
    payload: Dict[str, Any] = field(default_factory=dict)
    position: Optional[Tuple[float, float]] = None


@dataclass
class EdgeDef:
    id: str
    source: str
    target: str
    kind: EdgeKind = EdgeKind.PLAIN
    label: Optional[str] = None
    condition: Optional[str] = None


@dataclass
class GraphDef:
    nodes: List[NodeDef]
    edges: List[EdgeDef]


@dataclass
class ParallelGroup:
    fan_out: str
    convergence: str
    members: List[str]


@dataclass
class Finding:
    message: str
    severity: str
    node_ids: Optional[List[str]] = None
    edge_ids: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"message": self.message, "severity": self.severity}
        if self.node_ids is not None:
            out["nodeIds"] = list(self.node_ids)
        if self.edge_ids is not None:
            out["edgeIds"] = list(self.edge_ids)
        return out


@dataclass
class ValidationReport:
    valid: bool
    errors: List[Finding] = field(default_factory=list)
    warnings: List[Finding] = field(default_factory=list)
    parallel_groups: List[List[str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "parallelGroups": [list(g) for g in self.parallel_groups],
        }
