from __future__ import annotations

import json
import os
from typing import Any, Dict

from .document import WorkflowDocument, WorkflowEdgeModel, WorkflowNodeModel
from .schema import GraphDef


def load_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_document(path: str) -> WorkflowDocument:
    raw = load_json(path)
    if not isinstance(raw, dict) or not raw:
        raise ValueError("JSON file is empty or not an object.")
    if "name" not in raw:
        # bare snapshots carry no name; fall back to the file name
        raw = {**raw, "name": os.path.splitext(os.path.basename(path))[0]}
    return WorkflowDocument.model_validate(raw)


def save_document(document: WorkflowDocument, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document.to_dict(), f, ensure_ascii=False, indent=2)


def normalize_raw_to_graphdef(raw: Dict[str, Any]) -> GraphDef:
    """Accept a full workflow document or a bare {"nodes", "edges"} snapshot."""
    if not isinstance(raw, dict) or not raw:
        raise ValueError("JSON file is empty or not an object.")
    if "nodes" not in raw:
        raise ValueError("Workflow JSON has no 'nodes' list.")

    nodes = [WorkflowNodeModel.model_validate(n) for n in raw.get("nodes") or []]
    edges = [WorkflowEdgeModel.model_validate(e) for e in raw.get("edges") or []]

    return GraphDef(
        nodes=[n.to_node_def() for n in nodes],
        edges=[e.to_edge_def() for e in edges],
    )
