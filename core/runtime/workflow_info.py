from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from workflow_graph.document import WorkflowDocument
from workflow_graph.graph_builder import WorkflowGraphBuilder
from workflow_graph.schema import ValidationReport


@dataclass
class WorkflowInfo:
    document: WorkflowDocument
    graph: nx.MultiDiGraph
    report: ValidationReport


def load_and_validate(json_path: str, strict: bool = False) -> WorkflowInfo:
    """Load a workflow document from JSON, build its graph, validate, and return the bundle.

    With strict set, a document that fails validation raises ValueError;
    otherwise the report is returned and warnings or errors are left to the caller.
    """
    gb = WorkflowGraphBuilder()
    if not gb.load_from_json(json_path):
        raise ValueError(f"Invalid JSON or failed to load: {json_path}")
    valid = gb.build_graph()
    if strict and not valid:
        messages = "; ".join(e.message for e in gb.report.errors)
        raise ValueError(f"Workflow validation failed: {messages}")

    return WorkflowInfo(
        document=gb.document,
        graph=gb.graph,
        report=gb.report,
    )
