from __future__ import annotations

from workflow_graph.schema import Finding, GraphDef, ValidationReport

from .models import FindingItem, GraphPayload, ValidationResponse


def payload_to_graphdef(payload: GraphPayload) -> GraphDef:
    return GraphDef(
        nodes=[n.to_node_def() for n in payload.nodes],
        edges=[e.to_edge_def() for e in payload.edges],
    )


def _finding_item(finding: Finding) -> FindingItem:
    return FindingItem(
        message=finding.message,
        severity=finding.severity,
        node_ids=finding.node_ids,
        edge_ids=finding.edge_ids,
    )


def build_validation_response(report: ValidationReport) -> ValidationResponse:
    return ValidationResponse(
        valid=report.valid,
        errors=[_finding_item(e) for e in report.errors],
        warnings=[_finding_item(w) for w in report.warnings],
        parallel_groups=report.parallel_groups,
    )
