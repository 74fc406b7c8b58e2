from __future__ import annotations

import logging
from typing import List

import networkx as nx

from .builder import nodes_of_kind
from .cycles import cycle_edge_ids, detect_cycles
from .parallel import find_parallel_groups
from .reachability import unreachable_from
from .schema import Finding, NodeKind, ValidationReport
from .structure import dead_end_nodes, disconnected_nodes

logger = logging.getLogger(__name__)

ERROR = "error"
WARNING = "warning"


def validate_graph(g: nx.MultiDiGraph) -> ValidationReport:
    warnings: List[Finding] = []
    errors: List[Finding] = []

    entry_nodes = nodes_of_kind(g, NodeKind.ENTRY)
    if not entry_nodes:
        errors.append(Finding("Workflow must have at least one entry node", ERROR))
    elif len(entry_nodes) > 1:
        warnings.append(Finding(
            "Multiple entry nodes detected. Only one will be used.",
            WARNING,
            node_ids=entry_nodes,
        ))

    # an empty graph only reports the missing entry node
    exit_nodes = nodes_of_kind(g, NodeKind.EXIT)
    if not exit_nodes and g.number_of_nodes() > 0:
        warnings.append(Finding("Workflow has no exit node. It may run indefinitely.", WARNING))

    cycles = detect_cycles(g)
    if cycles:
        errors.append(Finding(
            f"Detected {len(cycles)} cycle(s) in the workflow. Cycles are not allowed.",
            ERROR,
            node_ids=[n for cycle in cycles for n in cycle],
            edge_ids=[e for cycle in cycles for e in cycle_edge_ids(g, cycle)],
        ))

    disconnected = disconnected_nodes(g)
    if disconnected:
        warnings.append(Finding(
            f"Found {len(disconnected)} disconnected node(s)",
            WARNING,
            node_ids=disconnected,
        ))

    # reachability from the first entry if present
    if entry_nodes:
        already_reported = set(disconnected)
        unreachable = [n for n in unreachable_from(g, entry_nodes[0]) if n not in already_reported]
        if unreachable:
            warnings.append(Finding(
                f"Found {len(unreachable)} unreachable node(s) from entry",
                WARNING,
                node_ids=unreachable,
            ))

    dead_ends = dead_end_nodes(g)
    if dead_ends:
        warnings.append(Finding(
            f"Found {len(dead_ends)} node(s) without outgoing connections",
            WARNING,
            node_ids=dead_ends,
        ))

    parallel_groups = [group.members for group in find_parallel_groups(g)]

    logger.debug(
        f"Validated graph with {g.number_of_nodes()} nodes and {g.number_of_edges()} edges: "
        f"{len(errors)} error(s), {len(warnings)} warning(s), {len(parallel_groups)} parallel group(s)"
    )
    return ValidationReport(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        parallel_groups=parallel_groups,
    )
