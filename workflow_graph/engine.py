"""
Snapshot-level entry points.

Each function takes the node and edge lists of one point-in-time snapshot,
builds a fresh multigraph from them and runs a single analysis over it.
Nothing is cached or mutated between calls.
"""

from __future__ import annotations

from typing import Iterable, List

import networkx as nx

from .builder import build_nx_graph
from .cycles import detect_cycles
from .depth import shortest_depth
from .parallel import find_parallel_groups
from .reachability import unreachable_from
from .schema import EdgeDef, GraphDef, NodeDef, ValidationReport
from .structure import dead_end_nodes, disconnected_nodes
from .validator import validate_graph


def _snapshot(nodes: Iterable[NodeDef], edges: Iterable[EdgeDef]) -> nx.MultiDiGraph:
    return build_nx_graph(GraphDef(nodes=list(nodes), edges=list(edges)))


def validate(nodes: Iterable[NodeDef], edges: Iterable[EdgeDef]) -> ValidationReport:
    return validate_graph(_snapshot(nodes, edges))


def detect_parallel_groups(nodes: Iterable[NodeDef], edges: Iterable[EdgeDef]) -> List[List[str]]:
    return [group.members for group in find_parallel_groups(_snapshot(nodes, edges))]


def node_depth(node_id: str, nodes: Iterable[NodeDef], edges: Iterable[EdgeDef]) -> int:
    return shortest_depth(_snapshot(nodes, edges), node_id)


def find_cycles(nodes: Iterable[NodeDef], edges: Iterable[EdgeDef]) -> List[List[str]]:
    return detect_cycles(_snapshot(nodes, edges))


def find_unreachable(nodes: Iterable[NodeDef], edges: Iterable[EdgeDef], entry_id: str) -> List[str]:
    return unreachable_from(_snapshot(nodes, edges), entry_id)


def find_disconnected_nodes(nodes: Iterable[NodeDef], edges: Iterable[EdgeDef]) -> List[str]:
    return disconnected_nodes(_snapshot(nodes, edges))


def find_dead_end_nodes(nodes: Iterable[NodeDef], edges: Iterable[EdgeDef]) -> List[str]:
    return dead_end_nodes(_snapshot(nodes, edges))
