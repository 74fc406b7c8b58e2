from __future__ import annotations

import logging
from typing import Iterator, List

import networkx as nx

from .schema import GraphDef, NodeKind

logger = logging.getLogger(__name__)


def build_nx_graph(graph_def: GraphDef) -> nx.MultiDiGraph:
    g: nx.MultiDiGraph = nx.MultiDiGraph()

    # add nodes
    for node in graph_def.nodes:
        g.add_node(
            node.id,
            kind=node.kind,
            payload=node.payload,
            position=node.position,
        )

    # add edges; networkx would silently create missing endpoints, so skip them
    for edge in graph_def.edges:
        if edge.source not in g or edge.target not in g:
            logger.debug(f"Ignoring edge {edge.id}: dangling endpoint {edge.source} -> {edge.target}")
            continue
        g.add_edge(
            edge.source,
            edge.target,
            key=edge.id,
            kind=edge.kind,
            label=edge.label or "",
            condition=edge.condition or "",
        )

    return g


def successors(g: nx.MultiDiGraph, node: str) -> Iterator[str]:
    """Targets of every outgoing edge of node, one per edge, in adjacency order."""
    for _, target in g.out_edges(node):
        yield target


def nodes_of_kind(g: nx.MultiDiGraph, kind: NodeKind) -> List[str]:
    return [n for n, k in g.nodes(data="kind") if k == kind]
