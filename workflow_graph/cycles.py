from __future__ import annotations

from typing import Iterator, List, Optional, Set, Tuple

import networkx as nx

from .builder import successors


def detect_cycles(g: nx.MultiDiGraph) -> List[List[str]]:
    """Depth-first search for cycles, rooted at each unvisited node in input order.

    At most one cycle is reported per root: the search for a root stops at the
    first back edge it meets. Each cycle is the path from the re-entered node
    around to the node whose edge closes it.
    """
    cycles: List[List[str]] = []
    visited: Set[str] = set()

    for root in g.nodes():
        if root in visited:
            continue
        cycle = _first_cycle_from(g, root, visited)
        if cycle:
            cycles.append(cycle)

    return cycles


def _first_cycle_from(g: nx.MultiDiGraph, root: str, visited: Set[str]) -> Optional[List[str]]:
    on_path: Set[str] = set()
    path: List[str] = []
    stack: List[Tuple[str, Iterator[str]]] = []

    def enter(node: str) -> None:
        visited.add(node)
        on_path.add(node)
        path.append(node)
        stack.append((node, successors(g, node)))

    enter(root)
    while stack:
        node, children = stack[-1]
        nb = next(children, None)
        if nb is None:
            stack.pop()
            on_path.discard(node)
            path.pop()
            continue
        if nb in on_path:
            return path[path.index(nb):]
        if nb not in visited:
            enter(nb)

    return None


def cycle_edge_ids(g: nx.MultiDiGraph, cycle: List[str]) -> List[str]:
    """Ids of the edges joining consecutive cycle members, closing edge included."""
    edge_ids: List[str] = []
    for i, u in enumerate(cycle):
        v = cycle[(i + 1) % len(cycle)]
        edge_ids.extend(g[u][v])
    return edge_ids
