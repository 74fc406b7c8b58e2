from __future__ import annotations

from collections import deque
from typing import Dict, Set

import networkx as nx

from .builder import nodes_of_kind, successors
from .schema import NodeKind

UNREACHABLE_DEPTH = -1


def shortest_depth(g: nx.MultiDiGraph, node_id: str) -> int:
    """Minimum number of hops from the first entry node to node_id.

    Returns UNREACHABLE_DEPTH when the graph has no entry node or node_id
    cannot be reached from it.
    """
    depths = depth_map(g)
    return depths.get(node_id, UNREACHABLE_DEPTH)


def depth_map(g: nx.MultiDiGraph) -> Dict[str, int]:
    """Depth of every node reachable from the first entry node."""
    entries = nodes_of_kind(g, NodeKind.ENTRY)
    if not entries:
        return {}

    start = entries[0]
    depths: Dict[str, int] = {start: 0}
    visited: Set[str] = set()
    q: deque[str] = deque([start])

    while q:
        cur = q.popleft()
        if cur in visited:
            continue
        visited.add(cur)

        next_depth = depths[cur] + 1
        for nb in successors(g, cur):
            known = depths.get(nb)
            if known is None or next_depth < known:
                depths[nb] = next_depth
            if nb not in visited:
                q.append(nb)

    return depths
