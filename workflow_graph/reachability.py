from __future__ import annotations

from collections import deque
from typing import List, Set

import networkx as nx

from .builder import successors


def unreachable_from(g: nx.MultiDiGraph, entry: str) -> List[str]:
    """Nodes that cannot be reached by following edges forward from entry.

    An entry id that is not in the graph leaves every node unreachable.
    """
    if entry not in g:
        return list(g.nodes())
    reachable = reachable_from(g, entry)
    return [n for n in g.nodes() if n not in reachable]


def reachable_from(g: nx.MultiDiGraph, start: str) -> Set[str]:
    visited: Set[str] = set()
    q: deque[str] = deque([start])
    while q:
        cur = q.popleft()
        if cur in visited:
            continue
        visited.add(cur)
        for nb in successors(g, cur):
            if nb not in visited:
                q.append(nb)
    return visited
