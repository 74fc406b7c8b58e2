from __future__ import annotations

from collections import deque
from typing import List, Optional, Set

import networkx as nx

from .builder import successors
from .schema import ParallelGroup


def find_parallel_groups(g: nx.MultiDiGraph) -> List[ParallelGroup]:
    """Find groups of branch targets that can run concurrently.

    Every node with more than one outgoing edge is a fan-out point. Its branch
    targets form a group when all of them reach a common descendant. Fan-out
    nodes are processed in input order and a node belongs to at most one
    group: targets claimed by an earlier group are dropped from later ones,
    and a group left with fewer than two members is not reported.
    """
    groups: List[ParallelGroup] = []
    claimed: Set[str] = set()

    for node in g.nodes():
        if g.out_degree(node) <= 1:
            continue

        branches = list(successors(g, node))
        convergence = find_convergence_point(g, branches)
        if convergence is None:
            continue

        distinct = list(dict.fromkeys(branches))
        if len(distinct) < 2:
            continue

        members = [b for b in distinct if b not in claimed]
        if len(members) < 2:
            continue

        groups.append(ParallelGroup(fan_out=node, convergence=convergence, members=members))
        claimed.update(members)

    return groups


def find_convergence_point(g: nx.MultiDiGraph, branches: List[str]) -> Optional[str]:
    """First node of the first branch's descendant list that every branch reaches."""
    if not branches:
        return None

    descendants = [all_descendants(g, b) for b in branches]
    descendant_sets = [set(d) for d in descendants]

    for candidate in descendants[0]:
        if all(candidate in s for s in descendant_sets):
            return candidate
    return None


def all_descendants(g: nx.MultiDiGraph, start: str) -> List[str]:
    """Breadth-first descendant list of start.

    Every edge target is listed as it is met, so a node can appear more than
    once; start itself is included only when a cycle leads back to it.
    """
    found: List[str] = []
    visited: Set[str] = set()
    q: deque[str] = deque([start])

    while q:
        cur = q.popleft()
        if cur in visited:
            continue
        visited.add(cur)
        for nb in successors(g, cur):
            found.append(nb)
            q.append(nb)

    return found
