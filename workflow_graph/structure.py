from __future__ import annotations

from typing import List

import networkx as nx

from .schema import NodeKind


def disconnected_nodes(g: nx.MultiDiGraph) -> List[str]:
    # a lone entry node is a valid single-node workflow
    return [
        n for n, kind in g.nodes(data="kind")
        if g.in_degree(n) == 0 and g.out_degree(n) == 0 and kind != NodeKind.ENTRY
    ]


def dead_end_nodes(g: nx.MultiDiGraph) -> List[str]:
    return [
        n for n, kind in g.nodes(data="kind")
        if g.out_degree(n) == 0 and kind != NodeKind.EXIT
    ]
