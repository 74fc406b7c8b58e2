from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import networkx as nx

from .depth import depth_map
from .schema import NodeKind

logger = logging.getLogger(__name__)

Box = Tuple[float, float, float, float]

KIND_COLORS: Dict[str, str] = {
    NodeKind.ENTRY.value: "#90EE90",
    NodeKind.EXIT.value: "#FFA07A",
    NodeKind.COMPUTE.value: "#87CEEB",
    NodeKind.MODEL_CALL.value: "#DDA0DD",
    NodeKind.EXTERNAL_CALL.value: "#F0E68C",
    NodeKind.BRANCH.value: "#FFB6C1",
}

GROUP_COLORS = ["#3B82F6", "#8B5CF6", "#EC4899", "#FB923C", "#22C55E"]


def group_bounding_boxes(
    groups: Sequence[Sequence[str]],
    pos: Dict[str, Tuple[float, float]],
    padding: float = 0.0,
    extent: Tuple[float, float] = (0.0, 0.0),
) -> List[Optional[Box]]:
    """(min_x, min_y, max_x, max_y) around each group's positioned members.

    extent is the node width/height added to the far corner. A group with no
    positioned member gets None so indices keep matching the group list.
    """
    width, height = extent
    boxes: List[Optional[Box]] = []
    for group in groups:
        points = [pos[n] for n in group if n in pos]
        if not points:
            boxes.append(None)
            continue
        min_x = min(x for x, _ in points) - padding
        min_y = min(y for _, y in points) - padding
        max_x = max(x for x, _ in points) + width + padding
        max_y = max(y for _, y in points) + height + padding
        boxes.append((min_x, min_y, max_x, max_y))
    return boxes


def _try_graphviz_layout(g: nx.DiGraph) -> Dict[str, Tuple[float, float]]:
    try:
        # Prefer pygraphviz if available
        from networkx.drawing.nx_agraph import graphviz_layout  # type: ignore
        return graphviz_layout(g, prog="dot")
    except (ImportError, OSError, ValueError):
        try:
            # Fallback to pydot if available
            from networkx.drawing.nx_pydot import graphviz_layout  # type: ignore
            return graphviz_layout(g, prog="dot")
        except (ImportError, OSError, ValueError):
            return {}


def _canvas_layout(g: nx.MultiDiGraph) -> Dict[str, Tuple[float, float]]:
    # canvas y grows downwards
    pos: Dict[str, Tuple[float, float]] = {}
    for n, p in g.nodes(data="position"):
        if p is None:
            return {}
        pos[n] = (p[0], -p[1])
    if pos and all(p == (0.0, 0.0) for p in pos.values()):
        return {}
    return pos


def _depth_layered_layout(g: nx.MultiDiGraph) -> Dict[str, Tuple[float, float]]:
    # Arrange nodes in columns by their depth from the entry node
    depths = depth_map(g)
    if not depths:
        return {}
    trailing = max(depths.values()) + 1

    grouped: Dict[int, List[str]] = {}
    for n in g.nodes():
        grouped.setdefault(depths.get(n, trailing), []).append(n)

    pos: Dict[str, Tuple[float, float]] = {}
    col_gap = 3.0
    row_gap = 1.5
    for col, nodes in sorted(grouped.items()):
        x = col * col_gap
        # Center around 0 vertically
        offset = (len(nodes) - 1) * row_gap / 2.0
        for i, n in enumerate(nodes):
            pos[n] = (x, -offset + i * row_gap)
    return pos


def draw_with_legend(
    g: nx.MultiDiGraph,
    save_path: str,
    groups: Optional[Sequence[Sequence[str]]] = None,
) -> bool:
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Patch, Rectangle
    except ImportError:
        logger.warning("matplotlib is not installed; skipping rendering.")
        return False

    simple = nx.DiGraph(g)

    pos = _canvas_layout(g)
    if not pos:
        pos = _try_graphviz_layout(simple)
    if not pos:
        pos = _depth_layered_layout(g)
    if not pos:
        pos = nx.spring_layout(simple, seed=42, k=0.7)

    fig, ax = plt.subplots(figsize=(16, 10))
    try:
        # Parallel groups behind the nodes
        for idx, box in enumerate(group_bounding_boxes(groups or [], pos, padding=0.6)):
            if box is None:
                continue
            min_x, min_y, max_x, max_y = box
            color = GROUP_COLORS[idx % len(GROUP_COLORS)]
            ax.add_patch(Rectangle(
                (min_x, min_y),
                max_x - min_x,
                max_y - min_y,
                facecolor=color,
                edgecolor=color,
                alpha=0.15,
                linestyle="--",
                linewidth=2,
                zorder=0,
            ))
            ax.text(min_x, max_y, f"Parallel Group {idx + 1}", color=color, fontsize=9, fontweight="bold")

        colors = [
            KIND_COLORS.get(getattr(kind, "value", kind), "#D3D3D3")
            for _, kind in g.nodes(data="kind")
        ]
        nx.draw_networkx_nodes(
            simple,
            pos,
            nodelist=list(g.nodes()),
            node_color=colors,
            node_size=2000,
            edgecolors="#444444",
            linewidths=2,
            ax=ax,
        )

        plain_edges: List[Tuple[str, str]] = []
        conditional_edges: List[Tuple[str, str]] = []
        edge_labels: Dict[Tuple[str, str], str] = {}
        for u, v, attrs in g.edges(data=True):
            if attrs.get("kind") == "conditional":
                conditional_edges.append((u, v))
            else:
                plain_edges.append((u, v))
            text = attrs.get("label") or attrs.get("condition")
            if text:
                edge_labels[(u, v)] = text

        for edgelist, style in ((plain_edges, "solid"), (conditional_edges, "dashed")):
            if not edgelist:
                continue
            nx.draw_networkx_edges(
                simple,
                pos,
                edgelist=edgelist,
                arrows=True,
                arrowstyle="-|>",
                arrowsize=22,
                width=2.6,
                edge_color="#555555",
                style=style,
                connectionstyle="arc3,rad=0.06",
                ax=ax,
            )

        nx.draw_networkx_labels(simple, pos, font_size=11, font_weight="bold", font_color="#111111", ax=ax)

        if edge_labels:
            nx.draw_networkx_edge_labels(
                simple,
                pos,
                edge_labels=edge_labels,
                font_size=9,
                bbox=dict(
                    boxstyle="round,pad=0.3",
                    facecolor="white",
                    edgecolor="gray",
                    alpha=0.9,
                ),
                label_pos=0.55,
                ax=ax,
            )

        # Legend
        handles = [
            Patch(facecolor=col, edgecolor="#444444", label=kind)
            for kind, col in KIND_COLORS.items()
        ]
        ax.legend(
            handles=handles,
            title="Node kind",
            loc="lower left",
            bbox_to_anchor=(1.02, 0),
            borderaxespad=0.0,
        )

        ax.axis("off")
        fig.tight_layout()
        fig.savefig(save_path, dpi=150, bbox_inches="tight", facecolor="white", edgecolor="none")
    finally:
        plt.close(fig)
    logger.info(f"Rendered workflow graph: {save_path}")
    return True
