from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import networkx as nx
from pydantic import ValidationError

from .builder import build_nx_graph, nodes_of_kind
from .cycles import detect_cycles
from .depth import shortest_depth
from .document import WorkflowDocument
from .parallel import find_parallel_groups
from .preprocess import load_document
from .schema import EdgeKind, NodeKind, ValidationReport
from .validator import validate_graph
from .visualize import draw_with_legend

logger = logging.getLogger(__name__)


class WorkflowGraphBuilder:
    def __init__(self) -> None:
        self.graph: nx.MultiDiGraph = nx.MultiDiGraph()
        self.document: Optional[WorkflowDocument] = None
        self.report: Optional[ValidationReport] = None

    def load_from_json(self, json_path: str) -> bool:
        try:
            self.document = load_document(json_path)
            logger.info(f"Loaded workflow '{self.document.name}' from {json_path}")
            logger.info(f"Nodes: {len(self.document.nodes)}, edges: {len(self.document.edges)}")
            return True

        except FileNotFoundError:
            logger.error(f"Workflow file not found: {json_path}")
            return False
        except OSError as e:
            logger.error(f"Cannot read workflow file {json_path}: {e}")
            return False
        except json.JSONDecodeError as e:
            logger.error(f"JSON parse error in {json_path}: {e}")
            return False
        except (ValidationError, ValueError) as e:
            logger.error(f"Invalid workflow document {json_path}: {e}")
            return False

    def load_document(self, document: WorkflowDocument) -> None:
        self.document = document

    def build_graph(self) -> bool:
        if self.document is None:
            logger.error("No workflow document loaded.")
            return False

        self.graph = build_nx_graph(self.document.to_graph_def())
        logger.info(
            f"Graph built: {self.graph.number_of_nodes()} nodes, {self.graph.number_of_edges()} edges"
        )

        self.report = validate_graph(self.graph)
        for w in self.report.warnings:
            logger.warning(f"{w.message}: {w.node_ids or []}")
        for e in self.report.errors:
            logger.error(f"{e.message}: {e.node_ids or []}")
        return self.report.valid

    def detect_cycles(self) -> Dict[str, Any]:
        cycles = detect_cycles(self.graph)
        if cycles:
            logger.warning(f"Cycles detected: {[' -> '.join(c) for c in cycles]}")
        return {
            "success": not cycles,
            "cycles": cycles,
            "cyclic_nodes": [n for c in cycles for n in c],
        }

    def parallel_groups(self) -> List[List[str]]:
        return [group.members for group in find_parallel_groups(self.graph)]

    def node_depth(self, node_name: str) -> int:
        return shortest_depth(self.graph, node_name)

    def get_node_info(self, node_name: str) -> Dict[str, Any]:
        if node_name not in self.graph:
            logger.warning(f"Node not found: {node_name}")
            return {}
        attrs = self.graph.nodes[node_name]
        return {"id": node_name, **attrs, "depth": self.node_depth(node_name)}

    def export_graph_info(self) -> Dict[str, Any]:
        nodes_payload = []
        for node, attrs in self.graph.nodes(data=True):
            nodes_payload.append({"id": node, "kind": NodeKind(attrs["kind"]).value, "payload": attrs["payload"]})

        edges_payload = []
        for u, v, key, attrs in self.graph.edges(keys=True, data=True):
            edges_payload.append({
                "id": key,
                "source": u,
                "target": v,
                "kind": EdgeKind(attrs["kind"]).value,
                "label": attrs["label"],
                "condition": attrs["condition"],
            })

        graph_stats = {
            "nodes": self.graph.number_of_nodes(),
            "edges": self.graph.number_of_edges(),
            "is_acyclic": not detect_cycles(self.graph),
            "entry_nodes": nodes_of_kind(self.graph, NodeKind.ENTRY),
            "exit_nodes": nodes_of_kind(self.graph, NodeKind.EXIT),
        }

        kind_groups: Dict[str, List[str]] = {}
        for node, kind in self.graph.nodes(data="kind"):
            kind_groups.setdefault(NodeKind(kind).value, []).append(node)

        return {
            "nodes": nodes_payload,
            "edges": edges_payload,
            "graph_stats": graph_stats,
            "kind_groups": kind_groups,
            "parallel_groups": self.parallel_groups(),
        }

    def visualize_graph(self, save_path: str) -> bool:
        return draw_with_legend(self.graph, save_path, groups=self.parallel_groups())

    def get_predecessors(self, node_name: str) -> List[str]:
        if node_name not in self.graph:
            return []
        return list(self.graph.predecessors(node_name))

    def get_successors(self, node_name: str) -> List[str]:
        if node_name not in self.graph:
            return []
        return list(self.graph.successors(node_name))
