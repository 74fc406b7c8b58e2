"""
Workflow graph validation and parallel execution group analysis
"""

from .schema import (
    NodeKind, EdgeKind, NodeDef, EdgeDef, GraphDef,
    Finding, ValidationReport, ParallelGroup,
)
from .builder import build_nx_graph
from .cycles import detect_cycles
from .reachability import unreachable_from
from .structure import disconnected_nodes, dead_end_nodes
from .parallel import find_parallel_groups
from .depth import UNREACHABLE_DEPTH, shortest_depth
from .validator import validate_graph
from .engine import (
    validate, detect_parallel_groups, node_depth,
    find_cycles, find_unreachable, find_disconnected_nodes, find_dead_end_nodes,
)
from .document import WorkflowDocument
from .preprocess import load_json, load_document, save_document, normalize_raw_to_graphdef
from .graph_builder import WorkflowGraphBuilder
from .visualize import draw_with_legend, group_bounding_boxes

__all__ = [
    'NodeKind', 'EdgeKind', 'NodeDef', 'EdgeDef', 'GraphDef',
    'Finding', 'ValidationReport', 'ParallelGroup',
    'build_nx_graph',
    'detect_cycles', 'unreachable_from', 'disconnected_nodes', 'dead_end_nodes',
    'find_parallel_groups', 'UNREACHABLE_DEPTH', 'shortest_depth',
    'validate_graph',
    'validate', 'detect_parallel_groups', 'node_depth',
    'find_cycles', 'find_unreachable', 'find_disconnected_nodes', 'find_dead_end_nodes',
    'WorkflowDocument',
    'load_json', 'load_document', 'save_document', 'normalize_raw_to_graphdef',
    'WorkflowGraphBuilder',
    'draw_with_legend', 'group_bounding_boxes',
]
