"""
Pytest configuration and fixtures
"""
import logging
import os
from typing import List

import pytest

from workflow_graph.schema import EdgeDef, NodeDef, NodeKind

SAMPLE_WORKFLOW = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "config",
    "sample_workflow.json",
)


def make_nodes(layout: str) -> List[NodeDef]:
    """Nodes from a layout like `A:entry B C:exit`; kind defaults to compute."""
    nodes = []
    for token in layout.split():
        node_id, _, kind = token.partition(":")
        nodes.append(NodeDef(id=node_id, kind=NodeKind.from_string(kind or "compute")))
    return nodes


def make_edges(layout: str) -> List[EdgeDef]:
    """Edges from a layout like `A>B B>C#loop`; ids default to e1, e2, ..."""
    edges = []
    for idx, token in enumerate(layout.split(), start=1):
        pair, _, edge_id = token.partition("#")
        source, target = pair.split(">")
        edges.append(EdgeDef(id=edge_id or f"e{idx}", source=source, target=target))
    return edges


@pytest.fixture
def diamond():
    """A(entry) fans out to B and C, which converge on D before E(exit)."""
    return (
        make_nodes("A:entry B C D E:exit"),
        make_edges("A>B A>C B>D C>D D>E"),
    )


@pytest.fixture
def sample_workflow_path() -> str:
    return SAMPLE_WORKFLOW


@pytest.fixture
def diamond_payload():
    return {
        "nodes": [
            {"id": "A", "type": "entry"},
            {"id": "B", "type": "compute"},
            {"id": "C", "type": "modelCall"},
            {"id": "D", "type": "compute"},
            {"id": "E", "type": "exit"},
        ],
        "edges": [
            {"id": "e1", "source": "A", "target": "B"},
            {"id": "e2", "source": "A", "target": "C"},
            {"id": "e3", "source": "B", "target": "D"},
            {"id": "e4", "source": "C", "target": "D"},
            {"id": "e5", "source": "D", "target": "E"},
        ],
    }


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
