"""Tests for rendering helpers."""

import pytest

from workflow_graph import build_nx_graph, group_bounding_boxes
from workflow_graph.document import WorkflowDocument
from workflow_graph.preprocess import load_document
from workflow_graph.schema import GraphDef
from workflow_graph.visualize import draw_with_legend

from tests.conftest import make_edges, make_nodes


class TestGroupBoundingBoxes:
    """Pure bounding-box computation around parallel groups."""

    def test_box_around_members(self):
        pos = {"B": (0.0, 0.0), "C": (4.0, 2.0), "D": (9.0, 9.0)}
        assert group_bounding_boxes([["B", "C"]], pos) == [(0.0, 0.0, 4.0, 2.0)]

    def test_padding_and_extent(self):
        """Node size is added to the far corner, padding on every side."""
        pos = {"B": (100.0, 50.0), "C": (400.0, 50.0)}
        boxes = group_bounding_boxes([["B", "C"]], pos, padding=20, extent=(250, 100))
        assert boxes == [(80.0, 30.0, 670.0, 170.0)]

    def test_unpositioned_group_keeps_its_slot(self):
        pos = {"X": (1.0, 1.0), "Y": (2.0, 3.0)}
        assert group_bounding_boxes([["B", "C"], ["X", "Y"]], pos) == [None, (1.0, 1.0, 2.0, 3.0)]


class TestDrawWithLegend:
    """Rendering to PNG (requires matplotlib)."""

    @pytest.fixture(autouse=True)
    def _agg_backend(self):
        matplotlib = pytest.importorskip("matplotlib")
        matplotlib.use("Agg")

    def test_renders_document_with_canvas_positions(self, sample_workflow_path, tmp_path):
        doc = load_document(sample_workflow_path)
        g = build_nx_graph(doc.to_graph_def())
        out = tmp_path / "sample.png"
        assert draw_with_legend(g, str(out), groups=[["lookup", "draft"]]) is True
        assert out.stat().st_size > 0

    def test_renders_graph_without_positions(self, tmp_path):
        g = build_nx_graph(GraphDef(
            nodes=make_nodes("A:entry B C D E:exit"),
            edges=make_edges("A>B A>C B>D C>D D>E"),
        ))
        out = tmp_path / "diamond.png"
        assert draw_with_legend(g, str(out), groups=[["B", "C"]]) is True
        assert out.exists()

    def test_renders_empty_document(self, tmp_path):
        g = build_nx_graph(WorkflowDocument.new("Blank").to_graph_def())
        out = tmp_path / "blank.png"
        assert draw_with_legend(g, str(out)) is True

    def test_figure_closed_when_save_fails(self, tmp_path):
        import matplotlib.pyplot as plt

        g = build_nx_graph(GraphDef(nodes=make_nodes("A:entry B:exit"), edges=make_edges("A>B")))
        before = plt.get_fignums()
        with pytest.raises(OSError):
            draw_with_legend(g, str(tmp_path / "missing_dir" / "out.png"))
        assert plt.get_fignums() == before
