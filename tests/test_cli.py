"""Tests for the workflow-validate command."""

import json
import logging

from cli.validate import EXIT_INVALID, EXIT_LOAD_FAILED, EXIT_VALID, main


class TestValidateCommand:
    """Exit codes and output of cli/validate.py."""

    def test_valid_document(self, sample_workflow_path, capsys):
        assert main([sample_workflow_path]) == EXIT_VALID
        out = capsys.readouterr().out
        assert "Support ticket triage" in out
        assert "Workflow is valid" in out
        assert "lookup, draft" in out

    def test_json_output_with_depths(self, sample_workflow_path, capsys):
        assert main([sample_workflow_path, "--json", "--depth", "review", "--depth", "ghost"]) == EXIT_VALID
        data = json.loads(capsys.readouterr().out)
        assert data["valid"] is True
        assert data["parallelGroups"] == [["lookup", "draft"]]
        assert data["depths"] == {"review": 3, "ghost": -1}

    def test_invalid_document(self, tmp_path, capsys):
        path = tmp_path / "no_entry.json"
        path.write_text(json.dumps({
            "name": "No entry",
            "nodes": [{"id": "a", "type": "compute"}, {"id": "b", "type": "exit"}],
            "edges": [{"id": "1", "source": "a", "target": "b"}],
        }), encoding="utf-8")
        assert main([str(path)]) == EXIT_INVALID
        assert "Workflow must have at least one entry node" in capsys.readouterr().out

    def test_orphan_reducer_note(self, tmp_path, capsys):
        path = tmp_path / "reducers.json"
        path.write_text(json.dumps({
            "name": "Reducers",
            "reducers": {"history": {"type": "append"}},
            "nodes": [{"id": "a", "type": "entry"}, {"id": "b", "type": "exit"}],
            "edges": [{"id": "1", "source": "a", "target": "b"}],
        }), encoding="utf-8")
        assert main([str(path)]) == EXIT_VALID
        assert "reducers without a matching state field: history" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == EXIT_LOAD_FAILED
        assert "Could not load workflow" in capsys.readouterr().out

    def test_directory_path(self, tmp_path, capsys):
        assert main([str(tmp_path)]) == EXIT_LOAD_FAILED
        assert "Could not load workflow" in capsys.readouterr().out

    def test_root_handlers_restored_between_tests(self):
        """Logging after a CLI run must not write to a closed capture stream."""
        streams = [getattr(h, "stream", None) for h in logging.getLogger().handlers]
        assert not any(getattr(s, "closed", False) for s in streams)
