"""Tests for CLI entry point."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from switchboard.cli import main


def _run(argv: list[str]) -> None:
    with patch("sys.argv", ["switchboard", *argv]):
        main()


class TestAgentsSubcommand:
    def test_lists_all_agents(self, capsys: pytest.CaptureFixture[str]):
        _run(["agents"])
        out = capsys.readouterr().out
        assert "frontend-specialist" in out
        assert "General Assistant" in out

    def test_search(self, capsys: pytest.CaptureFixture[str]):
        _run(["agents", "--search", "redis", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert [a["id"] for a in data] == ["database-master"]

    def test_search_no_match(self, capsys: pytest.CaptureFixture[str]):
        _run(["agents", "--search", "blockchain"])
        assert "No agents match" in capsys.readouterr().out


class TestShowSubcommand:
    def test_show_with_prompt(self, capsys: pytest.CaptureFixture[str]):
        _run(["show", "testing-specialist", "--prompt"])
        out = capsys.readouterr().out
        assert "Testing Specialist (testing-specialist)" in out
        assert "Prompt template:" in out
        assert "You are a Testing Specialist AI" in out

    def test_show_unknown_agent_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            _run(["show", "wizard"])
        assert exc_info.value.code != 0


class TestAnalyzeSubcommand:
    def test_analyze_json(self, project_dir: Path, capsys: pytest.CaptureFixture[str]):
        _run(["analyze", str(project_dir), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["type"] == "fullstack"
        assert data["fileCount"] == 3
        assert data["dependencies"] == ["react", "express", "jest"]

    def test_analyze_text(self, project_dir: Path, capsys: pytest.CaptureFixture[str]):
        _run(["analyze", str(project_dir)])
        out = capsys.readouterr().out
        assert "Type:         fullstack" in out
        assert "React" in out

    def test_analyze_missing_path(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            _run(["analyze", str(tmp_path / "missing")])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()


class TestSelectSubcommand:
    def test_select_text(self, project_dir: Path, capsys: pytest.CaptureFixture[str]):
        _run(["select", str(project_dir), "--request", "add an orders api", "--scores"])
        out = capsys.readouterr().out
        assert "Agent:      Backend Architect (backend-architect)" in out
        assert "Confidence: 1.00" in out
        assert "Scores:" in out

    def test_select_json_omits_scores_by_default(
        self, project_dir: Path, capsys: pytest.CaptureFixture[str]
    ):
        _run(["select", str(project_dir), "--request", "add an orders api", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["selection"]["selectedAgent"] == "backend-architect"
        assert "scores" not in data

    def test_select_empty_dir(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        _run(["select", str(tmp_path)])
        out = capsys.readouterr().out
        assert "General Assistant" in out
        assert "Confidence: 0.50" in out


class TestServeSubcommand:
    def test_serve_passes_port_override(self):
        with patch("switchboard.cli.run_server") as run:
            _run(["serve", "--port", "9999"])
        assert run.call_args.args[0].port == 9999


class TestNoCommand:
    def test_no_command_prints_help_and_exits(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            _run([])
        assert exc_info.value.code == 1
        assert "usage" in capsys.readouterr().out.lower()
