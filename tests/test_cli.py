"""Tests for the capscope command line."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from click.testing import CliRunner

from capscope.cli.main import cli


def _write(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _invoke(*args: str):
    return CliRunner().invoke(cli, ["--slow-ms", "0", *args])


class TestMergeCommand:
    def test_json_output(self, tmp_path: Path) -> None:
        user = _write(tmp_path / "user.json", {"theme": "light", "mcpServers": {"fs": {"command": "npx"}}})
        project = _write(tmp_path / "project.json", {"theme": "dark"})

        result = _invoke("merge", str(user), str(project), "--format", "json")

        assert result.exit_code == 0, result.output
        entries = json.loads(result.stdout)
        assert [(entry["key"], entry["source"]["type"]) for entry in entries] == [
            ("mcpServers.fs", "user"),
            ("theme", "project"),
        ]
        assert entries[0]["inherited"] is True
        assert entries[1]["value"] == "dark"
        assert entries[1]["overridden"] is True

    def test_show_shadowed_with_local(self, tmp_path: Path) -> None:
        user = _write(tmp_path / "user.json", {"model": "a"})
        project = _write(tmp_path / "project.json", {"model": "b"})
        local = _write(tmp_path / "local.json", {"model": "c"})

        result = _invoke("merge", str(user), str(project), "--local", str(local), "--show-shadowed", "--format", "yaml")

        assert result.exit_code == 0, result.output
        payload = yaml.safe_load(result.stdout)
        assert payload["resolved"] == {"model": "c"}
        assert [entry["source"]["type"] for entry in payload["shadowed"]] == ["user", "project"]
        assert payload["provenance"] == {"model": "user"}

    def test_table_output(self, tmp_path: Path) -> None:
        user = _write(tmp_path / "user.json", {"theme": "light"})
        project = _write(tmp_path / "project.json", {})

        result = _invoke("merge", str(user), str(project))

        assert result.exit_code == 0, result.output
        assert "theme" in result.stdout

    def test_unparseable_document(self, tmp_path: Path) -> None:
        user = tmp_path / "user.yaml"
        user.write_text("theme: [unclosed", encoding="utf-8")
        project = _write(tmp_path / "project.json", {})

        result = _invoke("merge", str(user), str(project))

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestDiffCommand:
    def _sides(self, tmp_path: Path) -> tuple[Path, Path]:
        left = _write(
            tmp_path / "left.json",
            [
                {"id": "a", "key": "a", "value": 1, "source": "project"},
                {"id": "b", "key": "b", "value": "same", "source": "project"},
            ],
        )
        right = _write(
            tmp_path / "right.json",
            {
                "capabilities": [
                    {"id": "a", "key": "a", "value": 2, "source": "project"},
                    {"id": "b", "key": "b", "value": "same", "source": "project"},
                    {"id": "c", "key": "c", "value": None, "source": "project"},
                ]
            },
        )
        return left, right

    def test_json_output(self, tmp_path: Path) -> None:
        left, right = self._sides(tmp_path)

        result = _invoke("diff", str(left), str(right), "--format", "json")

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["summary"] == {
            "totalDifferences": 2,
            "onlyInA": 0,
            "onlyInB": 1,
            "differentValues": 1,
        }
        assert [(d["capabilityId"], d["status"], d["highlightClass"]) for d in payload["diffResults"]] == [
            ("a", "different", "yellow"),
            ("b", "match", "none"),
            ("c", "only-right", "green"),
        ]

    def test_filters_narrow_results_but_not_summary(self, tmp_path: Path) -> None:
        left, right = self._sides(tmp_path)

        result = _invoke("diff", str(left), str(right), "--only-differences", "--green", "--format", "json")

        payload = json.loads(result.stdout)
        assert [d["capabilityId"] for d in payload["diffResults"]] == ["c"]
        assert payload["summary"]["totalDifferences"] == 2

    def test_fail_on_difference(self, tmp_path: Path) -> None:
        left, right = self._sides(tmp_path)

        result = _invoke("diff", str(left), str(right), "--fail-on-difference", "--format", "json")

        assert result.exit_code == 1

    def test_config_maps_are_flattened(self, tmp_path: Path) -> None:
        left = _write(tmp_path / "a.json", {"mcpServers": {"fs": {"command": "npx"}}})
        right = _write(tmp_path / "b.json", {"mcpServers": {"fs": {"command": "npx"}}})

        result = _invoke("diff", str(left), str(right), "--fail-on-difference", "--format", "json")

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert [(d["capabilityId"], d["status"]) for d in payload["diffResults"]] == [("mcpServers.fs", "match")]

    def test_undecodable_document(self, tmp_path: Path) -> None:
        left = tmp_path / "left.json"
        left.write_bytes(b"\xff\xfe[]")
        right = _write(tmp_path / "right.json", [])

        result = _invoke("diff", str(left), str(right), "--format", "json")

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output

    def test_malformed_capability(self, tmp_path: Path) -> None:
        left = _write(tmp_path / "left.json", [{"id": "a"}])
        right = _write(tmp_path / "right.json", [])

        result = _invoke("diff", str(left), str(right))

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestStatsCommand:
    def _configs(self, tmp_path: Path) -> tuple[Path, Path]:
        user = _write(tmp_path / "user.json", {"mcpServers": {"a": {}, "b": {}}})
        project = _write(
            tmp_path / "project.json",
            {"mcpServers": {"b": {"command": "uvx"}}, "subAgents": {"reviewer": {"description": "Reviews"}}},
        )
        return user, project

    def test_provenance_classification(self, tmp_path: Path) -> None:
        user, project = self._configs(tmp_path)

        result = _invoke("stats", str(user), "--project", str(project), "--format", "json")

        assert result.exit_code == 0, result.output
        stats = json.loads(result.stdout)
        assert stats["totalMcp"] == 2
        assert stats["totalAgents"] == 1
        assert stats["overridden"] == 1
        assert stats["unique"] == 2
        assert stats["breakdown"]["project"] == {"total": 2, "mcp": 1, "agents": 1}

    def test_heuristic_classification(self, tmp_path: Path) -> None:
        user, project = self._configs(tmp_path)

        result = _invoke("stats", str(user), "--project", str(project), "--heuristic", "--format", "json")

        stats = json.loads(result.stdout)
        assert stats["totalCount"] == 4
        assert stats["breakdown"]["user"]["total"] == 2
        assert stats["overridden"] == 1
        assert stats["unique"] == 3

    def test_scope_filter(self, tmp_path: Path) -> None:
        user, project = self._configs(tmp_path)

        result = _invoke("stats", str(user), "--project", str(project), "--scope", "user", "--format", "json")

        assert json.loads(result.stdout)["totalCount"] == 1


class TestHealthCommand:
    def test_json_output(self, tmp_path: Path) -> None:
        caps = _write(
            tmp_path / "caps.json",
            [
                {"id": "a", "key": "a", "value": "npx", "source": "project"},
                {"id": "b", "key": "b", "value": "uvx", "source": "project"},
            ],
        )

        result = _invoke("health", str(caps), "--format", "json")

        assert result.exit_code == 0, result.output
        health = json.loads(result.stdout)
        assert health["projectId"] == "caps"
        assert health["status"] == "good"
        assert health["score"] == 84

    def test_table_lists_issues(self, tmp_path: Path) -> None:
        caps = _write(
            tmp_path / "caps.json",
            [{"id": "a", "key": "a", "value": None, "source": "project"}],
        )

        result = _invoke("health", str(caps), "--project-id", "demo")

        assert result.exit_code == 0, result.output
        assert "Health: demo" in result.stdout
        assert "missing value" in result.stdout


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "capscope" in result.output
