"""Tests for the story command group."""

from __future__ import annotations

import json
import uuid
from typing import Any

import pytest
from click.testing import CliRunner

from gsdx.cli import cli


def _create(cli_runner: CliRunner, name: str = "Backlog") -> dict[str, Any]:
    result = cli_runner.invoke(cli, ["--json", "story", "create", name])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)["data"]["story"]


@pytest.mark.usefixtures("_isolated_root")
class TestStoryCommands:
    def test_create_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["story", "create", "Backlog"])
        assert result.exit_code == 0
        assert "OK: create_story" in result.output
        assert '"name":"Backlog"' in result.output

    def test_create_json(self, cli_runner: CliRunner) -> None:
        story = _create(cli_runner)
        assert story["name"] == "Backlog"
        uuid.UUID(story["story_id"])

    def test_create_empty_name_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["story", "create", "  "])
        assert result.exit_code == 1
        assert "INVALID_ARGUMENT" in result.output

    def test_list(self, cli_runner: CliRunner) -> None:
        for name in ("A", "B", "C"):
            _create(cli_runner, name)
        result = cli_runner.invoke(cli, ["--json", "story", "list", "--limit", "2"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        # Limit is clamped up to the minimum page size.
        assert [s["name"] for s in data["stories"]] == ["A", "B", "C"]

    def test_update(self, cli_runner: CliRunner) -> None:
        story = _create(cli_runner)
        result = cli_runner.invoke(
            cli, ["--json", "story", "update", story["story_id"], "Sprint"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["story"]["name"] == "Sprint"

    def test_update_unknown_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["story", "update", str(uuid.uuid4()), "x"])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output

    def test_delete(self, cli_runner: CliRunner) -> None:
        story = _create(cli_runner)
        result = cli_runner.invoke(cli, ["story", "delete", story["story_id"]])
        assert result.exit_code == 0
        again = cli_runner.invoke(cli, ["story", "delete", story["story_id"]])
        assert again.exit_code == 1

    def test_malformed_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["story", "delete", "xyz"])
        assert result.exit_code == 1
        assert "INVALID_ARGUMENT" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["story", "--examples"])
        assert result.exit_code == 0
        assert "gsdx story create" in result.output
