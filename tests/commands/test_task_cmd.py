"""Tests for the task command group."""

from __future__ import annotations

import json
import uuid
from typing import Any

import pytest
from click.testing import CliRunner

from gsdx.cli import cli


def _invoke_json(cli_runner: CliRunner, *args: str) -> dict[str, Any]:
    result = cli_runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)["data"]


@pytest.fixture
def story_id(_isolated_root: None, cli_runner: CliRunner) -> str:
    return _invoke_json(cli_runner, "story", "create", "Backlog")["story"]["story_id"]


@pytest.mark.usefixtures("_isolated_root")
class TestTaskCommands:
    def test_create_and_list(self, cli_runner: CliRunner, story_id: str) -> None:
        task = _invoke_json(cli_runner, "task", "create", story_id, "Write docs")["task"]
        assert task["status"] == "incomplete"
        tasks = _invoke_json(cli_runner, "task", "list", story_id)["tasks"]
        assert tasks == [task]

    def test_create_with_status(self, cli_runner: CliRunner, story_id: str) -> None:
        data = _invoke_json(cli_runner, "task", "create", story_id, "T", "--status", "complete")
        assert data["task"]["status"] == "complete"

    def test_bad_status_choice(self, cli_runner: CliRunner, story_id: str) -> None:
        result = cli_runner.invoke(cli, ["task", "create", story_id, "T", "--status", "done"])
        assert result.exit_code == 2

    def test_update_status_keeps_name(self, cli_runner: CliRunner, story_id: str) -> None:
        task = _invoke_json(cli_runner, "task", "create", story_id, "T")["task"]
        data = _invoke_json(cli_runner, "task", "update", task["task_id"], "--status", "complete")
        assert data["task"]["name"] == "T"
        assert data["task"]["status"] == "complete"

    def test_update_name(self, cli_runner: CliRunner, story_id: str) -> None:
        task = _invoke_json(cli_runner, "task", "create", story_id, "T")["task"]
        data = _invoke_json(cli_runner, "task", "update", task["task_id"], "--name", "T2")
        assert data["task"]["name"] == "T2"

    def test_delete(self, cli_runner: CliRunner, story_id: str) -> None:
        task = _invoke_json(cli_runner, "task", "create", story_id, "T")["task"]
        result = cli_runner.invoke(cli, ["task", "delete", task["task_id"]])
        assert result.exit_code == 0
        assert _invoke_json(cli_runner, "task", "list", story_id)["tasks"] == []

    def test_list_unknown_story(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["task", "list", str(uuid.uuid4())])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output
