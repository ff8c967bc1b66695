"""Command group: task management (list, create, update, delete)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gsdx.commands._base import GsdxGroup
from gsdx.domain.types import Status
from gsdx.services.adapter import (
    CreateTaskRequest,
    DeleteTaskRequest,
    ListTasksRequest,
    UpdateTaskRequest,
)

if TYPE_CHECKING:
    from gsdx.commands._context import AppContext

_STATUS_CHOICE = click.Choice([s.value for s in Status], case_sensitive=False)

_TASK_EXAMPLES = """\
  gsdx task list 9b2f6c1e-7d7a-4a53-9d0e-3f1f9e0c2a11
  gsdx task create 9b2f6c1e-7d7a-4a53-9d0e-3f1f9e0c2a11 "Write changelog"
  gsdx task update 4c1d0e3a-2b5f-4e6a-8c7d-1a2b3c4d5e6f --status complete
  gsdx task update 4c1d0e3a-2b5f-4e6a-8c7d-1a2b3c4d5e6f --name "Publish changelog"
  gsdx task delete 4c1d0e3a-2b5f-4e6a-8c7d-1a2b3c4d5e6f"""


@click.group(cls=GsdxGroup, examples=_TASK_EXAMPLES)
def task() -> None:
    """List, create, update, and delete the tasks of a story."""


@task.command("list")
@click.argument("story_id")
@click.pass_obj
def list_cmd(app: AppContext, story_id: str) -> None:
    """List the tasks of story STORY_ID, oldest first."""
    app.emit(app.service.list_tasks(ListTasksRequest(story_id=story_id)))


@task.command()
@click.argument("story_id")
@click.argument("name")
@click.option(
    "--status",
    type=_STATUS_CHOICE,
    default=Status.INCOMPLETE.value,
    show_default=True,
    help="Initial status.",
)
@click.pass_obj
def create(app: AppContext, story_id: str, name: str, status: str) -> None:
    """Create a task NAME in story STORY_ID."""
    request = CreateTaskRequest(story_id=story_id, name=name, status=status)
    app.emit(app.service.create_task(request))


@task.command()
@click.argument("task_id")
@click.option("--name", default=None, help="New name (unchanged when omitted).")
@click.option(
    "--status",
    type=_STATUS_CHOICE,
    default=Status.INCOMPLETE.value,
    show_default=True,
    help="New status; always written.",
)
@click.pass_obj
def update(app: AppContext, task_id: str, name: str | None, status: str) -> None:
    """Update task TASK_ID."""
    request = UpdateTaskRequest(task_id=task_id, name=name, status=status)
    app.emit(app.service.update_task(request))


@task.command()
@click.argument("task_id")
@click.pass_obj
def delete(app: AppContext, task_id: str) -> None:
    """Delete task TASK_ID."""
    app.emit(app.service.delete_task(DeleteTaskRequest(task_id=task_id)))
