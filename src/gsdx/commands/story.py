"""Command group: story management (create, list, update, delete)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gsdx.commands._base import GsdxGroup
from gsdx.services.adapter import (
    CreateStoryRequest,
    DeleteStoryRequest,
    ListStoriesRequest,
    UpdateStoryRequest,
)

if TYPE_CHECKING:
    from gsdx.commands._context import AppContext

_STORY_EXAMPLES = """\
  gsdx story create "Release 1.2"
  gsdx story list --cursor 1 --limit 25
  gsdx story update 9b2f6c1e-7d7a-4a53-9d0e-3f1f9e0c2a11 "Release 1.3"
  gsdx --json story delete 9b2f6c1e-7d7a-4a53-9d0e-3f1f9e0c2a11"""


@click.group(cls=GsdxGroup, examples=_STORY_EXAMPLES)
def story() -> None:
    """Create, list, rename, and delete stories."""


@story.command()
@click.argument("name")
@click.pass_obj
def create(app: AppContext, name: str) -> None:
    """Create a story named NAME."""
    app.emit(app.service.create_story(CreateStoryRequest(name=name)))


@story.command("list")
@click.option("--cursor", default=1, type=int, show_default=True, help="First seqno to return.")
@click.option("--limit", default=10, type=int, show_default=True, help="Page size (10-100).")
@click.pass_obj
def list_cmd(app: AppContext, cursor: int, limit: int) -> None:
    """List one page of stories in insertion order."""
    app.emit(app.service.list_stories(ListStoriesRequest(cursor=cursor, limit=limit)))


@story.command()
@click.argument("story_id")
@click.argument("name")
@click.pass_obj
def update(app: AppContext, story_id: str, name: str) -> None:
    """Rename story STORY_ID to NAME."""
    app.emit(app.service.update_story(UpdateStoryRequest(story_id=story_id, name=name)))


@story.command()
@click.argument("story_id")
@click.pass_obj
def delete(app: AppContext, story_id: str) -> None:
    """Delete story STORY_ID and all of its tasks."""
    app.emit(app.service.delete_story(DeleteStoryRequest(story_id=story_id)))
