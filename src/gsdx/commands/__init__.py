"""Subcommand modules for gsdx.

Provides register_commands() which uses deferred imports to keep
``gsdx --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from gsdx.commands.story import story
    from gsdx.commands.task import task

    cli.add_command(story)
    cli.add_command(task)

    # --- Standalone commands ---
    from gsdx.commands.migrate import migrate
    from gsdx.commands.serve import serve

    cli.add_command(migrate)
    cli.add_command(serve)
