"""CLI entry point for lcrelease.

This module provides the `lc-release` application.
"""

import typer

from lcrelease.cli.main import release_command

# Main application
app = typer.Typer(
    name="lc-release",
    help="lc-release: sorted Conventional Commits release notes for a git range",
    add_completion=False,
)

app.command()(release_command)


__all__ = [
    "app",
    "release_command",
]
