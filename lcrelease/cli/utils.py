"""Shared utility functions for CLI commands."""

import sys
from typing import Optional

import typer

from lcrelease.config import (
    resolve_link_mode,
    resolve_max_message_width,
    resolve_ticket_from_branch,
)
from lcrelease.git import RemoteLocation, build_url_bases
from lcrelease.notes import LinkMode, RenderConfig


def stdout_is_tty() -> bool:
    """Check whether stdout is an interactive terminal."""
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def build_render_config(
    repo_config: dict,
    location: Optional[RemoteLocation],
    remote: str,
    link_mode: Optional[LinkMode] = None,
    ticket_from_branch: Optional[bool] = None,
) -> RenderConfig:
    """Build the effective rendering configuration.

    Args:
        repo_config: Settings from .lcrelease/config.yaml.
        location: Parsed remote location, None when links can't be built.
        remote: The remote name.
        link_mode: Value of --link-mode, if given.
        ticket_from_branch: Value of --ticket-from-branch, if given.

    Returns:
        RenderConfig for the run.
    """
    commit_url_base, user_url_base = build_url_bases(location)
    return RenderConfig(
        link_mode=resolve_link_mode(link_mode, repo_config.get("link_mode"), stdout_is_tty()),
        commit_url_base=commit_url_base,
        user_url_base=user_url_base,
        ticket_from_branch=resolve_ticket_from_branch(
            ticket_from_branch, repo_config.get("ticket_from_branch")
        ),
        remote_name=remote,
        max_message_width=resolve_max_message_width(repo_config.get("max_message_width")),
    )


def display_debug_info(
    remote_url: str,
    location: Optional[RemoteLocation],
    commit_range: str,
    config: RenderConfig,
) -> None:
    """Write the resolved run settings to stderr.

    Args:
        remote_url: Raw URL of the remote.
        location: Parsed remote location, if any.
        commit_range: The git range being listed.
        config: The effective rendering configuration.
    """
    def show(name: str, value: Optional[str]) -> None:
        typer.echo(f"[lc-release] {name}: {value or '<empty>'}", err=True)

    show(f"{config.remote_name} url", remote_url)
    show("parsed host", location.host if location else None)
    show("parsed path", location.path if location else None)
    show(f"{config.remote_name} project_url", config.commit_url_base)
    show("user_base", config.user_url_base)
    show("range", commit_range)
    show("link_mode", config.link_mode.value)
    show("ticket_from_branch", str(int(config.ticket_from_branch)))
