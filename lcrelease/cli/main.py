"""Main CLI command for generating release notes."""

from typing import Optional

import typer

from lcrelease import __version__
from lcrelease.config import DEFAULT_REMOTE, resolve_debug
from lcrelease.git import (
    GitBranchLookup,
    GitError,
    GitNotFoundError,
    RefNotFoundError,
    get_commits,
    get_remote_url,
    get_repo_root,
    parse_remote_url,
    resolve_range,
)
from lcrelease.notes import LinkMode, ReleaseNotesPipeline
from lcrelease.user_config import get_release_config
from lcrelease.cli.utils import build_render_config, display_debug_info


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lc-release {__version__}")
        raise typer.Exit()


def release_command(
    target: str = typer.Argument(
        ...,
        help="Branch, remote branch or tag to list (the source when a destination is given)",
    ),
    destination: Optional[str] = typer.Argument(
        None,
        help="Destination reference; lists what <target> would bring into it",
    ),
    link_mode: Optional[LinkMode] = typer.Option(
        None,
        "--link-mode",
        "-l",
        case_sensitive=False,
        help="Link style: osc8 (terminal), md (Markdown) or off. "
        "Defaults to osc8 on a terminal, md otherwise",
    ),
    ticket_from_branch: Optional[bool] = typer.Option(
        None,
        "--ticket-from-branch/--no-ticket-from-branch",
        help="When a message has no ticket, look for one in the remote branches "
        "containing the commit (can be slow)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Print the resolved remote, range and link settings to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """List the commits between two references as sorted release notes.

    lc-release <target> lists <remote>/(main|master)..<target>.
    lc-release <source> <destination> lists <destination>..<source>.
    Merge commits are skipped.
    """
    try:
        # Step 1: Repository settings
        repo_root = get_repo_root()
        repo_config = get_release_config(repo_root)
        remote = str(repo_config.get("remote") or DEFAULT_REMOTE)

        # Step 2: Resolve the range before doing anything else
        commit_range = resolve_range(target, destination, remote)

        # Step 3: Link bases from the remote URL (links degrade silently)
        remote_url = get_remote_url(remote)
        location = parse_remote_url(remote_url)

        config = build_render_config(
            repo_config,
            location,
            remote,
            link_mode=link_mode,
            ticket_from_branch=ticket_from_branch,
        )

        if resolve_debug(debug):
            display_debug_info(remote_url, location, commit_range, config)

        # Step 4: Render and print
        commits = get_commits(commit_range)
        pipeline = ReleaseNotesPipeline(config, branch_lookup=GitBranchLookup())
        for line in pipeline.format(commits):
            typer.echo(line)

    except RefNotFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except GitNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(127)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
