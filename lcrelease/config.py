"""Configuration settings for lcrelease.

Settings are resolved with this precedence:
1. Command line flags
2. Environment variables (LC_RELEASE_*)
3. Repository config (.lcrelease/config.yaml)
4. Built-in defaults
"""

import os
from typing import Any, Optional

from lcrelease.notes.constants import MAX_MESSAGE_WIDTH, LinkMode

# Environment variables
ENV_LINK_MODE = "LC_RELEASE_LINK_MODE"
ENV_DEBUG = "LC_RELEASE_DEBUG"
ENV_TICKET_FROM_BRANCH = "LC_RELEASE_TICKET_FROM_BRANCH"

DEFAULT_REMOTE = "origin"

_TRUTHY_VALUES = {"1", "true", "yes", "on"}


def is_truthy(value: Any) -> bool:
    """Interpret an environment or YAML value as a boolean flag."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY_VALUES


def parse_link_mode(value: str) -> LinkMode:
    """Parse a link mode name ("off", "osc8" or "md").

    Unknown values select terminal hyperlinks.
    """
    try:
        return LinkMode(value.strip().lower())
    except ValueError:
        return LinkMode.TERMINAL_HYPERLINK


def default_link_mode(is_tty: bool) -> LinkMode:
    """Terminal hyperlinks on a TTY, Markdown when piped."""
    if is_tty:
        return LinkMode.TERMINAL_HYPERLINK
    return LinkMode.MARKDOWN


def resolve_link_mode(
    cli_value: Optional[LinkMode],
    repo_value: Optional[str],
    is_tty: bool,
) -> LinkMode:
    """Resolve the effective link mode.

    Args:
        cli_value: Value of --link-mode, if given.
        repo_value: Value of link_mode in the repository config, if any.
        is_tty: Whether stdout is an interactive terminal.

    Returns:
        The LinkMode to use for the run.
    """
    if cli_value is not None:
        return cli_value
    env_value = os.environ.get(ENV_LINK_MODE, "")
    if env_value:
        return parse_link_mode(env_value)
    # YAML reads an unquoted `off` as False
    if repo_value is False:
        return LinkMode.PLAIN
    if repo_value:
        return parse_link_mode(str(repo_value))
    return default_link_mode(is_tty)


def resolve_ticket_from_branch(cli_value: Optional[bool], repo_value: Any = None) -> bool:
    """Resolve whether tickets may be derived from containing branches."""
    if cli_value is not None:
        return cli_value
    env_value = os.environ.get(ENV_TICKET_FROM_BRANCH)
    if env_value is not None and env_value != "":
        return is_truthy(env_value)
    return is_truthy(repo_value)


def resolve_debug(cli_flag: bool) -> bool:
    """Debug output is on with --debug or LC_RELEASE_DEBUG=1."""
    return cli_flag or is_truthy(os.environ.get(ENV_DEBUG))


def resolve_max_message_width(repo_value: Any = None) -> int:
    """Use a positive integer from the repository config, else the default."""
    try:
        width = int(repo_value)
    except (TypeError, ValueError):
        return MAX_MESSAGE_WIDTH
    return width if width > 0 else MAX_MESSAGE_WIDTH
