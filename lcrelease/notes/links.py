"""Link decoration for commit ids and author handles.

Contains:
- osc8_link: Terminal hyperlink escape sequence
- markdown_link: Markdown inline link
- decorate_link: Apply the configured LinkMode
"""

from typing import Optional

from lcrelease.notes.constants import LinkMode


def osc8_link(url: str, text: str) -> str:
    """Wrap text in an OSC 8 hyperlink (iTerm2, VS Code, Warp, ...)."""
    return f"\033]8;;{url}\033\\{text}\033]8;;\033\\"


def markdown_link(url: str, text: str) -> str:
    """Render a Markdown inline link."""
    return f"[{text}]({url})"


def decorate_link(url: Optional[str], text: str, mode: LinkMode) -> str:
    """Decorate text with a link according to the link mode.

    Args:
        url: Target URL. Empty or None means no link.
        text: The visible text.
        mode: The link mode.

    Returns:
        The decorated text, or text unchanged when links are off.
    """
    if mode == LinkMode.PLAIN or not url:
        return text
    if mode == LinkMode.MARKDOWN:
        return markdown_link(url, text)
    return osc8_link(url, text)


def commit_url(base: Optional[str], sha: str) -> str:
    """Build the web URL of a commit, or "" without a project URL."""
    if not base:
        return ""
    return f"{base}/-/commit/{sha}"


def user_url(base: Optional[str], handle: str) -> str:
    """Build the web URL of a user profile, or "" without a host URL."""
    if not base:
        return ""
    return f"{base}/{handle}"
