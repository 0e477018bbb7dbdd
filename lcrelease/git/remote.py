"""Remote URL detection.

Derives the web URLs used for commit and user links from the URL of a git
remote. Recognized shapes:

- https://host/group/project(.git)
- ssh://user@host[:port]/group/project(.git)
- user@host:group/project(.git)
- host:group/project(.git)
"""

import re
from dataclasses import dataclass
from typing import Optional

from lcrelease.git.runner import _run_git_command_quiet

_HTTP_RE = re.compile(r"^https?://([^/]+)/(.*)$")
_SSH_RE = re.compile(r"^ssh://[^@]+@([^/:]+)(?::[0-9]+)?/(.*)$")
_SCP_RE = re.compile(r"^[^@]+@([^:]+):(.+)$")
_BARE_RE = re.compile(r"^([^:]+):(.+)$")


@dataclass(frozen=True)
class RemoteLocation:
    """Host and project path parsed from a remote URL."""

    host: str
    path: str


def _strip_git_suffix(path: str) -> str:
    return re.sub(r"\.git$", "", path)


def get_remote_url(remote: str = "origin") -> str:
    """Get the URL of a remote.

    Args:
        remote: The remote name.

    Returns:
        The URL with carriage returns removed, or "" if the remote is unknown.
    """
    return _run_git_command_quiet(["remote", "get-url", remote]).replace("\r", "")


def parse_remote_url(url: str) -> Optional[RemoteLocation]:
    """Parse a remote URL into host and project path.

    Args:
        url: The remote URL.

    Returns:
        RemoteLocation, or None if the shape is not recognized.
    """
    if not url:
        return None

    if re.match(r"^https?://", url):
        match = _HTTP_RE.match(url)
    elif url.startswith("ssh://"):
        match = _SSH_RE.match(url)
    elif _SCP_RE.match(url):
        match = _SCP_RE.match(url)
    else:
        match = _BARE_RE.match(url)
        # host:path needs a group/project path to be told apart from noise
        if match and "/" not in match.group(2):
            return None

    if not match:
        return None

    host = match.group(1)
    path = _strip_git_suffix(match.group(2))
    if not host or not path:
        return None
    return RemoteLocation(host=host, path=path)


def build_url_bases(location: Optional[RemoteLocation]) -> tuple[Optional[str], Optional[str]]:
    """Build the web URL bases used for links.

    Args:
        location: Parsed remote location, or None.

    Returns:
        (project_url, user_base), e.g. ("https://host/group/proj", "https://host"),
        or (None, None) without a location.
    """
    if location is None:
        return None, None
    return f"https://{location.host}/{location.path}", f"https://{location.host}"
