"""Best-effort ticket extraction.

Contains:
- extract_ticket_from_subject: Find a ticket id in a commit subject
- extract_ticket_from_branches: Find a ticket id in remote branch names
- extract_ticket: Subject first, then the optional branch fallback
- format_ticket: Render a ticket as a message prefix
- BranchLookup: Interface of the branch-name source
"""

import re
from typing import Callable, Iterable, Optional, Protocol


class BranchLookup(Protocol):
    """Source of the remote branch names that contain a commit."""

    def branches_containing(self, sha: str) -> Iterable[str]:
        ...


def _digits_only(text: str) -> str:
    return re.sub(r"[^0-9]", "", text)


def _verbatim(text: str) -> str:
    return text


# Tried in order against the raw subject; the first family that matches wins
SUBJECT_TICKET_PATTERNS: list[tuple[re.Pattern, Callable[[str], str]]] = [
    # [#12345]
    (re.compile(r"\[#[0-9]+\]?"), _digits_only),
    # #12345
    (re.compile(r"#[0-9]+"), _digits_only),
    # ABC-123
    (re.compile(r"[A-Z][A-Z0-9]+-[0-9]+"), _verbatim),
    # 12345-foo
    (re.compile(r"(^|[^0-9])[0-9]{4,}[-_][A-Za-z0-9]"), _digits_only),
    # foo-12345
    (re.compile(r"[A-Za-z0-9][-_][0-9]{4,}([^0-9]|$)"), _digits_only),
]

_TRACKER_TICKET_RE = re.compile(r"^[A-Z][A-Z0-9]+-[0-9]+$")
_NUMERIC_TICKET_RE = re.compile(r"^[0-9]+$")


def extract_ticket_from_subject(subject: str) -> str:
    """Extract a ticket id from a raw commit subject.

    Args:
        subject: The raw commit subject.

    Returns:
        The ticket ("12345" or "ABC-123"), or "" if none is found.
    """
    for pattern, convert in SUBJECT_TICKET_PATTERNS:
        match = pattern.search(subject)
        if match:
            return convert(match.group(0))
    return ""


def _branch_ticket_patterns(remote: str) -> list[tuple[re.Pattern, Callable[[str], str]]]:
    prefix = re.escape(f"{remote}/")
    prefix_len = len(remote) + 1

    def strip_remote(text: str) -> str:
        return text[prefix_len:]

    return [
        # origin/ABC-123-foo
        (re.compile(prefix + r"[A-Z][A-Z0-9]+-[0-9]+"), strip_remote),
        # origin/12345-foo
        (re.compile(prefix + r"[0-9]{4,}[-_][A-Za-z0-9]"), _digits_only),
        # origin/foo-12345
        (re.compile(prefix + r"[A-Za-z0-9._/-]+[-_][0-9]{4,}"), _digits_only),
    ]


def extract_ticket_from_branches(branches: Iterable[str], remote: str = "origin") -> str:
    """Extract a ticket id from remote branch names.

    Branches are scanned in the given order and only those under `remote`
    are considered. For each branch the tracker pattern is tried first, then
    the leading-digit and trailing-digit ones.

    Args:
        branches: Remote branch names, e.g. "origin/ABC-12-login".
        remote: The remote whose branches are inspected.

    Returns:
        The ticket of the first branch that carries one, or "".
    """
    patterns = _branch_ticket_patterns(remote)
    for branch in branches:
        name = branch.strip()
        if not name.startswith(f"{remote}/"):
            continue
        for pattern, convert in patterns:
            match = pattern.search(name)
            if match:
                return convert(match.group(0))
    return ""


def extract_ticket(
    subject: str,
    sha: str,
    lookup: Optional[BranchLookup] = None,
    from_branch: bool = False,
    remote: str = "origin",
) -> str:
    """Extract a ticket for a commit.

    The branch lookup is only called when the subject carries no ticket and
    the fallback is enabled. It is called at most once for the commit.

    Args:
        subject: The raw commit subject.
        sha: The commit id, passed to the branch lookup.
        lookup: Optional source of branch names containing the commit.
        from_branch: Whether the branch fallback is enabled.
        remote: The remote whose branches are inspected.

    Returns:
        The ticket, or "".
    """
    ticket = extract_ticket_from_subject(subject)
    if ticket or not from_branch or lookup is None:
        return ticket
    return extract_ticket_from_branches(lookup.branches_containing(sha), remote)


def format_ticket(ticket: str) -> str:
    """Render a ticket as a message prefix.

    Args:
        ticket: The ticket id, possibly empty.

    Returns:
        "[ABC-123] ", "[#12345] ", "[other] " or "".
    """
    if not ticket:
        return ""
    if _TRACKER_TICKET_RE.match(ticket):
        return f"[{ticket}] "
    if _NUMERIC_TICKET_RE.match(ticket):
        return f"[#{ticket}] "
    return f"[{ticket}] "
