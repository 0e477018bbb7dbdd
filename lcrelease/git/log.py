"""Commit listing.

Contains:
- get_commits: List the non-merge commits of a range as CommitRecord objects
- parse_log_output: Parse the raw output of the git log call
"""

from lcrelease.git.runner import _run_git_command
from lcrelease.notes.models import CommitRecord

DATE_FORMAT = "%d/%m/%Y - %H:%M"

# Unit separator: never present in emails or dates, unlikely in subjects
FIELD_SEPARATOR = "\x1f"

LOG_PRETTY_FORMAT = "format:%h%x1f%ae%x1f%ad%x1f%s"


def parse_log_output(output: str) -> list[CommitRecord]:
    """Parse git log output produced with LOG_PRETTY_FORMAT.

    Args:
        output: The stdout of the git log call.

    Returns:
        One CommitRecord per well-formed line, in git log order.
    """
    commits = []
    for line in output.split("\n"):
        if not line.strip():
            continue
        parts = line.split(FIELD_SEPARATOR, 3)
        if len(parts) < 3:
            # Skip lines that don't carry id, email and date
            continue
        # An empty last subject loses its separator to output stripping
        short_id, author_email, date = parts[:3]
        subject = parts[3] if len(parts) == 4 else ""
        commits.append(
            CommitRecord(
                short_id=short_id,
                author_email=author_email,
                date=date,
                subject=subject,
            )
        )
    return commits


def get_commits(commit_range: str) -> list[CommitRecord]:
    """Get the non-merge commits of a range.

    Args:
        commit_range: A git range such as "origin/main..feature".

    Returns:
        List of CommitRecord, newest first.

    Raises:
        GitError: If git log fails.
    """
    output = _run_git_command([
        "log",
        commit_range,
        "--no-merges",
        f"--date=format:{DATE_FORMAT}",
        f"--pretty={LOG_PRETTY_FORMAT}",
    ])
    if not output:
        return []
    return parse_log_output(output)
