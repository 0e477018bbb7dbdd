"""Release notes pipeline.

Contains:
- ReleaseNotesPipeline: Classify, extract tickets and render a list of commits
- sort_lines: Order rendered lines by category rank then message
- format_line: Lay out one rendered line in fixed-width columns
"""

from typing import Iterable, Optional

from lcrelease.notes.classify import classify_subject
from lcrelease.notes.constants import (
    AUTHOR_COLUMN_WIDTH,
    DATE_COLUMN_WIDTH,
    MAX_MESSAGE_WIDTH,
    SHA_COLUMN_WIDTH,
)
from lcrelease.notes.models import CommitRecord, RenderConfig, RenderedLine
from lcrelease.notes.render import render_commit
from lcrelease.notes.tickets import BranchLookup, extract_ticket, format_ticket


def sort_lines(lines: Iterable[RenderedLine]) -> list[RenderedLine]:
    """Stable sort by (sort key, message).

    Lines of the same category are ordered by their rendered message text,
    not by date.
    """
    return sorted(lines, key=lambda line: (line.sort_key, line.message_field))


def format_line(line: RenderedLine, max_message_width: int = MAX_MESSAGE_WIDTH) -> str:
    """Lay out a rendered line as left-aligned columns.

    The message is cut at max_message_width characters.
    """
    return (
        f"{line.sha_field:<{SHA_COLUMN_WIDTH}} "
        f"{line.author_field:<{AUTHOR_COLUMN_WIDTH}} "
        f"{line.date_field:<{DATE_COLUMN_WIDTH}} "
        f"{line.message_field[:max_message_width]}"
    )


class ReleaseNotesPipeline:
    """Turns commit records into sorted release note lines.

    Args:
        config: Rendering configuration for the whole run.
        branch_lookup: Optional source of branch names, only used when
            config.ticket_from_branch is set.
    """

    def __init__(self, config: RenderConfig, branch_lookup: Optional[BranchLookup] = None):
        self.config = config
        self.branch_lookup = branch_lookup

    def render(self, commit: CommitRecord) -> RenderedLine:
        """Classify, extract the ticket of and render one commit."""
        category = classify_subject(commit.subject)
        ticket = extract_ticket(
            commit.subject,
            commit.short_id,
            lookup=self.branch_lookup,
            from_branch=self.config.ticket_from_branch,
            remote=self.config.remote_name,
        )
        return render_commit(commit, category, format_ticket(ticket), self.config)

    def run(self, commits: Iterable[CommitRecord]) -> list[RenderedLine]:
        """Render every commit and return the sorted lines."""
        return sort_lines(self.render(commit) for commit in commits)

    def format(self, commits: Iterable[CommitRecord]) -> list[str]:
        """Render, sort and lay out every commit."""
        return [
            format_line(line, self.config.max_message_width)
            for line in self.run(commits)
        ]
