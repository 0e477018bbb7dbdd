"""Line rendering.

Contains:
- username_from_email: Derive an author handle from an email
- build_message: Build the ticket-prefixed, labelled message
- render_commit: Produce the RenderedLine of one commit
"""

import re

from lcrelease.notes.classify import has_type_prefix
from lcrelease.notes.constants import Category
from lcrelease.notes.links import commit_url, decorate_link, user_url
from lcrelease.notes.models import CommitRecord, RenderConfig, RenderedLine

# Noise, type token, optional scope and breaking marker, on the raw subject
_RAW_TYPE_PREFIX_RE = re.compile(r"^[^A-Za-z]*[a-z]+(\(.+\))?!?: ")


def username_from_email(email: str) -> str:
    """Derive a handle from an author email.

    Args:
        email: The author email, e.g. "alice@example.com".

    Returns:
        The part before the first "@", or the whole email when there is no
        "@" or it is the first character.
    """
    at = email.find("@")
    if at <= 0:
        return email
    return email[:at]


def build_message(subject: str, category: Category, ticket_prefix: str) -> str:
    """Build the message field of a commit.

    "[#12] feat(ui): add x" becomes "[#12] ✨ feat — add x". Subjects
    without a type token are only prefixed with the ticket.

    Args:
        subject: The raw commit subject.
        category: The commit category.
        ticket_prefix: Formatted ticket prefix, possibly empty.

    Returns:
        The message field.
    """
    if not has_type_prefix(subject):
        return f"{ticket_prefix}{subject}"
    replacement = f"{ticket_prefix}{category.label} — "
    # A lambda keeps backslashes in the replacement literal
    return _RAW_TYPE_PREFIX_RE.sub(lambda _: replacement, subject, count=1)


def render_commit(
    commit: CommitRecord,
    category: Category,
    ticket_prefix: str,
    config: RenderConfig,
) -> RenderedLine:
    """Render one commit.

    Args:
        commit: The commit record.
        category: Its category.
        ticket_prefix: Its formatted ticket prefix.
        config: The rendering configuration.

    Returns:
        The RenderedLine.
    """
    handle = username_from_email(commit.author_email)

    sha_field = decorate_link(
        commit_url(config.commit_url_base, commit.short_id),
        commit.short_id,
        config.link_mode,
    )
    author_field = decorate_link(
        user_url(config.user_url_base, handle),
        f"@{handle}",
        config.link_mode,
    )

    return RenderedLine(
        sort_key=f"{category.rank:02d}",
        sha_field=sha_field,
        author_field=author_field,
        date_field=commit.date,
        message_field=build_message(commit.subject, category, ticket_prefix),
    )
