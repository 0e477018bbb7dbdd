"""Data models for the lcrelease notes module.

Contains:
- CommitRecord: Pydantic model for one commit read from git log
- RenderConfig: Immutable rendering configuration for a run
- RenderedLine: Output fields of one rendered commit
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from lcrelease.notes.constants import LinkMode, MAX_MESSAGE_WIDTH


class CommitRecord(BaseModel):
    """A non-merge commit of the requested range.

    Attributes:
        short_id: Abbreviated commit id.
        author_email: Raw author email.
        date: Display date (dd/mm/YYYY - HH:MM), never parsed.
        subject: First line of the commit message.
    """

    model_config = ConfigDict(frozen=True)

    short_id: str
    author_email: str = ""
    date: str = ""
    subject: str = ""

    @field_validator("author_email", "date", "subject", mode="before")
    @classmethod
    def ensure_string(cls, v):
        """Treat missing fields as empty strings."""
        if v is None:
            return ""
        return v


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for release note rendering, fixed for a whole run."""

    link_mode: LinkMode = LinkMode.PLAIN
    commit_url_base: Optional[str] = None  # project URL, e.g. https://host/group/proj
    user_url_base: Optional[str] = None  # e.g. https://host
    ticket_from_branch: bool = False
    remote_name: str = "origin"
    max_message_width: int = MAX_MESSAGE_WIDTH


@dataclass
class RenderedLine:
    """A rendered commit, before sorting and column layout."""

    sort_key: str
    sha_field: str
    author_field: str
    date_field: str
    message_field: str
