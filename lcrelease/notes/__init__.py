"""Release notes core for lcrelease.

Turns commit records into sorted, categorized release note lines:
- constants: Category, CONVENTIONAL_TYPES, CATEGORY_RANKS, CATEGORY_LABELS, LinkMode
- models: CommitRecord, RenderConfig, RenderedLine
- normalize: normalize_subject
- classify: classify_subject, has_type_prefix
- tickets: extract_ticket, extract_ticket_from_subject, extract_ticket_from_branches,
  format_ticket, BranchLookup
- links: decorate_link, osc8_link, markdown_link
- render: username_from_email, build_message, render_commit
- pipeline: ReleaseNotesPipeline, sort_lines, format_line
"""

# Constants
from lcrelease.notes.constants import (
    CATEGORY_LABELS,
    CATEGORY_RANKS,
    CONVENTIONAL_TYPES,
    MAX_MESSAGE_WIDTH,
    Category,
    LinkMode,
)

# Models
from lcrelease.notes.models import (
    CommitRecord,
    RenderConfig,
    RenderedLine,
)

# Classification
from lcrelease.notes.normalize import normalize_subject
from lcrelease.notes.classify import classify_subject, has_type_prefix

# Tickets
from lcrelease.notes.tickets import (
    BranchLookup,
    extract_ticket,
    extract_ticket_from_branches,
    extract_ticket_from_subject,
    format_ticket,
)

# Rendering
from lcrelease.notes.links import decorate_link, markdown_link, osc8_link
from lcrelease.notes.render import build_message, render_commit, username_from_email

# Pipeline
from lcrelease.notes.pipeline import ReleaseNotesPipeline, format_line, sort_lines


__all__ = [
    # Constants
    "Category",
    "CONVENTIONAL_TYPES",
    "CATEGORY_RANKS",
    "CATEGORY_LABELS",
    "LinkMode",
    "MAX_MESSAGE_WIDTH",
    # Models
    "CommitRecord",
    "RenderConfig",
    "RenderedLine",
    # Classification
    "normalize_subject",
    "classify_subject",
    "has_type_prefix",
    # Tickets
    "BranchLookup",
    "extract_ticket",
    "extract_ticket_from_subject",
    "extract_ticket_from_branches",
    "format_ticket",
    # Rendering
    "decorate_link",
    "osc8_link",
    "markdown_link",
    "username_from_email",
    "build_message",
    "render_commit",
    # Pipeline
    "ReleaseNotesPipeline",
    "sort_lines",
    "format_line",
]
