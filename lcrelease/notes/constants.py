"""Constants for the lcrelease notes module.

Contains:
- Category: Release note categories (conventional commit types + other)
- CONVENTIONAL_TYPES: Categories in classification order
- CATEGORY_RANKS / CATEGORY_LABELS: Sort rank and display label per category
- LinkMode: How commit ids and authors are decorated
"""

from enum import Enum


class Category(Enum):
    """Release note categories."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"
    OTHER = "other"

    @property
    def rank(self) -> int:
        return CATEGORY_RANKS[self]

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


# Classification order; the first matching type wins
CONVENTIONAL_TYPES = [
    Category.FEAT,
    Category.FIX,
    Category.DOCS,
    Category.STYLE,
    Category.REFACTOR,
    Category.PERF,
    Category.TEST,
    Category.BUILD,
    Category.CI,
    Category.CHORE,
    Category.REVERT,
]

CATEGORY_RANKS = {
    Category.FEAT: 1,
    Category.FIX: 2,
    Category.DOCS: 3,
    Category.STYLE: 4,
    Category.REFACTOR: 5,
    Category.PERF: 6,
    Category.TEST: 7,
    Category.BUILD: 8,
    Category.CI: 9,
    Category.CHORE: 10,
    Category.REVERT: 11,
    Category.OTHER: 99,
}

CATEGORY_LABELS = {
    Category.FEAT: "✨ feat",
    Category.FIX: "🐛 fix",
    Category.DOCS: "📚 docs",
    Category.STYLE: "🎨 style",
    Category.REFACTOR: "♻️ refactor",
    Category.PERF: "⚡ perf",
    Category.TEST: "🧪 test",
    Category.BUILD: "🏗️ build",
    Category.CI: "🤖 ci",
    Category.CHORE: "🧹 chore",
    Category.REVERT: "⏪ revert",
    Category.OTHER: "• other",
}


class LinkMode(Enum):
    """Link decoration applied to commit ids and author handles."""

    PLAIN = "off"
    TERMINAL_HYPERLINK = "osc8"
    MARKDOWN = "md"


# Output layout
SHA_COLUMN_WIDTH = 10
AUTHOR_COLUMN_WIDTH = 18
DATE_COLUMN_WIDTH = 18
MAX_MESSAGE_WIDTH = 90
