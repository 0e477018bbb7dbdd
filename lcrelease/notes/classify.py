"""Conventional commit classification."""

import re

from lcrelease.notes.constants import CONVENTIONAL_TYPES, Category
from lcrelease.notes.normalize import normalize_subject

# Scope and breaking marker are accepted but don't change the category
_TYPE_PATTERNS = [
    (re.compile(rf"^{category.value}(\(.+\))?!?: "), category)
    for category in CONVENTIONAL_TYPES
]

# Any lowercase type token, used to rewrite the message prefix
GENERIC_TYPE_RE = re.compile(r"^[a-z]+(\(.+\))?!?: ")


def classify_subject(subject: str) -> Category:
    """Classify a raw commit subject.

    The normalized subject is tested against each type in CONVENTIONAL_TYPES
    order and the first match wins.

    Args:
        subject: The raw commit subject.

    Returns:
        The matching Category, or Category.OTHER.
    """
    normalized = normalize_subject(subject)
    for pattern, category in _TYPE_PATTERNS:
        if pattern.match(normalized):
            return category
    return Category.OTHER


def has_type_prefix(subject: str) -> bool:
    """Check whether the normalized subject starts with any type token.

    Unlike classify_subject, unknown lowercase types (e.g. "wip: x") count.
    """
    return GENERIC_TYPE_RE.match(normalize_subject(subject)) is not None
