"""Subject normalization.

Strips the noise that commonly precedes a conventional commit type so the
type can be recognized:
- a leading ticket bracket: "[#123] feat: x" -> "feat: x"
- a leading run of non-letters: "✨ feat: x" -> "feat: x"
"""

import re

_TICKET_BRACKET_RE = re.compile(r"^\[[^\]]+\]\s+")
_NON_LETTER_PREFIX_RE = re.compile(r"^[^A-Za-z]+\s*")


def normalize_subject(subject: str) -> str:
    """Remove a leading ticket bracket, then a leading non-letter run.

    Each removal is applied at most once, in that order.

    Args:
        subject: The raw commit subject.

    Returns:
        The normalized subject.
    """
    normalized = _TICKET_BRACKET_RE.sub("", subject, count=1)
    normalized = _NON_LETTER_PREFIX_RE.sub("", normalized, count=1)
    return normalized
