"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from lcrelease.notes import CommitRecord


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_commits():
    """Commits as they come out of git log, newest first."""
    return [
        CommitRecord(
            short_id="a1b2c3d",
            author_email="ccassinat@x.com",
            date="16/02/2026 - 15:42",
            subject="[#12345] feat: add sorting",
        ),
        CommitRecord(
            short_id="b2c3d4e",
            author_email="bob@example.com",
            date="15/02/2026 - 10:01",
            subject="fix(api): handle empty range ABC-77",
        ),
        CommitRecord(
            short_id="c3d4e5f",
            author_email="alice@example.com",
            date="14/02/2026 - 09:30",
            subject="Update README",
        ),
        CommitRecord(
            short_id="d4e5f6a",
            author_email="alice@example.com",
            date="13/02/2026 - 18:12",
            subject="docs: describe link modes",
        ),
    ]


@pytest.fixture
def sample_log_output():
    """Raw git log output using the unit separator format."""
    return "\n".join([
        "a1b2c3d\x1fccassinat@x.com\x1f16/02/2026 - 15:42\x1f[#12345] feat: add sorting",
        "b2c3d4e\x1fbob@example.com\x1f15/02/2026 - 10:01\x1ffix(api): handle a|b pipes",
    ])

