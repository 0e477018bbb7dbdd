"""Allow running as `python -m lcrelease`."""

from lcrelease.cli import app

app()
