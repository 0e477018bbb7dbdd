"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- GitNotFoundError: Raised when the git executable is missing
- RefNotFoundError: Raised when a reference cannot be resolved
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class GitNotFoundError(GitError):
    """Raised when git is not installed or not in PATH."""

    pass


class RefNotFoundError(GitError):
    """Raised when a branch, remote branch or tag cannot be resolved."""

    def __init__(self, ref: str):
        self.ref = ref
        super().__init__(f"Ref not found: {ref}")
