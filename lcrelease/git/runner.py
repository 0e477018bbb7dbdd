"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output, raising on failure
- _run_git_command_quiet: Same, but an unsuccessful command gives ""
- git_succeeds: Whether a git command exits with status 0
- get_repo_root: Get the root directory of the current git repository

Only a missing git executable is always an error; whether a non-zero exit
is one depends on the caller.
"""

import subprocess
from pathlib import Path

from lcrelease.git.exceptions import GitError, GitNotFoundError


def _invoke_git(args: list[str]) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise GitNotFoundError("Git is not installed or not in PATH.")


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command, stripped.

    Raises:
        GitError: If the command exits with a non-zero status.
        GitNotFoundError: If git is not available.
    """
    result = _invoke_git(args)
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise GitError(f"Git command failed (exit {result.returncode}): git {' '.join(args)}\n{stderr}")
    return (result.stdout or "").strip()


def _run_git_command_quiet(args: list[str]) -> str:
    """Run a git command whose failure only means "nothing found".

    Used for lookups such as `git remote get-url` on a repository without
    that remote.

    Returns:
        The stripped stdout, or "" if the command fails.

    Raises:
        GitNotFoundError: If git is not available.
    """
    result = _invoke_git(args)
    if result.returncode != 0:
        return ""
    return (result.stdout or "").strip()


def git_succeeds(args: list[str]) -> bool:
    """Check whether a git command exits with status 0.

    Raises:
        GitNotFoundError: If git is not available.
    """
    return _invoke_git(args).returncode == 0


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    root = _run_git_command_quiet(["rev-parse", "--show-toplevel"])
    if not root:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
    return Path(root)
