"""Git access for lcrelease.

This package provides the git collaborators of the release notes pipeline:
- exceptions: GitError, GitNotFoundError, RefNotFoundError
- runner: _run_git_command, _run_git_command_quiet, git_succeeds, get_repo_root
- refs: ref_exists, resolve_ref, get_default_base, resolve_range
- remote: RemoteLocation, get_remote_url, parse_remote_url, build_url_bases
- log: get_commits, parse_log_output
- branch: get_remote_branches_containing, GitBranchLookup
"""

# Exceptions
from lcrelease.git.exceptions import (
    GitError,
    GitNotFoundError,
    RefNotFoundError,
)

# Runner utilities
from lcrelease.git.runner import (
    _run_git_command,
    _run_git_command_quiet,
    git_succeeds,
    get_repo_root,
)

# Reference utilities
from lcrelease.git.refs import (
    ref_exists,
    resolve_ref,
    get_default_base,
    resolve_range,
)

# Remote utilities
from lcrelease.git.remote import (
    RemoteLocation,
    get_remote_url,
    parse_remote_url,
    build_url_bases,
)

# Log utilities
from lcrelease.git.log import (
    get_commits,
    parse_log_output,
)

# Branch utilities
from lcrelease.git.branch import (
    get_remote_branches_containing,
    GitBranchLookup,
)


__all__ = [
    # Exceptions
    "GitError",
    "GitNotFoundError",
    "RefNotFoundError",
    # Runner
    "_run_git_command",
    "_run_git_command_quiet",
    "git_succeeds",
    "get_repo_root",
    # Refs
    "ref_exists",
    "resolve_ref",
    "get_default_base",
    "resolve_range",
    # Remote
    "RemoteLocation",
    "get_remote_url",
    "parse_remote_url",
    "build_url_bases",
    # Log
    "get_commits",
    "parse_log_output",
    # Branch
    "get_remote_branches_containing",
    "GitBranchLookup",
]
