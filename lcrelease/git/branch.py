"""Git branch utilities.

Contains:
- get_remote_branches_containing: List remote branches containing a commit
- GitBranchLookup: Branch lookup used by the ticket fallback
"""

from lcrelease.git.runner import _run_git_command_quiet


def get_remote_branches_containing(sha: str) -> list[str]:
    """Get the remote branches that contain a commit.

    This runs one `git branch -r --contains` per call, which can be slow on
    repositories with many remote refs.

    Args:
        sha: The commit id.

    Returns:
        Branch names in git's order, e.g. ["origin/ABC-12-login", "origin/main"].
        Empty list if git fails.
    """
    output = _run_git_command_quiet(["branch", "-r", "--contains", sha])

    branches = []
    for line in output.splitlines():
        name = line.lstrip(" \t*")
        if name:
            branches.append(name)
    return branches


class GitBranchLookup:
    """Branch lookup backed by the local git repository."""

    def branches_containing(self, sha: str) -> list[str]:
        return get_remote_branches_containing(sha)
