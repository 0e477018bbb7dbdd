"""Reference and commit range resolution.

Contains:
- ref_exists: Check whether a fully qualified ref exists
- resolve_ref: Resolve a user-supplied name to a usable ref
- get_default_base: Find <remote>/main or <remote>/master
- resolve_range: Build the "<base>..<tip>" range for git log
"""

from typing import Optional

from lcrelease.git.exceptions import GitError, RefNotFoundError
from lcrelease.git.runner import git_succeeds

DEFAULT_BASE_BRANCHES = ["main", "master"]


def ref_exists(refname: str) -> bool:
    """Check whether a fully qualified ref (e.g. refs/heads/main) exists.

    Args:
        refname: The fully qualified reference name.

    Returns:
        True if git can verify the ref, False otherwise.
    """
    return git_succeeds(["show-ref", "--verify", "--quiet", refname])


def resolve_ref(ref: str, remote: str = "origin") -> str:
    """Resolve a branch, remote branch or tag name.

    Lookup order:
    1. refs/remotes/<ref> (e.g. "origin/release")
    2. refs/heads/<ref> (local branch)
    3. refs/remotes/<remote>/<ref> ("release" -> "origin/release")
    4. refs/tags/<ref>

    Args:
        ref: The name given by the user.
        remote: Remote used for the short-name lookup.

    Returns:
        The name to use in a git range.

    Raises:
        RefNotFoundError: If none of the candidates exist.
    """
    if ref_exists(f"refs/remotes/{ref}"):
        return ref
    if ref_exists(f"refs/heads/{ref}"):
        return ref
    if ref_exists(f"refs/remotes/{remote}/{ref}"):
        return f"{remote}/{ref}"
    if ref_exists(f"refs/tags/{ref}"):
        return ref
    raise RefNotFoundError(ref)


def get_default_base(remote: str = "origin") -> str:
    """Get the default base branch of the remote.

    Args:
        remote: The remote name.

    Returns:
        "<remote>/main" or "<remote>/master".

    Raises:
        GitError: If neither branch exists on the remote.
    """
    for branch in DEFAULT_BASE_BRANCHES:
        if ref_exists(f"refs/remotes/{remote}/{branch}"):
            return f"{remote}/{branch}"
    raise GitError(f"Could not find {remote}/main or {remote}/master")


def resolve_range(source: str, destination: Optional[str] = None, remote: str = "origin") -> str:
    """Build the commit range to list.

    With a single reference, lists what <source> has on top of the remote's
    default branch. With two, lists what would be sent from <source> to
    <destination>.

    Args:
        source: The target (or source) reference.
        destination: Optional destination reference.
        remote: The remote name.

    Returns:
        A range string such as "origin/main..feature/x".
    """
    if destination:
        source_ref = resolve_ref(source, remote)
        dest_ref = resolve_ref(destination, remote)
        return f"{dest_ref}..{source_ref}"

    target_ref = resolve_ref(source, remote)
    base_ref = get_default_base(remote)
    return f"{base_ref}..{target_ref}"
