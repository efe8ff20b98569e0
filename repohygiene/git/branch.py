"""Git branch and upstream queries."""

from pathlib import Path

from repohygiene.git.runner import run_git


def get_current_branch(worktree: Path, timeout: float | None = None) -> str | None:
    """Get the current branch name, or None if detached HEAD.

    Works on an unborn branch too: the symbolic name is returned even
    before the first commit.
    """
    result = run_git(["branch", "--show-current"], worktree, timeout=timeout)
    if result.success:
        return result.stdout.strip() or None
    return None


def has_commits(worktree: Path, timeout: float | None = None) -> bool:
    """Check if HEAD resolves to a commit (False on an unborn branch)."""
    result = run_git(["rev-parse", "--verify", "-q", "HEAD"], worktree, timeout=timeout)
    return result.success


def get_upstream(worktree: Path, timeout: float | None = None) -> str | None:
    """Get the upstream of the current branch (e.g. "origin/main"), or None."""
    result = run_git(
        ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{upstream}"],
        worktree,
        timeout=timeout,
    )
    if result.success:
        return result.stdout.strip() or None
    return None


def get_divergence_count(
    worktree: Path,
    ref1: str,
    ref2: str,
    timeout: float | None = None,
) -> tuple[int, int] | None:
    """
    Get how many commits ref1 and ref2 have diverged.

    Counts come from local refs only; nothing is fetched.

    Returns:
        Tuple of (commits_in_ref1_not_in_ref2, commits_in_ref2_not_in_ref1),
        or None on error.

    Example:
        get_divergence_count(repo, "HEAD", "@{upstream}")
        -> (2, 0) means HEAD is 2 commits ahead of its upstream
    """
    result = run_git(
        ["rev-list", "--left-right", "--count", f"{ref1}...{ref2}"],
        worktree,
        timeout=timeout,
    )
    if not result.success:
        return None
    parts = result.stdout.strip().split()
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def get_branches_without_upstream(worktree: Path, timeout: float | None = None) -> list[str]:
    """List local branches that have no upstream configured.

    Order follows git for-each-ref (sorted by refname). Returns empty list
    on git failure.
    """
    result = run_git(
        ["for-each-ref", "--format=%(refname:short) %(upstream:short)", "refs/heads"],
        worktree,
        timeout=timeout,
    )
    if not result.success:
        return []

    branches = []
    for line in result.stdout.splitlines():
        parts = line.split()
        # Branch names cannot contain spaces, so a lone field means no upstream
        if len(parts) == 1:
            branches.append(parts[0])
    return branches
