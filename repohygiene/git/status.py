"""Git working tree status queries."""

from pathlib import Path

from repohygiene.git.runner import run_git


def is_inside_work_tree(path: Path, timeout: float | None = None) -> bool:
    """Check if path is inside a git working tree."""
    result = run_git(["rev-parse", "--is-inside-work-tree"], path, timeout=timeout)
    return result.success and result.stdout.strip() == "true"


def has_uncommitted_changes(worktree: Path, timeout: float | None = None) -> bool:
    """Check if worktree has any uncommitted changes (staged, unstaged, or untracked).

    A failed or timed-out status query counts as dirty, so callers that gate
    on a clean tree stay closed.
    """
    result = run_git(["status", "--porcelain"], worktree, timeout=timeout)
    if not result.success:
        return True
    return bool(result.stdout.strip())
