"""Git remote operations."""

from pathlib import Path

from repohygiene.git.runner import run_git, GitResult


def get_remote_url(repo: Path, name: str = "origin", timeout: float | None = None) -> str | None:
    """Get the URL of a named remote, or None if it is not configured."""
    result = run_git(["remote", "get-url", name], repo, timeout=timeout)
    if result.success:
        return result.stdout.strip() or None
    return None


def has_remote(repo: Path, name: str = "origin", timeout: float | None = None) -> bool:
    """Check if a named remote is configured."""
    return get_remote_url(repo, name, timeout=timeout) is not None


def add_remote(repo: Path, name: str, url: str, timeout: float | None = None) -> GitResult:
    """Add a remote."""
    return run_git(["remote", "add", name, url], repo, timeout=timeout)


def push(worktree: Path, timeout: float | None = None) -> GitResult:
    """Push the current branch to its configured upstream."""
    return run_git(["push"], worktree, timeout=timeout)


def push_set_upstream(
    worktree: Path,
    remote: str,
    branch: str,
    timeout: float | None = None,
) -> GitResult:
    """Push and set upstream tracking."""
    return run_git(["push", "-u", remote, branch], worktree, timeout=timeout)
