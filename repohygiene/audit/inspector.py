"""
Repository inspector.

Gathers the git facts for a single directory. Read-only: never fetches,
never writes refs or config.
"""

import logging
from pathlib import Path

from repohygiene import git
from repohygiene.lib.types import DETACHED, RepoFacts

logger = logging.getLogger(__name__)

FALLBACK_BRANCH = "main"


def ahead_behind(path: Path, timeout: float | None = None) -> tuple[int, int]:
    """Count commits HEAD has over its upstream and vice versa.

    Any failure degrades to (0, 0) with a warning; the counts are a
    diagnostic, not something to abort a scan over.
    """
    counts = git.get_divergence_count(path, "HEAD", "@{upstream}", timeout=timeout)
    if counts is None:
        logger.warning(f"{path.name}: could not compute ahead/behind, assuming 0 0")
        return 0, 0
    return counts


def inspect_repo(path: Path, timeout: float | None = None) -> RepoFacts:
    """Collect RepoFacts for the directory at path.

    Non-repositories short-circuit after the first query and get defaults
    for everything else.
    """
    name = path.name
    if not git.is_inside_work_tree(path, timeout=timeout):
        logger.debug(f"{name}: not a git work tree")
        return RepoFacts(name=name, path=path)

    branch = git.get_current_branch(path, timeout=timeout) or DETACHED
    has_upstream = git.get_upstream(path, timeout=timeout) is not None
    ahead, behind = ahead_behind(path, timeout=timeout) if has_upstream else (0, 0)

    facts = RepoFacts(
        name=name,
        path=path,
        is_repo=True,
        has_origin=git.has_remote(path, "origin", timeout=timeout),
        branch=branch,
        unborn=not git.has_commits(path, timeout=timeout),
        has_upstream=has_upstream,
        ahead=ahead,
        behind=behind,
        dirty=git.has_uncommitted_changes(path, timeout=timeout),
        orphan_branches=tuple(git.get_branches_without_upstream(path, timeout=timeout)),
    )
    logger.debug(f"{name}: {facts}")
    return facts


def push_branch(facts: RepoFacts, default_branch: str | None = None) -> str:
    """Branch name fix mode reports for this repo.

    On an unborn HEAD the --default-branch hint (or the built-in fallback)
    stands in for the real branch. Never used in report rows.
    """
    if facts.unborn:
        return default_branch or FALLBACK_BRANCH
    return facts.branch
