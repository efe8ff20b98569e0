"""Status classifier: maps RepoFacts to hygiene tags."""

from repohygiene.lib.types import ReportRow, RepoFacts, StatusTag


def classify(facts: RepoFacts) -> tuple[StatusTag, ...]:
    """
    Derive the ordered status tags for a repository.

    Pure and deterministic. Tags are independent facets, so a repo without a
    remote typically carries NO_REMOTE, NO_UPSTREAM and NOT_PUSHED_OR_AHEAD
    together. OK is returned alone iff nothing else applies.
    """
    if not facts.is_repo:
        return (StatusTag.UNINITIALIZED,)

    tags: list[StatusTag] = []

    if not facts.has_origin:
        tags.append(StatusTag.NO_REMOTE)

    if facts.has_upstream:
        if facts.behind > 0:
            tags.append(StatusTag.BEHIND_REMOTE)
    else:
        tags.append(StatusTag.NO_UPSTREAM)

    if not facts.detached:
        never_pushed = not facts.has_origin or not facts.has_upstream
        if never_pushed or facts.ahead > 0:
            tags.append(StatusTag.NOT_PUSHED_OR_AHEAD)

    if facts.dirty:
        tags.append(StatusTag.DIRTY)

    if facts.orphan_branches:
        tags.append(StatusTag.UNTRACKED_BRANCHES)

    return tuple(tags) or (StatusTag.OK,)


def build_row(facts: RepoFacts) -> ReportRow:
    """Pair the classification with the facts shown in the table."""
    return ReportRow(
        name=facts.name,
        tags=classify(facts),
        branch=facts.branch,
        ahead=facts.ahead,
        behind=facts.behind,
        dirty=facts.dirty,
        untracked_branches=facts.orphan_branches,
    )
