"""Tests for repohygiene.audit.classifier module."""

import itertools
from pathlib import Path

import pytest

from repohygiene.audit.classifier import classify, build_row
from repohygiene.lib.types import DETACHED, NO_BRANCH, RepoFacts, StatusTag


def make_facts(**overrides) -> RepoFacts:
    """A clean, fully published repo unless overridden."""
    values = dict(
        name="app",
        path=Path("/projects/app"),
        is_repo=True,
        has_origin=True,
        branch="main",
        has_upstream=True,
    )
    values.update(overrides)
    return RepoFacts(**values)


class TestClassify:
    """Tests for classify() rules."""

    def test_not_a_repo_is_uninitialized_only(self):
        facts = RepoFacts(name="notes", path=Path("/projects/notes"))
        assert classify(facts) == (StatusTag.UNINITIALIZED,)

    def test_uninitialized_ignores_other_fields(self):
        facts = make_facts(is_repo=False, dirty=True, orphan_branches=("x",))
        assert classify(facts) == (StatusTag.UNINITIALIZED,)

    def test_clean_published_repo_is_ok(self):
        assert classify(make_facts()) == (StatusTag.OK,)

    def test_no_remote_no_upstream(self):
        facts = make_facts(has_origin=False, has_upstream=False)
        assert classify(facts) == (
            StatusTag.NO_REMOTE,
            StatusTag.NO_UPSTREAM,
            StatusTag.NOT_PUSHED_OR_AHEAD,
        )

    def test_origin_but_no_upstream(self):
        facts = make_facts(has_upstream=False)
        assert classify(facts) == (StatusTag.NO_UPSTREAM, StatusTag.NOT_PUSHED_OR_AHEAD)

    def test_ahead_of_upstream(self):
        facts = make_facts(ahead=2)
        assert classify(facts) == (StatusTag.NOT_PUSHED_OR_AHEAD,)

    def test_behind_upstream(self):
        facts = make_facts(behind=3)
        assert classify(facts) == (StatusTag.BEHIND_REMOTE,)

    def test_diverged(self):
        facts = make_facts(ahead=1, behind=1)
        assert classify(facts) == (StatusTag.BEHIND_REMOTE, StatusTag.NOT_PUSHED_OR_AHEAD)

    def test_detached_head_never_not_pushed(self):
        facts = make_facts(branch=DETACHED, has_origin=False, has_upstream=False)
        assert classify(facts) == (StatusTag.NO_REMOTE, StatusTag.NO_UPSTREAM)

    def test_dirty(self):
        assert classify(make_facts(dirty=True)) == (StatusTag.DIRTY,)

    def test_untracked_branches(self):
        facts = make_facts(orphan_branches=("feature",))
        assert classify(facts) == (StatusTag.UNTRACKED_BRANCHES,)

    def test_commits_no_origin_clean(self):
        facts = make_facts(has_origin=False, has_upstream=False, orphan_branches=("main",))
        tags = classify(facts)
        assert StatusTag.NO_REMOTE in tags
        assert StatusTag.NOT_PUSHED_OR_AHEAD in tags
        assert StatusTag.DIRTY not in tags

    def test_display_order_is_fixed(self):
        facts = make_facts(
            has_origin=False,
            has_upstream=False,
            dirty=True,
            orphan_branches=("main",),
        )
        assert classify(facts) == (
            StatusTag.NO_REMOTE,
            StatusTag.NO_UPSTREAM,
            StatusTag.NOT_PUSHED_OR_AHEAD,
            StatusTag.DIRTY,
            StatusTag.UNTRACKED_BRANCHES,
        )


class TestClassifyProperties:
    """Invariants checked over every combination of facts."""

    @staticmethod
    def all_facts():
        for origin, upstream, ahead, behind, dirty, orphans, branch in itertools.product(
            (True, False), (True, False), (0, 2), (0, 1), (True, False),
            ((), ("feature",)), ("main", DETACHED),
        ):
            yield make_facts(
                has_origin=origin,
                has_upstream=upstream,
                ahead=ahead if upstream else 0,
                behind=behind if upstream else 0,
                dirty=dirty,
                orphan_branches=orphans,
                branch=branch,
            )

    def test_never_empty(self):
        for facts in self.all_facts():
            assert classify(facts)

    def test_ok_is_exclusive(self):
        for facts in self.all_facts():
            tags = classify(facts)
            if StatusTag.OK in tags:
                assert tags == (StatusTag.OK,)

    def test_uninitialized_never_for_repos(self):
        for facts in self.all_facts():
            assert StatusTag.UNINITIALIZED not in classify(facts)

    def test_up_to_date_upstream_has_no_upstream_tags(self):
        for facts in self.all_facts():
            if facts.has_upstream and facts.behind == 0:
                tags = classify(facts)
                assert StatusTag.NO_UPSTREAM not in tags
                assert StatusTag.BEHIND_REMOTE not in tags

    def test_dirty_always_tagged(self):
        for facts in self.all_facts():
            assert (StatusTag.DIRTY in classify(facts)) == facts.dirty

    def test_deterministic(self):
        for facts in self.all_facts():
            assert classify(facts) == classify(facts)


class TestBuildRow:

    def test_row_for_uninitialized_dir(self):
        row = build_row(RepoFacts(name="empty", path=Path("/projects/empty")))
        assert row.name == "empty"
        assert row.tags == (StatusTag.UNINITIALIZED,)
        assert row.branch == NO_BRANCH
        assert (row.ahead, row.behind, row.dirty) == (0, 0, False)

    def test_row_carries_untracked_branch_names(self):
        row = build_row(make_facts(orphan_branches=("feature", "spike")))
        assert row.untracked_branches == ("feature", "spike")

    @pytest.mark.parametrize("ahead,behind", [(0, 0), (2, 0), (0, 5)])
    def test_row_copies_counts(self, ahead, behind):
        row = build_row(make_facts(ahead=ahead, behind=behind))
        assert (row.ahead, row.behind) == (ahead, behind)
