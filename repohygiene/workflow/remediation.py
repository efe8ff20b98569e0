"""Per-repository remediation state machine using transitions library.

Runs the safe fix protocol for one repository:
- Gate: non-repos and dirty work trees are never touched
- Action A: add 'origin' from the remote template when missing
- Action B: set upstream with push -u, or push when ahead

It will NOT commit, pull, merge, rebase, or guess a remote URL, and makes at
most one push attempt per repository per run.

Usage:
    from repohygiene.workflow.remediation import remediate

    outcome = remediate(facts, remote_template="git@github.com:me/{name}.git")
    for action in outcome.actions:
        print(action.result.value, action.message)
"""

import logging
from pathlib import Path

from transitions import Machine

from repohygiene import git
from repohygiene.audit.inspector import ahead_behind, push_branch
from repohygiene.lib.types import (
    ActionKind,
    ActionResult,
    FixOutcome,
    RepoFacts,
)

logger = logging.getLogger(__name__)

TEMPLATE_PLACEHOLDER = "{name}"

STATES = [
    "pending",
    "blocked",  # gate refused: not a repo, or dirty
    "clean",
    "origin_checked",
    "halted",  # adding origin failed
    "finished",
]

TRANSITIONS = [
    # Gate 0
    {"trigger": "precheck", "source": "pending", "dest": "blocked",
     "conditions": "should_block", "after": "record_block"},
    {"trigger": "precheck", "source": "pending", "dest": "clean"},

    # Action A
    {"trigger": "ensure_origin", "source": "clean", "dest": "origin_checked",
     "before": "add_origin_if_missing"},
    {"trigger": "halt", "source": "origin_checked", "dest": "halted"},

    # Action B
    {"trigger": "publish", "source": "origin_checked", "dest": "finished",
     "before": "set_upstream_and_push"},
]


def origin_url(template: str, name: str) -> str:
    """Build an origin URL by substituting the project name into template."""
    return template.replace(TEMPLATE_PLACEHOLDER, name)


class RemediationFSM:
    """State machine driving the fix protocol for a single repository.

    Wraps the transitions library:
    - Gate, Action A and Action B are explicit triggers, so they can only
      run in order
    - Each step records a FixAction on self.outcome
    - All transitions are logged at debug level
    """

    def __init__(
        self,
        facts: RepoFacts,
        remote_template: str | None = None,
        default_branch: str | None = None,
        timeout: float | None = None,
    ):
        self.facts = facts
        self.remote_template = remote_template
        self.default_branch = default_branch
        self.timeout = timeout
        self.outcome = FixOutcome(name=facts.name)

        self.machine = Machine(
            model=self,
            states=STATES,
            transitions=TRANSITIONS,
            initial="pending",
            auto_transitions=False,
            send_event=True,
            after_state_change="on_state_change",
        )

    @property
    def path(self) -> Path:
        return self.facts.path

    def on_state_change(self, event) -> None:
        logger.debug(
            f"[FIX-FSM] {self.facts.name}: {event.transition.source} -> "
            f"{event.transition.dest} ({event.event.name})"
        )

    # Gate 0

    def should_block(self, event) -> bool:
        return not self.facts.is_repo or self.facts.dirty

    def record_block(self, event) -> None:
        if not self.facts.is_repo:
            reason = "not a git repo (no auto-init in --fix)"
        else:
            reason = "dirty worktree"
        self.outcome.record(ActionKind.PRECHECK, ActionResult.SKIPPED, reason)

    # Action A

    def add_origin_if_missing(self, event) -> None:
        if self.facts.has_origin:
            return

        if not self.remote_template:
            self.outcome.record(
                ActionKind.ADD_ORIGIN,
                ActionResult.SKIPPED,
                "no --remote-template for origin",
                essential=True,
            )
            return

        url = origin_url(self.remote_template, self.facts.name)
        result = git.add_remote(self.path, "origin", url, timeout=self.timeout)
        if result.success:
            self.outcome.record(ActionKind.ADD_ORIGIN, ActionResult.FIXED, f"added origin -> {url}")
        else:
            logger.debug(f"{self.facts.name}: remote add failed: {result.stderr.strip()}")
            self.outcome.record(
                ActionKind.ADD_ORIGIN,
                ActionResult.FAILED,
                f"remote add origin {url}",
                essential=True,
            )

    # Action B

    def set_upstream_and_push(self, event) -> None:
        name = self.facts.name
        branch = push_branch(self.facts, self.default_branch)

        if not git.has_remote(self.path, "origin", timeout=self.timeout):
            self.outcome.record(ActionKind.PUSH_UPSTREAM, ActionResult.SKIPPED, "no origin remote")
            return

        if self.facts.detached:
            self.outcome.record(ActionKind.PUSH_UPSTREAM, ActionResult.SKIPPED, "detached HEAD")
            return

        if self.facts.unborn:
            self.outcome.record(
                ActionKind.PUSH_UPSTREAM,
                ActionResult.SKIPPED,
                f"no commits yet on '{branch}'",
            )
            return

        if not self.facts.has_upstream:
            # Creates the remote branch if missing, sets tracking either way
            result = git.push_set_upstream(self.path, "origin", branch, timeout=self.timeout)
            if result.success:
                self.outcome.record(
                    ActionKind.PUSH_UPSTREAM,
                    ActionResult.FIXED,
                    f"set upstream and pushed '{branch}'",
                )
            else:
                logger.debug(f"{name}: push -u failed: {result.stderr.strip()}")
                self.outcome.record(
                    ActionKind.PUSH_UPSTREAM,
                    ActionResult.FAILED,
                    f"push -u origin {branch}",
                    essential=True,
                )
            return

        ahead, behind = ahead_behind(self.path, timeout=self.timeout)
        if behind > 0:
            self.outcome.record(
                ActionKind.PUSH,
                ActionResult.SKIPPED,
                "behind remote; not pulling in --fix",
            )
            return

        if ahead > 0:
            result = git.push(self.path, timeout=self.timeout)
            if result.success:
                self.outcome.record(
                    ActionKind.PUSH,
                    ActionResult.FIXED,
                    f"pushed '{branch}' (ahead by {ahead})",
                )
            else:
                logger.debug(f"{name}: push failed: {result.stderr.strip()}")
                self.outcome.record(
                    ActionKind.PUSH,
                    ActionResult.FAILED,
                    f"push '{branch}'",
                    essential=True,
                )
            return

        self.outcome.record(ActionKind.PUSH, ActionResult.OK, "up to date")

    def run(self) -> FixOutcome:
        """Drive the machine to a terminal state and return the outcome."""
        self.precheck()
        if self.state == "clean":
            self.ensure_origin()
            if self.outcome.failed:
                self.halt()
            else:
                self.publish()
        self.outcome.final_state = self.state
        return self.outcome


def remediate(
    facts: RepoFacts,
    remote_template: str | None = None,
    default_branch: str | None = None,
    timeout: float | None = None,
) -> FixOutcome:
    """Run the fix protocol for one repository.

    Factory function for cleaner imports.
    """
    return RemediationFSM(
        facts,
        remote_template=remote_template,
        default_branch=default_branch,
        timeout=timeout,
    ).run()
