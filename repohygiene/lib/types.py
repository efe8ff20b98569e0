"""
Shared data types for repohygiene.

This module contains the dataclasses and enums passed between the inspector,
classifier, remediation engine and reporter, kept here to avoid circular
imports.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Branch value shown when HEAD is not on a named branch
DETACHED = "(detached)"

# Branch placeholder for directories that are not repositories
NO_BRANCH = "—"


class StatusTag(Enum):
    """Hygiene facets reported per repository.

    Declaration order is display order.
    """
    UNINITIALIZED = "UNINITIALIZED"
    NO_REMOTE = "NO_REMOTE"
    NO_UPSTREAM = "NO_UPSTREAM"
    NOT_PUSHED_OR_AHEAD = "NOT_PUSHED_OR_AHEAD"
    BEHIND_REMOTE = "BEHIND_REMOTE"
    DIRTY = "DIRTY"
    UNTRACKED_BRANCHES = "UNTRACKED_BRANCHES"
    OK = "OK"


@dataclass(frozen=True)
class RepoFacts:
    """Git facts gathered for one subdirectory. Recomputed on every scan."""
    name: str
    path: Path
    is_repo: bool = False
    has_origin: bool = False
    branch: str = NO_BRANCH
    unborn: bool = False
    has_upstream: bool = False
    ahead: int = 0
    behind: int = 0
    dirty: bool = False
    orphan_branches: tuple[str, ...] = ()

    @property
    def detached(self) -> bool:
        return self.branch == DETACHED


@dataclass(frozen=True)
class ReportRow:
    """One line of the scan table."""
    name: str
    tags: tuple[StatusTag, ...]
    branch: str
    ahead: int
    behind: int
    dirty: bool
    untracked_branches: tuple[str, ...] = ()


class ActionKind(Enum):
    """Remediation steps, in the order they run."""
    PRECHECK = "precheck"
    ADD_ORIGIN = "add_origin"
    PUSH_UPSTREAM = "push_upstream"
    PUSH = "push"


class ActionResult(Enum):
    FIXED = "FIX"  # repository was changed
    OK = "OK"  # nothing to do
    SKIPPED = "SKIP"
    FAILED = "FAIL"


@dataclass
class FixAction:
    """A single remediation step and how it ended."""
    kind: ActionKind
    result: ActionResult
    message: str
    essential: bool = False  # Still shown with --quiet


@dataclass
class FixOutcome:
    """Everything the remediation engine did for one repository."""
    name: str
    actions: list[FixAction] = field(default_factory=list)
    final_state: str = "pending"

    def record(
        self,
        kind: ActionKind,
        result: ActionResult,
        message: str,
        essential: bool = False,
    ) -> FixAction:
        action = FixAction(kind=kind, result=result, message=message, essential=essential)
        self.actions.append(action)
        return action

    @property
    def changed(self) -> int:
        """Number of actions that modified the repository."""
        return sum(1 for a in self.actions if a.result == ActionResult.FIXED)

    @property
    def failed(self) -> bool:
        return any(a.result == ActionResult.FAILED for a in self.actions)
