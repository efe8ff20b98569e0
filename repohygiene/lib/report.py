"""
Report rendering for scan results.

Separates display concerns from inspection and remediation: tags and action
results stay plain enums, this module maps them to text and colors.
"""

import os

from rich.console import Console
from rich.text import Text

from repohygiene.lib.types import (
    ActionResult,
    FixAction,
    ReportRow,
    StatusTag,
)

COLUMNS = ["Project", "Status", "Branch", "Ahead", "Behind", "Dirty"]
SEPARATOR = " | "
RULE_WIDTH = 90

TAG_STYLES = {
    StatusTag.UNINITIALIZED: "yellow",
    StatusTag.NO_REMOTE: "yellow",
    StatusTag.NO_UPSTREAM: "yellow",
    StatusTag.NOT_PUSHED_OR_AHEAD: "magenta",
    StatusTag.BEHIND_REMOTE: "red",
    StatusTag.DIRTY: "red",
    StatusTag.UNTRACKED_BRANCHES: "yellow",
    StatusTag.OK: "green",
}

RESULT_STYLES = {
    ActionResult.FIXED: "green",
    ActionResult.OK: "blue",
    ActionResult.SKIPPED: "yellow",
    ActionResult.FAILED: "red",
}


def printable(text: str) -> str:
    """Undo surrogate escapes from undecodable file names so the text can be written."""
    return os.fsencode(text).decode("utf-8", "replace")


def format_tag(tag: StatusTag, row: ReportRow) -> str:
    """Display text for one tag; UNTRACKED_BRANCHES carries its branch list."""
    if tag == StatusTag.UNTRACKED_BRANCHES and row.untracked_branches:
        return f"{tag.value}({' '.join(row.untracked_branches)})"
    return tag.value


class Reporter:
    """Writes the scan table and fix-log lines to stdout.

    Styling is applied through rich and drops out automatically when stdout
    is not a terminal, or always when color is False.
    """

    def __init__(self, quiet: bool = False, color: bool = True):
        self.quiet = quiet
        # file=None makes rich resolve sys.stdout at print time
        self.console = Console(
            color_system="auto" if color else None,
            highlight=False,
        )

    def _emit(self, text: Text) -> None:
        self.console.print(text, soft_wrap=True)

    def header(self) -> None:
        if self.quiet:
            return
        line = Text()
        for i, column in enumerate(COLUMNS):
            if i:
                line.append(SEPARATOR)
            line.append(column, style="bold cyan")
        self._emit(line)
        self._emit(Text("-" * RULE_WIDTH))

    def row(self, row: ReportRow) -> None:
        line = Text(printable(row.name))
        line.append(SEPARATOR)
        for i, tag in enumerate(row.tags):
            if i:
                line.append(", ")
            line.append(format_tag(tag, row), style=TAG_STYLES[tag])
        line.append(SEPARATOR.join(["", printable(row.branch), str(row.ahead), str(row.behind)]))
        line.append(SEPARATOR)
        line.append("yes" if row.dirty else "no")
        self._emit(line)

    def action(self, name: str, action: FixAction) -> None:
        """Fix-log line, e.g. "[FIX] api: added origin -> url"."""
        if self.quiet and not action.essential:
            return
        line = Text()
        line.append(f"[{action.result.value}]", style=RESULT_STYLES[action.result])
        line.append(f" {printable(name)}: {printable(action.message)}")
        self._emit(line)
