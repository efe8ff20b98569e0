"""
repohygiene scan - Report git hygiene for every project under a directory.
"""

import logging
import os
import sys
from pathlib import Path

from repohygiene.audit.classifier import build_row
from repohygiene.audit.inspector import inspect_repo
from repohygiene.lib.config import ScanConfig
from repohygiene.lib.report import Reporter
from repohygiene.lib.types import ReportRow
from repohygiene.workflow.remediation import remediate

logger = logging.getLogger(__name__)


def list_candidates(base_dir: Path) -> list[Path]:
    """Immediate subdirectories of base_dir, sorted by name.

    Hidden entries are dropped first. Symlinks are not followed.
    """
    candidates = []
    with os.scandir(base_dir) as entries:
        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                if not entry.is_dir(follow_symlinks=False):
                    continue
            except OSError as e:
                logger.warning(f"Skipping {entry.name}: {e}")
                continue
            candidates.append(Path(entry.path))
    return sorted(candidates, key=lambda p: p.name)


def can_enter(path: Path) -> bool:
    """Check the directory can be listed and traversed."""
    return os.access(path, os.R_OK | os.X_OK)


def process_repo(path: Path, config: ScanConfig, reporter: Reporter) -> ReportRow:
    """Inspect, classify, report and (in fix mode) remediate one directory."""
    facts = inspect_repo(path, timeout=config.git_timeout)
    row = build_row(facts)
    reporter.row(row)

    if config.fix:
        outcome = remediate(
            facts,
            remote_template=config.remote_template,
            default_branch=config.default_branch,
            timeout=config.git_timeout,
        )
        for action in outcome.actions:
            reporter.action(facts.name, action)
        logger.debug(f"{facts.name}: fix finished in '{outcome.final_state}', {outcome.changed} change(s)")

    return row


def scan(config: ScanConfig, reporter: Reporter) -> list[ReportRow]:
    """Process every candidate directory in order.

    A failure in one directory never stops the scan; that entry is skipped.
    """
    reporter.header()

    rows = []
    for path in list_candidates(config.base_dir):
        if not can_enter(path):
            logger.warning(f"Skipping {path.name}: cannot enter directory")
            continue
        try:
            rows.append(process_repo(path, config, reporter))
        except Exception as e:
            logger.warning(f"Skipping {path.name}: {type(e).__name__}: {e}")
    return rows


def cmd_scan(args, config: ScanConfig) -> int:
    """Run a scan and print the report."""
    reporter = Reporter(quiet=config.quiet, color=config.color)
    try:
        scan(config, reporter)
    except OSError as e:
        print(f"ERROR: Cannot read {config.base_dir}: {e}", file=sys.stderr)
        return 1
    return 0
