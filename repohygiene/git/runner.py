"""Git command runner with optional timeout handling."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# No limit unless the caller asks for one; a hung git stalls the scan.
DEFAULT_TIMEOUT = None


@dataclass
class GitResult:
    """Result of a git command."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out


def run_git(
    args: list[str],
    cwd: Path,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> GitResult:
    """
    Run a git command against an explicit directory.

    The process working directory is never changed; the target directory is
    passed to git with -C. Output bytes that are not valid UTF-8 (branch
    names, remote URLs) are replaced rather than raising.

    Args:
        args: Git command arguments (e.g., ["status", "--porcelain"])
        cwd: Directory the command operates on
        timeout: Timeout in seconds, or None to wait indefinitely

    Returns:
        GitResult with returncode, stdout, stderr, and timed_out flag
    """
    cmd = ["git", "-C", str(cwd)] + args
    logger.debug(f"run: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
        return GitResult(
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"git {args[0]} in {cwd} timed out after {timeout}s")
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout}s",
            timed_out=True,
        )
