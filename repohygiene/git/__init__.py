"""Git operations for repohygiene.

Every function takes the repository directory explicitly and runs
`git -C <dir>`; nothing here changes the process working directory.

Return type conventions:
- Functions returning GitResult: Caller must check .success before using output.
  Examples: add_remote(), push(), push_set_upstream()
- Functions returning bool: True on success/condition met, False otherwise.
  Examples: is_inside_work_tree(), has_uncommitted_changes(), has_remote()
- Functions returning parsed values (str, tuple, list): Return None/empty on failure.
  Examples: get_current_branch() -> None, get_branches_without_upstream() -> []
"""

from repohygiene.git.runner import (
    GitResult,
    run_git,
)
from repohygiene.git.status import (
    is_inside_work_tree,
    has_uncommitted_changes,
)
from repohygiene.git.branch import (
    get_current_branch,
    has_commits,
    get_upstream,
    get_divergence_count,
    get_branches_without_upstream,
)
from repohygiene.git.remote import (
    get_remote_url,
    has_remote,
    add_remote,
    push,
    push_set_upstream,
)

__all__ = [
    # runner
    "GitResult",
    "run_git",
    # status
    "is_inside_work_tree",
    "has_uncommitted_changes",
    # branch
    "get_current_branch",
    "has_commits",
    "get_upstream",
    "get_divergence_count",
    "get_branches_without_upstream",
    # remote
    "get_remote_url",
    "has_remote",
    "add_remote",
    "push",
    "push_set_upstream",
]
