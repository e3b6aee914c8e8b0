"""Git command-line adapter.

Translates the worktree and branch operations of VersionControlPort
into ``git`` invocations run through a CommandRunnerPort. Nothing here
decides whether a failure is fatal; results are handed back as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...domain.models import CommandResult
from ...ports.command import CommandRunnerPort


@dataclass
class GitCLIAdapter:
    """Version control through the ``git`` executable.

    This adapter implements VersionControlPort.

    Attributes:
        runner: Command runner used for every git call
        repo_root: Working directory of the main repository
        executable: Name or path of the git binary
    """

    runner: CommandRunnerPort
    repo_root: Optional[Path] = None
    executable: str = "git"
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _git(
        self, *args: str, cwd: Optional[Path] = None, capture: bool = False
    ) -> CommandResult:
        return self.runner.run(
            [self.executable, *args],
            cwd=cwd if cwd is not None else self.repo_root,
            capture=capture,
        )

    def remove_worktree(self, path: Path) -> CommandResult:
        return self._git("worktree", "remove", str(path), "--force", capture=True)

    def prune_worktrees(self) -> CommandResult:
        return self._git("worktree", "prune", capture=True)

    def remote_branch_exists(self, remote: str, branch: str) -> bool:
        result = self._git("ls-remote", "--heads", remote, branch, capture=True)
        if not result.ok:
            self._logger.debug(
                "Remote branch query failed",
                extra={"remote": remote, "branch": branch, "stderr": result.stderr},
            )
            return False
        return bool(result.stdout.strip())

    def fetch_branch(self, remote: str, branch: str) -> CommandResult:
        return self._git("fetch", remote, f"{branch}:{branch}", capture=True)

    def add_worktree(self, path: Path, branch: str) -> CommandResult:
        return self._git("worktree", "add", "-f", str(path), branch)

    def add_detached_worktree(self, path: Path) -> CommandResult:
        return self._git("worktree", "add", "--detach", str(path))

    def checkout_orphan(self, path: Path, branch: str) -> CommandResult:
        return self._git("checkout", "--orphan", branch, cwd=path)

    def remove_tracked_files(self, path: Path) -> CommandResult:
        return self._git("rm", "-rf", "--quiet", ".", cwd=path, capture=True)

    def stage_all(self, path: Path) -> CommandResult:
        return self._git("add", "-A", cwd=path)

    def commit(self, path: Path, message: str) -> CommandResult:
        # Each deploy records a commit even when the build is unchanged.
        return self._git("commit", "--allow-empty", "-m", message, cwd=path)

    def push(self, path: Path, remote: str, branch: str) -> CommandResult:
        return self._git("push", remote, branch, cwd=path)
