"""Version-control port - Operations the publish workflow needs from git.

Every method reports failure through its return value so the caller
decides which steps are fatal and which are best-effort.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import CommandResult


class VersionControlPort(Protocol):
    """Port for worktree and branch operations.

    Implementation: adapters/vcs/git_cli.py
    """

    def remove_worktree(self, path: Path) -> CommandResult:
        """Detach a worktree directory from worktree tracking (forced)."""
        ...

    def prune_worktrees(self) -> CommandResult:
        """Drop registrations of worktrees whose directories are gone."""
        ...

    def remote_branch_exists(self, remote: str, branch: str) -> bool:
        """Check whether ``branch`` exists on ``remote``.

        A failing query is reported as False.
        """
        ...

    def fetch_branch(self, remote: str, branch: str) -> CommandResult:
        """Update the local branch from the remote branch of the same name."""
        ...

    def add_worktree(self, path: Path, branch: str) -> CommandResult:
        """Attach a worktree for ``branch``, overriding stale registrations."""
        ...

    def add_detached_worktree(self, path: Path) -> CommandResult:
        """Attach a worktree with a detached HEAD."""
        ...

    def checkout_orphan(self, path: Path, branch: str) -> CommandResult:
        """Turn the worktree at ``path`` into a new parentless branch."""
        ...

    def remove_tracked_files(self, path: Path) -> CommandResult:
        """Remove every tracked file from the worktree and its index."""
        ...

    def stage_all(self, path: Path) -> CommandResult:
        """Stage additions, modifications and deletions."""
        ...

    def commit(self, path: Path, message: str) -> CommandResult:
        """Record a commit in the worktree."""
        ...

    def push(self, path: Path, remote: str, branch: str) -> CommandResult:
        """Push ``branch`` to ``remote``."""
        ...
