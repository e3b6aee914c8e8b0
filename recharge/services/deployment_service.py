"""Deployment service - Publishes the static build to the hosting branch.

A run goes through fixed phases:
1. Build the site with the configured build command
2. Verify the build output directory exists
3. Prepare a git worktree bound to the hosting branch
4. Replace the worktree contents with the build output
5. Commit and push the hosting branch

Fatal failures raise a DeploymentError subclass and leave the run in
the FAILED phase. Nothing is rolled back; the next run's cleanup of the
worktree is the recovery path.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional

from ..config import DeployConfig
from ..domain.errors import (
    ArtifactNotFoundError,
    BuildError,
    DeploymentError,
    PublishError,
    SyncError,
    WorkspaceSetupError,
)
from ..domain.models import CommandResult, DeployPhase, DeployReport
from ..ports.command import CommandRunnerPort
from ..ports.vcs import VersionControlPort

NOJEKYLL_MARKER = ".nojekyll"
VCS_METADATA = ".git"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def default_commit_message(now: datetime) -> str:
    """Timestamped message used when the caller gives none."""
    stamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return f"Deploy: {stamp.replace('+00:00', 'Z')}"


@dataclass
class DeploymentService:
    """Build-and-publish orchestrator for the static site.

    Attributes:
        config: Deployment configuration (paths, branch, remote)
        runner: Runs the build command
        vcs: Git operations on the main repository and the worktree
        clock: Source of the current time for default commit messages
        on_phase: Optional callback invoked on every phase change
    """

    config: DeployConfig
    runner: CommandRunnerPort
    vcs: VersionControlPort
    clock: Callable[[], datetime] = _utcnow
    on_phase: Optional[Callable[[DeployPhase], None]] = None

    phase: DeployPhase = field(default=DeployPhase.IDLE, init=False)
    _history: List[DeployPhase] = field(default_factory=list, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def workspace(self) -> Path:
        return self.config.workspace_path

    def _enter(self, phase: DeployPhase) -> None:
        self.phase = phase
        self._history.append(phase)
        self._logger.debug("Deploy phase", extra={"phase": phase.value})
        if self.on_phase is not None:
            self.on_phase(phase)

    def deploy(self, message: Optional[str] = None) -> DeployReport:
        """Run the whole pipeline once.

        Args:
            message: Commit message for the deploy commit (defaults to a
                timestamped message).

        Returns:
            DeployReport describing the published snapshot.

        Raises:
            DeploymentError: If any fatal step fails.
        """
        self._history = []
        self._enter(DeployPhase.IDLE)
        self._logger.info(
            "Starting deployment",
            extra={"branch": self.config.branch, "remote": self.config.remote},
        )

        try:
            self._enter(DeployPhase.BUILDING)
            self.build()

            self._enter(DeployPhase.VERIFYING)
            self.verify_artifacts()

            self._enter(DeployPhase.PREPARING_WORKSPACE)
            branch_created = self.prepare_workspace()

            self._enter(DeployPhase.SYNCING)
            self.sync_artifacts()

            self._enter(DeployPhase.PUBLISHING)
            commit_message = self.publish(message)
        except DeploymentError as e:
            self._logger.error(
                "Deployment failed",
                extra={"phase": e.phase.value, "error": str(e)},
            )
            self._enter(DeployPhase.FAILED)
            raise

        self._enter(DeployPhase.DONE)
        self._logger.info("Deployment complete", extra={"branch": self.config.branch})

        return DeployReport(
            branch=self.config.branch,
            workspace=self.workspace,
            commit_message=commit_message,
            branch_created=branch_created,
            phases=tuple(self._history),
        )

    def build(self) -> None:
        """Run the build command with inherited output.

        Raises:
            BuildError: If the command is empty or exits non-zero.
        """
        args = self.config.build_args
        if not args:
            raise BuildError("No build command configured")

        result = self.runner.run(args, cwd=self.config.project_root)
        if not result.ok:
            raise BuildError(
                "Build failed",
                command=result.args,
                returncode=result.returncode,
            )
        self._logger.info("Build complete")

    def verify_artifacts(self) -> None:
        """Check that the build produced its output directory.

        Raises:
            ArtifactNotFoundError: If the directory is missing.
        """
        build_path = self.config.build_path
        if not build_path.is_dir():
            raise ArtifactNotFoundError(
                f'Build directory "{self.config.build_dir}" not found',
                build_dir=str(build_path),
            )

    def prepare_workspace(self) -> bool:
        """Check out a fresh worktree for the hosting branch.

        Returns:
            True if the branch did not exist remotely and was created as
            a parentless branch.

        Raises:
            WorkspaceSetupError: If the worktree cannot be attached.
        """
        workspace = self.workspace
        branch = self.config.branch
        remote = self.config.remote

        if workspace.exists():
            self._logger.info(
                "Removing existing worktree", extra={"workspace": str(workspace)}
            )
            if not self.vcs.remove_worktree(workspace).ok:
                try:
                    shutil.rmtree(workspace)
                except OSError as e:
                    raise WorkspaceSetupError(
                        f"Could not delete {workspace}", cause=e
                    ) from e

        pruned = self.vcs.prune_worktrees()
        if not pruned.ok:
            self._logger.debug("Worktree prune failed", extra={"stderr": pruned.stderr})

        if self.vcs.remote_branch_exists(remote, branch):
            self._logger.info(
                "Found existing branch on remote",
                extra={"branch": branch, "remote": remote},
            )
            fetched = self.vcs.fetch_branch(remote, branch)
            if not fetched.ok:
                self._logger.warning(
                    "Fetch failed, using local branch",
                    extra={"branch": branch, "stderr": fetched.stderr},
                )
            self._require(self.vcs.add_worktree(workspace, branch), "add worktree")
            self._logger.info("Created worktree", extra={"workspace": str(workspace)})
            return False

        self._logger.info(
            "Branch does not exist yet, creating it", extra={"branch": branch}
        )
        self._require(self.vcs.add_detached_worktree(workspace), "add worktree")
        self._require(
            self.vcs.checkout_orphan(workspace, branch), "create orphan branch"
        )
        cleared = self.vcs.remove_tracked_files(workspace)
        if not cleared.ok:
            self._logger.debug("No tracked files removed", extra={"stderr": cleared.stderr})
        self._logger.info("Created orphan branch", extra={"branch": branch})
        return True

    def _require(self, result: CommandResult, action: str) -> None:
        if not result.ok:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise WorkspaceSetupError(
                f"Failed to {action}: {detail}",
                command=result.args,
                returncode=result.returncode,
            )

    def sync_artifacts(self) -> None:
        """Replace the worktree contents with the build output.

        The version-control metadata entry is kept, and an empty
        ``.nojekyll`` marker is written at the worktree root.

        Raises:
            SyncError: On any file-system failure.
        """
        workspace = self.workspace
        try:
            for entry in workspace.iterdir():
                if entry.name == VCS_METADATA:
                    continue
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()

            shutil.copytree(
                self.config.build_path, workspace, symlinks=True, dirs_exist_ok=True
            )
            (workspace / NOJEKYLL_MARKER).write_text("")
        except OSError as e:
            raise SyncError("Failed to copy files", cause=e) from e

        self._logger.info(
            "Files copied and marker created", extra={"workspace": str(workspace)}
        )

    def publish(self, message: Optional[str] = None) -> str:
        """Stage, commit and push the worktree.

        Returns:
            The commit message that was used.

        Raises:
            PublishError: If any of the three git steps fails.
        """
        workspace = self.workspace
        commit_message = message or default_commit_message(self.clock())

        steps = (
            ("stage", lambda: self.vcs.stage_all(workspace)),
            ("commit", lambda: self.vcs.commit(workspace, commit_message)),
            (
                "push",
                lambda: self.vcs.push(workspace, self.config.remote, self.config.branch),
            ),
        )
        for action, step in steps:
            result = step()
            if not result.ok:
                raise PublishError(
                    f"Failed to {action} changes",
                    command=result.args,
                    returncode=result.returncode,
                )

        self._logger.info(
            "Pushed hosting branch",
            extra={"branch": self.config.branch, "commit_message": commit_message},
        )
        return commit_message
