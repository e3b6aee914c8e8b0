"""Typed domain errors for the recharge tooling.

All errors inherit from RechargeError and can optionally wrap a root
cause exception for debugging. Deployment failures carry the phase
that was running when they happened.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .models import DeployPhase


@dataclass
class RechargeError(Exception):
    """Base error for the recharge domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DeploymentError(RechargeError):
    """A fatal deployment failure.

    Attributes:
        phase: Phase that was running when the run failed
        command: Command line that failed, if any
        returncode: Exit status of that command
    """

    phase: DeployPhase = DeployPhase.IDLE
    command: tuple[str, ...] = ()
    returncode: Optional[int] = None


@dataclass
class BuildError(DeploymentError):
    """The build command exited with a non-zero status."""

    phase: DeployPhase = DeployPhase.BUILDING


@dataclass
class ArtifactNotFoundError(DeploymentError):
    """The build output directory is missing after the build.

    Attributes:
        build_dir: Directory that was expected
    """

    phase: DeployPhase = DeployPhase.VERIFYING
    build_dir: str = ""


@dataclass
class WorkspaceSetupError(DeploymentError):
    """The publish worktree could not be prepared."""

    phase: DeployPhase = DeployPhase.PREPARING_WORKSPACE


@dataclass
class SyncError(DeploymentError):
    """Copying build artifacts into the workspace failed."""

    phase: DeployPhase = DeployPhase.SYNCING


@dataclass
class PublishError(DeploymentError):
    """Staging, committing or pushing the workspace failed."""

    phase: DeployPhase = DeployPhase.PUBLISHING


@dataclass
class DestinationNotFoundError(RechargeError):
    """Destination identifier not found in the data tables.

    Attributes:
        destination_id: The identifier that was not found
    """

    destination_id: str = ""
