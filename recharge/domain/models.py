"""Immutable domain models for the recharge tooling.

All models are frozen dataclasses with slots. They have no external
dependencies and describe the itinerary data, form submissions and the
deployment run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class DeployPhase(Enum):
    """Phases of a single deployment run.

    A run moves forward through the phases in declaration order and
    ends in DONE or FAILED. FAILED can be entered from any phase.
    """

    IDLE = "idle"
    BUILDING = "building"
    VERIFYING = "verifying"
    PREPARING_WORKSPACE = "preparing_workspace"
    SYNCING = "syncing"
    PUBLISHING = "publishing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class ItineraryEntry:
    """One card of the itinerary grid.

    Attributes:
        id: Destination identifier (e.g., 'bali')
        title: Card heading
        description: Short blurb shown under the title
        dates: Human-readable date range, empty for the summary card
        image: Site-relative image path, empty when the card has none
        column_span: Grid columns the card occupies
        is_summary: Closing card without a destination
        is_tall: Layout hint for a double-height card
        is_wide: Layout hint for a wide card
    """

    id: str
    title: str
    description: str
    dates: str
    image: str
    column_span: int
    is_summary: bool = False
    is_tall: bool = False
    is_wide: bool = False

    def image_url(self, base_path: str = "") -> str:
        """Return the image reference prefixed with the site base path."""
        if not self.image:
            return ""
        return f"{base_path.rstrip('/')}{self.image}"


@dataclass(frozen=True, slots=True)
class SubmissionData:
    """A visitor's destination selection."""

    name: str
    destinations: tuple[str, ...] = field(default_factory=tuple)

    def to_payload(self) -> Dict[str, Any]:
        """JSON body sent to the submission endpoint."""
        return {"name": self.name, "destinations": list(self.destinations)}


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """Normalized outcome of a form submission.

    Attributes:
        success: True when the endpoint accepted the submission
        error: Human-readable message when it did not
    """

    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> SubmissionResult:
        return cls(success=True)

    @classmethod
    def failure(cls, message: str) -> SubmissionResult:
        return cls(success=False, error=message)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True}
        return {"success": False, "error": self.error}


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of an external command.

    Attributes:
        args: The argument vector that was run
        returncode: Process exit status
        stdout: Captured standard output (empty when not captured)
        stderr: Captured standard error (empty when not captured)
    """

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Check if the command exited with status 0."""
        return self.returncode == 0


@dataclass(frozen=True, slots=True)
class DeployReport:
    """Summary of a successful deployment run.

    Attributes:
        branch: Hosting branch that was pushed
        workspace: Publish workspace directory
        commit_message: Message used for the deploy commit
        branch_created: True when the branch was created as a parentless branch
        phases: Phases the run went through, in order
    """

    branch: str
    workspace: Path
    commit_message: str
    branch_created: bool
    phases: tuple[DeployPhase, ...] = field(default_factory=tuple)
