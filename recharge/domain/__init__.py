"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ArtifactNotFoundError,
    BuildError,
    DeploymentError,
    DestinationNotFoundError,
    PublishError,
    RechargeError,
    SyncError,
    WorkspaceSetupError,
)
from .models import (
    CommandResult,
    DeployPhase,
    DeployReport,
    GeoLocation,
    ItineraryEntry,
    SubmissionData,
    SubmissionResult,
)

__all__ = [
    # Models
    "GeoLocation",
    "ItineraryEntry",
    "SubmissionData",
    "SubmissionResult",
    "CommandResult",
    "DeployPhase",
    "DeployReport",
    # Errors
    "RechargeError",
    "DeploymentError",
    "BuildError",
    "ArtifactNotFoundError",
    "WorkspaceSetupError",
    "SyncError",
    "PublishError",
    "DestinationNotFoundError",
]
