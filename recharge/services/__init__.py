"""Services layer - Application orchestration.

Available services:
- DeploymentService: builds the site and publishes it to the hosting branch
- ItineraryService: queries over the destination tables
"""

from .deployment_service import DeploymentService, default_commit_message
from .itinerary_service import ItineraryService

__all__ = ["DeploymentService", "ItineraryService", "default_commit_message"]
