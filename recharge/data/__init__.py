"""Static data tables for the itinerary site."""

from .destinations import DESTINATION_COORDINATES
from .itinerary import ITINERARY

__all__ = ["DESTINATION_COORDINATES", "ITINERARY"]
