"""Itinerary service - Queries over the destination tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from geopy.distance import geodesic

from ..domain.errors import DestinationNotFoundError
from ..domain.models import GeoLocation, ItineraryEntry
from ..ports.itinerary import ItineraryRepositoryPort


@dataclass
class ItineraryService:
    """Read-side helpers for the itinerary page and the form.

    Attributes:
        repository: Source of entries and coordinates
    """

    repository: ItineraryRepositoryPort
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def destinations(self) -> List[ItineraryEntry]:
        """Entries a visitor can pick, i.e. every card except the summary."""
        return [e for e in self.repository.list_entries() if not e.is_summary]

    def unknown_destinations(self, destination_ids: Sequence[str]) -> List[str]:
        """Return the identifiers that match no selectable entry."""
        known = {e.id for e in self.destinations()}
        return [d for d in destination_ids if d not in known]

    def coordinates(self, destination_id: str) -> GeoLocation:
        """Coordinates of a destination.

        Raises:
            DestinationNotFoundError: If the destination has no coordinates.
        """
        location = self.repository.get_coordinates(destination_id)
        if location is None:
            raise DestinationNotFoundError(
                f"Unknown destination: {destination_id}",
                destination_id=destination_id,
            )
        return location

    def distance_km(self, origin: str, destination: str) -> float:
        """Geodesic distance between two destinations in kilometers."""
        return geodesic(
            self.coordinates(origin).as_tuple(),
            self.coordinates(destination).as_tuple(),
        ).km

    def route_distance_km(self, destination_ids: Sequence[str]) -> float:
        """Sum of the legs between consecutive destinations.

        Fewer than two destinations yields 0.0.
        """
        total = 0.0
        for origin, destination in zip(destination_ids, destination_ids[1:]):
            total += self.distance_km(origin, destination)
        self._logger.debug(
            "Route distance computed",
            extra={"stops": len(destination_ids), "distance_km": total},
        )
        return total
