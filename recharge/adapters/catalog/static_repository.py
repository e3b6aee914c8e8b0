"""Static itinerary repository adapter.

Serves the built-in data tables through ItineraryRepositoryPort.
Alternative tables can be injected, e.g. in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ...data import DESTINATION_COORDINATES, ITINERARY
from ...domain.models import GeoLocation, ItineraryEntry


@dataclass
class StaticItineraryRepository:
    """Read-only repository over in-memory tables.

    Attributes:
        entries: Itinerary entries in display order
        coordinates: Destination identifier to coordinates
    """

    entries: Tuple[ItineraryEntry, ...] = ITINERARY
    coordinates: Mapping[str, GeoLocation] = field(
        default_factory=lambda: dict(DESTINATION_COORDINATES)
    )

    _by_id: Dict[str, ItineraryEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_id = {entry.id: entry for entry in self.entries}

    def list_entries(self) -> Sequence[ItineraryEntry]:
        return list(self.entries)

    def get_entry(self, entry_id: str) -> Optional[ItineraryEntry]:
        return self._by_id.get(entry_id)

    def list_coordinates(self) -> Mapping[str, GeoLocation]:
        return dict(self.coordinates)

    def get_coordinates(self, destination_id: str) -> Optional[GeoLocation]:
        return self.coordinates.get(destination_id)
