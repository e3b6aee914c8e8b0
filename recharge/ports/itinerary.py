"""Itinerary port - Read-only access to the itinerary data tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import GeoLocation, ItineraryEntry


class ItineraryRepositoryPort(Protocol):
    """Port for the destination and itinerary tables.

    Implementation: adapters/catalog/static_repository.py
    """

    def list_entries(self) -> Sequence[ItineraryEntry]:
        """Return itinerary entries in display order."""
        ...

    def get_entry(self, entry_id: str) -> Optional[ItineraryEntry]:
        """Return the entry with the given identifier, or None."""
        ...

    def list_coordinates(self) -> Mapping[str, GeoLocation]:
        """Return the destination identifier to coordinates mapping."""
        ...

    def get_coordinates(self, destination_id: str) -> Optional[GeoLocation]:
        """Return coordinates for a destination, or None if unknown."""
        ...
