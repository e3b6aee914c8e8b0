"""Coordinates of every destination shown on the itinerary map."""

from __future__ import annotations

from typing import Dict

from ..domain.models import GeoLocation

DESTINATION_COORDINATES: Dict[str, GeoLocation] = {
    "taiwan": GeoLocation(latitude=23.6978, longitude=120.9605),
    "yogyakarta": GeoLocation(latitude=-7.7956, longitude=110.3695),
    "kuala-lumpur": GeoLocation(latitude=3.139, longitude=101.6869),
    "komodo": GeoLocation(latitude=-8.52, longitude=119.55),
    "kinabatangan": GeoLocation(latitude=5.3, longitude=118.3),
    "bromo": GeoLocation(latitude=-7.9425, longitude=112.953),
    "bali": GeoLocation(latitude=-8.7075, longitude=115.2625),
}
