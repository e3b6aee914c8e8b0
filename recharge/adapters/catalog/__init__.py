"""Catalog adapters - Implementations of ItineraryRepositoryPort.

Available implementations:
- StaticItineraryRepository: the site's built-in data tables
"""

from .static_repository import StaticItineraryRepository

__all__ = ["StaticItineraryRepository"]
