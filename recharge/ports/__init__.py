"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: How the application is driven (services)
- Output ports: How the application drives external systems (adapters)
"""

from .command import CommandRunnerPort
from .itinerary import ItineraryRepositoryPort
from .submission import SubmissionPort
from .vcs import VersionControlPort

__all__ = [
    # Processes
    "CommandRunnerPort",
    "VersionControlPort",
    # Form backend
    "SubmissionPort",
    # Data tables
    "ItineraryRepositoryPort",
]
