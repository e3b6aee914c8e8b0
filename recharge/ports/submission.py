"""Submission port - Abstraction for the itinerary form backend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import SubmissionResult


class SubmissionPort(Protocol):
    """Port for sending a visitor's destination selection.

    Implementation: adapters/submission/http_client.py

    Implementations never raise: every failure is returned as a
    SubmissionResult carrying a human-readable message.
    """

    def submit(self, name: str, destinations: Sequence[str]) -> SubmissionResult:
        """Submit a name and a list of destination identifiers.

        Args:
            name: Visitor name as typed in the form.
            destinations: Selected destination identifiers.

        Returns:
            SubmissionResult with success flag and optional error.
        """
        ...
