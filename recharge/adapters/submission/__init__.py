"""Submission adapters - Implementations of SubmissionPort.

Available implementations:
- HTTPSubmissionClient: JSON POST to the configured endpoint
"""

from .http_client import (
    NOT_CONFIGURED_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    HTTPSubmissionClient,
)

__all__ = [
    "HTTPSubmissionClient",
    "NOT_CONFIGURED_MESSAGE",
    "UNEXPECTED_ERROR_MESSAGE",
]
