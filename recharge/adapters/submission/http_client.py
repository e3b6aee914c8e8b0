"""HTTP submission client adapter.

Posts the itinerary form to the configured backend endpoint and turns
every outcome into a SubmissionResult:
- Missing endpoint: failure without any network call
- Non-2xx response (3xx included): the backend's ``error.message``
  or the status text
- Transport error: the exception message
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import requests

from ...domain.models import SubmissionData, SubmissionResult

NOT_CONFIGURED_MESSAGE = (
    "Form submission is not configured. Please set PUBLIC_SUBMISSION_ENDPOINT "
    "in your environment to point to your backend."
)
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def _extract_error_message(response: requests.Response) -> Optional[str]:
    """Return ``error.message`` from a JSON error body, if there is one."""
    try:
        body: Any = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    if isinstance(message, str) and message:
        return message
    return None


@dataclass
class HTTPSubmissionClient:
    """Submission client over HTTP using ``requests``.

    This adapter implements SubmissionPort. The endpoint is injected
    once at construction; no ambient configuration is read per call.

    Attributes:
        endpoint: Backend URL, None or blank when submissions are disabled
        timeout_seconds: Request timeout
        session: HTTP session (a new one is created if omitted)
    """

    endpoint: Optional[str] = None
    timeout_seconds: float = 10.0
    session: requests.Session = field(default_factory=requests.Session, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint and self.endpoint.strip())

    def submit(self, name: str, destinations: Sequence[str]) -> SubmissionResult:
        if not self.is_configured:
            self._logger.error(
                "PUBLIC_SUBMISSION_ENDPOINT is not configured. "
                "Form submissions are disabled."
            )
            return SubmissionResult.failure(NOT_CONFIGURED_MESSAGE)

        data = SubmissionData(name=name, destinations=tuple(destinations))

        try:
            response = self.session.post(
                self.endpoint.strip(),  # type: ignore[union-attr]
                json=data.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            self._logger.warning(
                "Submission request failed",
                extra={"error": str(e)},
            )
            return SubmissionResult.failure(str(e) or UNEXPECTED_ERROR_MESSAGE)
        except Exception as e:
            self._logger.error(
                "Submission unexpected error",
                extra={"error": str(e)},
            )
            return SubmissionResult.failure(str(e) or UNEXPECTED_ERROR_MESSAGE)

        if not 200 <= response.status_code < 300:
            message = (
                _extract_error_message(response)
                or response.reason
                or f"HTTP {response.status_code}"
            )
            self._logger.warning(
                "Submission rejected",
                extra={"status": response.status_code, "error": message},
            )
            return SubmissionResult.failure(message)

        self._logger.info(
            "Submission accepted",
            extra={"destinations": len(data.destinations)},
        )
        return SubmissionResult.ok()
