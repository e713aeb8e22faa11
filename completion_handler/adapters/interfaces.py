"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass
from typing import Protocol

import httpx


@dataclass(frozen=True)
class JobHistoryFetchResult:
    """Result contract for job history lookups.

    Attributes:
        status_code: HTTP status code returned by the host API.
        request_url: Fully rendered request URL.
        body_text: Response body, logged but not parsed.
    """

    status_code: int
    request_url: str
    body_text: str


class JobHistoryPort(Protocol):
    """Port definition for reading orchestrator job history from the host API."""

    async def adapter_fetch_job_history(self, client: httpx.AsyncClient, job_id: str) -> JobHistoryFetchResult:
        """Fetch job history entries for one job through the host-supplied client.

        Args:
            client: Host-configured HTTP client.
            job_id: Completed job identifier.

        Returns:
            JobHistoryFetchResult: Response status and body.

        Raises:
            CommandApiError: Raised when the call fails at the transport or HTTP layer.
        """
