"""Host Command API adapter for orchestrator job history lookups."""

from __future__ import annotations

from typing import Final

import httpx

from .command_api_errors import CommandApiConnectionError, CommandApiStatusError, CommandApiTimeoutError
from .interfaces import JobHistoryFetchResult, JobHistoryPort


class CommandApiJobHistoryAdapter(JobHistoryPort):
    """Adapter issuing the `OrchestratorJobs/JobHistory` query on a host-supplied client.

    The adapter never creates, configures or closes HTTP clients. Base address
    and caller identity belong to the client the host passes in with each job.
    """

    _QUERY_PARAMETER_NAME: Final[str] = "pq.queryString"

    def __init__(
        self,
        job_history_path: str = "OrchestratorJobs/JobHistory",
        request_timeout_seconds: float = 30.0,
    ):
        """Initialize job history adapter.

        Args:
            job_history_path: Relative API path resolved against the client base address.
            request_timeout_seconds: Per-request timeout in seconds.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when configuration values are invalid.
        """

        normalized_path = job_history_path.strip().lstrip("/")
        if not normalized_path:
            raise ValueError("job_history_path must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._job_history_path = normalized_path
        self._request_timeout_seconds = request_timeout_seconds

    @staticmethod
    def adapter_build_job_query(job_id: str) -> str:
        """Return the job history filter expression for one job.

        Args:
            job_id: Completed job identifier.

        Returns:
            str: Unencoded `JobID -eq "<job_id>"` expression.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return f'JobID -eq "{job_id}"'

    async def adapter_fetch_job_history(self, client: httpx.AsyncClient, job_id: str) -> JobHistoryFetchResult:
        """Issue one GET against the job history endpoint.

        Args:
            client: Host-configured HTTP client.
            job_id: Completed job identifier.

        Returns:
            JobHistoryFetchResult: Response status and body for a 2xx response.

        Raises:
            ValueError: Raised when client is missing or job_id is blank.
            CommandApiTimeoutError: Raised when the request times out.
            CommandApiConnectionError: Raised for other transport failures.
            CommandApiStatusError: Raised for non-2xx responses.
        """

        if client is None:
            raise ValueError("client must not be None")
        normalized_job_id = str(job_id).strip()
        if not normalized_job_id:
            raise ValueError("job_id must not be blank")

        query_parameters = {self._QUERY_PARAMETER_NAME: self.adapter_build_job_query(normalized_job_id)}
        try:
            response = await client.get(
                self._job_history_path,
                params=query_parameters,
                timeout=self._request_timeout_seconds,
            )
        except httpx.TimeoutException as error:
            raise CommandApiTimeoutError("Command API request timed out") from error
        except httpx.RequestError as error:
            raise CommandApiConnectionError(f"Command API request failed: {error}") from error

        request_url = str(response.request.url)
        if not response.is_success:
            raise CommandApiStatusError(
                f"Command API returned HTTP {response.status_code} for {request_url}",
                status_code=response.status_code,
            )

        return JobHistoryFetchResult(
            status_code=response.status_code,
            request_url=request_url,
            body_text=response.text,
        )
