"""Inventory job completion handler with a job history callback into the host API."""

from __future__ import annotations

import structlog

from completion_handler.adapters import CommandApiError, JobHistoryPort
from completion_handler.domain import (
    API_CLIENT_MISSING_CODE,
    COMMAND_API_FAILED_CODE,
    HandlerOutcome,
    JobCompletionContext,
    domain_describe_orchestrator,
)

from .errors import HandlerExecutionError
from .preconditions import job_require_successful_result


class InventoryCompletionHandler:
    """Asynchronous handler for completed Inventory jobs."""

    _HANDLER_LABEL = "Inventory"

    def __init__(self, job_history_adapter: JobHistoryPort):
        """Initialize inventory handler dependencies.

        Args:
            job_history_adapter: Adapter for the host job history endpoint.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when job_history_adapter is None.
        """

        if job_history_adapter is None:
            raise ValueError("job_history_adapter must not be None")
        self._job_history_adapter = job_history_adapter
        self._logger = structlog.get_logger(__name__)

    async def job_handle(self, context: JobCompletionContext) -> HandlerOutcome:
        """Query job history for the completed job and log the response body.

        Args:
            context: Job completion context.

        Returns:
            HandlerOutcome: Success when the host API answered with 2xx; a declared
            failure for unsuccessful jobs, a missing client or HTTP-layer errors.

        Raises:
            HandlerExecutionError: Raised for any other failure, wrapping the cause.
        """

        orchestrator = domain_describe_orchestrator(context)
        logger = self._logger.bind(handler=self._HANDLER_LABEL, job_id=context.job_id, orchestrator=orchestrator)
        logger.debug("Executing the Inventory handler")

        precondition_outcome = job_require_successful_result(context, self._HANDLER_LABEL, logger)
        if precondition_outcome is not None:
            return precondition_outcome

        if context.api_client is None:
            reason = f"No HTTP client supplied in the context for orchestrator [{orchestrator}]"
            logger.error(reason, failure_kind="declared", reason_code=API_CLIENT_MISSING_CODE)
            return HandlerOutcome.failure(reason_code=API_CLIENT_MISSING_CODE, reason=reason)

        try:
            logger.debug("Querying Command API for job history")
            history = await self._job_history_adapter.adapter_fetch_job_history(
                client=context.api_client,
                job_id=context.job_id,
            )
        except CommandApiError as error:
            reason = f"Could not query Command API for orchestrator [{orchestrator}]: {error}"
            logger.error(
                reason,
                failure_kind="declared",
                reason_code=COMMAND_API_FAILED_CODE,
                status_code=error.status_code,
            )
            return HandlerOutcome.failure(reason_code=COMMAND_API_FAILED_CODE, reason=reason)
        except Exception as error:
            raise HandlerExecutionError(
                f"FAILURE in Inventory handler for orchestrator [{orchestrator}]",
                agent_id=context.agent_id,
                client_machine=context.client_machine,
                job_id=context.job_id,
            ) from error

        logger.debug(
            "Results of JobHistory API",
            request_url=history.request_url,
            status_code=history.status_code,
            body=history.body_text,
        )
        return HandlerOutcome.success()
