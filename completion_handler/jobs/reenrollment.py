"""Re-enrollment job completion handler."""

from __future__ import annotations

import structlog

from completion_handler.domain import HandlerOutcome, JobCompletionContext, domain_describe_orchestrator

from .errors import HandlerExecutionError
from .preconditions import job_require_successful_result


class ReenrollmentCompletionHandler:
    """Synchronous handler for completed Re-enrollment jobs."""

    _HANDLER_LABEL = "Reenrollment"

    def __init__(self):
        self._logger = structlog.get_logger(__name__)

    def job_handle(self, context: JobCompletionContext) -> HandlerOutcome:
        """Run re-enrollment post-processing for a successful job.

        Args:
            context: Job completion context.

        Returns:
            HandlerOutcome: Success once the precondition passes.

        Raises:
            HandlerExecutionError: Raised when post-processing fails unexpectedly.
        """

        orchestrator = domain_describe_orchestrator(context)
        logger = self._logger.bind(handler=self._HANDLER_LABEL, job_id=context.job_id, orchestrator=orchestrator)
        logger.debug("Executing the Reenrollment handler")

        precondition_outcome = job_require_successful_result(context, self._HANDLER_LABEL, logger)
        if precondition_outcome is not None:
            return precondition_outcome

        try:
            self._job_process_reenrollment(context, logger)
        except Exception as error:
            raise HandlerExecutionError(
                f"FAILURE in Reenrollment handler for orchestrator [{orchestrator}]: {error}",
                agent_id=context.agent_id,
                client_machine=context.client_machine,
                job_id=context.job_id,
            ) from error

        return HandlerOutcome.success()

    def _job_process_reenrollment(self, context: JobCompletionContext, logger) -> None:
        logger.debug("Re-enrollment post-processing", certificate_id=context.certificate_id)
