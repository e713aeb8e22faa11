"""Management job completion handler."""

from __future__ import annotations

import structlog

from completion_handler.domain import (
    CertStoreOperationType,
    HandlerOutcome,
    JobCompletionContext,
    domain_describe_orchestrator,
)

from .errors import HandlerExecutionError
from .preconditions import job_require_successful_result


class ManagementCompletionHandler:
    """Synchronous handler for completed Management jobs.

    Add and Remove operations have their own sub-routines; every other
    operation type falls through to a generic one. All of them are extension
    points and currently only log.
    """

    _HANDLER_LABEL = "Management"

    def __init__(self):
        self._logger = structlog.get_logger(__name__)

    def job_handle(self, context: JobCompletionContext) -> HandlerOutcome:
        """Route a successful Management job to its operation sub-routine.

        Args:
            context: Job completion context.

        Returns:
            HandlerOutcome: Success once the precondition passes.

        Raises:
            HandlerExecutionError: Raised when a sub-routine fails unexpectedly.
        """

        orchestrator = domain_describe_orchestrator(context)
        logger = self._logger.bind(handler=self._HANDLER_LABEL, job_id=context.job_id, orchestrator=orchestrator)
        logger.debug("Executing the Management handler")

        precondition_outcome = job_require_successful_result(context, self._HANDLER_LABEL, logger)
        if precondition_outcome is not None:
            return precondition_outcome

        try:
            if context.operation_type is CertStoreOperationType.ADD:
                self._job_process_add(context, logger)
            elif context.operation_type is CertStoreOperationType.REMOVE:
                self._job_process_remove(context, logger)
            else:
                self._job_process_other(context, logger)
        except Exception as error:
            raise HandlerExecutionError(
                f"FAILURE in Management handler for orchestrator [{orchestrator}]: {error}",
                agent_id=context.agent_id,
                client_machine=context.client_machine,
                job_id=context.job_id,
            ) from error

        return HandlerOutcome.success()

    def _job_process_add(self, context: JobCompletionContext, logger) -> None:
        logger.debug("Management job process for an Add operation", certificate_id=context.certificate_id)

    def _job_process_remove(self, context: JobCompletionContext, logger) -> None:
        logger.debug("Management job process for a Remove operation", certificate_id=context.certificate_id)

    def _job_process_other(self, context: JobCompletionContext, logger) -> None:
        logger.debug(
            "Management job process for another operation type",
            operation_type=context.operation_type.value,
        )
