"""Shared precondition checks for category handlers."""

from __future__ import annotations

from completion_handler.domain import (
    JOB_NOT_SUCCESSFUL_CODE,
    HandlerOutcome,
    JobCompletionContext,
    JobResult,
    domain_describe_orchestrator,
)


def job_require_successful_result(context: JobCompletionContext, handler_label: str, logger) -> HandlerOutcome | None:
    """Return a failed outcome when the completed job was not successful.

    Args:
        context: Job completion context.
        handler_label: Handler name used in log and reason text.
        logger: Bound structlog logger of the calling handler.

    Returns:
        HandlerOutcome | None: Failed outcome, or None when the precondition holds.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if context.job_result is JobResult.SUCCESS:
        return None

    reason = (
        f"Job {context.job_id} for orchestrator [{domain_describe_orchestrator(context)}] "
        f"wasn't successful ({context.job_result.value}); {handler_label} handler skipped"
    )
    logger.error(
        reason,
        failure_kind="declared",
        reason_code=JOB_NOT_SUCCESSFUL_CODE,
        job_result=context.job_result.value,
    )
    return HandlerOutcome.failure(reason_code=JOB_NOT_SUCCESSFUL_CODE, reason=reason)
