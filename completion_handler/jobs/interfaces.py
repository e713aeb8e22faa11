"""Typed interfaces for job-layer handler responsibilities."""

from typing import Awaitable, Protocol

from completion_handler.domain import HandlerOutcome, JobCompletionContext


class CategoryHandlerPort(Protocol):
    """Port definition for one job category handler.

    Implementations are plain or `async def` methods; the dispatcher runs
    coroutine functions on its bridge loop.
    """

    def job_handle(self, context: JobCompletionContext) -> HandlerOutcome | Awaitable[HandlerOutcome]:
        """Run post-processing for one completed job.

        Args:
            context: Job completion context.

        Returns:
            HandlerOutcome | Awaitable[HandlerOutcome]: Declared outcome.

        Raises:
            HandlerExecutionError: Raised for unexpected failures.
        """


class JobCompletionHandlerPort(Protocol):
    """Host-facing contract invoked once per completed job."""

    def job_handle_completion(self, context: JobCompletionContext | None) -> bool:
        """Handle one job completion notification.

        Args:
            context: Job completion context, possibly missing.

        Returns:
            bool: True when post-processing succeeded.

        Raises:
            RuntimeError: Implementations must not raise.
        """
