"""Host-facing completion dispatcher routing completed jobs to category handlers."""

from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
import inspect
from typing import Final

import structlog

from completion_handler.domain import (
    CONTEXT_MISSING_CODE,
    DISPATCH_TIMEOUT_CODE,
    JOB_TYPE_UNRECOGNIZED_CODE,
    UNEXPECTED_ERROR_CODE,
    HandlerOutcome,
    JobCategory,
    JobCompletionContext,
    domain_describe_orchestrator,
    domain_format_context,
)

from .bridge import AsyncWorkBridge
from .errors import DispatchTimeoutError
from .interfaces import CategoryHandlerPort, JobCompletionHandlerPort

DISTRIBUTION_NAME: Final[str] = "orchestrator-job-completion-handler"


@dataclass(frozen=True)
class DispatcherConfig:
    """Configuration values for completion dispatch.

    Attributes:
        job_type_ids: Normalized job type identifiers the host invokes this handler for.
        inventory_job_type: Job type tag of Inventory jobs.
        management_job_type: Job type tag of Management jobs.
        reenrollment_job_type: Job type tag of Re-enrollment jobs.
        favorite_animal: Free-form demo parameter, logged on each invocation.
        dispatch_timeout_seconds: Upper bound on one dispatch; None waits indefinitely.
    """

    job_type_ids: tuple[str, ...]
    inventory_job_type: str = "WinCertInventory"
    management_job_type: str = "WinCertManagement"
    reenrollment_job_type: str = "WinCertReenrollment"
    favorite_animal: str = "Unspecified"
    dispatch_timeout_seconds: float | None = 120.0


def job_classify_job_type(job_type: str, config: DispatcherConfig) -> JobCategory:
    """Map a job type tag to its category.

    Args:
        job_type: Job type tag from the completion context.
        config: Dispatcher configuration holding the recognized tags.

    Returns:
        JobCategory: Matching category, `UNRECOGNIZED` for any other tag.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    recognized_tags = {
        config.inventory_job_type: JobCategory.INVENTORY,
        config.management_job_type: JobCategory.MANAGEMENT,
        config.reenrollment_job_type: JobCategory.REENROLLMENT,
    }
    return recognized_tags.get(job_type, JobCategory.UNRECOGNIZED)


def _job_handler_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "unknown"


class CompletionDispatcher(JobCompletionHandlerPort):
    """Synchronous job completion entry point for the host.

    Every failure resolves to `False` at `job_handle_completion`; the reason is
    only available through the log stream.
    """

    def __init__(
        self,
        config: DispatcherConfig,
        inventory_handler: CategoryHandlerPort,
        management_handler: CategoryHandlerPort,
        reenrollment_handler: CategoryHandlerPort,
        bridge: AsyncWorkBridge | None = None,
    ):
        """Initialize dispatcher dependencies.

        Args:
            config: Dispatch configuration.
            inventory_handler: Handler for Inventory jobs.
            management_handler: Handler for Management jobs.
            reenrollment_handler: Handler for Re-enrollment jobs.
            bridge: Optional sync-to-async bridge; a private one is created when omitted.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        if inventory_handler is None:
            raise ValueError("inventory_handler must not be None")
        if management_handler is None:
            raise ValueError("management_handler must not be None")
        if reenrollment_handler is None:
            raise ValueError("reenrollment_handler must not be None")
        if not config.job_type_ids:
            raise ValueError("config.job_type_ids must not be empty")
        for tag_name in ("inventory_job_type", "management_job_type", "reenrollment_job_type"):
            if not getattr(config, tag_name).strip():
                raise ValueError(f"config.{tag_name} must not be blank")
        if config.dispatch_timeout_seconds is not None and config.dispatch_timeout_seconds <= 0:
            raise ValueError("config.dispatch_timeout_seconds must be > 0")

        self._config = config
        self._handlers: dict[JobCategory, CategoryHandlerPort] = {
            JobCategory.INVENTORY: inventory_handler,
            JobCategory.MANAGEMENT: management_handler,
            JobCategory.REENROLLMENT: reenrollment_handler,
        }
        self._bridge = bridge or AsyncWorkBridge()
        self._logger = structlog.get_logger(__name__)
        self._logger.info(
            "Job completion handler initialized",
            handler_version=_job_handler_version(),
            job_type_ids=list(config.job_type_ids),
        )

    def job_is_registered_for(self, job_type_id: str) -> bool:
        """Return whether the configured job type ids include the given id.

        Args:
            job_type_id: Job type identifier, compared case-insensitively.

        Returns:
            bool: True when the host should invoke this handler for the id.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        return str(job_type_id).strip().lower() in self._config.job_type_ids

    def job_handle_completion(self, context: JobCompletionContext | None) -> bool:
        """Handle one job completion notification and report success to the host.

        Args:
            context: Job completion context supplied by the host.

        Returns:
            bool: True when the matching category handler succeeded.

        Raises:
            RuntimeError: This method never raises; all failures become False.
        """

        if context is None:
            self._logger.error(
                "A null context object was passed to the job completion handler",
                failure_kind="declared",
                reason_code=CONTEXT_MISSING_CODE,
            )
            return False

        orchestrator = domain_describe_orchestrator(context)
        logger = self._logger.bind(job_id=context.job_id, orchestrator=orchestrator, job_type=context.job_type)
        logger.info(
            f"Entering job completion handler for orchestrator [{orchestrator}] and job type '{context.job_type}'"
        )
        logger.debug(f"This handler's favorite animal is: {self._config.favorite_animal}")
        logger.debug(f"The context passed is:\n[\n{domain_format_context(context)}\n]")
        try:
            outcome = self._job_route(context)
        except DispatchTimeoutError as error:
            logger.error(str(error), failure_kind="timeout", reason_code=DISPATCH_TIMEOUT_CODE)
            outcome = HandlerOutcome.failure(reason_code=DISPATCH_TIMEOUT_CODE, reason=str(error))
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.exception(
                f"Unexpected failure in job completion handler for orchestrator [{orchestrator}]",
                failure_kind="unexpected",
                reason_code=UNEXPECTED_ERROR_CODE,
                error_type=type(error).__name__,
            )
            outcome = HandlerOutcome.failure(reason_code=UNEXPECTED_ERROR_CODE, reason=str(error))

        logger.debug(
            f"Exiting job completion handler for orchestrator [{orchestrator}] and job type "
            f"'{context.job_type}' with status: {outcome.succeeded}",
            result=outcome.succeeded,
            reason_code=outcome.reason_code,
        )
        return outcome.succeeded

    def _job_route(self, context: JobCompletionContext) -> HandlerOutcome:
        """Classify one context and run its category handler to completion.

        Synchronous handlers run on the calling thread. Coroutine handlers are
        created and awaited on the bridge loop under the dispatch timeout.

        Args:
            context: Job completion context.

        Returns:
            HandlerOutcome: Category handler outcome, or a declared failure for
            unrecognized job types.

        Raises:
            HandlerExecutionError: Raised when a category handler fails unexpectedly.
            DispatchTimeoutError: Raised when a coroutine handler exceeds the dispatch timeout.
        """

        category = job_classify_job_type(context.job_type, self._config)
        logger = self._logger.bind(job_id=context.job_id, job_type=context.job_type, category=category.value)

        handler = self._handlers.get(category)
        if handler is None:
            reason = (
                f"{context.job_type} is not implemented by the completion handler. "
                f"No action taken for job {context.job_id}"
            )
            logger.debug(reason)
            return HandlerOutcome.failure(reason_code=JOB_TYPE_UNRECOGNIZED_CODE, reason=reason)

        article = "an" if category.value[0].lower() in "aeiou" else "a"
        logger.debug(f"Dispatching job completion handler for {article} {category.value} job {context.job_id}")
        if not inspect.iscoroutinefunction(handler.job_handle):
            return handler.job_handle(context)
        return self._bridge.bridge_run(
            lambda: handler.job_handle(context),
            timeout_seconds=self._config.dispatch_timeout_seconds,
            agent_id=context.agent_id,
            client_machine=context.client_machine,
            job_id=context.job_id,
        )

    def job_close(self) -> None:
        """Stop the dispatcher event loop thread.

        Returns:
            None: Closes the bridge as side effect.

        Raises:
            RuntimeError: This method does not raise runtime errors.
        """

        self._bridge.bridge_close()
