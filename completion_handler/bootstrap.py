"""Handler bootstrap wiring for registration-time validation and dependency assembly."""

from collections.abc import Mapping
from typing import Any

from completion_handler.adapters import CommandApiJobHistoryAdapter
from completion_handler.config import config_load_settings
from completion_handler.jobs import (
    AsyncWorkBridge,
    CompletionDispatcher,
    DispatcherConfig,
    InventoryCompletionHandler,
    ManagementCompletionHandler,
    ReenrollmentCompletionHandler,
)
from completion_handler.logging_config import logging_configure


def bootstrap_create_completion_handler(options: Mapping[str, Any] | None = None) -> CompletionDispatcher:
    """Assemble the completion dispatcher after validating its configuration.

    This is the factory the host resolves through the
    `orchestrator_job_completion_handlers` entry point.

    Args:
        options: Optional host registration options, such as `JobTypes` and `FavoriteAnimal`.

    Returns:
        CompletionDispatcher: Fully wired dispatcher.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    settings = config_load_settings(options)
    if settings.log_configure:
        logging_configure(level=settings.log_level, json_output=settings.log_json)

    job_history_adapter = CommandApiJobHistoryAdapter(
        job_history_path=settings.job_history_path,
        request_timeout_seconds=settings.request_timeout_seconds,
    )
    return CompletionDispatcher(
        config=DispatcherConfig(
            job_type_ids=settings.job_type_ids,
            inventory_job_type=settings.inventory_job_type,
            management_job_type=settings.management_job_type,
            reenrollment_job_type=settings.reenrollment_job_type,
            favorite_animal=settings.favorite_animal,
            dispatch_timeout_seconds=settings.dispatch_timeout_seconds,
        ),
        inventory_handler=InventoryCompletionHandler(job_history_adapter=job_history_adapter),
        management_handler=ManagementCompletionHandler(),
        reenrollment_handler=ReenrollmentCompletionHandler(),
        bridge=AsyncWorkBridge(),
    )
