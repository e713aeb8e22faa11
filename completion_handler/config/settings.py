"""Typed handler settings with dotenv support and registration-time validation."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_FAVORITE_ANIMAL = "Unspecified"
_CAMEL_BOUNDARY_PATTERN = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class SettingsLoadError(RuntimeError):
    """Raised when handler settings cannot be loaded or validated."""


class HandlerSettings(BaseSettings):
    """Settings for the job completion handler.

    Environment variable names are the field names in uppercase with a
    `JOB_COMPLETION_` prefix. Example: `job_types` reads from
    `JOB_COMPLETION_JOB_TYPES`. Host-supplied registration options take
    precedence over the environment.

    Attributes:
        job_types: Comma-separated job type identifiers the host invokes this handler for.
        favorite_animal: Free-form demo parameter, logged on each invocation.
        inventory_job_type: Job type tag of Inventory jobs.
        management_job_type: Job type tag of Management jobs.
        reenrollment_job_type: Job type tag of Re-enrollment jobs.
        job_history_path: Relative host API path of the job history endpoint.
        request_timeout_seconds: Timeout for the job history request.
        dispatch_timeout_seconds: Upper bound on one dispatch, including the request.
        log_configure: Whether the handler installs its own log handler.
        log_level: Minimum level for the handler's own log handler.
        log_json: Render the handler's own log output as JSON lines.
    """

    model_config = SettingsConfigDict(
        env_prefix="JOB_COMPLETION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    job_types: str = Field(min_length=1)
    favorite_animal: str = Field(default=_DEFAULT_FAVORITE_ANIMAL)
    inventory_job_type: str = Field(default="WinCertInventory", min_length=1)
    management_job_type: str = Field(default="WinCertManagement", min_length=1)
    reenrollment_job_type: str = Field(default="WinCertReenrollment", min_length=1)
    job_history_path: str = Field(default="OrchestratorJobs/JobHistory", min_length=1)
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    dispatch_timeout_seconds: float = Field(default=120.0, gt=0)
    log_configure: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("job_types")
    @classmethod
    def _validate_job_types(cls, value: str) -> str:
        entries = [entry.strip() for entry in value.split(",") if entry.strip()]
        if not entries:
            raise ValueError("job_types must list at least one job type identifier")
        return ",".join(entries)

    @field_validator("favorite_animal")
    @classmethod
    def _default_blank_favorite_animal(cls, value: str) -> str:
        return value.strip() or _DEFAULT_FAVORITE_ANIMAL

    @field_validator("inventory_job_type", "management_job_type", "reenrollment_job_type", "job_history_path")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("dispatch_timeout_seconds")
    @classmethod
    def _validate_dispatch_timeout_bounds(cls, value: float, info) -> float:
        request_timeout_seconds = float(info.data.get("request_timeout_seconds", 30.0))
        if value < request_timeout_seconds:
            raise ValueError("dispatch_timeout_seconds must be greater than or equal to request_timeout_seconds")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_level = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized_level), int):
            raise ValueError(f"unknown log level: {value}")
        return normalized_level

    @model_validator(mode="after")
    def _validate_distinct_job_type_tags(self) -> HandlerSettings:
        tags = (self.inventory_job_type, self.management_job_type, self.reenrollment_job_type)
        if len(set(tags)) != len(tags):
            raise ValueError("inventory, management and reenrollment job types must be distinct")
        return self

    @property
    def job_type_ids(self) -> tuple[str, ...]:
        """Return configured job type identifiers, lower-cased and de-duplicated in order.

        Returns:
            tuple[str, ...]: Normalized job type identifiers.

        Raises:
            RuntimeError: This property does not raise runtime errors.
        """

        normalized_ids = (entry.strip().lower() for entry in self.job_types.split(","))
        return tuple(dict.fromkeys(entry for entry in normalized_ids if entry))


def config_normalize_option_key(option_key: str) -> str:
    """Convert a registration option key such as `JobTypes` to `job_types`.

    Args:
        option_key: Option key as written in the host registration.

    Returns:
        str: Snake-case settings field name.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return _CAMEL_BOUNDARY_PATTERN.sub("_", option_key.strip()).replace("-", "_").lower()


def config_load_settings(options: Mapping[str, Any] | None = None) -> HandlerSettings:
    """Load and validate handler settings from registration options, environment and dotenv.

    Args:
        options: Optional host registration options; keys may be PascalCase.

    Returns:
        HandlerSettings: Validated handler settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    normalized_options = {
        config_normalize_option_key(str(option_key)): option_value
        for option_key, option_value in (options or {}).items()
        if option_value is not None
    }
    try:
        return HandlerSettings(**normalized_options)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Job completion handler configuration validation failed. Update the registration options, "
            f".env or environment variables. Details: {error}"
        ) from error
