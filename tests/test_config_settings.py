"""Regression tests for handler settings loading and validation."""

from __future__ import annotations

import pytest

from completion_handler.config import (
    HandlerSettings,
    SettingsLoadError,
    config_load_settings,
    config_normalize_option_key,
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test without handler environment variables or a dotenv file.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Empty working directory.

    Returns:
        None: Fixture mutates process environment only.

    Raises:
        RuntimeError: This fixture does not raise runtime errors.
    """

    for field_name in HandlerSettings.model_fields:
        monkeypatch.delenv(f"JOB_COMPLETION_{field_name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_load_settings_requires_job_types() -> None:
    """Fail with SettingsLoadError when no job types are configured.

    Returns:
        None: Assertions validate startup rejection.

    Raises:
        AssertionError: Raised when missing job types are accepted.
    """

    with pytest.raises(SettingsLoadError, match="job_types"):
        config_load_settings()


def test_config_load_settings_rejects_separator_only_job_types() -> None:
    """Reject a job type list that contains only separators and whitespace."""

    with pytest.raises(SettingsLoadError, match="at least one job type"):
        config_load_settings({"JobTypes": " , ,"})


def test_config_load_settings_accepts_pascal_case_registration_options() -> None:
    """Map PascalCase registration options onto settings fields.

    Returns:
        None: Assertions validate normalized settings values.

    Raises:
        AssertionError: Raised when option keys are not normalized.
    """

    settings = config_load_settings(
        {
            "JobTypes": " 49A3E6D8-2F14-4C8B-B5A7-3E9D0C1F2A6B, 5c2d8e1f-0a9b-4c7d-8e6f-1a2b3c4d5e6f ,49a3e6d8-2f14-4c8b-b5a7-3e9d0c1f2a6b",
            "FavoriteAnimal": "Tiger",
        }
    )

    assert settings.favorite_animal == "Tiger"
    assert settings.job_type_ids == (
        "49a3e6d8-2f14-4c8b-b5a7-3e9d0c1f2a6b",
        "5c2d8e1f-0a9b-4c7d-8e6f-1a2b3c4d5e6f",
    )


def test_config_load_settings_defaults_blank_favorite_animal_and_job_type_tags() -> None:
    """Apply documented defaults when optional parameters are blank or omitted."""

    settings = config_load_settings({"JobTypes": "job-type-a", "FavoriteAnimal": "  "})

    assert settings.favorite_animal == "Unspecified"
    assert settings.inventory_job_type == "WinCertInventory"
    assert settings.management_job_type == "WinCertManagement"
    assert settings.reenrollment_job_type == "WinCertReenrollment"
    assert settings.job_history_path == "OrchestratorJobs/JobHistory"
    assert settings.log_configure is False


def test_config_load_settings_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read prefixed environment variables and let registration options override them.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate precedence.

    Raises:
        AssertionError: Raised when precedence is wrong.
    """

    monkeypatch.setenv("JOB_COMPLETION_JOB_TYPES", "env-job-type")
    monkeypatch.setenv("JOB_COMPLETION_FAVORITE_ANIMAL", "Otter")

    from_environment = config_load_settings()
    overridden = config_load_settings({"FavoriteAnimal": "Heron"})

    assert from_environment.job_type_ids == ("env-job-type",)
    assert from_environment.favorite_animal == "Otter"
    assert overridden.favorite_animal == "Heron"


def test_config_load_settings_rejects_duplicate_job_type_tags() -> None:
    """Reject configurations that map two categories to the same job type tag."""

    with pytest.raises(SettingsLoadError, match="must be distinct"):
        config_load_settings(
            {
                "JobTypes": "job-type-a",
                "InventoryJobType": "PemInventory",
                "ManagementJobType": "PemInventory",
            }
        )


def test_config_load_settings_rejects_dispatch_timeout_below_request_timeout() -> None:
    """Reject a dispatch timeout that would expire before the HTTP request timeout."""

    with pytest.raises(SettingsLoadError, match="dispatch_timeout_seconds"):
        config_load_settings(
            {"JobTypes": "job-type-a", "RequestTimeoutSeconds": 30, "DispatchTimeoutSeconds": 10}
        )


def test_config_load_settings_validates_log_level() -> None:
    """Normalize known log levels and reject unknown ones."""

    settings = config_load_settings({"JobTypes": "job-type-a", "LogLevel": "debug"})
    assert settings.log_level == "DEBUG"

    with pytest.raises(SettingsLoadError, match="unknown log level"):
        config_load_settings({"JobTypes": "job-type-a", "LogLevel": "chatty"})


@pytest.mark.parametrize(
    ("option_key", "expected"),
    [
        ("JobTypes", "job_types"),
        ("FavoriteAnimal", "favorite_animal"),
        ("request-timeout-seconds", "request_timeout_seconds"),
        ("LogJSON", "log_json"),
        ("job_history_path", "job_history_path"),
    ],
)
def test_config_normalize_option_key(option_key: str, expected: str) -> None:
    """Normalize registration option keys to settings field names.

    Args:
        option_key: Raw option key.
        expected: Expected field name.

    Returns:
        None: Assertions validate key normalization.

    Raises:
        AssertionError: Raised when normalization is wrong.
    """

    assert config_normalize_option_key(option_key) == expected
