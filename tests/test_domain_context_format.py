"""Regression tests for job completion context rendering and validation."""

from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from completion_handler.domain import (
    CertStoreOperationType,
    HandlerOutcome,
    JobCompletionContext,
    JobResult,
    domain_context_fields,
    domain_describe_orchestrator,
    domain_format_context,
)


def _build_context(**overrides: object) -> JobCompletionContext:
    """Create deterministic context with optional field overrides.

    Args:
        overrides: Field values replacing defaults.

    Returns:
        JobCompletionContext: Test context.

    Raises:
        ValueError: Raised by the context when values are invalid.
    """

    values: dict[str, object] = {
        "agent_id": "0f3a2c10-6d5e-4b1a-9a36-1f0d3c2b7e11",
        "client_machine": "winhost01.example.test",
        "username": "EXAMPLE\\svc-orchestrator",
        "job_id": "b7e4d9a2-1c3f-4e5a-8b6d-9f0e1a2b3c4d",
        "job_type": "WinCertInventory",
        "job_type_id": "49a3e6d8-2f14-4c8b-b5a7-3e9d0c1f2a6b",
        "job_result": JobResult.SUCCESS,
        "operation_type": CertStoreOperationType.INVENTORY,
    }
    values.update(overrides)
    return JobCompletionContext(**values)  # type: ignore[arg-type]


def test_domain_format_context_renders_twelve_fields_with_null_placeholders() -> None:
    """Render every field in fixed order and use `null` for absent values.

    Returns:
        None: Assertions validate rendered lines.

    Raises:
        AssertionError: Raised when rendering deviates from the log contract.
    """

    rendered = domain_format_context(_build_context())
    lines = rendered.split(",\n")

    assert [line.split(" : ")[0] for line in lines] == [
        "AgentId",
        "Username",
        "ClientMachine",
        "JobResult",
        "JobId",
        "JobType",
        "JobTypeId",
        "OperationType",
        "CertificateId",
        "RequestTimestamp",
        "CurrentRetryCount",
        "ClientBaseAddress",
    ]
    assert "CertificateId : null" in lines
    assert "RequestTimestamp : null" in lines
    assert "ClientBaseAddress : null" in lines
    assert "JobResult : Success" in lines


def test_domain_format_context_renders_optional_values_and_client_base_address() -> None:
    """Render certificate id, timestamp, retry count and client base address when present.

    Returns:
        None: Assertions validate rendered values.

    Raises:
        AssertionError: Raised when optional values are not rendered.
    """

    client = httpx.AsyncClient(base_url="https://command.example.test/KeyfactorAPI/")
    context = _build_context(
        certificate_id=4711,
        request_timestamp=datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc),
        current_retry_count=2,
        api_client=client,
    )

    fields = dict(domain_context_fields(context))

    assert fields["CertificateId"] == "4711"
    assert fields["RequestTimestamp"] == "2026-03-01T12:30:00+00:00"
    assert fields["CurrentRetryCount"] == "2"
    assert fields["ClientBaseAddress"] == "https://command.example.test/KeyfactorAPI/"


def test_domain_format_context_renders_null_for_client_without_base_address() -> None:
    """Render `null` when the supplied client has no base address."""

    fields = dict(domain_context_fields(_build_context(api_client=httpx.AsyncClient())))

    assert fields["ClientBaseAddress"] == "null"


def test_domain_describe_orchestrator_joins_agent_and_machine() -> None:
    """Build `<agent>/<machine>` orchestrator label."""

    assert domain_describe_orchestrator(_build_context()) == (
        "0f3a2c10-6d5e-4b1a-9a36-1f0d3c2b7e11/winhost01.example.test"
    )


@pytest.mark.parametrize(
    ("field_name", "field_value"),
    [("job_id", " "), ("job_type", ""), ("current_retry_count", -1)],
)
def test_domain_context_rejects_missing_required_values(field_name: str, field_value: object) -> None:
    """Reject blank job id, blank job type and negative retry count.

    Args:
        field_name: Context field under test.
        field_value: Invalid value.

    Returns:
        None: Assertions validate constructor rejection.

    Raises:
        AssertionError: Raised when invalid values are accepted.
    """

    with pytest.raises(ValueError, match=field_name):
        _build_context(**{field_name: field_value})


def test_domain_handler_outcome_failure_requires_reason_code() -> None:
    """Reject failed outcomes without a reason code and keep success reason-free."""

    with pytest.raises(ValueError, match="reason_code"):
        HandlerOutcome.failure(reason_code=" ", reason="missing code")

    outcome = HandlerOutcome.success()
    assert outcome.succeeded
    assert outcome.reason_code is None
