"""Diagnostic rendering helpers for job completion contexts."""

from __future__ import annotations

from typing import Final

from .models import JobCompletionContext

_NULL_TEXT: Final[str] = "null"
_PAIR_SEPARATOR: Final[str] = " : "
_LINE_SEPARATOR: Final[str] = ",\n"


def domain_describe_orchestrator(context: JobCompletionContext) -> str:
    """Return the `<agent>/<machine>` label used in log and error messages.

    Args:
        context: Job completion context.

    Returns:
        str: Orchestrator label.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return f"{context.agent_id}/{context.client_machine}"


def domain_context_fields(context: JobCompletionContext) -> list[tuple[str, str]]:
    """Return the ordered diagnostic field pairs operators rely on.

    Args:
        context: Job completion context.

    Returns:
        list[tuple[str, str]]: Twelve `(name, rendered value)` pairs.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    client_base_address = _NULL_TEXT
    if context.api_client is not None and str(context.api_client.base_url):
        client_base_address = str(context.api_client.base_url)

    return [
        ("AgentId", str(context.agent_id)),
        ("Username", str(context.username)),
        ("ClientMachine", str(context.client_machine)),
        ("JobResult", context.job_result.value),
        ("JobId", str(context.job_id)),
        ("JobType", str(context.job_type)),
        ("JobTypeId", str(context.job_type_id)),
        ("OperationType", context.operation_type.value),
        ("CertificateId", _NULL_TEXT if context.certificate_id is None else str(context.certificate_id)),
        (
            "RequestTimestamp",
            _NULL_TEXT if context.request_timestamp is None else context.request_timestamp.isoformat(),
        ),
        ("CurrentRetryCount", str(context.current_retry_count)),
        ("ClientBaseAddress", client_base_address),
    ]


def domain_format_context(context: JobCompletionContext) -> str:
    """Render the context as `Name : value` lines for the diagnostic log line.

    Args:
        context: Job completion context.

    Returns:
        str: Multi-line field dump.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return _LINE_SEPARATOR.join(
        _PAIR_SEPARATOR.join(pair) for pair in domain_context_fields(context)
    )
