"""Domain models used across handler layer boundaries."""

from .context_format import domain_context_fields, domain_describe_orchestrator, domain_format_context
from .models import CertStoreOperationType, JobCategory, JobCompletionContext, JobResult
from .outcomes import (
    API_CLIENT_MISSING_CODE,
    COMMAND_API_FAILED_CODE,
    CONTEXT_MISSING_CODE,
    DISPATCH_TIMEOUT_CODE,
    JOB_NOT_SUCCESSFUL_CODE,
    JOB_TYPE_UNRECOGNIZED_CODE,
    UNEXPECTED_ERROR_CODE,
    HandlerOutcome,
)

__all__ = [
    "API_CLIENT_MISSING_CODE",
    "COMMAND_API_FAILED_CODE",
    "CONTEXT_MISSING_CODE",
    "DISPATCH_TIMEOUT_CODE",
    "JOB_NOT_SUCCESSFUL_CODE",
    "JOB_TYPE_UNRECOGNIZED_CODE",
    "UNEXPECTED_ERROR_CODE",
    "CertStoreOperationType",
    "HandlerOutcome",
    "JobCategory",
    "JobCompletionContext",
    "JobResult",
    "domain_context_fields",
    "domain_describe_orchestrator",
    "domain_format_context",
]
