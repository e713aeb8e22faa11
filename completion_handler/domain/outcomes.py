"""Explicit handler outcome contract and reason codes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

CONTEXT_MISSING_CODE: Final[str] = "CONTEXT_MISSING"
JOB_TYPE_UNRECOGNIZED_CODE: Final[str] = "JOB_TYPE_UNRECOGNIZED"
JOB_NOT_SUCCESSFUL_CODE: Final[str] = "JOB_NOT_SUCCESSFUL"
API_CLIENT_MISSING_CODE: Final[str] = "API_CLIENT_MISSING"
COMMAND_API_FAILED_CODE: Final[str] = "COMMAND_API_FAILED"
DISPATCH_TIMEOUT_CODE: Final[str] = "DISPATCH_TIMEOUT"
UNEXPECTED_ERROR_CODE: Final[str] = "UNEXPECTED_ERROR"


@dataclass(frozen=True)
class HandlerOutcome:
    """Result of one category handler or dispatch attempt.

    Attributes:
        succeeded: Whether post-processing completed.
        reason_code: Deterministic failure code, `None` on success.
        reason: Human-readable failure detail, `None` on success.
    """

    succeeded: bool
    reason_code: str | None = None
    reason: str | None = None

    @classmethod
    def success(cls) -> HandlerOutcome:
        """Build a successful outcome.

        Returns:
            HandlerOutcome: Outcome with `succeeded=True`.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return cls(succeeded=True)

    @classmethod
    def failure(cls, reason_code: str, reason: str) -> HandlerOutcome:
        """Build a failed outcome with a reason.

        Args:
            reason_code: Deterministic failure code.
            reason: Human-readable failure detail.

        Returns:
            HandlerOutcome: Outcome with `succeeded=False`.

        Raises:
            ValueError: Raised when reason_code is blank.
        """

        if not reason_code.strip():
            raise ValueError("reason_code must not be blank")
        return cls(succeeded=False, reason_code=reason_code, reason=reason)
