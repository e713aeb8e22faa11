"""Project-native typed exceptions raised inside the job completion handlers."""

from __future__ import annotations


class CompletionHandlerError(Exception):
    """Base exception for job completion handler failures.

    Attributes:
        agent_id: Orchestrator agent identifier, when known.
        client_machine: Orchestrator client machine, when known.
        job_id: Completed job identifier, when known.
    """

    def __init__(
        self,
        message: str,
        agent_id: str | None = None,
        client_machine: str | None = None,
        job_id: str | None = None,
    ):
        super().__init__(message)
        self.agent_id = agent_id
        self.client_machine = client_machine
        self.job_id = job_id


class HandlerExecutionError(CompletionHandlerError, RuntimeError):
    """Unexpected failure inside a category handler, wrapped with job identity."""


class DispatchTimeoutError(CompletionHandlerError, TimeoutError):
    """Dispatched work did not finish within the configured dispatch timeout."""
