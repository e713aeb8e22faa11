"""Typed domain models shared across handler layers.

The host constructs one `JobCompletionContext` per completed orchestrator job
and discards it once the handler returns. Nothing in this package mutates it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

import httpx


class JobResult(str, Enum):
    """Outcome reported by the orchestrator for a completed job."""

    UNKNOWN = "Unknown"
    SUCCESS = "Success"
    WARNING = "Warning"
    FAILURE = "Failure"


class CertStoreOperationType(str, Enum):
    """Certificate store operation kinds.

    The set covers every job family; Management jobs only ever carry
    `ADD`, `REMOVE`, `CREATE` or `CREATE_ADD`.
    """

    UNKNOWN = "Unknown"
    INVENTORY = "Inventory"
    ADD = "Add"
    REMOVE = "Remove"
    CREATE = "Create"
    CREATE_ADD = "CreateAdd"
    DISCOVERY = "Discovery"
    REENROLLMENT = "Reenrollment"


class JobCategory(str, Enum):
    """Closed set of job categories the dispatcher routes on."""

    INVENTORY = "Inventory"
    MANAGEMENT = "Management"
    REENROLLMENT = "Reenrollment"
    UNRECOGNIZED = "Unrecognized"


@dataclass(frozen=True)
class JobCompletionContext:
    """Read-only description of one completed orchestrator job.

    Attributes:
        agent_id: Opaque identifier of the reporting orchestrator.
        client_machine: Machine the orchestrator ran on.
        username: Identity the job executed under.
        job_id: Unique identifier of the completed job.
        job_type: Job type tag used for dispatch (for example `WinCertInventory`).
        job_type_id: Stable identifier backing `job_type`.
        job_result: Reported job outcome.
        operation_type: Sub-operation for Management jobs.
        certificate_id: Optional certificate record reference.
        request_timestamp: Optional time the job was requested.
        current_retry_count: Prior retry attempts, supplied by the host.
        api_client: Optional host-configured client for calling back into the host API.
    """

    agent_id: str
    client_machine: str
    username: str
    job_id: str
    job_type: str
    job_type_id: str
    job_result: JobResult = JobResult.UNKNOWN
    operation_type: CertStoreOperationType = CertStoreOperationType.UNKNOWN
    certificate_id: int | None = None
    request_timestamp: datetime | None = None
    current_retry_count: int = 0
    api_client: httpx.AsyncClient | None = None

    def __post_init__(self) -> None:
        if not str(self.job_id).strip():
            raise ValueError("job_id must not be blank")
        if not str(self.job_type).strip():
            raise ValueError("job_type must not be blank")
        if self.current_retry_count < 0:
            raise ValueError("current_retry_count must be >= 0")
