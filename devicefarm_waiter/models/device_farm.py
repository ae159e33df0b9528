"""
Device Farm Models
==================
Pydantic views over the few fields this tool reads from Device Farm
responses. Everything else in the boto3 payloads is ignored.

Fields:
    name    — human-readable, mutable name shown in the console
    arn     — stable identifier used for every follow-up call
    status  — ExecutionStatus for known values, raw string otherwise
    result  — PASSED / FAILED / ERRORED / ... (only meaningful once COMPLETED)
"""
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, field_validator


class ExecutionStatus(str, Enum):
    PENDING = "PENDING"
    PENDING_CONCURRENCY = "PENDING_CONCURRENCY"
    PENDING_DEVICE = "PENDING_DEVICE"
    PROCESSING = "PROCESSING"
    SCHEDULING = "SCHEDULING"
    PREPARING = "PREPARING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    STOPPING = "STOPPING"


PollOutcome = Literal["completed", "timeout"]


class ProjectSummary(BaseModel):
    name: str
    arn: str


class RunSummary(BaseModel):
    name: str = ""
    arn: str
    # Left as a plain string when the service returns a status this enum predates
    status: Union[ExecutionStatus, str] = ""
    result: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        try:
            return ExecutionStatus(value)
        except ValueError:
            return value

    @property
    def status_label(self) -> str:
        if isinstance(self.status, ExecutionStatus):
            return self.status.value
        return self.status

    @property
    def is_completed(self) -> bool:
        return self.status == ExecutionStatus.COMPLETED
