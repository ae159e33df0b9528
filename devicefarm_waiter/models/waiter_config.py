"""
Waiter Config Model
Immutable record produced by the argument parser.
"""
from pydantic import BaseModel, ConfigDict, Field

from devicefarm_waiter.core.constants import MAX_TIMEOUT_SECONDS


class WaiterConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    project: str
    test_run: str
    timeout_seconds: int = Field(default=30 * 60, ge=0, le=MAX_TIMEOUT_SECONDS)
    poll_interval_seconds: float = Field(default=5.0, gt=0, allow_inf_nan=False)
