"""
Poll Event Model
================
One entry of the poller's timeline: recorded whenever the observed run
status changes, and once more when polling finishes.

Fields:
    poll_count       — number of GetRun calls made so far (1-based)
    status           — status label as reported by Device Farm, or "timeout"
    result           — run result, only set on the COMPLETED event
    timestamp        — UTC ISO-8601 time the event was recorded
    elapsed_seconds  — seconds since polling started
"""
from typing import Optional
from pydantic import BaseModel


class PollEvent(BaseModel):
    poll_count: int
    status: str
    result: Optional[str] = None
    timestamp: str
    elapsed_seconds: float = 0.0
