"""
Run Poller
==========
Polls Device Farm GetRun until the run is COMPLETED or the deadline passes.

State machine:
    Polling → Success   status == COMPLETED
    Polling → Timeout   wall clock past the deadline after a delay
    Polling → Polling   anything else, after a fixed delay

Console protocol (stdout, no newline between iterations):
    " => STATUS"   the status differs from the previous check
    "."            the status is unchanged
    then "\n => completed" or "\nFailed to obtain a status in time - timing out"

The interval is fixed (no backoff, no jitter). Errors raised by the client
are not caught and end the process.
"""
import time
import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional

from devicefarm_waiter.core import output_formatter as fmt
from devicefarm_waiter.models.device_farm import PollOutcome
from devicefarm_waiter.models.poll_event import PollEvent
from devicefarm_waiter.services.device_farm_client import DeviceFarmClient

logger = logging.getLogger(__name__)


class RunPoller:
    """
    Waits on a single Device Farm run.
    """

    def __init__(self, client: DeviceFarmClient) -> None:
        self.client = client
        self.timeline: List[PollEvent] = []
        self.poll_count = 0

    def _add_timeline_event(
        self,
        status: str,
        elapsed: float,
        result: Optional[str] = None,
    ) -> None:
        self.timeline.append(PollEvent(
            poll_count=self.poll_count,
            status=status,
            result=result,
            timestamp=datetime.now(timezone.utc).isoformat(),
            elapsed_seconds=round(elapsed, 2),
        ))

    async def poll(
        self,
        run_arn: str,
        timeout_seconds: int,
        poll_interval_seconds: float = 5.0,
    ) -> PollOutcome:
        start_time = time.time()
        deadline = start_time + timeout_seconds
        last_status: Optional[str] = None

        # At least one check is made, even with a zero timeout
        while True:
            run = await self.client.get_run(run_arn)
            self.poll_count += 1
            elapsed = time.time() - start_time

            if run.is_completed:
                print()
                print(fmt.COMPLETED)
                logger.info(
                    "Run %s completed after %d check(s), result: %s",
                    run_arn, self.poll_count, run.result or "unknown",
                )
                self._add_timeline_event(run.status_label, elapsed, result=run.result)
                return "completed"

            current_status = run.status_label
            if current_status == last_status:
                print(fmt.UNCHANGED_MARKER, end="", flush=True)
            else:
                print(fmt.status_change(current_status), end="", flush=True)
                logger.info("Run status update: %s", current_status)
                self._add_timeline_event(current_status, elapsed)
                last_status = current_status

            await asyncio.sleep(poll_interval_seconds)

            if time.time() > deadline:
                break

        print()
        print(fmt.TIMED_OUT)
        logger.warning("Gave up on %s after %ds (%d check(s))", run_arn, timeout_seconds, self.poll_count)
        self._add_timeline_event("timeout", time.time() - start_time)
        return "timeout"

    def get_timeline(self) -> List[PollEvent]:
        """Return the captured timeline events."""
        return self.timeline
