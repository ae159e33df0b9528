"""
Device Farm Client
==================
Asynchronous wrapper around the three Device Farm operations the waiter
consumes: ListProjects, ListRuns and GetRun.

boto3 is synchronous, so every call runs in a worker thread via
``asyncio.to_thread``. Calls are still issued strictly one after another.

Listings:
    - ListProjects / ListRuns are paginated with nextToken.
    - Both listings are walked to the last page through boto3 paginators.

Errors:
    - botocore ClientError / BotoCoreError are NOT caught here.
      The caller decides whether a failed call is fatal (it always is today).
"""
import asyncio
import logging
from typing import Any, List, Optional

import boto3

from devicefarm_waiter.core.config import DEVICE_FARM_REGION
from devicefarm_waiter.models.device_farm import ProjectSummary, RunSummary

logger = logging.getLogger(__name__)


class DeviceFarmClient:
    """Read-only view of a Device Farm account in one region."""

    def __init__(self, region: str = DEVICE_FARM_REGION, boto_client: Optional[Any] = None) -> None:
        self.region = region
        self._client = boto_client or boto3.client("devicefarm", region_name=region)

    # ------------------------------------------------------------------
    # Blocking helpers (executed in a worker thread)
    # ------------------------------------------------------------------
    def _collect(self, operation: str, result_key: str, **kwargs) -> List[dict]:
        paginator = self._client.get_paginator(operation)
        items: List[dict] = []
        for page_number, page in enumerate(paginator.paginate(**kwargs), start=1):
            page_items = page.get(result_key, [])
            logger.debug("%s page %d returned %d item(s)", operation, page_number, len(page_items))
            items.extend(page_items)
        return items

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def list_projects(self) -> List[ProjectSummary]:
        raw = await asyncio.to_thread(self._collect, "list_projects", "projects")
        logger.info("Fetched %d project(s) from Device Farm (%s)", len(raw), self.region)
        return [ProjectSummary(name=p.get("name", ""), arn=p["arn"]) for p in raw]

    async def list_runs(self, project_arn: str) -> List[RunSummary]:
        raw = await asyncio.to_thread(self._collect, "list_runs", "runs", arn=project_arn)
        logger.info("Fetched %d run(s) for project %s", len(raw), project_arn)
        return [_to_run_summary(r) for r in raw]

    async def get_run(self, run_arn: str) -> RunSummary:
        response = await asyncio.to_thread(self._client.get_run, arn=run_arn)
        return _to_run_summary(response["run"])


def _to_run_summary(raw: dict) -> RunSummary:
    return RunSummary(
        name=raw.get("name", ""),
        arn=raw["arn"],
        status=raw.get("status", ""),
        result=raw.get("result"),
    )
