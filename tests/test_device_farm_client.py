"""
Device Farm Client Tests
========================
The boto3 client is replaced by a MagicMock; no AWS credentials needed.
"""
import asyncio
import pytest
from unittest.mock import MagicMock, patch

from devicefarm_waiter.models.device_farm import ExecutionStatus, RunSummary
from devicefarm_waiter.services.device_farm_client import DeviceFarmClient


@pytest.fixture
def boto_client():
    return MagicMock()


@pytest.fixture
def client(boto_client):
    return DeviceFarmClient(region="us-west-2", boto_client=boto_client)


def _paginator(pages):
    paginator = MagicMock()
    paginator.paginate.return_value = pages
    return paginator


def test_default_construction_uses_region():
    with patch("devicefarm_waiter.services.device_farm_client.boto3.client") as mock_factory:
        DeviceFarmClient(region="us-west-2")
        mock_factory.assert_called_once_with("devicefarm", region_name="us-west-2")


def test_list_projects_walks_every_page(client, boto_client):
    boto_client.get_paginator.return_value = _paginator([
        {"projects": [{"name": "Mobile", "arn": "arn:p:1"}], "nextToken": "t1"},
        {"projects": [{"name": "Web", "arn": "arn:p:2"}]},
    ])

    projects = asyncio.run(client.list_projects())

    boto_client.get_paginator.assert_called_once_with("list_projects")
    assert [(p.name, p.arn) for p in projects] == [("Mobile", "arn:p:1"), ("Web", "arn:p:2")]


def test_list_runs_scoped_to_project(client, boto_client):
    paginator = _paginator([
        {"runs": [{"name": "Nightly", "arn": "arn:r:1", "status": "RUNNING"}]},
        {"runs": []},
    ])
    boto_client.get_paginator.return_value = paginator

    runs = asyncio.run(client.list_runs("arn:p:1"))

    boto_client.get_paginator.assert_called_once_with("list_runs")
    paginator.paginate.assert_called_once_with(arn="arn:p:1")
    assert len(runs) == 1
    assert runs[0].status is ExecutionStatus.RUNNING


def test_get_run(client, boto_client):
    boto_client.get_run.return_value = {
        "run": {"name": "Nightly", "arn": "arn:r:1", "status": "COMPLETED", "result": "PASSED"},
    }

    run = asyncio.run(client.get_run("arn:r:1"))

    boto_client.get_run.assert_called_once_with(arn="arn:r:1")
    assert run.is_completed
    assert run.result == "PASSED"
    assert run.status_label == "COMPLETED"


def test_errors_are_not_swallowed(client, boto_client):
    boto_client.get_run.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        asyncio.run(client.get_run("arn:r:1"))


def test_unknown_status_kept_as_string():
    run = RunSummary(arn="arn:r:1", status="ARCHIVING")
    assert run.status == "ARCHIVING"
    assert not isinstance(run.status, ExecutionStatus)
    assert not run.is_completed
