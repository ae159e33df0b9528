import pytest
import asyncio
from unittest.mock import AsyncMock, MagicMock

from devicefarm_waiter.agents.resolver import IdentifierResolver, is_arn, match_by_name
from devicefarm_waiter.core.errors import AmbiguousNameError, ResourceNotFoundError
from devicefarm_waiter.models.device_farm import ProjectSummary, RunSummary
from devicefarm_waiter.services.device_farm_client import DeviceFarmClient

PROJECT_ARN = "arn:aws:devicefarm:us-west-2:123456789012:project:aaaa"
RUN_ARN = "arn:aws:devicefarm:us-west-2:123456789012:run:aaaa/bbbb"


@pytest.fixture
def client():
    mock = MagicMock(spec=DeviceFarmClient)
    mock.list_projects = AsyncMock(return_value=[
        ProjectSummary(name="Mobile App", arn=PROJECT_ARN),
        ProjectSummary(name="Web", arn="arn:aws:devicefarm:us-west-2:123456789012:project:cccc"),
    ])
    mock.list_runs = AsyncMock(return_value=[
        RunSummary(name="Nightly", arn=RUN_ARN, status="RUNNING"),
        RunSummary(name="Smoke", arn="arn:aws:devicefarm:us-west-2:123456789012:run:aaaa/dddd", status="COMPLETED"),
    ])
    return mock


@pytest.fixture
def resolver(client):
    return IdentifierResolver(client)


def test_is_arn():
    assert is_arn(PROJECT_ARN)
    assert not is_arn("Mobile App")
    assert not is_arn("ARN:upper")


def test_match_by_name_ignores_case():
    items = [ProjectSummary(name="Straße", arn="arn:1"), ProjectSummary(name="Other", arn="arn:2")]
    assert [m.arn for m in match_by_name(items, "STRASSE")] == ["arn:1"]
    assert match_by_name(items, "Oth") == []


def test_arn_references_skip_lookup(resolver, client):
    async def run_test():
        project = await resolver.resolve_project(PROJECT_ARN)
        run = await resolver.resolve_run(project, RUN_ARN)
        assert project == PROJECT_ARN
        assert run == RUN_ARN
        client.list_projects.assert_not_called()
        client.list_runs.assert_not_called()

    asyncio.run(run_test())


def test_project_resolved_case_insensitively(resolver, client, capsys):
    async def run_test():
        assert await resolver.resolve_project("mobile app") == PROJECT_ARN
        client.list_projects.assert_awaited_once()

    asyncio.run(run_test())
    assert "Sourcing project details from AWS" in capsys.readouterr().out


def test_run_resolved_within_project(resolver, client, capsys):
    async def run_test():
        assert await resolver.resolve_run(PROJECT_ARN, "NIGHTLY") == RUN_ARN
        client.list_runs.assert_awaited_once_with(PROJECT_ARN)

    asyncio.run(run_test())
    assert "Sourcing test run details from AWS" in capsys.readouterr().out


def test_unknown_project(resolver):
    async def run_test():
        with pytest.raises(ResourceNotFoundError) as exc:
            await resolver.resolve_project("Desktop")
        assert str(exc.value) == "No project name 'Desktop' found"
        assert exc.value.exit_code == 1

    asyncio.run(run_test())


def test_unknown_run(resolver):
    async def run_test():
        with pytest.raises(ResourceNotFoundError) as exc:
            await resolver.resolve_run(PROJECT_ARN, "Weekly")
        assert str(exc.value) == "No test run named 'Weekly' found"

    asyncio.run(run_test())


def test_duplicate_names_are_ambiguous(resolver, client):
    client.list_runs.return_value = [
        RunSummary(name="Nightly", arn="arn:run:1", status="COMPLETED"),
        RunSummary(name="nightly", arn="arn:run:2", status="RUNNING"),
    ]

    async def run_test():
        with pytest.raises(AmbiguousNameError) as exc:
            await resolver.resolve_run(PROJECT_ARN, "Nightly")
        assert exc.value.arns == ["arn:run:1", "arn:run:2"]
        assert exc.value.exit_code == 1
        assert "Multiple test runs named 'Nightly'" in str(exc.value)

    asyncio.run(run_test())
