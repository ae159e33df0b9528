"""
Identifier Resolver
===================
Turns the human-readable project / run names given on the command line into
Device Farm ARNs.

Rules:
    - A reference that already starts with "arn:" is used verbatim (no AWS call).
    - Otherwise the matching listing is fetched and names are compared
      case-insensitively (str.casefold), exact match only.
    - Zero matches  → ResourceNotFoundError
    - Many matches  → AmbiguousNameError (never silently pick the first one)
"""
import logging
from typing import List, Sequence, Union

from devicefarm_waiter.core import output_formatter as fmt
from devicefarm_waiter.core.constants import ARN_PREFIX
from devicefarm_waiter.core.errors import AmbiguousNameError, ResourceNotFoundError
from devicefarm_waiter.models.device_farm import ProjectSummary, RunSummary
from devicefarm_waiter.services.device_farm_client import DeviceFarmClient

logger = logging.getLogger(__name__)


def is_arn(reference: str) -> bool:
    return reference.startswith(ARN_PREFIX)


def match_by_name(
    items: Sequence[Union[ProjectSummary, RunSummary]],
    name: str,
) -> List[Union[ProjectSummary, RunSummary]]:
    """Return every item whose name equals ``name`` ignoring case."""
    wanted = name.casefold()
    return [item for item in items if item.name.casefold() == wanted]


class IdentifierResolver:
    """Resolves project and test-run references against one DeviceFarmClient."""

    def __init__(self, client: DeviceFarmClient) -> None:
        self.client = client

    async def resolve_project(self, reference: str) -> str:
        if is_arn(reference):
            logger.debug("Project reference %s is already an ARN", reference)
            return reference

        print(fmt.SOURCING_PROJECT)
        projects = await self.client.list_projects()
        return self._pick(projects, reference, "project", fmt.project_not_found)

    async def resolve_run(self, project_arn: str, reference: str) -> str:
        if is_arn(reference):
            logger.debug("Test run reference %s is already an ARN", reference)
            return reference

        print(fmt.SOURCING_TEST_RUN)
        runs = await self.client.list_runs(project_arn)
        return self._pick(runs, reference, "test run", fmt.test_run_not_found)

    def _pick(self, items, reference: str, kind: str, not_found) -> str:
        matches = match_by_name(items, reference)
        if not matches:
            logger.warning("No %s named %r among %d candidate(s)", kind, reference, len(items))
            raise ResourceNotFoundError(not_found(reference))
        if len(matches) > 1:
            arns = [m.arn for m in matches]
            logger.warning("%d %ss share the name %r", len(matches), kind, reference)
            raise AmbiguousNameError(fmt.ambiguous_name(kind, reference, arns), arns)

        logger.info("Resolved %s %r to %s", kind, reference, matches[0].arn)
        return matches[0].arn
