"""
Waiter Entry Point
==================
parse → resolve project → resolve run → poll → exit code.

Exit codes:
    0  run completed, or help shown
    1  usage error, lookup failure or timeout

AWS faults (botocore ClientError / BotoCoreError) are logged with their
traceback and re-raised, so the interpreter exits non-zero on its own.
"""
import sys
import asyncio
import logging
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from devicefarm_waiter.agents.resolver import IdentifierResolver
from devicefarm_waiter.agents.run_poller import RunPoller
from devicefarm_waiter.cli.arg_parser import parse_args
from devicefarm_waiter.core import output_formatter as fmt
from devicefarm_waiter.core.config import LOG_FILE, LOG_LEVEL, Settings, get_settings
from devicefarm_waiter.core.constants import EXIT_FAILURE, EXIT_SUCCESS
from devicefarm_waiter.core.errors import WaiterError
from devicefarm_waiter.services.device_farm_client import DeviceFarmClient
from devicefarm_waiter.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def run(
    argv: List[str],
    client: Optional[DeviceFarmClient] = None,
    settings: Optional[Settings] = None,
) -> int:
    settings = settings or get_settings()
    try:
        config = parse_args(argv, settings=settings)

        print(fmt.CREATING_CLIENT)
        client = client or DeviceFarmClient(region=settings.region)

        resolver = IdentifierResolver(client)
        project_arn = await resolver.resolve_project(config.project)
        run_arn = await resolver.resolve_run(project_arn, config.test_run)
    except WaiterError as e:
        print(e)
        return e.exit_code

    print(fmt.settings_block(project_arn, run_arn, config.timeout_seconds))
    print(fmt.CHECKING_STATUS)

    poller = RunPoller(client)
    outcome = await poller.poll(
        run_arn,
        timeout_seconds=config.timeout_seconds,
        poll_interval_seconds=config.poll_interval_seconds,
    )

    logger.info("Polling finished (%s) after %d check(s)", outcome, poller.poll_count)
    for event in poller.get_timeline():
        logger.info(
            "  check %d at %.2fs: %s%s",
            event.poll_count, event.elapsed_seconds, event.status,
            f" ({event.result})" if event.result else "",
        )
    return EXIT_SUCCESS if outcome == "completed" else EXIT_FAILURE


def main(argv: Optional[List[str]] = None) -> None:
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE or None)
    if argv is None:
        argv = sys.argv[1:]

    try:
        exit_code = asyncio.run(run(argv))
    except (ClientError, BotoCoreError) as e:
        logger.exception("Device Farm call failed: %s", e)
        raise

    sys.exit(exit_code)
