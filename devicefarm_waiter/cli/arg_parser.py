"""
Argument Parser
===============
Hand-rolled parser for the waiter's single-dash flags:

    -project XXX        name or ARN of the Device Farm project (required)
    -testRun XXX        name or ARN of the run (defaults to "Test Run - <UTC now>")
    -timeout XXX        seconds before giving up, integer (negative → 0)
    -pollInterval XXX   seconds between status checks, positive number
    --help              print help and stop, wherever it appears

Flags are case-insensitive. Every flag except --help consumes the next
argument as its value; a flag with nothing after it is a UsageError.

Help and usage problems are raised (HelpRequested / UsageError) rather than
printed here, so the entry point owns stdout and exit codes. The one
exception is the negative-timeout warning, which does not stop parsing.
"""
import re
import math
import logging
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError

from devicefarm_waiter.core import output_formatter as fmt
from devicefarm_waiter.core.config import Settings, get_settings
from devicefarm_waiter.core.constants import (
    DEFAULT_RUN_NAME_FORMAT,
    FLAG_HELP,
    FLAG_POLL_INTERVAL,
    FLAG_PROJECT,
    FLAG_TEST_RUN,
    FLAG_TIMEOUT,
    MAX_TIMEOUT_SECONDS,
)
from devicefarm_waiter.core.errors import HelpRequested, UsageError
from devicefarm_waiter.models.waiter_config import WaiterConfig

logger = logging.getLogger(__name__)

# No "_" separators, no non-ASCII digits
_TIMEOUT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def default_run_name(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.strftime(DEFAULT_RUN_NAME_FORMAT)


def _expect_value(argv: List[str], index: int) -> str:
    """Return the value following the flag at ``index`` or raise UsageError."""
    if index + 1 >= len(argv):
        raise UsageError(fmt.missing_value(argv[index]))
    return argv[index + 1]


def parse_timeout(raw: str) -> int:
    """Optionally signed ASCII digits within the 32-bit range; negatives clamp to 0."""
    if not _TIMEOUT_PATTERN.fullmatch(raw):
        raise UsageError(fmt.bad_timeout(raw))

    seconds = int(raw)
    if seconds > MAX_TIMEOUT_SECONDS or seconds < -MAX_TIMEOUT_SECONDS - 1:
        raise UsageError(fmt.bad_timeout(raw))

    if seconds < 0:
        print(fmt.NEGATIVE_TIMEOUT)
        logger.debug("Timeout %d clamped to 0", seconds)
        seconds = 0
    return seconds


def parse_poll_interval(raw: str) -> float:
    try:
        seconds = float(raw)
    except ValueError:
        raise UsageError(fmt.bad_poll_interval(raw))

    if not math.isfinite(seconds) or seconds <= 0:
        raise UsageError(fmt.bad_poll_interval(raw))
    return seconds


def parse_args(
    argv: List[str],
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> WaiterConfig:
    """
    Parse raw command-line arguments into a WaiterConfig.

    Parameters
    ----------
    argv : list[str]
        Arguments without the program name.
    settings : Settings
        Environment defaults (timeout, poll interval). Read from the
        environment when omitted.
    now : datetime
        Clock used for the default run name.

    Raises
    ------
    HelpRequested
        No arguments, or --help anywhere before a fatal error.
    UsageError
        Unknown flag, missing/malformed value, or missing project / run.
    """
    if not argv:
        raise HelpRequested(fmt.HELP_TEXT)

    settings = settings or get_settings()
    project: Optional[str] = None
    test_run = default_run_name(now)
    timeout_seconds = settings.default_timeout_seconds
    poll_interval_seconds = settings.poll_interval_seconds

    i = 0
    while i < len(argv):
        flag = argv[i].lower()

        if flag == FLAG_HELP:
            raise HelpRequested(fmt.HELP_TEXT)
        elif flag == FLAG_PROJECT:
            project = _expect_value(argv, i)
        elif flag == FLAG_TEST_RUN:
            test_run = _expect_value(argv, i)
        elif flag == FLAG_TIMEOUT:
            timeout_seconds = parse_timeout(_expect_value(argv, i))
        elif flag == FLAG_POLL_INTERVAL:
            poll_interval_seconds = parse_poll_interval(_expect_value(argv, i))
        else:
            raise UsageError(fmt.unknown_arg(argv[i]))

        i += 2

    if not project:
        raise UsageError(fmt.NO_PROJECT)
    if not test_run:
        raise UsageError(fmt.NO_TEST_RUN)

    # Flag values are checked above; this catches bad environment defaults
    try:
        return WaiterConfig(
            project=project,
            test_run=test_run,
            timeout_seconds=timeout_seconds,
            poll_interval_seconds=poll_interval_seconds,
        )
    except ValidationError as e:
        raise UsageError(fmt.invalid_config(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ))
