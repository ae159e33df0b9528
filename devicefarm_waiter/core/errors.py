"""
Waiter Errors
=============
Exception hierarchy for every failure the waiter reports to the user.

Each exception carries the one-line diagnostic to print and the process
exit code. Remote faults raised by boto3/botocore are NOT part
of this hierarchy: they propagate out of the entry point unchanged.
"""
from .constants import EXIT_FAILURE, EXIT_SUCCESS


class WaiterError(Exception):
    """Base class. ``str(err)`` is the diagnostic printed to stdout."""

    exit_code = EXIT_FAILURE


class HelpRequested(WaiterError):
    """Raised for --help or an empty argument list; not a failure."""

    exit_code = EXIT_SUCCESS


class UsageError(WaiterError):
    """Unknown flag, missing flag value, malformed value or missing field."""


class LookupFailure(WaiterError):
    """A human-readable name did not resolve to exactly one remote entity."""


class ResourceNotFoundError(LookupFailure):
    pass


class AmbiguousNameError(LookupFailure):
    def __init__(self, message: str, arns: list[str]) -> None:
        super().__init__(message)
        self.arns = arns
