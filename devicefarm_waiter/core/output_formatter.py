"""
Output Formatter
================
THE SINGLE SOURCE OF TRUTH for all console output strings.

STRICT DETERMINISM CONTRACT:
  - This module NEVER talks to AWS.
  - This module NEVER reads environment variables.
  - Given the same inputs, it ALWAYS returns the exact same output string.

Progress lines are printed to stdout by the callers; diagnostics for
operators go through ``logging`` instead and never use these helpers.
"""

# ---------------------------------------------------------------------------
# Help Text
# ---------------------------------------------------------------------------
HELP_TEXT = """AWS Device Farm Test Waiter
===========================

Summary:
This app is designed to make it easy to wait for an AWS Device Farm test job from the command line.

The app will return an exit code of zero in case of success, or non-zero in case of error.

Security Model:
The security variables are read in from environment variables and as such, they should be set accordingly.

Required parameters:
 -project XXX               The name or arn of the AWS device farm project
 -testRun XXX               The name or arn of the test run to wait on

Others:
 -timeout XXX               The number of seconds to wait before giving up (defaults to 30 minutes)
 -pollInterval XXX          The number of seconds between two status checks (defaults to 5)

 --help                     Show this help text"""


# ---------------------------------------------------------------------------
# Usage Diagnostics
# ---------------------------------------------------------------------------
NO_PROJECT = "No project specified"
NO_TEST_RUN = "No test run specified"
NEGATIVE_TIMEOUT = "Negative timeout specified, using 0"


def unknown_arg(arg: str) -> str:
    return f"Unknown command line arg - {arg}"


def missing_value(flag: str) -> str:
    return f"Missing value for {flag}"


def bad_timeout(raw: str) -> str:
    """Echo the raw input, not a parsed value: parsing is what failed."""
    return f"Failed to parse '{raw}' as a valid time out"


def invalid_config(problems) -> str:
    """One line for settings that came from the environment, not from flags."""
    return f"Invalid configuration - {'; '.join(problems)}"


def bad_poll_interval(raw: str) -> str:
    return f"Failed to parse '{raw}' as a valid poll interval (must be a positive number of seconds)"


# ---------------------------------------------------------------------------
# Lookup Diagnostics
# ---------------------------------------------------------------------------
SOURCING_PROJECT = "Sourcing project details from AWS"
SOURCING_TEST_RUN = "Sourcing test run details from AWS"


def project_not_found(name: str) -> str:
    return f"No project name '{name}' found"


def test_run_not_found(name: str) -> str:
    return f"No test run named '{name}' found"


def ambiguous_name(kind: str, name: str, arns: list[str]) -> str:
    return f"Multiple {kind}s named '{name}' found: {', '.join(arns)}"


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------
CREATING_CLIENT = "Creating farm client"
CHECKING_STATUS = "Checking status"
UNCHANGED_MARKER = "."
COMPLETED = " => completed"
TIMED_OUT = "Failed to obtain a status in time - timing out"


def status_change(status: str) -> str:
    return f" => {status}"


def settings_block(project_arn: str, run_arn: str, timeout_seconds: int) -> str:
    """Multi-line summary printed once resolution has succeeded."""
    return "\n".join([
        "Settings:",
        f" Project: {project_arn}",
        f" Test Run: {run_arn}",
        f" Timeout: {timeout_seconds}s",
        "",
    ])
