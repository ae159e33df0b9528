"""
Constants
Centralised storage for exit codes, flag names and Device Farm identifiers.
"""
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Every Device Farm project / run ARN starts with this literal
ARN_PREFIX = "arn:"

FLAG_PROJECT = "-project"
FLAG_TEST_RUN = "-testrun"
FLAG_TIMEOUT = "-timeout"
FLAG_POLL_INTERVAL = "-pollinterval"
FLAG_HELP = "--help"

# strftime pattern for the default run name, evaluated in UTC
DEFAULT_RUN_NAME_FORMAT = "Test Run - %Y-%m-%d %H%M%S"

# -timeout accepts the range of a signed 32-bit integer
MAX_TIMEOUT_SECONDS = 2**31 - 1
