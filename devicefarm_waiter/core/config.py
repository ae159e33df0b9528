"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    DEVICE_FARM_REGION       — AWS region hosting Device Farm (default: us-west-2)
    POLL_INTERVAL_SECONDS    — Delay between two status checks (default: 5)
    DEFAULT_TIMEOUT_SECONDS  — Deadline used when -timeout is omitted (default: 1800)
    LOG_LEVEL                — Diagnostic log level on stderr (default: WARNING)
    LOG_FILE                 — Optional path for a persistent log file

AWS credentials are NOT read here. boto3 resolves them from its usual
environment variables / shared config files.

Polling Interval:
    The interval is fixed for the lifetime of one invocation (no backoff).
    It can be overridden per invocation with -pollInterval.
"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEVICE_FARM_REGION = os.getenv("DEVICE_FARM_REGION", "us-west-2")
POLL_INTERVAL_SECONDS = float(os.getenv("POLL_INTERVAL_SECONDS", 5))
DEFAULT_TIMEOUT_SECONDS = int(os.getenv("DEFAULT_TIMEOUT_SECONDS", 30 * 60))
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE", "")


@dataclass(frozen=True)
class Settings:
    region: str = DEVICE_FARM_REGION
    poll_interval_seconds: float = POLL_INTERVAL_SECONDS
    default_timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS


def get_settings() -> Settings:
    return Settings(
        region=DEVICE_FARM_REGION,
        poll_interval_seconds=POLL_INTERVAL_SECONDS,
        default_timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
    )
