import os

from .policy import DEFAULT_POLICY

POLICY_ENV: str = "BYTESCAPE_POLICY"
LOG_LEVEL_ENV: str = "BYTESCAPE_LOG_LEVEL"

_DEFAULT_LOG_LEVEL: str = "WARNING"


def default_policy_name() -> str:
    """Return the policy used when none is given (respects env var override)."""
    return os.environ.get(POLICY_ENV, "").strip() or DEFAULT_POLICY


def default_log_level() -> str:
    """Return the CLI log level used when none is given (respects env var override)."""
    return os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or _DEFAULT_LOG_LEVEL
