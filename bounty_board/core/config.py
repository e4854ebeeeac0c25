"""
Bounty validation configuration.
Environment-driven settings, read once at import time.
"""

import os

# Reward defaults applied when a reward object is supplied without them
DEFAULT_REWARD_CURRENCY = os.getenv("BOUNTY_DEFAULT_CURRENCY", "BANK")
DEFAULT_REWARD_SCALE = int(os.getenv("BOUNTY_DEFAULT_SCALE", "0"))

# Audit logging of validation outcomes
VALIDATION_AUDIT_ENABLED = os.getenv("VALIDATION_AUDIT_ENABLED", "true").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Version string
VERSION = "0.3.0"

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def is_validation_audit_enabled():
    """Check if validation outcomes should be written to the audit log."""
    return VALIDATION_AUDIT_ENABLED


def get_default_currency():
    return DEFAULT_REWARD_CURRENCY


def get_default_scale():
    return DEFAULT_REWARD_SCALE


def validate_config():
    """Validate configuration and return any issues."""
    issues = []

    if not DEFAULT_REWARD_CURRENCY.strip():
        issues.append("BOUNTY_DEFAULT_CURRENCY must not be empty")

    if DEFAULT_REWARD_SCALE < 0:
        issues.append("BOUNTY_DEFAULT_SCALE must be >= 0")

    if LOG_LEVEL not in _LOG_LEVELS:
        issues.append(f"Invalid LOG_LEVEL: {LOG_LEVEL}")

    return issues
