"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from typing import Optional

from AQI.errors import AQIError

# Extend the top segment past the table end, AQI may exceed 500
POLICY_EXTRAPOLATE = "extrapolate"
# Raise ConcentrationOutOfRangeError past the table end
POLICY_STRICT = "strict"

RANGE_POLICIES = (POLICY_EXTRAPOLATE, POLICY_STRICT)

DEFAULT_RANGE_POLICY = POLICY_EXTRAPOLATE
DEFAULT_LOG_LEVEL = "INFO"


def get_range_policy(policy: Optional[str] = None) -> str:
    """Resolve the out-of-range policy, falling back to ``AQI_RANGE_POLICY``."""
    if policy is None:
        policy = os.getenv("AQI_RANGE_POLICY", default=DEFAULT_RANGE_POLICY)
    policy = policy.strip().lower()
    if policy not in RANGE_POLICIES:
        raise AQIError(f"Unknown range policy: {policy!r}")
    return policy


def get_log_level() -> int:
    """Return the logging level named by ``AQI_LOG_LEVEL``."""
    name = os.getenv("AQI_LOG_LEVEL", default=DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise AQIError(f"Unknown log level: {name!r}")
    return level
