"""Utility subpackage for the AQI calculations."""

from .breakpoints import Breakpoint, high_index, low_index
from .indices import AQICategory, Pollutant
from .logging_config import setup_logging
from .settings import (
    POLICY_EXTRAPOLATE,
    POLICY_STRICT,
    get_log_level,
    get_range_policy,
)
from .truncation import trunc1dp, trunc3dp, trunc_whole

__all__ = [
    "Breakpoint",
    "high_index",
    "low_index",
    "AQICategory",
    "Pollutant",
    "setup_logging",
    "POLICY_EXTRAPOLATE",
    "POLICY_STRICT",
    "get_log_level",
    "get_range_policy",
    "trunc1dp",
    "trunc3dp",
    "trunc_whole",
]
