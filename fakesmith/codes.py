"""HTTP status codes and log levels."""

from __future__ import annotations

from fakesmith.data import LOG_LEVELS
from fakesmith.randomness import get_rand_int_value, get_rand_value


def simple_status_code() -> int:
    """Return one of the most common HTTP status codes."""
    return get_rand_int_value("status_code", "simple")


def status_code() -> int:
    """Return a random HTTP status code."""
    return get_rand_int_value("status_code", "general")


def log_level(log_type: str) -> str:
    """Return a random log level of the given kind, or a general one if unknown."""
    if log_type in LOG_LEVELS:
        return get_rand_value("log_level", log_type)
    return get_rand_value("log_level", "general")