"""Job titles, descriptors and levels."""

from __future__ import annotations

from fakesmith.randomness import get_rand_value


def job_title() -> str:
    """Return a random job title."""
    return get_rand_value("job", "title")


def job_descriptor() -> str:
    """Return a random job descriptor."""
    return get_rand_value("job", "descriptor")


def job_level() -> str:
    """Return a random job level."""
    return get_rand_value("job", "level")