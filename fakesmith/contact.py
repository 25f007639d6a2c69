"""Phone numbers."""

from __future__ import annotations

from fakesmith.randomness import get_rand_value, replace_with_numbers


def phone() -> str:
    """Return ten random digits, not starting with 0."""
    return replace_with_numbers("##########")


def phone_formatted() -> str:
    """Return a random phone number in one of the known layouts."""
    return replace_with_numbers(get_rand_value("contact", "phone"))