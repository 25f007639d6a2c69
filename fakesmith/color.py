"""Colour names and values."""

from __future__ import annotations

from fakesmith.randomness import (
    get_rand_value,
    rand_int_range,
    replace_with_letters,
    replace_with_numbers,
)


def color() -> str:
    """Return a random colour name."""
    return get_rand_value("color", "full")


def safe_color() -> str:
    """Return a random web-safe colour name."""
    return get_rand_value("color", "safe")


def hex_color() -> str:
    """Return '#' followed by six random digits and lower-case letters."""
    pattern = "".join("?#"[rand_int_range(0, 1)] for _ in range(6))
    return "#" + replace_with_letters(replace_with_numbers(pattern))


def rgb_color() -> list[int]:
    """Return three random channel values in [0, 255]."""
    return [rand_int_range(0, 255) for _ in range(3)]