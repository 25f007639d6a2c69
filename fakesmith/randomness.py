"""Shared random source and the low-level helpers built on it."""

from __future__ import annotations

import random
import time

from fakesmith.data import DATA, INT_DATA

_rng = random.Random()


def seed(value: int) -> None:
    """Seed the shared random source; 0 seeds from the current time."""
    _rng.seed(time.time_ns() if value == 0 else value)


def rand_int_range(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    if low == high:
        return low
    if high < low:
        raise ValueError(f"invalid range: {low} > {high}")
    return _rng.randrange(low, high + 1)


def rand_float_range(low: float, high: float) -> float:
    """Return a random float in [low, high)."""
    if low == high:
        return low
    return _rng.random() * (high - low) + low


def rand_letter() -> str:
    """Return a random lower-case ASCII letter."""
    return chr(ord("a") + _rng.randrange(26))


def rand_digit() -> str:
    """Return a random ASCII digit."""
    return chr(ord("0") + _rng.randrange(10))


def replace_with_numbers(text: str) -> str:
    """Replace every '#' with a random digit; a leading '0' becomes 1-8."""
    if not text:
        return text
    result = "".join(rand_digit() if char == "#" else char for char in text)
    if result[0] == "0":
        result = str(_rng.randrange(8) + 1) + result[1:]
    return result


def replace_with_letters(text: str) -> str:
    """Replace every '?' with a random lower-case letter."""
    return "".join(rand_letter() if char == "?" else char for char in text)


def get_rand_value(category: str, subcategory: str) -> str:
    """Pick a random string from a table, or '' if the table is unknown."""
    values = DATA.get(category, {}).get(subcategory)
    if not values:
        return ""
    return values[_rng.randrange(len(values))]


def get_rand_int_value(category: str, subcategory: str) -> int:
    """Pick a random integer from a table, or 0 if the table is unknown."""
    values = INT_DATA.get(category, {}).get(subcategory)
    if not values:
        return 0
    return values[_rng.randrange(len(values))]


def categories() -> dict[str, list[str]]:
    """Return every data category with the names of its subcategories."""
    return {category: list(tables) for category, tables in DATA.items()}