"""Random latitudes and longitudes."""

from __future__ import annotations

from fakesmith.randomness import rand_float_range


def latitude() -> float:
    """Return a random latitude in [-90, 90)."""
    return rand_float_range(-90.0, 90.0)


def latitude_in_range(low: float, high: float) -> float:
    """Return a random latitude in [low, high); raise ValueError on a bad range."""
    if low > high or not -90 <= low <= 90 or not -90 <= high <= 90:
        raise ValueError("input range is invalid")
    return rand_float_range(low, high)


def longitude() -> float:
    """Return a random longitude in [-180, 180)."""
    return rand_float_range(-180.0, 180.0)


def longitude_in_range(low: float, high: float) -> float:
    """Return a random longitude in [low, high); raise ValueError on a bad range."""
    if low > high or not -180 <= low <= 180 or not -180 <= high <= 180:
        raise ValueError("input range is invalid")
    return rand_float_range(low, high)