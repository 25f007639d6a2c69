"""Beer names, ingredients and measurements."""

from __future__ import annotations

from fakesmith.randomness import get_rand_value, rand_float_range, rand_int_range


def beer_name() -> str:
    """Return a random beer name."""
    return get_rand_value("beer", "name")


def beer_style() -> str:
    """Return a random beer style."""
    return get_rand_value("beer", "style")


def beer_hop() -> str:
    """Return a random hop variety."""
    return get_rand_value("beer", "hop")


def beer_yeast() -> str:
    """Return a random yeast strain."""
    return get_rand_value("beer", "yeast")


def beer_malt() -> str:
    """Return a random malt."""
    return get_rand_value("beer", "malt")


def beer_ibu() -> str:
    """Return a random bitterness between 10 and 100 IBU."""
    return f"{rand_int_range(10, 100)} IBU"


def beer_alcohol() -> str:
    """Return a random alcohol level between 2.0 and 10.0 percent."""
    return f"{rand_float_range(2.0, 10.0):.1f}%"


def beer_blg() -> str:
    """Return a random density between 5.0 and 20.0 degrees Balling."""
    return f"{rand_float_range(5.0, 20.0):.1f}°Blg"