"""Random letters, digits and string-list helpers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from fakesmith.randomness import rand_digit, rand_int_range, rand_letter, replace_with_letters


def letter() -> str:
    """Return a random lower-case ASCII letter."""
    return rand_letter()


def digit() -> str:
    """Return a random ASCII digit."""
    return rand_digit()


def lexify(text: str) -> str:
    """Replace every '?' in text with a random lower-case letter."""
    return replace_with_letters(text)


def shuffle_strings(values: MutableSequence[str] | None) -> None:
    """Shuffle a list of strings in place."""
    if not values:
        return
    for i in range(len(values) - 1, 0, -1):
        j = rand_int_range(0, i)
        values[i], values[j] = values[j], values[i]


def rand_string(values: Sequence[str] | None) -> str:
    """Return one of values at random, or '' if there are none."""
    if not values:
        return ""
    return values[rand_int_range(0, len(values) - 1)]