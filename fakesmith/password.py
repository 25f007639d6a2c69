"""Random passwords."""

from __future__ import annotations

from fakesmith.randomness import rand_int_range

LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMERIC = "0123456789"
SPECIAL = "!@#$%&*+-=?"
SPACE = "   "

MIN_LENGTH = 5


def _pick(chars: str) -> str:
    return chars[rand_int_range(0, len(chars) - 1)]


def password(
    lower: bool, upper: bool, numeric: bool, special: bool, space: bool, length: int
) -> str:
    """Return a random password of at least five characters.

    Each enabled character class appears at least once; with none enabled,
    lower-case letters and digits are used.
    """
    length = max(length, MIN_LENGTH)
    enabled = [
        chars
        for flag, chars in (
            (lower, LOWER),
            (upper, UPPER),
            (numeric, NUMERIC),
            (special, SPECIAL),
            (space, SPACE),
        )
        if flag
    ]

    chars = [_pick(group) for group in enabled]
    pool = "".join(enabled) or LOWER + NUMERIC
    chars.extend(_pick(pool) for _ in range(length - len(chars)))

    for i in range(len(chars)):
        j = rand_int_range(0, i)
        chars[i], chars[j] = chars[j], chars[i]

    return "".join(chars)