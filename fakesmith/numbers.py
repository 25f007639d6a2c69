"""Random numbers of the usual fixed-width ranges, plus booleans."""

from __future__ import annotations

import struct
import sys
from collections.abc import MutableSequence
from typing import Any

from fakesmith.randomness import rand_float_range, rand_int_range, replace_with_numbers

_UINT8_MAX = 2**8 - 1
_UINT16_MAX = 2**16 - 1
_INT8_MIN, _INT8_MAX = -(2**7), 2**7 - 1
_INT16_MIN, _INT16_MAX = -(2**15), 2**15 - 1
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1

_FLOAT32_SMALLEST = 1.401298464324817e-45
_FLOAT32_MAX = 3.4028234663852886e38
_FLOAT64_SMALLEST = 5e-324
_FLOAT64_MAX = sys.float_info.max


def _as_float32(value: float) -> float:
    """Round a float to the nearest single-precision value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def number(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    return rand_int_range(low, high)


def uint8() -> int:
    """Return a random value in [0, 255]."""
    return rand_int_range(0, _UINT8_MAX)


def uint16() -> int:
    """Return a random value in [0, 65535]."""
    return rand_int_range(0, _UINT16_MAX)


def uint32() -> int:
    """Return a random value in [0, 2**31 - 1]."""
    return rand_int_range(0, _INT32_MAX)


def uint64() -> int:
    """Return a random value in [0, 2**63 - 1)."""
    return rand_int_range(0, _INT64_MAX - 1)


def int8() -> int:
    """Return a random value in [-128, 127]."""
    return rand_int_range(_INT8_MIN, _INT8_MAX)


def int16() -> int:
    """Return a random value in [-32768, 32767]."""
    return rand_int_range(_INT16_MIN, _INT16_MAX)


def int32() -> int:
    """Return a random value in [-2**31, 2**31 - 1]."""
    return rand_int_range(_INT32_MIN, _INT32_MAX)


def int64() -> int:
    """Return a random value in [-2**63, -2]."""
    return rand_int_range(0, _INT64_MAX - 1) + _INT64_MIN


def float32() -> float:
    """Return a random positive single-precision value."""
    return _as_float32(rand_float_range(_FLOAT32_SMALLEST, _FLOAT32_MAX))


def float32_range(low: float, high: float) -> float:
    """Return a random single-precision value in [low, high)."""
    return _as_float32(rand_float_range(_as_float32(low), _as_float32(high)))


def float64() -> float:
    """Return a random positive double-precision value."""
    return rand_float_range(_FLOAT64_SMALLEST, _FLOAT64_MAX)


def float64_range(low: float, high: float) -> float:
    """Return a random float in [low, high)."""
    return rand_float_range(low, high)


def numerify(text: str) -> str:
    """Replace every '#' in text with a random digit."""
    return replace_with_numbers(text)


def shuffle_ints(values: MutableSequence[Any]) -> None:
    """Shuffle a list in place."""
    for i in range(1, len(values)):
        j = rand_int_range(0, i)
        values[i], values[j] = values[j], values[i]


def boolean() -> bool:
    """Return True or False at random."""
    return rand_int_range(0, 1) == 1