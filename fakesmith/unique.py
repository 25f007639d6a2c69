"""Random version 4 UUIDs drawn from the shared random source."""

from __future__ import annotations

import uuid as _uuid

from fakesmith.randomness import rand_int_range

_VERSION = 4


def uuid() -> str:
    """Return a random version 4 UUID string (xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx)."""
    raw = bytearray(rand_int_range(0, 255) for _ in range(16))
    raw[6] = (raw[6] & 0x0F) | (_VERSION << 4)
    raw[8] = (raw[8] & 0xBF) | 0x80
    return str(_uuid.UUID(bytes=bytes(raw)))