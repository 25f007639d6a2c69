"""Network addresses, HTTP methods and image links."""

from __future__ import annotations

from fakesmith.randomness import get_rand_value, rand_int_range


def domain_suffix() -> str:
    """Return a random top-level domain suffix."""
    return get_rand_value("internet", "domain_suffix")


def http_method() -> str:
    """Return a random HTTP method."""
    return get_rand_value("internet", "http_method")


def ipv4_address() -> str:
    """Return a random IPv4 address with every octet in [2, 255]."""
    return ".".join(str(2 + rand_int_range(0, 253)) for _ in range(4))


def ipv6_address() -> str:
    """Return a random IPv6 address under the 2001:cafe prefix."""
    groups = (f"{rand_int_range(0, 65535):x}" for _ in range(6))
    return "2001:cafe:" + ":".join(groups)


def mac_address() -> str:
    """Return a random MAC address with every byte in [0, 254]."""
    return ":".join(f"{rand_int_range(0, 254):02x}" for _ in range(6))


def image_url(width: int, height: int) -> str:
    """Return a placeholder image link of the given size."""
    return f"https://picsum.photos/{width}/{height}"