"""Small helpers for working with DNS names."""

from __future__ import annotations

import ipaddress
from typing import Union

IPAddress = Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address]


def reverse(ip: IPAddress) -> str:
    """Return the reverse DNS name for an IPv4 or IPv6 address, for PTR lookups."""
    address = ipaddress.ip_address(ip)
    if address.version == 4:
        labels = [str(octet) for octet in reversed(address.packed)]
        return ".".join(labels) + ".in-addr.arpa."
    nibbles = []
    for octet in reversed(address.packed):
        nibbles.append(f"{octet & 0x0F:x}")
        nibbles.append(f"{octet >> 4:x}")
    return ".".join(nibbles) + ".ip6.arpa."