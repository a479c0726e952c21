"""Resource record data: A, AAAA, NS, CNAME, PTR, TXT, SPF, MX, SOA, SRV."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar, Iterable, Union

from dnskit.types import Class, Type


class InvalidRnameError(ValueError):
    """Raised when an SOA rname or mailbox address cannot be converted."""

    def __init__(self, rname: str) -> None:
        super().__init__(f"invalid rname {rname!r}")
        self.rname = rname


@dataclass(frozen=True)
class A:
    """IPv4 address record."""

    type: ClassVar[Type] = Type.A

    address: ipaddress.IPv4Address

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", ipaddress.IPv4Address(self.address))


@dataclass(frozen=True)
class AAAA:
    """IPv6 address record."""

    type: ClassVar[Type] = Type.AAAA

    address: ipaddress.IPv6Address

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", ipaddress.IPv6Address(self.address))


@dataclass(frozen=True)
class NS:
    """Name server record, delegating to an authoritative name server."""

    type: ClassVar[Type] = Type.NS

    name: str


@dataclass(frozen=True)
class CNAME:
    """Canonical name record, aliasing one name to another."""

    type: ClassVar[Type] = Type.CNAME

    name: str


@dataclass(frozen=True)
class PTR:
    """Pointer record, most commonly used for reverse lookups."""

    type: ClassVar[Type] = Type.PTR

    name: str


@dataclass(frozen=True)
class TXT:
    """Text record holding one or more character strings."""

    type: ClassVar[Type] = Type.TXT

    strings: tuple[bytes, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "strings", tuple(bytes(s) for s in self.strings))

    @classmethod
    def from_strings(cls, *args: str):
        """Build a record from text strings, encoded as UTF-8."""
        return cls(tuple(s.encode("utf-8") for s in args))

    @classmethod
    def parse(cls, data: bytes):
        """Parse record data made of length-prefixed character strings."""
        strings = []
        view = memoryview(bytes(data))
        pos = 0
        while pos < len(view):
            length = view[pos]
            pos += 1
            end = pos + length
            if end > len(view):
                raise ValueError(
                    f"truncated character string: wanted {length} bytes, "
                    f"{len(view) - pos} left"
                )
            strings.append(bytes(view[pos:end]))
            pos = end
        return cls(tuple(strings))

    def to_bytes(self) -> bytes:
        """Encode as length-prefixed character strings."""
        out = bytearray()
        for s in self.strings:
            if len(s) > 255:
                raise ValueError(f"character string too long: {len(s)} bytes")
            out.append(len(s))
            out += s
        return bytes(out)


@dataclass(frozen=True)
class SPF(TXT):
    """Sender Policy Framework record; same layout as TXT."""

    type: ClassVar[Type] = Type.SPF


@dataclass(frozen=True)
class MX:
    """Mail exchanger record. Lower preference values are preferred."""

    type: ClassVar[Type] = Type.MX

    preference: int
    exchange: str


@dataclass(frozen=True)
class SOA:
    """Start of authority record.

    ``rname`` holds the responsible mailbox as an e-mail address; use
    :func:`rname_to_email` and :func:`email_to_rname` to convert.
    """

    type: ClassVar[Type] = Type.SOA

    mname: str
    rname: str
    serial: int
    refresh: timedelta
    retry: timedelta
    expire: timedelta
    minimum: timedelta


@dataclass(frozen=True)
class SRV:
    """Service record with host and port of a service."""

    type: ClassVar[Type] = Type.SRV

    priority: int
    weight: int
    port: int
    name: str


@dataclass(frozen=True)
class OPT:
    """EDNS(0) pseudo record marker."""

    type: ClassVar[Type] = Type.OPT


@dataclass(frozen=True)
class ANY:
    """Any-type marker; valid only as a question type."""

    type: ClassVar[Type] = Type.ANY


Resource = Union[A, AAAA, NS, CNAME, PTR, TXT, SPF, MX, SOA, SRV, OPT, ANY]


@dataclass(frozen=True)
class Record:
    """A resource record: owner name, class, time to live and data."""

    name: str
    class_: Class
    ttl: timedelta
    resource: Resource

    @property
    def type(self) -> Type:
        return self.resource.type


def rname_to_email(domain: str) -> str:
    """Convert an SOA rname such as ``admin.example.com`` to ``admin@example.com``.

    The first unescaped dot becomes ``@``; backslash escapes are removed.
    """
    result: list[str] = []
    last_char = " "
    done = False
    for c in domain:
        if last_char == "\\":
            result.append(c)
        elif c == "." and not done:
            result.append("@")
            done = True
        elif c != "\\":
            result.append(c)
        last_char = c
    if not done:
        raise InvalidRnameError(domain)
    return "".join(result)


def email_to_rname(email: str) -> str:
    """Convert an e-mail address to SOA rname form, escaping dots in the local part."""
    left, sep, right = email.partition("@")
    if not sep:
        raise InvalidRnameError(email)
    return left.replace(".", "\\.") + "." + right


def _iter_types(resources: Iterable[Resource]) -> list[Type]:
    return [r.type for r in resources]