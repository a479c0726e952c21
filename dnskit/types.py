"""Core DNS message types: header enums, questions, extensions and messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Any, Optional

_LABELS: dict[tuple[str, str], str] = {}


class _LabelledEnum(IntEnum):
    """Integer enum whose text form is a fixed label rather than its name."""

    @property
    def label(self) -> str:
        return _LABELS.get((type(self).__name__, self.name), self.name)

    def __str__(self) -> str:
        return self.label

    @classmethod
    def _parse_label(cls, text: str):
        for member in cls:
            if member.label == text:
                return member
        raise ValueError(f"unknown {cls.__name__} {text!r}")


def _register(enum_cls: type, labels: dict[str, str]) -> None:
    for name, label in labels.items():
        _LABELS[(enum_cls.__name__, name)] = label


class QR(_LabelledEnum):
    """Query or response bit."""

    QUERY = 0
    RESPONSE = 1

    @classmethod
    def from_bool(cls, b: bool) -> "QR":
        return cls.RESPONSE if b else cls.QUERY

    def to_bool(self) -> bool:
        return self is QR.RESPONSE


class Opcode(_LabelledEnum):
    """Kind of query carried by a message (4 bits on the wire)."""

    QUERY = 0
    IQUERY = 1
    STATUS = 2
    NOTIFY = 4
    UPDATE = 5
    DSO = 6


class Rcode(_LabelledEnum):
    """Response codes."""

    NOERROR = 0
    FORMERR = 1
    SERVFAIL = 2
    NXDOMAIN = 3
    NOTIMP = 4
    REFUSED = 5
    YXDOMAIN = 6
    YXRRSET = 7
    NXRRSET = 8
    NOTAUTH = 9
    NOTZONE = 10
    DSOTYPENI = 11


class Type(_LabelledEnum):
    """Resource record type."""

    RESERVED = 0
    A = 1
    NS = 2
    CNAME = 5
    SOA = 6
    PTR = 12
    MX = 15
    TXT = 16
    AAAA = 28
    SRV = 33
    OPT = 41
    SPF = 99
    ANY = 255

    @classmethod
    def from_text(cls, text: str) -> "Type":
        """Parse a type from its text form, e.g. ``"AAAA"``."""
        return cls._parse_label(text)


class Class(_LabelledEnum):
    """Resource record class."""

    RESERVED = 0
    INTERNET = 1
    CSNET = 2
    CHAOS = 3
    HESIOD = 4
    NONE = 254
    ANY = 255

    @classmethod
    def from_text(cls, text: str) -> "Class":
        """Parse a class from its text form, e.g. ``"IN"`` or ``"*"``."""
        return cls._parse_label(text)


_register(QR, {"QUERY": "Query", "RESPONSE": "Response"})
_register(
    Opcode,
    {
        "QUERY": "Query",
        "IQUERY": "IQuery",
        "STATUS": "Status",
        "NOTIFY": "Notify",
        "UPDATE": "Update",
        "DSO": "DSO",
    },
)
_register(
    Rcode,
    {
        "NOERROR": "NoError",
        "FORMERR": "FormErr",
        "SERVFAIL": "ServFail",
        "NXDOMAIN": "NXDomain",
        "NOTIMP": "NotImp",
        "REFUSED": "Refused",
        "YXDOMAIN": "YXDomain",
        "YXRRSET": "YXRRSet",
        "NXRRSET": "NXRRSet",
        "NOTAUTH": "NotAuth",
        "NOTZONE": "NotZone",
        "DSOTYPENI": "DSOTYPENI",
    },
)
_register(Type, {"RESERVED": "Reserved"})
_register(
    Class,
    {
        "RESERVED": "Reserved",
        "INTERNET": "IN",
        "CSNET": "CS",
        "CHAOS": "CH",
        "HESIOD": "HS",
        "NONE": "None",
        "ANY": "*",
    },
)


@dataclass(frozen=True)
class Question:
    """A question: domain name, record type and class."""

    name: str
    type: Type = Type.ANY
    class_: Class = Class.INTERNET


@dataclass(frozen=True)
class Extension:
    """EDNS(0) extension record."""

    payload_size: int = 4096
    extend_rcode: int = 0
    version: int = 0
    dnssec_ok: bool = False


@dataclass
class Stats:
    """Metadata about a query as performed by a client."""

    start: datetime
    duration: timedelta
    server: tuple[str, int]
    request_size: int
    response_size: int


@dataclass
class Message:
    """A DNS message, the root of every request and response.

    Equality ignores ``stats``, which is metadata about the exchange.
    """

    id: int = 0
    rd: bool = False
    tc: bool = False
    aa: bool = False
    opcode: Opcode = Opcode.QUERY
    qr: QR = QR.QUERY
    rcode: Rcode = Rcode.NOERROR
    cd: bool = False
    ad: bool = False
    z: bool = False
    ra: bool = False
    questions: list[Question] = field(default_factory=list)
    answers: list[Any] = field(default_factory=list)
    authoritys: list[Any] = field(default_factory=list)
    additionals: list[Any] = field(default_factory=list)
    extension: Optional[Extension] = None
    stats: Optional[Stats] = field(default=None, compare=False)