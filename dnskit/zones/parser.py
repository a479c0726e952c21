"""Parser for zone files in the master file format (RFC 1035, section 5)."""

from __future__ import annotations

import ipaddress
import re
from datetime import timedelta
from typing import Callable, Optional, Sequence

from dnskit.resource import AAAA, CNAME, MX, NS, PTR, SOA, A, Resource
from dnskit.types import Class
from dnskit.zones.entries import TTL, Entry, File, Origin, ZoneError, ZoneRecord
from dnskit.zones.preprocessor import preprocess


class ZoneSyntaxError(ZoneError):
    """Raised when zone file text does not follow the zone file grammar."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        text = message if line is None else f"line {line}: {message}"
        super().__init__(text)
        self.line = line


_WORD_PATTERN = re.compile(r"[()]|[^\s();]+")
_DIGITS = re.compile(r"[0-9]+")

_CLASSES = {
    "IN": Class.INTERNET,
    "CS": Class.CSNET,
    "CH": Class.CHAOS,
    "HS": Class.HESIOD,
}

# Ways the fields before the resource may be laid out, in order of preference.
_LAYOUTS: tuple[tuple[str, ...], ...] = (
    (),
    ("ttl",),
    ("class_",),
    ("name",),
    ("ttl", "class_"),
    ("class_", "ttl"),
    ("name", "ttl"),
    ("name", "class_"),
    ("name", "ttl", "class_"),
    ("name", "class_", "ttl"),
)


def _split_words(line: str, line_no: Optional[int]) -> list[str]:
    """Split one logical line into words, dropping comments and parentheses."""
    comment = line.find(";")
    if comment >= 0:
        line = line[:comment]
    depth = 0
    words: list[str] = []
    for word in _WORD_PATTERN.findall(line):
        if word == "(":
            depth += 1
        elif word == ")":
            depth -= 1
            if depth < 0:
                raise ZoneSyntaxError("unexpected ')'", line_no)
        else:
            words.append(word)
    if depth:
        raise ZoneSyntaxError("unclosed '('", line_no)
    return words


def _number(text: str, bits: int) -> Optional[int]:
    if not _DIGITS.fullmatch(text):
        return None
    value = int(text)
    return value if value < 1 << bits else None


def _duration(text: str) -> Optional[timedelta]:
    seconds = _number(text, 64)
    if seconds is None:
        return None
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        return None


def _class(text: str) -> Optional[Class]:
    return _CLASSES.get(text)


def _resource_a(args: Sequence[str]) -> Optional[Resource]:
    if len(args) != 1:
        return None
    try:
        return A(ipaddress.IPv4Address(args[0]))
    except ValueError:
        return None


def _resource_aaaa(args: Sequence[str]) -> Optional[Resource]:
    if len(args) != 1 or "%" in args[0]:
        return None
    try:
        return AAAA(ipaddress.IPv6Address(args[0]))
    except ValueError:
        return None


def _single_domain(kind: Callable[[str], Resource]):
    def build(args: Sequence[str]) -> Optional[Resource]:
        return kind(args[0]) if len(args) == 1 else None

    return build


def _resource_mx(args: Sequence[str]) -> Optional[Resource]:
    if len(args) != 2:
        return None
    preference = _number(args[0], 16)
    if preference is None:
        return None
    return MX(preference=preference, exchange=args[1])


def _resource_soa(args: Sequence[str]) -> Optional[Resource]:
    if len(args) != 7:
        return None
    mname, rname, serial_text, *timer_texts = args
    serial = _number(serial_text, 32)
    timers = [_duration(t) for t in timer_texts]
    if serial is None or any(t is None for t in timers):
        return None
    refresh, retry, expire, minimum = timers
    return SOA(
        mname=mname,
        rname=rname,
        serial=serial,
        refresh=refresh,
        retry=retry,
        expire=expire,
        minimum=minimum,
    )


_RESOURCES: dict[str, Callable[[Sequence[str]], Optional[Resource]]] = {
    "A": _resource_a,
    "AAAA": _resource_aaaa,
    "CNAME": _single_domain(CNAME),
    "NS": _single_domain(NS),
    "PTR": _single_domain(PTR),
    "MX": _resource_mx,
    "SOA": _resource_soa,
}


def _parse_resource(words: Sequence[str]) -> Optional[Resource]:
    if not words:
        return None
    builder = _RESOURCES.get(words[0])
    return builder(words[1:]) if builder else None


def _parse_prefix(layout: Sequence[str], words: Sequence[str]) -> Optional[dict]:
    fields: dict = {}
    for kind, word in zip(layout, words):
        if kind == "name":
            value = word
        elif kind == "ttl":
            value = _duration(word)
        else:
            value = _class(word)
        if value is None:
            return None
        fields[kind] = value
    return fields


def _parse_record_words(words: Sequence[str], line_no: Optional[int]) -> ZoneRecord:
    for layout in _LAYOUTS:
        if len(layout) >= len(words):
            continue
        fields = _parse_prefix(layout, words[: len(layout)])
        if fields is None:
            continue
        resource = _parse_resource(words[len(layout):])
        if resource is None:
            continue
        return ZoneRecord(resource=resource, **fields)
    raise ZoneSyntaxError(f"invalid resource record {' '.join(words)!r}", line_no)


def _parse_directive(words: Sequence[str], line_no: int) -> Entry:
    directive, args = words[0], words[1:]
    if directive == "$ORIGIN":
        if len(args) != 1:
            raise ZoneSyntaxError("$ORIGIN takes exactly one domain", line_no)
        return Origin(args[0])
    if directive == "$TTL":
        ttl = _duration(args[0]) if len(args) == 1 else None
        if ttl is None:
            raise ZoneSyntaxError("$TTL takes exactly one duration", line_no)
        return TTL(ttl)
    raise ZoneSyntaxError(f"unsupported directive {directive!r}", line_no)


def parse_record(text: str) -> ZoneRecord:
    """Parse a single resource record written on one line."""
    if "\n" in text:
        raise ZoneSyntaxError("a single record may not contain a newline")
    words = _split_words(text, None)
    if not words:
        raise ZoneSyntaxError("empty record")
    return _parse_record_words(words, None)


def parse_file(text: str) -> File:
    """Parse a whole zone file into its unprocessed entries."""
    entries: list[Entry] = []
    for line_no, line in enumerate(preprocess(text).split("\n"), start=1):
        words = _split_words(line, line_no)
        if not words:
            continue
        if words[0].startswith("$"):
            entries.append(_parse_directive(words, line_no))
        else:
            entries.append(_parse_record_words(words, line_no))
    return File(origin=None, entries=entries)