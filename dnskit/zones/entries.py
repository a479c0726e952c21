"""Zone file entries and their resolution into resource records."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional, Union

from dnskit.resource import (
    ANY,
    CNAME,
    MX,
    NS,
    PTR,
    SOA,
    SRV,
    Record,
    Resource,
    rname_to_email,
)
from dnskit.types import Class


class ZoneError(ValueError):
    """Raised when a zone file cannot be turned into records."""


@dataclass(frozen=True)
class Origin:
    """A ``$ORIGIN`` directive."""

    domain: str


@dataclass(frozen=True)
class TTL:
    """A ``$TTL`` directive."""

    ttl: timedelta


@dataclass(frozen=True)
class ZoneRecord:
    """A resource record as written in a zone file; fields may be left out."""

    name: Optional[str] = None
    ttl: Optional[timedelta] = None
    class_: Optional[Class] = None
    resource: Resource = field(default_factory=ANY)


Entry = Union[Origin, TTL, ZoneRecord]


def _strip_absolute(domain: str) -> str:
    if not domain.endswith("."):
        raise ZoneError(f"origin {domain!r} is not an absolute domain")
    return domain[:-1]


def resolve_name(name: str, origin: Optional[str]) -> str:
    """Resolve a possibly relative name against ``origin`` (given without a trailing dot)."""
    if name.endswith("."):
        return name[:-1]
    if origin is None:
        raise ZoneError(f"relative domain {name!r} without an origin set")
    if name == "@":
        return origin
    return f"{name}.{origin}"


def resolve_resource(resource: Resource, origin: Optional[str]) -> Resource:
    """Resolve every domain name inside ``resource`` against ``origin``."""
    if isinstance(resource, (CNAME, NS, PTR)):
        return dataclasses.replace(resource, name=resolve_name(resource.name, origin))
    if isinstance(resource, MX):
        return dataclasses.replace(
            resource, exchange=resolve_name(resource.exchange, origin)
        )
    if isinstance(resource, SOA):
        return dataclasses.replace(
            resource,
            mname=resolve_name(resource.mname, origin),
            rname=rname_to_email(resolve_name(resource.rname, origin)),
        )
    if isinstance(resource, SRV):
        return dataclasses.replace(resource, name=resolve_name(resource.name, origin))
    return resource


@dataclass
class File:
    """An unprocessed zone file.

    ``origin`` is the origin given when the file was created, distinct from
    any ``$ORIGIN`` inside it; it must be absolute and is kept without its
    trailing dot.
    """

    origin: Optional[str] = None
    entries: list[Entry] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.origin is not None:
            self.origin = _strip_absolute(self.origin)

    def into_records(self) -> list[Record]:
        """Resolve names, TTLs and classes, returning complete records."""
        results: list[Record] = []
        origin = self.origin
        default_ttl: Optional[timedelta] = None
        last_name: Optional[str] = None
        last_class: Optional[Class] = None

        for entry in self.entries:
            if isinstance(entry, Origin):
                origin = _strip_absolute(entry.domain)
            elif isinstance(entry, TTL):
                default_ttl = entry.ttl
            elif isinstance(entry, ZoneRecord):
                if entry.name is not None:
                    full_name = resolve_name(entry.name, origin)
                elif last_name is not None:
                    full_name = last_name
                else:
                    raise ZoneError("blank domain without a previous domain set")
                last_name = full_name

                ttl = entry.ttl if entry.ttl is not None else default_ttl
                if ttl is None:
                    raise ZoneError("blank TTL without a default TTL set")

                class_ = entry.class_ if entry.class_ is not None else last_class
                if class_ is None:
                    raise ZoneError("blank class without a previous class set")
                last_class = class_

                results.append(
                    Record(
                        name=full_name,
                        class_=class_,
                        ttl=ttl,
                        resource=resolve_resource(entry.resource, origin),
                    )
                )
            else:
                raise ZoneError(f"unknown zone entry {entry!r}")
        return results