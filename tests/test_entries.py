from datetime import timedelta

import pytest

from dnskit.resource import (
    A,
    AAAA,
    CNAME,
    MX,
    NS,
    PTR,
    SOA,
    SRV,
    TXT,
    InvalidRnameError,
    Record,
)
from dnskit.types import Class
from dnskit.zones.entries import (
    TTL,
    File,
    Origin,
    ZoneError,
    ZoneRecord,
    resolve_name,
    resolve_resource,
)

IN = Class.INTERNET
HOUR = timedelta(seconds=3600)


def _example_file():
    return File(
        None,
        [
            Origin("example.com."),
            TTL(HOUR),
            ZoneRecord(
                name="example.com.",
                class_=IN,
                resource=SOA(
                    mname="ns.example.com.",
                    rname="username.example.com.",
                    serial=2020091025,
                    refresh=timedelta(seconds=7200),
                    retry=timedelta(seconds=3600),
                    expire=timedelta(seconds=1209600),
                    minimum=timedelta(seconds=3600),
                ),
            ),
            ZoneRecord(name="example.com.", class_=IN, resource=NS("ns")),
            ZoneRecord(
                name="example.com.", class_=IN, resource=NS("ns.somewhere.example.")
            ),
            ZoneRecord(
                name="example.com.", class_=IN, resource=MX(10, "mail.example.com.")
            ),
            ZoneRecord(name="@", class_=IN, resource=MX(20, "mail2.example.com.")),
            ZoneRecord(name="@", class_=IN, resource=MX(50, "mail3")),
            ZoneRecord(name="example.com.", class_=IN, resource=A("192.0.2.1")),
            ZoneRecord(class_=IN, resource=AAAA("2001:db8:10::1")),
            ZoneRecord(name="ns", class_=IN, resource=A("192.0.2.2")),
            ZoneRecord(class_=IN, resource=AAAA("2001:db8:10::2")),
            ZoneRecord(name="www", class_=IN, resource=CNAME("example.com.")),
            ZoneRecord(name="wwwtest", class_=IN, resource=CNAME("www")),
        ],
    )


def test_into_records():
    want = [
        Record(
            "example.com",
            IN,
            HOUR,
            SOA(
                mname="ns.example.com",
                rname="username@example.com",
                serial=2020091025,
                refresh=timedelta(seconds=7200),
                retry=timedelta(seconds=3600),
                expire=timedelta(seconds=1209600),
                minimum=timedelta(seconds=3600),
            ),
        ),
        Record("example.com", IN, HOUR, NS("ns.example.com")),
        Record("example.com", IN, HOUR, NS("ns.somewhere.example")),
        Record("example.com", IN, HOUR, MX(10, "mail.example.com")),
        Record("example.com", IN, HOUR, MX(20, "mail2.example.com")),
        Record("example.com", IN, HOUR, MX(50, "mail3.example.com")),
        Record("example.com", IN, HOUR, A("192.0.2.1")),
        Record("example.com", IN, HOUR, AAAA("2001:db8:10::1")),
        Record("ns.example.com", IN, HOUR, A("192.0.2.2")),
        Record("ns.example.com", IN, HOUR, AAAA("2001:db8:10::2")),
        Record("www.example.com", IN, HOUR, CNAME("example.com")),
        Record("wwwtest.example.com", IN, HOUR, CNAME("www.example.com")),
    ]
    assert _example_file().into_records() == want


def test_file_origin_strips_dot():
    assert File("example.com.", []).origin == "example.com"


def test_file_origin_must_be_absolute():
    with pytest.raises(ZoneError):
        File("example.com", [])


def test_file_origin_used_for_relative_names():
    f = File("example.org.", [ZoneRecord("www", HOUR, IN, A("10.0.0.1"))])
    assert f.into_records() == [Record("www.example.org", IN, HOUR, A("10.0.0.1"))]


def test_origin_entry_must_be_absolute():
    with pytest.raises(ZoneError):
        File(None, [Origin("example.com")]).into_records()


def test_blank_name_without_previous():
    f = File(None, [ZoneRecord(ttl=HOUR, class_=IN, resource=A("10.0.0.1"))])
    with pytest.raises(ZoneError):
        f.into_records()


def test_blank_ttl_without_default():
    f = File(None, [ZoneRecord("a.example.", None, IN, A("10.0.0.1"))])
    with pytest.raises(ZoneError):
        f.into_records()


def test_blank_class_without_previous():
    f = File(None, [ZoneRecord("a.example.", HOUR, None, A("10.0.0.1"))])
    with pytest.raises(ZoneError):
        f.into_records()


def test_explicit_ttl_overrides_default():
    f = File(
        None,
        [
            TTL(HOUR),
            ZoneRecord("a.example.", timedelta(seconds=5), IN, A("10.0.0.1")),
            ZoneRecord(None, None, None, A("10.0.0.2")),
        ],
    )
    assert f.into_records() == [
        Record("a.example", IN, timedelta(seconds=5), A("10.0.0.1")),
        Record("a.example", IN, HOUR, A("10.0.0.2")),
    ]


def test_resolve_name_absolute():
    assert resolve_name("host.example.com.", None) == "host.example.com"


def test_resolve_name_at():
    assert resolve_name("@", "example.com") == "example.com"


def test_resolve_name_relative():
    assert resolve_name("mail", "example.com") == "mail.example.com"


def test_resolve_name_relative_without_origin():
    with pytest.raises(ZoneError):
        resolve_name("mail", None)


def test_resolve_resource_srv_and_ptr():
    assert resolve_resource(SRV(1, 2, 80, "web"), "example.com") == SRV(
        1, 2, 80, "web.example.com"
    )
    assert resolve_resource(PTR("localhost."), None) == PTR("localhost")


def test_resolve_resource_leaves_txt_alone():
    txt = TXT.from_strings("hello")
    assert resolve_resource(txt, "example.com") == txt