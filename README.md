# dnskit

DNS record types, reverse-lookup names and an RFC 1035 zone file parser,
written in plain Python with no third-party dependencies.

## Installation

```
pip install dnskit
```

## Record types

`dnskit.types` holds the protocol enums (`Type`, `Class`, `Opcode`, `Rcode`,
`QR`) and the message structures (`Message`, `Question`, `Extension`,
`Stats`). `Type.from_text` and `Class.from_text` parse the names used in zone
files, such as `"AAAA"` or `"IN"`.

`dnskit.resource` defines the resource data: `A`, `AAAA`, `NS`, `CNAME`,
`PTR`, `TXT`, `SPF`, `MX`, `SOA`, `SRV`, `OPT`, `ANY`. A `Record` ties a name,
class and TTL to one of them.

SOA mailbox names can be converted both ways:

```python
from dnskit.resource import rname_to_email, email_to_rname

rname_to_email("username.example.com")   # "username@example.com"
email_to_rname("username@example.com")   # "username.example.com"
```

Names without an unescaped dot, or addresses without `@`, raise
`InvalidRnameError`.

## Reverse lookups

```python
from ipaddress import ip_address
from dnskit.util import reverse

reverse(ip_address("127.0.0.1"))   # "1.0.0.127.in-addr.arpa."
```

IPv6 addresses give the nibble form under `ip6.arpa.`.

## Zone files

```python
from dnskit.zones.parser import parse_file, parse_record

zone = parse_file("""
$ORIGIN example.com.
$TTL 3600
@    IN  SOA  ns.example.com. username.example.com. ( 1 7200 3600 1209600 3600 )
www  IN  A    192.0.2.1
""")

for record in zone.into_records():
    print(record)
```

`parse_file` returns a `File` whose entries (`Origin`, `TTL`, `ZoneRecord`)
mirror the text as written. `File.into_records()` resolves `@`, relative
names, the default TTL and carried-over names and classes into full
`Record` objects, raising `ZoneError` when something cannot be resolved.

`parse_record` parses a single resource-record line into a `ZoneRecord`.
Text that does not follow the grammar raises `ZoneSyntaxError`.

Parentheses may span several lines; `dnskit.zones.preprocessor.preprocess`
joins them before parsing, blanking out newlines and comments inside them.

## Running the tests

```
pip install dnskit[test]
pytest
```