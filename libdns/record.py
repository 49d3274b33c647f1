#
#
#

"""DNS record values and their wire codec.

Providers exchange record values as a flat ``(type, value)`` string pair.
``RecordData.from_raw`` turns such a pair into one of the typed variants
below, and ``get_type``/``get_value`` project it back. Values that cannot be
parsed are kept verbatim in ``Other``, so decoding never fails.
"""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address


def _u16(token):
    if not (token.isascii() and token.isdigit()):
        raise ValueError(f'not an unsigned integer: {token!r}')
    value = int(token)
    if value > 65535:
        raise ValueError(f'out of range: {token!r}')
    return value


def _fields(value, count):
    parts = value.split()
    if len(parts) != count:
        raise ValueError(f'expected {count} fields, got {len(parts)}')
    return parts


class RecordData(object):
    @classmethod
    def from_raw(cls, typ: str, value: str) -> 'RecordData':
        parse = _PARSERS.get(typ)
        if parse is None:
            return Other(typ, value)
        try:
            return parse(value)
        except (ValueError, AttributeError):
            return Other(typ, value)

    def get_type(self) -> str:
        return self.TYPE

    def get_value(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class A(RecordData):
    TYPE = 'A'

    address: IPv4Address

    def get_value(self) -> str:
        return str(self.address)


@dataclass(frozen=True)
class AAAA(RecordData):
    TYPE = 'AAAA'

    address: IPv6Address

    def get_value(self) -> str:
        return str(self.address)


@dataclass(frozen=True)
class CNAME(RecordData):
    TYPE = 'CNAME'

    name: str

    def get_value(self) -> str:
        return self.name


@dataclass(frozen=True)
class MX(RecordData):
    TYPE = 'MX'

    priority: int
    mail_server: str

    @classmethod
    def parse(cls, value):
        priority, mail_server = _fields(value, 2)
        return cls(_u16(priority), mail_server)

    def get_value(self) -> str:
        return f'{self.priority} {self.mail_server}'


@dataclass(frozen=True)
class NS(RecordData):
    TYPE = 'NS'

    name: str

    def get_value(self) -> str:
        return self.name


@dataclass(frozen=True)
class SRV(RecordData):
    TYPE = 'SRV'

    priority: int
    weight: int
    port: int
    target: str

    @classmethod
    def parse(cls, value):
        priority, weight, port, target = _fields(value, 4)
        return cls(_u16(priority), _u16(weight), _u16(port), target)

    def get_value(self) -> str:
        return f'{self.priority} {self.weight} {self.port} {self.target}'


@dataclass(frozen=True)
class TXT(RecordData):
    TYPE = 'TXT'

    text: str

    def get_value(self) -> str:
        return self.text


@dataclass(frozen=True)
class Other(RecordData):
    """A record type without a dedicated variant, or a value that failed to
    parse as its type."""

    typ: str
    value: str

    def get_type(self) -> str:
        return self.typ

    def get_value(self) -> str:
        return self.value


_PARSERS = {
    'A': lambda value: A(IPv4Address(value)),
    'AAAA': lambda value: AAAA(IPv6Address(value)),
    'CNAME': CNAME,
    'MX': MX.parse,
    'NS': NS,
    'SRV': SRV.parse,
    'TXT': TXT,
}


@dataclass(frozen=True)
class Record(object):
    """A single DNS record as listed by a zone.

    ``ttl`` is always resolved; providers substitute the zone default when a
    record carries none of its own.
    """

    id: str
    host: str
    data: RecordData
    ttl: int
