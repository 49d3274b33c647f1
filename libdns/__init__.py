#
#
#

"""Provider-agnostic management of DNS zones and records.

Bindings for specific providers live in subpackages, e.g. ``libdns.hetzner``.
"""

from .capabilities import (
    CreateRecord,
    CreateZone,
    DeleteRecord,
    DeleteZone,
    Provider,
    Zone,
)
from .exceptions import (
    CreateRecordError,
    CreateZoneError,
    Custom,
    DeleteRecordError,
    DeleteZoneError,
    InvalidDomainName,
    InvalidRecord,
    LibdnsException,
    NotFound,
    RetrieveRecordError,
    RetrieveZoneError,
    Unauthorized,
    UnsupportedType,
)
from .record import AAAA, CNAME, MX, NS, SRV, TXT, A, Other, Record, RecordData

__version__ = __VERSION__ = '0.1.1'

__all__ = [
    'A',
    'AAAA',
    'CNAME',
    'CreateRecord',
    'CreateRecordError',
    'CreateZone',
    'CreateZoneError',
    'Custom',
    'DeleteRecord',
    'DeleteRecordError',
    'DeleteZone',
    'DeleteZoneError',
    'InvalidDomainName',
    'InvalidRecord',
    'LibdnsException',
    'MX',
    'NS',
    'NotFound',
    'Other',
    'Provider',
    'Record',
    'RecordData',
    'RetrieveRecordError',
    'RetrieveZoneError',
    'SRV',
    'TXT',
    'Unauthorized',
    'UnsupportedType',
    'Zone',
]
