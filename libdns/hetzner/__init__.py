#
#
#

"""Binding for the Hetzner DNS API (https://dns.hetzner.com/api-docs).

Zone ids are the ids assigned by Hetzner, not the domain names. Record hosts
are returned as Hetzner stores them, '@' denoting the zone apex.
"""

import logging
from contextlib import contextmanager

from requests.exceptions import HTTPError, RequestException

from ..capabilities import CreateRecord, CreateZone, DeleteRecord, DeleteZone
from ..exceptions import (
    CreateRecordError,
    CreateRecordUnsupportedType,
    CreateZoneError,
    Custom,
    DeleteRecordError,
    DeleteZoneError,
    InvalidDomainName,
    InvalidRecord,
    NotFound,
    RetrieveRecordError,
    RetrieveRecordNotFound,
    RetrieveZoneError,
    Unauthorized,
    error_for,
    recast,
)
from ..pagination import PER_PAGE, Page, paginate
from ..record import Record, RecordData
from .clients import DNSClient
from .dnsapi_client import HetznerClient

__all__ = ['HetznerProvider', 'HetznerZone', 'SUPPORTED_RECORD_TYPES']

SUPPORTED_RECORD_TYPES = frozenset(
    (
        'A',
        'AAAA',
        'CAA',
        'CNAME',
        'DANE',
        'DS',
        'HINFO',
        'MX',
        'NS',
        'RP',
        'SOA',
        'SRV',
        'TLSA',
        'TXT',
    )
)

# Capabilities only define some of these kinds; 422 resolves to whichever
# one the failing capability has.
_STATUS_KINDS = {
    401: (Unauthorized,),
    403: (Unauthorized,),
    404: (NotFound,),
    422: (InvalidDomainName, InvalidRecord),
}


@contextmanager
def _translate_errors(capability):
    """Turn transport failures into errors of ``capability``.

    Anything without a well-known kind, including malformed responses,
    becomes the capability's Custom error wrapping the original exception.
    """
    try:
        yield
    except HTTPError as e:
        response = e.response
        status = response.status_code if response is not None else None
        for kind in _STATUS_KINDS.get(status, ()):
            error_class = error_for(capability, kind)
            if error_class is not None:
                raise error_class() from e
        raise error_for(capability, Custom)(e) from e
    except (
        RequestException,
        AttributeError,
        KeyError,
        TypeError,
        ValueError,
    ) as e:
        raise error_for(capability, Custom)(e) from e


class HetznerZone(CreateRecord, DeleteRecord):
    def __init__(self, client: DNSClient, zone: dict, per_page=PER_PAGE):
        self._client = client
        self._id = zone['id']
        self._domain = zone['name']
        self._ttl = zone['ttl']
        self._status = zone.get('status')
        self.per_page = per_page
        self.log = logging.getLogger('HetznerZone')

    def __repr__(self):
        return f'HetznerZone<{self._id}, {self._domain}>'

    @property
    def id(self):
        return self._id

    @property
    def domain(self):
        return self._domain

    @property
    def ttl(self):
        """Default TTL for records that carry none of their own."""
        return self._ttl

    @property
    def status(self):
        return self._status

    def _record(self, record):
        value = record['value']
        if not isinstance(value, str):
            raise TypeError(f'record value is not a string: {value!r}')
        ttl = record.get('ttl')
        return Record(
            id=record['id'],
            host=record['name'],
            data=RecordData.from_raw(record['type'], value),
            ttl=self._ttl if ttl is None else ttl,
        )

    def _records_page(self, page, per_page):
        self.log.debug(
            '_records_page: zone=%s, page=%d, per_page=%d',
            self._id,
            page,
            per_page,
        )
        with _translate_errors(RetrieveRecordError):
            data = self._client.records(self._id, page, per_page)
            records = [self._record(r) for r in data['records']]
            total = data['meta']['pagination']['total_entries']
        return Page(records, total)

    def list_records(self):
        self.log.debug('list_records: zone=%s', self._id)
        return paginate(self._records_page, self.per_page)

    def get_record(self, record_id):
        self.log.debug(
            'get_record: zone=%s, record_id=%s', self._id, record_id
        )
        with _translate_errors(RetrieveRecordError):
            record = self._client.record_get(record_id)
            zone_id = record['zone_id']
            ret = self._record(record)
        # Ids are global at Hetzner, records of other zones must not leak
        if zone_id != self._id:
            raise RetrieveRecordNotFound()
        return ret

    def create_record(self, host, data, ttl):
        _type = data.get_type()
        self.log.debug(
            'create_record: host=%s, type=%s, ttl=%s', host, _type, ttl
        )
        if _type not in SUPPORTED_RECORD_TYPES:
            raise CreateRecordUnsupportedType(
                f'Unsupported record type: {_type}'
            )

        with _translate_errors(CreateRecordError):
            record = self._client.record_create(
                self._id,
                host,
                _type,
                data.get_value(),
                None if ttl == self._ttl else ttl,
            )
            return self._record(record)

    def delete_record(self, record_id):
        self.log.debug(
            'delete_record: zone=%s, record_id=%s', self._id, record_id
        )
        try:
            self.get_record(record_id)
        except RetrieveRecordError as e:
            raise recast(e, DeleteRecordError) from e

        with _translate_errors(DeleteRecordError):
            self._client.record_delete(record_id)


class HetznerProvider(CreateZone, DeleteZone):
    def __init__(self, token, base_url=None, per_page=PER_PAGE):
        self.log = logging.getLogger('HetznerProvider')
        self.log.debug(
            '__init__: token=***, base_url=%s, per_page=%d',
            base_url,
            per_page,
        )
        self.per_page = per_page
        # Shared with every zone handed out
        self._client: DNSClient = HetznerClient(token, base_url=base_url)

    def _zone(self, zone):
        return HetznerZone(self._client, zone, per_page=self.per_page)

    def _zones_page(self, page, per_page):
        self.log.debug('_zones_page: page=%d, per_page=%d', page, per_page)
        with _translate_errors(RetrieveZoneError):
            data = self._client.zones(page, per_page)
            zones = [self._zone(z) for z in data['zones']]
            total = data['meta']['pagination']['total_entries']
        return Page(zones, total)

    def list_zones(self):
        self.log.debug('list_zones:')
        return paginate(self._zones_page, self.per_page)

    def get_zone(self, zone_id):
        self.log.debug('get_zone: zone_id=%s', zone_id)
        with _translate_errors(RetrieveZoneError):
            return self._zone(self._client.zone_get(zone_id))

    def create_zone(self, domain):
        self.log.debug('create_zone: domain=%s', domain)
        with _translate_errors(CreateZoneError):
            return self._zone(self._client.zone_create(domain))

    def delete_zone(self, zone_id):
        self.log.debug('delete_zone: zone_id=%s', zone_id)
        with _translate_errors(DeleteZoneError):
            self._client.zone_delete(zone_id)
