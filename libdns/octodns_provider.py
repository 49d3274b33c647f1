#
#
#

"""octoDNS provider backed by a libdns provider.

Example config::

    providers:
      hetzner:
        class: libdns.octodns_provider.LibdnsProvider
        token: env/HETZNER_TOKEN
        # Optional, defaults to hetzner
        backend: hetzner
"""

import logging
from collections import defaultdict

from octodns.provider.base import BaseProvider
from octodns.record import Record

from .record import CNAME, MX, SRV, Other, RecordData

APEX = '@'


class LibdnsProvider(BaseProvider):
    SUPPORTS_GEO = False
    SUPPORTS_DYNAMIC = False
    SUPPORTS_ROOT_NS = True
    SUPPORTS = set(('A', 'AAAA', 'CNAME', 'MX', 'NS', 'SRV', 'TXT'))

    def __init__(self, id, token, *args, **kwargs):
        self.log = logging.getLogger(f'LibdnsProvider[{id}]')
        backend = kwargs.pop('backend', 'hetzner')
        self.log.debug('__init__: id=%s, token=***, backend=%s', id, backend)
        super().__init__(id, *args, **kwargs)

        self._backend = backend
        self._provider = self._create_provider(backend, token)

    def _create_provider(self, backend: str, token: str):
        """Factory method for the libdns provider.

        Args:
            backend: Backend name ('hetzner')
            token: API token

        Returns:
            Provider implementing zone and record creation and deletion

        Raises:
            ValueError: If backend is invalid
        """
        if backend == 'hetzner':
            from .hetzner import HetznerProvider

            return HetznerProvider(token)
        raise ValueError(f"Invalid backend '{backend}'. Must be 'hetzner'")

    def _append_dot(self, value):
        if value == APEX or value[-1] == '.':
            return value
        return f'{value}.'

    def _find_zone(self, zone_name):
        domain = zone_name[:-1]
        for zone in self._provider.list_zones():
            if zone.domain == domain:
                return zone
        return None

    def _data_for_multiple(self, _type, records):
        return {
            'ttl': records[0].ttl,
            'type': _type,
            'values': [record.data.get_value() for record in records],
        }

    _data_for_A = _data_for_multiple
    _data_for_AAAA = _data_for_multiple

    def _data_for_CNAME(self, _type, records):
        record = records[0]
        return {
            'ttl': record.ttl,
            'type': _type,
            'value': self._append_dot(record.data.name),
        }

    def _data_for_MX(self, _type, records):
        values = []
        for record in records:
            values.append(
                {
                    'preference': record.data.priority,
                    'exchange': self._append_dot(record.data.mail_server),
                }
            )
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    def _data_for_NS(self, _type, records):
        values = [self._append_dot(record.data.name) for record in records]
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    def _data_for_SRV(self, _type, records):
        values = []
        for record in records:
            data = record.data
            values.append(
                {
                    'port': data.port,
                    'priority': data.priority,
                    'target': self._append_dot(data.target),
                    'weight': data.weight,
                }
            )
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    def _data_for_TXT(self, _type, records):
        values = [
            record.data.get_value().replace(';', '\\;') for record in records
        ]
        return {'ttl': records[0].ttl, 'type': _type, 'values': values}

    def list_zones(self):
        self.log.debug('list_zones:')
        return sorted(f'{z.domain}.' for z in self._provider.list_zones())

    def populate(self, zone, target=False, lenient=False):
        self.log.debug(
            'populate: name=%s, target=%s, lenient=%s',
            zone.name,
            target,
            lenient,
        )

        remote = self._find_zone(zone.name)
        if remote is None:
            self.log.info('populate:   zone %s does not exist', zone.name)
            return False

        values = defaultdict(lambda: defaultdict(list))
        for record in remote.list_records():
            _type = record.data.get_type()
            if _type not in self.SUPPORTS:
                self.log.warning(
                    'populate: skipping unsupported %s record', _type
                )
                continue
            if isinstance(record.data, Other):
                self.log.warning(
                    'populate: skipping unparsable %s record %r',
                    _type,
                    record.data.get_value(),
                )
                continue
            name = '' if record.host == APEX else record.host
            values[name][_type].append(record)

        before = len(zone.records)
        for name, types in values.items():
            for _type, records in types.items():
                data_for = getattr(self, f'_data_for_{_type}')
                record = Record.new(
                    zone,
                    name,
                    data_for(_type, records),
                    source=self,
                    lenient=lenient,
                )
                zone.add_record(record, lenient=lenient)

        self.log.info(
            'populate:   found %s records, exists=True',
            len(zone.records) - before,
        )
        return True

    def _params_for_multiple(self, record):
        for value in record.values:
            yield RecordData.from_raw(record._type, value.replace('\\;', ';'))

    _params_for_A = _params_for_multiple
    _params_for_AAAA = _params_for_multiple
    _params_for_NS = _params_for_multiple
    _params_for_TXT = _params_for_multiple

    def _params_for_CNAME(self, record):
        yield CNAME(record.value)

    def _params_for_MX(self, record):
        for value in record.values:
            yield MX(value.preference, value.exchange)

    def _params_for_SRV(self, record):
        for value in record.values:
            yield SRV(value.priority, value.weight, value.port, value.target)

    def _apply_Create(self, zone, change):
        new = change.new
        params_for = getattr(self, f'_params_for_{new._type}')
        for data in params_for(new):
            zone.create_record(new.name or APEX, data, new.ttl)

    def _apply_Update(self, zone, change):
        # It's simpler to delete-then-recreate than to update
        self._apply_Delete(zone, change)
        self._apply_Create(zone, change)

    def _apply_Delete(self, zone, change):
        existing = change.existing
        host = existing.name or APEX
        for record in zone.list_records():
            if (
                record.host == host
                and record.data.get_type() == existing._type
            ):
                zone.delete_record(record.id)

    def _apply(self, plan):
        desired = plan.desired
        changes = plan.changes
        self.log.debug(
            '_apply: zone=%s, len(changes)=%d', desired.name, len(changes)
        )

        zone = self._find_zone(desired.name)
        if zone is None:
            self.log.debug('_apply:   no matching zone, creating domain')
            zone = self._provider.create_zone(desired.name[:-1])

        for change in changes:
            class_name = change.__class__.__name__
            getattr(self, f'_apply_{class_name}')(zone, change)
