#
#
#

"""Capability interfaces for DNS providers and zones.

Every provider implements ``Provider``, which only retrieves zones, and every
zone it hands out implements ``Zone``, which only retrieves records. Write
access is opt-in: a binding additionally subclasses ``CreateZone``,
``DeleteZone``, ``CreateRecord`` and/or ``DeleteRecord`` for the operations
its backend supports. Code that needs one of them should ask for it in its
signature.
"""

from typing import List, Protocol

from .record import Record, RecordData


class Zone(Protocol):
    """A DNS zone handed out by a Provider.

    Zones are snapshots of the remote state at the time they were retrieved.
    """

    @property
    def id(self) -> str:
        """Provider-specific zone identifier."""
        ...

    @property
    def domain(self) -> str:
        """Domain the zone manages."""
        ...

    def list_records(self) -> List[Record]:
        """Retrieve all records of the zone.

        Returns:
            List of records, empty when the zone has none

        Raises:
            RetrieveRecordError
        """
        ...

    def get_record(self, record_id: str) -> Record:
        """Retrieve a single record of the zone.

        Raises:
            RetrieveRecordError: NotFound when no record with that id
                exists in this zone
        """
        ...


class CreateRecord(Zone, Protocol):
    def create_record(self, host: str, data: RecordData, ttl: int) -> Record:
        """Create a record in the zone.

        Raises:
            CreateRecordError: UnsupportedType is raised before anything is
                sent when the provider does not handle ``data``'s type
        """
        ...


class DeleteRecord(Zone, Protocol):
    def delete_record(self, record_id: str) -> None:
        """Delete a record of the zone.

        Raises:
            DeleteRecordError
        """
        ...


class Provider(Protocol):
    def list_zones(self) -> List[Zone]:
        """Retrieve all zones.

        Returns:
            List of zones, empty when there are none

        Raises:
            RetrieveZoneError
        """
        ...

    def get_zone(self, zone_id: str) -> Zone:
        """Retrieve a zone by its provider-specific id.

        Raises:
            RetrieveZoneError: NotFound when no such zone exists
        """
        ...


class CreateZone(Provider, Protocol):
    def create_zone(self, domain: str) -> Zone:
        """Create a zone for ``domain``.

        Raises:
            CreateZoneError
        """
        ...


class DeleteZone(Provider, Protocol):
    def delete_zone(self, zone_id: str) -> None:
        """Delete a zone by its provider-specific id.

        Raises:
            DeleteZoneError
        """
        ...
