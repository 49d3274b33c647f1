#
#
#

"""Protocol definition for the Hetzner DNS API client.

HetznerProvider and HetznerZone only depend on this structural interface,
so the requests based HetznerClient can be swapped for any object that
conforms to it.
"""

from typing import Dict, Optional, Protocol


class DNSClient(Protocol):
    """Remote calls against the Hetzner DNS API.

    Implementations raise requests exceptions on failure; HTTP errors must
    carry the response so its status code can be inspected.
    """

    def zones(self, page: int, per_page: int) -> Dict:
        """List one page of zones.

        Returns:
            Dict with 'zones' and 'meta' keys, 'meta' holding the
            'pagination' block with 'total_entries'
        """
        ...

    def zone_get(self, zone_id: str) -> Dict:
        """Get zone metadata by id.

        Returns:
            Dict with 'id', 'name', and 'ttl' keys
        """
        ...

    def zone_create(self, name: str) -> Dict:
        """Create a new DNS zone.

        Args:
            name: Zone name (without trailing dot)

        Returns:
            Dict with zone metadata including 'id' and 'ttl'
        """
        ...

    def zone_delete(self, zone_id: str) -> None:
        ...

    def records(self, zone_id: str, page: int, per_page: int) -> Dict:
        """List one page of records of a zone.

        Returns:
            Dict with 'records' and 'meta' keys, records being dicts with
            'id', 'type', 'name', 'value', 'zone_id' and an optional 'ttl'
        """
        ...

    def record_get(self, record_id: str) -> Dict:
        ...

    def record_create(
        self,
        zone_id: str,
        name: str,
        _type: str,
        value: str,
        ttl: Optional[int] = None,
    ) -> Dict:
        """Create a single DNS record.

        Args:
            zone_id: Zone identifier
            name: Record name ('@' for zone apex)
            _type: Record type (A, AAAA, etc.)
            value: Record value
            ttl: Optional TTL override, None to use the zone default
        """
        ...

    def record_delete(self, record_id: str) -> None:
        ...

