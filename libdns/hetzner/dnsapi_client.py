#
#
#

from requests import Session

from .. import __version__ as package_version


class HetznerClient(object):
    BASE_URL = 'https://dns.hetzner.com/api/v1'

    def __init__(self, token, base_url=None):
        session = Session()
        session.headers.update(
            {
                'Auth-API-Token': token,
                'User-Agent': f'libdns/{package_version}',
            }
        )
        self._session = session
        self.base_url = base_url or self.BASE_URL

    def _do(self, method, path, params=None, data=None):
        url = f'{self.base_url}{path}'
        response = self._session.request(method, url, params=params, json=data)
        response.raise_for_status()
        return response

    def _do_json(self, method, path, params=None, data=None):
        return self._do(method, path, params, data).json()

    def zones(self, page, per_page):
        params = {'page': page, 'per_page': per_page}
        return self._do_json('GET', '/zones', params)

    def zone_get(self, zone_id):
        return self._do_json('GET', f'/zones/{zone_id}')['zone']

    def zone_create(self, name):
        data = {'name': name}
        return self._do_json('POST', '/zones', data=data)['zone']

    def zone_delete(self, zone_id):
        self._do('DELETE', f'/zones/{zone_id}')

    def records(self, zone_id, page, per_page):
        params = {'zone_id': zone_id, 'page': page, 'per_page': per_page}
        return self._do_json('GET', '/records', params)

    def record_get(self, record_id):
        return self._do_json('GET', f'/records/{record_id}')['record']

    def record_create(self, zone_id, name, _type, value, ttl=None):
        data = {
            'name': name,
            'type': _type,
            'value': value,
            'zone_id': zone_id,
        }
        # Without ttl the record follows the zone default
        if ttl is not None:
            data['ttl'] = ttl
        return self._do_json('POST', '/records', data=data)['record']

    def record_delete(self, record_id):
        self._do('DELETE', f'/records/{record_id}')
