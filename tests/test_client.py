#
# Tests for the TechnitiumClient facade
#

import json
from unittest import TestCase
from unittest.mock import MagicMock, patch

from technitium_api import (
    NO_PAYLOAD,
    ClientConfig,
    Permission,
    StaticNode,
    StaticToken,
    TechnitiumApiError,
    TechnitiumClient,
    TechnitiumDecodeError,
    TechnitiumInvalidToken,
)
from technitium_api.models import RecordType, ZoneType

from tests.fakes import FakeTransport, ok


def _client(*responses, **kwargs):
    transport = FakeTransport(*responses)
    kwargs.setdefault('token', 'tok123')
    client = TechnitiumClient(
        'http://dns.local:5380', transport=transport, **kwargs
    )
    return client, transport


class TestClientInit(TestCase):
    def test_conflicting_arguments(self):
        with self.assertRaises(ValueError):
            TechnitiumClient(
                'http://dns', token='t', token_provider=StaticToken('t')
            )
        with self.assertRaises(ValueError):
            TechnitiumClient(
                'http://dns', node='n', node_selector=StaticNode('n')
            )

    def test_default_transport(self):
        with patch('technitium_api.transport.Session') as session:
            client = TechnitiumClient(
                'http://dns/', timeout=5, verify_tls=False
            )
        self.assertEqual('http://dns', client.url)
        transport = client.adapter.transport
        self.assertEqual(5, transport.timeout)
        self.assertFalse(transport.verify)
        client.close()
        session.return_value.close.assert_called_once_with()

    def test_from_config(self):
        transport = FakeTransport(ok({'zones': []}))
        config = ClientConfig(
            url='https://dns.example.com/', token='abc', node='node2'
        )
        client = TechnitiumClient.from_config(config, transport=transport)
        self.assertEqual('https://dns.example.com', client.url)
        client.zones.list()
        self.assertEqual(
            {'token': 'abc', 'node': 'node2'}, transport.last_query()
        )

    def test_context_manager(self):
        transport = MagicMock()
        with TechnitiumClient('http://dns', transport=transport):
            pass
        transport.close.assert_called_once_with()


class TestSession(TestCase):
    def test_login_stores_token(self):
        client, transport = _client(
            {
                'status': 'ok',
                'displayName': 'Administrator',
                'username': 'admin',
                'token': 'fresh',
                'info': {'version': '13.2', 'dnsServerDomain': 'dns.local'},
            },
            ok({'zones': []}),
            token=None,
        )
        response = client.login('admin', 'admin')
        self.assertEqual('fresh', response.token)
        self.assertEqual('dns.local', response.info.dns_server_domain)
        self.assertEqual(
            {'user': 'admin', 'pass': 'admin', 'includeInfo': 'true'},
            transport.last_query(),
        )

        client.zones.list()
        self.assertEqual('fresh', transport.last_query()['token'])

    def test_login_with_custom_provider(self):
        provider = MagicMock()
        client = TechnitiumClient(
            'http://dns', transport=FakeTransport(), token_provider=provider
        )
        with self.assertRaises(TypeError):
            client.login('admin', 'admin')

    def test_logout_clears_token(self):
        client, transport = _client()
        self.assertIs(NO_PAYLOAD, client.logout())
        self.assertEqual('/api/user/logout', transport.last_path())
        with self.assertRaises(RuntimeError):
            client.zones.list()
        self.assertEqual(1, len(transport.requests))

    def test_logout_clears_token_on_failure(self):
        client, transport = _client({'status': 'invalid-token'})
        with self.assertRaises(TechnitiumInvalidToken):
            client.logout()
        with self.assertRaises(RuntimeError):
            client.zones.list()

    def test_select_node(self):
        client, transport = _client()
        client.select_node('node3')
        client.cache.flush()
        self.assertEqual('node3', transport.last_query()['node'])
        client.select_node(None)
        client.cache.flush()
        self.assertNotIn('node', transport.last_query())

    def test_user_calls_are_not_node_scoped(self):
        client, transport = _client(
            {'status': 'ok', 'username': 'admin'}, node='node2'
        )
        self.assertEqual('admin', client.user.session().username)
        self.assertNotIn('node', transport.last_query())

    def test_change_password(self):
        client, transport = _client()
        client.user.change_password('old', 'new')
        query = transport.last_query()
        self.assertEqual('old', query['pass'])
        self.assertEqual('new', query['newPass'])
        self.assertNotIn('currentPassword', query)


class TestZones(TestCase):
    def test_list(self):
        client, transport = _client(
            ok(
                {
                    'zones': [
                        {
                            'name': 'example.com',
                            'type': 'Primary',
                            'internal': False,
                            'dnssecStatus': 'SignedWithNSEC',
                            'soaSerial': 2024010101,
                            'lastModified': '2024-01-01T00:00:00Z',
                            'disabled': True,
                        },
                        {
                            'name': '0.in-addr.arpa',
                            'type': 'Primary',
                            'internal': True,
                        },
                    ]
                }
            )
        )
        zones = client.zones.list().zones
        self.assertEqual('/api/zones/list', transport.last_path())
        self.assertEqual(2, len(zones))
        self.assertEqual(ZoneType.PRIMARY, zones[0].type)
        self.assertEqual(2024010101, zones[0].soa_serial)
        self.assertTrue(zones[0].is_disabled)
        self.assertFalse(zones[1].is_disabled)
        self.assertTrue(zones[1].is_internal)

    def test_create(self):
        client, transport = _client()
        client.zones.create(
            'example.com', ZoneType.FORWARDER, {'forwarder': '1.1.1.1'}
        )
        self.assertEqual(
            {
                'token': 'tok123',
                'zone': 'example.com',
                'type': 'Forwarder',
                'forwarder': '1.1.1.1',
            },
            transport.last_query(),
        )

    def test_error(self):
        client, _ = _client(
            {'status': 'error', 'errorMessage': 'Zone already exists'}
        )
        with self.assertRaises(TechnitiumApiError) as ctx:
            client.zones.create('example.com')
        self.assertEqual('Zone already exists', ctx.exception.message)

    def test_export(self):
        client, transport = _client(b'$ORIGIN example.com.\n')
        self.assertEqual(
            '$ORIGIN example.com.\n', client.zones.export('example.com')
        )
        self.assertEqual('/api/zones/export', transport.last_path())

    def test_export_invalid_token(self):
        client, _ = _client({'status': 'invalid-token'})
        with self.assertRaises(TechnitiumInvalidToken):
            client.zones.export('example.com')

    def test_permissions_missing_response(self):
        client, _ = _client({'status': 'ok'})
        with self.assertRaises(TechnitiumDecodeError):
            client.zones.permissions('example.com')

    def test_import_uses_form(self):
        client, transport = _client()
        client.zones.import_('example.com', 'www 3600 IN A 1.2.3.4')
        self.assertEqual('POST', transport.last['method'])
        self.assertEqual(
            'www 3600 IN A 1.2.3.4', transport.last_form()['zoneFile']
        )
        self.assertEqual('false', transport.last_form()['overwrite'])

    def test_permissions(self):
        client, _ = _client(
            ok(
                {
                    'userPermissions': 'admin|true|true|true|bob|true|false',
                    'groupPermissions': 'Everyone|True|false|false',
                }
            )
        )
        permissions = client.zones.permissions('example.com')
        self.assertEqual(
            [Permission('admin', True, True, True)], permissions.users
        )
        self.assertEqual(
            [Permission('Everyone', True, False, False)], permissions.groups
        )

    def test_set_permissions(self):
        client, transport = _client()
        client.zones.set_permissions(
            'example.com',
            [Permission('admin', True, True, True)],
            [Permission('DNS Administrators', True, False, False)],
        )
        query = transport.last_query()
        self.assertEqual('admin|true|true|true', query['userPermissions'])
        self.assertEqual(
            'DNS Administrators|true|false|false', query['groupPermissions']
        )

    def test_set_options_arrays(self):
        client, transport = _client()
        client.zones.set_options(
            'example.com',
            {
                'queryAccessNetworkACL': ['10.0.0.0/8', '!192.168.0.0/16'],
                'notifyNameServers': [],
            },
        )
        query = transport.last_query()
        self.assertEqual(
            '10.0.0.0/8,!192.168.0.0/16', query['queryAccessNetworkACL']
        )
        self.assertEqual('', query['notifyNameServers'])


class TestRecords(TestCase):
    def test_get(self):
        client, transport = _client(
            ok(
                {
                    'zone': {'name': 'example.com', 'type': 'Primary'},
                    'records': [
                        {
                            'name': 'www.example.com',
                            'type': 'A',
                            'ttl': 3600,
                            'disabled': False,
                            'rData': {'ipAddress': '1.2.3.4'},
                        },
                        {
                            'name': 'example.com',
                            'type': 'MX',
                            'ttl': 300,
                            'disabled': False,
                            'rData': {'preference': 10, 'exchange': 'mx.a'},
                        },
                    ],
                }
            )
        )
        records = client.records.get('example.com').records
        self.assertEqual(
            {
                'token': 'tok123',
                'zone': 'example.com',
                'domain': 'example.com',
                'listZone': 'true',
            },
            transport.last_query(),
        )
        self.assertEqual('1.2.3.4', str(records[0].r_data['ipAddress']))
        self.assertEqual(
            'preference=10,exchange=mx.a', records[1].r_data_string
        )
        self.assertTrue(records[1].r_data['preference'].is_integer)

    def test_add(self):
        client, transport = _client()
        client.records.add(
            'example.com',
            'www.example.com',
            RecordType.A,
            {'ipAddress': '1.2.3.4', 'ptr': False},
            ttl=60,
        )
        self.assertEqual(
            {
                'token': 'tok123',
                'zone': 'example.com',
                'domain': 'www.example.com',
                'type': 'A',
                'ipAddress': '1.2.3.4',
                'ptr': 'false',
                'ttl': '60',
            },
            transport.last_query(),
        )

    def test_update_defaults_new_domain(self):
        client, transport = _client()
        client.records.update(
            'example.com',
            'www.example.com',
            'A',
            {'ipAddress': '1.2.3.4', 'newIpAddress': '5.6.7.8'},
        )
        query = transport.last_query()
        self.assertEqual('www.example.com', query['newDomain'])
        self.assertEqual('5.6.7.8', query['newIpAddress'])
        self.assertEqual('false', query['disable'])
        self.assertNotIn('ttl', query)


class TestSettings(TestCase):
    def test_get(self):
        client, _ = _client(
            ok(
                {
                    'version': '13.2',
                    'dnsServerDomain': 'dns.local',
                    'defaultRecordTtl': 3600,
                    'preferIPv6': True,
                    'someNewSetting': 'kept',
                }
            )
        )
        settings = client.settings.get()
        self.assertEqual(3600, settings.default_record_ttl)
        self.assertTrue(settings.prefer_ipv6)
        self.assertEqual('kept', settings.someNewSetting)

    def test_set_json(self):
        client, transport = _client()
        client.settings.set(
            {'udpPorts': [53, 5380], 'proxyBypassList': ['localhost']}
        )
        self.assertEqual('POST', transport.last['method'])
        self.assertEqual('/api/settings/set', transport.last_path())
        self.assertEqual(
            {'udpPorts': ['53', '5380'], 'proxyBypass': ['localhost']},
            transport.last_json(),
        )

    def test_backup(self):
        client, transport = _client(b'PK\x03\x04')
        self.assertEqual(
            b'PK\x03\x04', client.settings.backup(exclude=['logs', 'stats'])
        )
        query = transport.last_query()
        self.assertEqual('false', query['logs'])
        self.assertEqual('false', query['stats'])
        self.assertEqual('true', query['zones'])

    def test_backup_denied(self):
        client, _ = _client(
            {'status': 'error', 'errorMessage': 'Access was denied.'}
        )
        with self.assertRaises(TechnitiumApiError) as ctx:
            client.settings.backup()
        self.assertEqual('Access was denied.', ctx.exception.message)

    def test_backup_unknown_section(self):
        client, transport = _client()
        with self.assertRaises(ValueError):
            client.settings.backup(exclude=['everything'])
        self.assertEqual([], transport.requests)

    def test_restore(self):
        client, transport = _client()
        client.settings.restore(b'PK\x03\x04', delete_existing_files=True)
        self.assertEqual('/api/settings/restore', transport.last_path())
        self.assertEqual('true', transport.last_query()['deleteExistingFiles'])
        self.assertIn(b'backup.zip', transport.last['body'])


class TestCluster(TestCase):
    def test_remove_secondary(self):
        client, transport = _client()
        client.cluster.remove_secondary(2)
        self.assertEqual(
            '/api/admin/cluster/primary/removeSecondary',
            transport.last_path(),
        )
        client.cluster.remove_secondary(2, force=True)
        self.assertEqual(
            '/api/admin/cluster/primary/deleteSecondary',
            transport.last_path(),
        )
        self.assertEqual('2', transport.last_query()['secondaryNodeId'])

    def test_state(self):
        client, transport = _client(
            ok(
                {
                    'clusterInitialized': True,
                    'clusterDomain': 'cluster.local',
                    'clusterNodes': [
                        {
                            'id': 1,
                            'name': 'dns1',
                            'url': 'https://dns1:53443/',
                            'type': 'Primary',
                            'state': 'Self',
                        }
                    ],
                }
            )
        )
        state = client.cluster.state()
        self.assertNotIn('includeServerIpAddresses', transport.last_query())
        self.assertEqual('dns1', state.cluster_nodes[0].name)


class TestDnsClient(TestCase):
    def test_resolve(self):
        client, transport = _client(
            ok(
                {
                    'Metadata': {'NameServer': '1.1.1.1', 'Protocol': 'Udp'},
                    'Identifier': 1234,
                    'RCODE': 'NoError',
                    'Question': [
                        {'Name': 'example.com', 'Type': 'A', 'Class': 'IN'}
                    ],
                    'Answer': [
                        {
                            'Name': 'example.com',
                            'Type': 'A',
                            'Class': 'IN',
                            'TTL': 300,
                            'RData': {'IPAddress': '93.184.216.34'},
                        }
                    ],
                }
            )
        )
        response = client.dns_client.resolve(
            '1.1.1.1', 'example.com', protocol='Tls', import_records=True
        )
        query = transport.last_query()
        self.assertEqual('Tls', query['protocol'])
        self.assertEqual('true', query['import'])
        self.assertNotIn('queryProtocol', query)
        self.assertNotIn('importRecords', query)

        self.assertEqual('NoError', response.rcode)
        self.assertEqual('1.1.1.1', response.metadata.name_server)
        self.assertEqual(300, response.answer[0].ttl)
        self.assertEqual(
            '93.184.216.34', str(response.answer[0].r_data['IPAddress'])
        )
        self.assertEqual([], response.authority)


def _apps(*names):
    return ok(
        {
            'apps': [
                {'name': n, 'description': '', 'version': '1.0'}
                for n in names
            ]
        }
    )


class TestAdvancedBlocking(TestCase):
    CONFIG = '{"enableBlocking": false, "blockListUrlUpdateIntervalHours": 24}'

    def test_find_app(self):
        client, _ = _client(_apps('Geo Continent', 'Advanced Blocking Plus'))
        self.assertEqual(
            'Advanced Blocking Plus', client.apps.advanced_blocking_app()
        )

    def test_app_missing(self):
        client, _ = _client(_apps('Geo Continent'))
        self.assertIsNone(client.apps.advanced_blocking_app())

    def test_enabled(self):
        client, transport = _client(ok({'config': self.CONFIG}))
        self.assertIs(
            False, client.apps.advanced_blocking_enabled('Advanced Blocking')
        )
        self.assertEqual('Advanced Blocking', transport.last_query()['name'])

        client, _ = _client(ok({'config': '{}'}))
        self.assertIsNone(
            client.apps.advanced_blocking_enabled('Advanced Blocking')
        )

    def test_toggle(self):
        client, transport = _client(ok({'config': self.CONFIG}))
        self.assertTrue(
            client.apps.toggle_advanced_blocking('Advanced Blocking')
        )
        self.assertEqual('/api/apps/config/set', transport.last_path())
        self.assertEqual('POST', transport.last['method'])
        form = transport.last_form()
        self.assertEqual('Advanced Blocking', form['name'])
        self.assertEqual(
            {'enableBlocking': True, 'blockListUrlUpdateIntervalHours': 24},
            json.loads(form['config']),
        )

    def test_toggle_without_flag_disables(self):
        client, transport = _client(ok({'config': '{}'}))
        self.assertFalse(
            client.apps.toggle_advanced_blocking('Advanced Blocking')
        )
        config = json.loads(transport.last_form()['config'])
        self.assertEqual({'enableBlocking': False}, config)

    def test_set(self):
        client, transport = _client(ok({'config': self.CONFIG}))
        client.apps.set_advanced_blocking('Advanced Blocking', True)
        config = json.loads(transport.last_form()['config'])
        self.assertTrue(config['enableBlocking'])

    def test_config_not_json(self):
        for config in (None, 'not json', '[1, 2]'):
            client, transport = _client(ok({'config': config}))
            with self.assertRaises(TechnitiumDecodeError):
                client.apps.toggle_advanced_blocking('Advanced Blocking')
            self.assertEqual(1, len(transport.requests))
