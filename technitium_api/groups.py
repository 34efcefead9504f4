#
#
#

"""Endpoint groups.

Each group is a thin set of typed methods over ``ApiAdapter``. Methods that
return nothing return ``NO_PAYLOAD`` on success; every failure is one of the
adapter's exceptions. ``node`` defaults to the selected cluster node.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from . import endpoints as ep
from .adapter import SELECTED_NODE, ApiAdapter, BodyFormat
from .exceptions import TechnitiumDecodeError
from .models import (
    AppConfigResponse,
    AppsResponse,
    AppStoreResponse,
    BlockedCheckResponse,
    CacheResponse,
    ClusterStateResponse,
    DhcpLeasesResponse,
    DhcpScope,
    DhcpScopesResponse,
    DnsResolveResponse,
    DnssecProperties,
    DnsSettings,
    DomainsResponse,
    GroupDetails,
    GroupsResponse,
    LoginResponse,
    LogFilesResponse,
    LogsResponse,
    ProfileResponse,
    RecordsResponse,
    SessionInfo,
    SessionsResponse,
    StatsResponse,
    StatsType,
    TokenResponse,
    TopStatsResponse,
    TopStatsType,
    TwoFactorInitResponse,
    UpdateCheckResponse,
    User,
    UsersResponse,
    ZoneOptions,
    ZonePermissionsResponse,
    ZonesResponse,
    ZoneType,
)
from .permissions import Permission, format_permissions, parse_permissions


def _value(v):
    # enums go out as their wire value
    return getattr(v, 'value', v)


def _merge(extra: Optional[Mapping[str, Any]], **fields) -> Dict[str, Any]:
    ret = dict(extra or {})
    ret.update((k, _value(v)) for k, v in fields.items())
    return ret


class EndpointGroup(object):
    def __init__(self, adapter: ApiAdapter):
        self._adapter = adapter

    def _call(self, endpoint, params=None, payload_type=None, **kwargs):
        return self._adapter.call(endpoint, params, payload_type, **kwargs)


class UserEndpoints(EndpointGroup):
    def login(self, username: str, password: str) -> LoginResponse:
        """Log in and return the new session.

        The token is returned, not stored: keeping it is the job of
        whatever TokenProvider the caller uses.
        """
        return self._call(
            ep.LOGIN,
            {'user': username, 'pass': password, 'includeInfo': True},
            LoginResponse,
            authenticated=False,
            node=None,
            payload_at_root=True,
        )

    def logout(self):
        return self._call(ep.LOGOUT, node=None)

    def session(self) -> SessionInfo:
        return self._call(
            ep.SESSION_GET, None, SessionInfo, node=None, payload_at_root=True
        )

    def profile(self) -> ProfileResponse:
        return self._call(ep.PROFILE_GET, None, ProfileResponse, node=None)

    def set_profile(
        self,
        display_name: Optional[str] = None,
        session_timeout_seconds: Optional[int] = None,
    ):
        params = {
            'displayName': display_name,
            'sessionTimeoutSeconds': session_timeout_seconds,
        }
        return self._call(ep.PROFILE_SET, params, node=None)

    def change_password(
        self, current_password: str, new_password: str, totp=None
    ):
        params = {
            'currentPassword': current_password,
            'newPass': new_password,
            'totp': totp,
        }
        return self._call(ep.CHANGE_PASSWORD, params, node=None)

    def create_token(
        self, username: str, password: str, token_name: str, totp=None
    ) -> TokenResponse:
        params = {
            'user': username,
            'pass': password,
            'tokenName': token_name,
            'totp': totp,
        }
        return self._call(
            ep.CREATE_TOKEN,
            params,
            TokenResponse,
            node=None,
            payload_at_root=True,
        )

    def two_factor_init(self) -> TwoFactorInitResponse:
        return self._call(
            ep.TWO_FACTOR_INIT, None, TwoFactorInitResponse, node=None
        )

    def two_factor_enable(self, totp: str):
        return self._call(ep.TWO_FACTOR_ENABLE, {'totp': totp}, node=None)

    def two_factor_disable(self):
        return self._call(ep.TWO_FACTOR_DISABLE, node=None)


class DashboardEndpoints(EndpointGroup):
    def stats(
        self, type=StatsType.LAST_HOUR, utc: bool = False, node=SELECTED_NODE
    ) -> StatsResponse:
        params = _merge(None, type=type, utc=utc)
        return self._call(ep.DASHBOARD_STATS, params, StatsResponse, node=node)

    def top_stats(
        self,
        type: TopStatsType,
        stats_type=StatsType.LAST_HOUR,
        limit: int = 10,
        node=SELECTED_NODE,
    ) -> TopStatsResponse:
        params = _merge(None, type=type, statsType=stats_type, limit=limit)
        return self._call(
            ep.DASHBOARD_TOP_STATS, params, TopStatsResponse, node=node
        )


@dataclass(frozen=True)
class ZonePermissions:
    users: List[Permission]
    groups: List[Permission]


class ZoneEndpoints(EndpointGroup):
    def list(self, node=SELECTED_NODE) -> ZonesResponse:
        return self._call(ep.ZONES_LIST, None, ZonesResponse, node=node)

    def create(
        self,
        zone: str,
        type=ZoneType.PRIMARY,
        options: Optional[Mapping[str, Any]] = None,
        node=SELECTED_NODE,
    ):
        params = _merge(options, zone=zone, type=type)
        return self._call(ep.ZONES_CREATE, params, node=node)

    def delete(self, zone: str, node=SELECTED_NODE):
        return self._call(ep.ZONES_DELETE, {'zone': zone}, node=node)

    def enable(self, zone: str, node=SELECTED_NODE):
        return self._call(ep.ZONES_ENABLE, {'zone': zone}, node=node)

    def disable(self, zone: str, node=SELECTED_NODE):
        return self._call(ep.ZONES_DISABLE, {'zone': zone}, node=node)

    def clone(self, zone: str, source_zone: str, node=SELECTED_NODE):
        params = {'zone': zone, 'sourceZone': source_zone}
        return self._call(ep.ZONES_CLONE, params, node=node)

    def convert(self, zone: str, type: ZoneType, node=SELECTED_NODE):
        params = _merge(None, zone=zone, type=type)
        return self._call(ep.ZONES_CONVERT, params, node=node)

    def options(self, zone: str, node=SELECTED_NODE) -> ZoneOptions:
        return self._call(
            ep.ZONES_OPTIONS_GET, {'zone': zone}, ZoneOptions, node=node
        )

    def set_options(
        self, zone: str, options: Mapping[str, Any], node=SELECTED_NODE
    ):
        params = _merge(options, zone=zone)
        return self._call(ep.ZONES_OPTIONS_SET, params, node=node)

    def export(self, zone: str, node=SELECTED_NODE) -> str:
        '''Zone file text.'''
        raw = self._adapter.fetch_raw(ep.ZONES_EXPORT, {'zone': zone}, node)
        return raw.decode('utf-8')

    def import_(
        self,
        zone: str,
        zone_file: str,
        overwrite: bool = False,
        node=SELECTED_NODE,
    ):
        params = {'zone': zone, 'overwrite': overwrite, 'zoneFile': zone_file}
        # zone files are too large for a query string
        return self._call(
            ep.ZONES_IMPORT, params, body_format=BodyFormat.FORM, node=node
        )

    def resync(self, zone: str, node=SELECTED_NODE):
        return self._call(ep.ZONES_RESYNC, {'zone': zone}, node=node)

    def permissions(self, zone: str, node=SELECTED_NODE) -> ZonePermissions:
        response = self._call(
            ep.ZONES_PERMISSIONS_GET,
            {'zone': zone},
            ZonePermissionsResponse,
            node=node,
        )
        return ZonePermissions(
            users=parse_permissions(response.user_permissions),
            groups=parse_permissions(response.group_permissions),
        )

    def set_permissions(
        self,
        zone: str,
        users: List[Permission],
        groups: List[Permission],
        node=SELECTED_NODE,
    ):
        params = {
            'zone': zone,
            'userPermissions': format_permissions(users),
            'groupPermissions': format_permissions(groups),
        }
        return self._call(ep.ZONES_PERMISSIONS_SET, params, node=node)


class DnssecEndpoints(EndpointGroup):
    def sign(
        self,
        zone: str,
        algorithm: str = 'ECDSA_P256_SHA256',
        dns_key_ttl: int = 86400,
        zsk_rollover_days: int = 30,
        nx_proof: str = 'NSEC3',
        iterations: int = 0,
        salt_length: int = 0,
        node=SELECTED_NODE,
    ):
        params = {
            'zone': zone,
            'algorithm': algorithm,
            'dnsKeyTtl': dns_key_ttl,
            'zskRolloverDays': zsk_rollover_days,
            'nxProof': nx_proof,
            'iterations': iterations,
            'saltLength': salt_length,
        }
        return self._call(ep.DNSSEC_SIGN, params, node=node)

    def unsign(self, zone: str, node=SELECTED_NODE):
        return self._call(ep.DNSSEC_UNSIGN, {'zone': zone}, node=node)

    def properties(self, zone: str, node=SELECTED_NODE) -> DnssecProperties:
        return self._call(
            ep.DNSSEC_PROPERTIES_GET,
            {'zone': zone},
            DnssecProperties,
            node=node,
        )


class RecordEndpoints(EndpointGroup):
    '''Record data (ipAddress, exchange, preference, ...) is passed as
    ``record_data`` and goes through the same encoding rules as any field.'''

    def get(
        self,
        zone: str,
        domain: Optional[str] = None,
        list_zone: bool = True,
        node=SELECTED_NODE,
    ) -> RecordsResponse:
        params = {
            'zone': zone,
            'domain': domain or zone,
            'listZone': True if list_zone else None,
        }
        return self._call(ep.RECORDS_GET, params, RecordsResponse, node=node)

    def add(
        self,
        zone: str,
        domain: str,
        type,
        record_data: Mapping[str, Any],
        ttl: Optional[int] = None,
        node=SELECTED_NODE,
    ):
        params = _merge(record_data, zone=zone, domain=domain, type=type)
        params['ttl'] = ttl
        return self._call(ep.RECORDS_ADD, params, node=node)

    def update(
        self,
        zone: str,
        domain: str,
        type,
        record_data: Mapping[str, Any],
        new_domain: Optional[str] = None,
        ttl: Optional[int] = None,
        disable: bool = False,
        node=SELECTED_NODE,
    ):
        params = _merge(record_data, zone=zone, domain=domain, type=type)
        params.update(
            {'newDomain': new_domain or domain, 'ttl': ttl, 'disable': disable}
        )
        return self._call(ep.RECORDS_UPDATE, params, node=node)

    def delete(
        self,
        zone: str,
        domain: str,
        type,
        record_data: Mapping[str, Any],
        node=SELECTED_NODE,
    ):
        params = _merge(record_data, zone=zone, domain=domain, type=type)
        return self._call(ep.RECORDS_DELETE, params, node=node)


class DomainListEndpoints(EndpointGroup):
    '''The blocked and allowed lists share one shape.'''

    def __init__(self, adapter, list_, add, delete):
        super().__init__(adapter)
        self._endpoints = (list_, add, delete)

    def list(self, domain: Optional[str] = None, node=SELECTED_NODE):
        return self._call(
            self._endpoints[0], {'domain': domain}, DomainsResponse, node=node
        )

    def add(self, domain: str, node=SELECTED_NODE):
        return self._call(self._endpoints[1], {'domain': domain}, node=node)

    def delete(self, domain: str, node=SELECTED_NODE):
        return self._call(self._endpoints[2], {'domain': domain}, node=node)


class BlockedEndpoints(DomainListEndpoints):
    def __init__(self, adapter):
        super().__init__(
            adapter, ep.BLOCKED_LIST, ep.BLOCKED_ADD, ep.BLOCKED_DELETE
        )

    def is_blocked(
        self, domain: str, node=SELECTED_NODE
    ) -> BlockedCheckResponse:
        return self._call(
            ep.BLOCKED_IS_BLOCKED,
            {'domain': domain},
            BlockedCheckResponse,
            node=node,
        )


class AllowedEndpoints(DomainListEndpoints):
    def __init__(self, adapter):
        super().__init__(
            adapter, ep.ALLOWED_LIST, ep.ALLOWED_ADD, ep.ALLOWED_DELETE
        )


class CacheEndpoints(EndpointGroup):
    def list(self, domain: str = '', node=SELECTED_NODE) -> CacheResponse:
        return self._call(
            ep.CACHE_LIST, {'domain': domain}, CacheResponse, node=node
        )

    def delete(self, domain: str, node=SELECTED_NODE):
        return self._call(ep.CACHE_DELETE, {'domain': domain}, node=node)

    def flush(self, node=SELECTED_NODE):
        return self._call(ep.CACHE_FLUSH, node=node)

    def prefetch(
        self,
        domain: str,
        type='A',
        dnssec: bool = False,
        node=SELECTED_NODE,
    ):
        params = _merge(None, domain=domain, type=type, dnssec=dnssec)
        return self._call(ep.CACHE_PREFETCH, params, node=node)


class LogEndpoints(EndpointGroup):
    def query(
        self,
        app_name: str,
        class_path: str,
        page_number: int = 1,
        entries_per_page: int = 100,
        descending_order: bool = True,
        filters: Optional[Mapping[str, Any]] = None,
        node=SELECTED_NODE,
    ) -> LogsResponse:
        params = _merge(
            filters,
            name=app_name,
            classPath=class_path,
            pageNumber=page_number,
            entriesPerPage=entries_per_page,
            descendingOrder=descending_order,
        )
        return self._call(ep.LOGS_QUERY, params, LogsResponse, node=node)

    def files(self, node=SELECTED_NODE) -> LogFilesResponse:
        return self._call(ep.LOGS_LIST, None, LogFilesResponse, node=node)

    def delete(self, file_name: str, node=SELECTED_NODE):
        return self._call(ep.LOGS_DELETE, {'fileName': file_name}, node=node)

    def delete_all(self, node=SELECTED_NODE):
        return self._call(ep.LOGS_DELETE_ALL, node=node)


class DhcpEndpoints(EndpointGroup):
    def scopes(self, node=SELECTED_NODE) -> DhcpScopesResponse:
        return self._call(
            ep.DHCP_SCOPES_LIST, None, DhcpScopesResponse, node=node
        )

    def scope(self, name: str, node=SELECTED_NODE) -> DhcpScope:
        return self._call(
            ep.DHCP_SCOPES_GET, {'name': name}, DhcpScope, node=node
        )

    def set_scope(self, scope: Mapping[str, Any], node=SELECTED_NODE):
        # reservations and exclusions make these too large for a query
        return self._call(
            ep.DHCP_SCOPES_SET,
            scope,
            body_format=BodyFormat.FORM,
            node=node,
        )

    def delete_scope(self, name: str, node=SELECTED_NODE):
        return self._call(ep.DHCP_SCOPES_DELETE, {'name': name}, node=node)

    def enable_scope(self, name: str, node=SELECTED_NODE):
        return self._call(ep.DHCP_SCOPES_ENABLE, {'name': name}, node=node)

    def disable_scope(self, name: str, node=SELECTED_NODE):
        return self._call(ep.DHCP_SCOPES_DISABLE, {'name': name}, node=node)

    def leases(self, scope: str, node=SELECTED_NODE) -> DhcpLeasesResponse:
        return self._call(
            ep.DHCP_LEASES_LIST, {'name': scope}, DhcpLeasesResponse, node=node
        )

    def remove_lease(
        self, scope: str, hardware_address: str, node=SELECTED_NODE
    ):
        params = {'name': scope, 'hardwareAddress': hardware_address}
        return self._call(ep.DHCP_LEASES_REMOVE, params, node=node)


ADVANCED_BLOCKING_APPS = ('Advanced Blocking', 'Advanced Blocking Plus')


class AppEndpoints(EndpointGroup):
    def list(self, node=SELECTED_NODE) -> AppsResponse:
        return self._call(ep.APPS_LIST, None, AppsResponse, node=node)

    def store(self) -> AppStoreResponse:
        return self._call(ep.APPS_LIST_STORE, None, AppStoreResponse)

    def install(self, name: str, url: str, node=SELECTED_NODE):
        params = {'name': name, 'url': url}
        return self._call(ep.APPS_DOWNLOAD, params, node=node)

    def update(self, name: str, url: Optional[str] = None, node=SELECTED_NODE):
        params = {'name': name, 'url': url}
        return self._call(ep.APPS_UPDATE, params, node=node)

    def uninstall(self, name: str, node=SELECTED_NODE):
        return self._call(ep.APPS_UNINSTALL, {'name': name}, node=node)

    def config(self, name: str, node=SELECTED_NODE) -> Optional[str]:
        response = self._call(
            ep.APPS_CONFIG_GET, {'name': name}, AppConfigResponse, node=node
        )
        return response.config

    def set_config(self, name: str, config: str, node=SELECTED_NODE):
        return self._call(
            ep.APPS_CONFIG_SET,
            {'name': name, 'config': config},
            body_format=BodyFormat.FORM,
            node=node,
        )

    def advanced_blocking_app(self, node=SELECTED_NODE) -> Optional[str]:
        '''Name of the installed Advanced Blocking app, if any.'''
        for app in self.list(node=node).apps:
            if app.name in ADVANCED_BLOCKING_APPS:
                return app.name
        return None

    def _json_config(self, name, node) -> Dict[str, Any]:
        config = self.config(name, node=node)
        try:
            ret = json.loads(config or '')
        except ValueError as e:
            raise TechnitiumDecodeError(f'{name} config is not JSON') from e
        if not isinstance(ret, dict):
            raise TechnitiumDecodeError(f'{name} config is not a JSON object')
        return ret

    def _store_json_config(self, name, config, node):
        text = json.dumps(config, indent=2, sort_keys=True)
        return self.set_config(name, text, node=node)

    def advanced_blocking_enabled(
        self, name: str, node=SELECTED_NODE
    ) -> Optional[bool]:
        """Read ``enableBlocking`` from a blocking app's config.

        Returns:
            The flag, or None when the config does not carry a boolean one
        """
        enabled = self._json_config(name, node).get('enableBlocking')
        return enabled if isinstance(enabled, bool) else None

    def set_advanced_blocking(
        self, name: str, enabled: bool, node=SELECTED_NODE
    ):
        config = self._json_config(name, node)
        config['enableBlocking'] = enabled
        return self._store_json_config(name, config, node)

    def toggle_advanced_blocking(self, name: str, node=SELECTED_NODE) -> bool:
        '''Flip ``enableBlocking`` and return the new state.'''
        config = self._json_config(name, node)
        current = config.get('enableBlocking')
        # the app blocks unless told otherwise
        enabled = not (current if isinstance(current, bool) else True)
        config['enableBlocking'] = enabled
        self._store_json_config(name, config, node)
        return enabled


BACKUP_SECTIONS = (
    'blockLists',
    'logs',
    'scopes',
    'apps',
    'stats',
    'zones',
    'allowedZones',
    'blockedZones',
    'dnsSettings',
    'authConfig',
    'logSettings',
)


class SettingsEndpoints(EndpointGroup):
    def get(self, node=SELECTED_NODE) -> DnsSettings:
        return self._call(ep.SETTINGS_GET, None, DnsSettings, node=node)

    def set(self, settings: Mapping[str, Any], node=SELECTED_NODE):
        """Change server settings.

        Args:
            settings: Wire-named settings to change; only the keys present
                are changed. Array fields are encoded per the rule table.
        """
        return self._call(
            ep.SETTINGS_SET, settings, body_format=BodyFormat.JSON, node=node
        )

    def force_update_block_lists(self, node=SELECTED_NODE):
        return self._call(ep.SETTINGS_FORCE_UPDATE_BLOCK_LISTS, node=node)

    def temporary_disable_blocking(self, minutes: int, node=SELECTED_NODE):
        return self._call(
            ep.SETTINGS_TEMPORARY_DISABLE_BLOCKING,
            {'minutes': minutes},
            node=node,
        )

    def check_for_update(self) -> UpdateCheckResponse:
        return self._call(
            ep.SETTINGS_CHECK_FOR_UPDATE, None, UpdateCheckResponse
        )

    def backup(self, exclude=(), node=SELECTED_NODE) -> bytes:
        '''Backup zip. ``exclude`` names sections from BACKUP_SECTIONS.'''
        unknown = set(exclude) - set(BACKUP_SECTIONS)
        if unknown:
            raise ValueError(f'Unknown backup sections: {sorted(unknown)}')
        params = {s: s not in exclude for s in BACKUP_SECTIONS}
        return self._adapter.fetch_raw(ep.SETTINGS_BACKUP, params, node)

    def restore(
        self,
        backup: bytes,
        delete_existing_files: bool = False,
        node=SELECTED_NODE,
    ):
        return self._adapter.upload(
            ep.SETTINGS_RESTORE,
            'file',
            'backup.zip',
            backup,
            'application/zip',
            params={'deleteExistingFiles': delete_existing_files},
            node=node,
        )


class AdminEndpoints(EndpointGroup):
    '''Users, groups and sessions. Admin state is cluster-wide.'''

    def users(self) -> UsersResponse:
        return self._call(ep.USERS_LIST, None, UsersResponse, node=None)

    def user(self, username: str) -> User:
        return self._call(ep.USERS_GET, {'user': username}, User, node=None)

    def create_user(self, user: Mapping[str, Any]):
        return self._call(ep.USERS_CREATE, user, node=None)

    def set_user(self, user: Mapping[str, Any]):
        return self._call(ep.USERS_SET, user, node=None)

    def delete_user(self, username: str):
        return self._call(ep.USERS_DELETE, {'user': username}, node=None)

    def enable_user(self, username: str):
        return self._call(ep.USERS_ENABLE, {'user': username}, node=None)

    def disable_user(self, username: str):
        return self._call(ep.USERS_DISABLE, {'user': username}, node=None)

    def set_user_password(self, username: str, new_password: str):
        params = {'user': username, 'newPassword': new_password}
        return self._call(ep.USERS_SET_PASSWORD, params, node=None)

    def groups(self) -> GroupsResponse:
        return self._call(ep.GROUPS_LIST, None, GroupsResponse, node=None)

    def group(self, name: str) -> GroupDetails:
        return self._call(
            ep.GROUPS_GET, {'group': name}, GroupDetails, node=None
        )

    def create_group(self, name: str, description: str = ''):
        params = {'group': name, 'description': description}
        return self._call(ep.GROUPS_CREATE, params, node=None)

    def set_group(self, group: Mapping[str, Any]):
        return self._call(ep.GROUPS_SET, group, node=None)

    def delete_group(self, name: str):
        return self._call(ep.GROUPS_DELETE, {'group': name}, node=None)

    def sessions(self) -> SessionsResponse:
        return self._call(ep.SESSIONS_LIST, None, SessionsResponse, node=None)

    def delete_session(self, partial_token: str):
        params = {'partialToken': partial_token}
        return self._call(ep.SESSIONS_DELETE, params, node=None)


class ClusterEndpoints(EndpointGroup):
    def state(
        self, include_server_ip_addresses: bool = False, node=SELECTED_NODE
    ) -> ClusterStateResponse:
        params = {
            'includeServerIpAddresses': include_server_ip_addresses or None
        }
        return self._call(
            ep.CLUSTER_STATE, params, ClusterStateResponse, node=node
        )

    def init(self, cluster_domain: str, primary_node_ip_addresses: List[str]):
        params = {
            'clusterDomain': cluster_domain,
            'primaryNodeIpAddresses': primary_node_ip_addresses,
        }
        return self._call(ep.CLUSTER_INIT, params, node=None)

    def join(self, params: Mapping[str, Any]):
        return self._call(
            ep.CLUSTER_JOIN, params, body_format=BodyFormat.FORM, node=None
        )

    def delete(self, force: bool = False, node=SELECTED_NODE):
        params = {'forceDelete': force or None}
        return self._call(ep.CLUSTER_DELETE, params, node=node)

    def remove_secondary(
        self, secondary_node_id, force: bool = False, node=SELECTED_NODE
    ):
        if force:
            endpoint = ep.CLUSTER_DELETE_SECONDARY
        else:
            endpoint = ep.CLUSTER_REMOVE_SECONDARY
        return self._call(
            endpoint, {'secondaryNodeId': secondary_node_id}, node=node
        )

    def leave(self, force: bool = False, node=SELECTED_NODE):
        params = {'forceLeave': force or None}
        return self._call(ep.CLUSTER_LEAVE, params, node=node)

    def promote(self, force_delete_primary: bool = False, node=SELECTED_NODE):
        params = {'forceDeletePrimary': force_delete_primary or None}
        return self._call(ep.CLUSTER_PROMOTE, params, node=node)

    def resync(self, node=SELECTED_NODE):
        return self._call(ep.CLUSTER_RESYNC, node=node)


class DnsClientEndpoints(EndpointGroup):
    def resolve(
        self,
        server: str,
        domain: str,
        type='A',
        protocol: str = 'Udp',
        dnssec: bool = False,
        edns_client_subnet: Optional[str] = None,
        import_records: bool = False,
        node=SELECTED_NODE,
    ) -> DnsResolveResponse:
        params = _merge(
            None,
            server=server,
            domain=domain,
            type=type,
            queryProtocol=protocol,
            dnssec=dnssec,
            eDnsClientSubnet=edns_client_subnet,
            importRecords=import_records or None,
        )
        return self._call(
            ep.DNS_CLIENT_RESOLVE, params, DnsResolveResponse, node=node
        )

    def flush_cache(self):
        return self._call(ep.DNS_CLIENT_FLUSH_CACHE)
