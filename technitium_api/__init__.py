#
#
#

import logging
from typing import Optional

from .adapter import SELECTED_NODE, ApiAdapter, BodyFormat
from .clients import (
    NodeSelector,
    StaticNode,
    StaticToken,
    TokenProvider,
    Transport,
)
from .config import ClientConfig
from .encoding import ENCODING_RULES, FieldKind, FieldRule, RequestEncoder
from .envelope import NO_PAYLOAD, ResponseEnvelope, ResponseStatus
from .exceptions import (
    TechnitiumApiError,
    TechnitiumClientException,
    TechnitiumDecodeError,
    TechnitiumHttpError,
    TechnitiumInvalidToken,
    TechnitiumTimeout,
    TechnitiumTransportError,
)
from .groups import (
    AdminEndpoints,
    AllowedEndpoints,
    AppEndpoints,
    BlockedEndpoints,
    CacheEndpoints,
    ClusterEndpoints,
    DashboardEndpoints,
    DhcpEndpoints,
    DnsClientEndpoints,
    DnssecEndpoints,
    LogEndpoints,
    RecordEndpoints,
    SettingsEndpoints,
    UserEndpoints,
    ZoneEndpoints,
    ZonePermissions,
)
from .json_value import JsonValue
from .permissions import Permission, format_permissions, parse_permissions

__version__ = '1.0.0'

__all__ = [
    'ApiAdapter',
    'BodyFormat',
    'ClientConfig',
    'ENCODING_RULES',
    'FieldKind',
    'FieldRule',
    'JsonValue',
    'NO_PAYLOAD',
    'NodeSelector',
    'Permission',
    'RequestEncoder',
    'ResponseEnvelope',
    'ResponseStatus',
    'SELECTED_NODE',
    'StaticNode',
    'StaticToken',
    'TechnitiumApiError',
    'TechnitiumClient',
    'TechnitiumClientException',
    'TechnitiumDecodeError',
    'TechnitiumHttpError',
    'TechnitiumInvalidToken',
    'TechnitiumTimeout',
    'TechnitiumTransportError',
    'TokenProvider',
    'Transport',
    'ZonePermissions',
    'format_permissions',
    'parse_permissions',
]


class TechnitiumClient(object):
    '''Typed access to a Technitium DNS Server's HTTP API.

    Endpoints are grouped by area: ``client.zones.list()``,
    ``client.records.add(...)``, ``client.settings.set({...})``.
    '''

    def __init__(
        self,
        url,
        token=None,
        node=None,
        timeout=30,
        verify_tls=True,
        id='default',
        transport: Optional[Transport] = None,
        token_provider: Optional[TokenProvider] = None,
        node_selector: Optional[NodeSelector] = None,
    ):
        self.log = logging.getLogger(f'TechnitiumClient[{id}]')
        self.log.debug(
            '__init__: id=%s, url=%s, token=%s, node=%s',
            id,
            url,
            '***' if token else None,
            node,
        )
        if token_provider is not None and token is not None:
            raise ValueError('Pass either token or token_provider, not both')
        if node_selector is not None and node is not None:
            raise ValueError('Pass either node or node_selector, not both')

        self.url = url.rstrip('/')
        self._token = token_provider or StaticToken(token)
        self._node = node_selector or StaticNode(node)
        self._transport = self._create_transport(
            transport, timeout, verify_tls
        )
        self._adapter = ApiAdapter(
            self.url, self._transport, self._token, self._node
        )

        self.user = UserEndpoints(self._adapter)
        self.dashboard = DashboardEndpoints(self._adapter)
        self.zones = ZoneEndpoints(self._adapter)
        self.dnssec = DnssecEndpoints(self._adapter)
        self.records = RecordEndpoints(self._adapter)
        self.blocked = BlockedEndpoints(self._adapter)
        self.allowed = AllowedEndpoints(self._adapter)
        self.cache = CacheEndpoints(self._adapter)
        self.logs = LogEndpoints(self._adapter)
        self.dhcp = DhcpEndpoints(self._adapter)
        self.apps = AppEndpoints(self._adapter)
        self.settings = SettingsEndpoints(self._adapter)
        self.admin = AdminEndpoints(self._adapter)
        self.cluster = ClusterEndpoints(self._adapter)
        self.dns_client = DnsClientEndpoints(self._adapter)

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs):
        return cls(
            config.url,
            token=config.token,
            node=config.node,
            timeout=config.timeout,
            verify_tls=config.verify_tls,
            **kwargs,
        )

    def _create_transport(self, transport, timeout, verify_tls):
        """Factory method for the transport.

        Args:
            transport: Caller supplied transport, used as is when given
            timeout: Request timeout in seconds
            verify_tls: Verify the server certificate

        Returns:
            Transport instance
        """
        if transport is not None:
            return transport
        from .transport import RequestsTransport

        return RequestsTransport(timeout=timeout, verify=verify_tls)

    @property
    def adapter(self) -> ApiAdapter:
        return self._adapter

    def login(self, username, password):
        """Log in and keep the session token for subsequent calls.

        Only possible when the client owns its token, i.e. no
        token_provider was passed in.
        """
        if not isinstance(self._token, StaticToken):
            raise TypeError(
                'login() needs the built-in token store; with a custom '
                'token_provider call user.login() and store the token there'
            )
        response = self.user.login(username, password)
        self._token.set(response.token)
        self.log.debug('login: username=%s', username)
        return response

    def logout(self):
        try:
            return self.user.logout()
        finally:
            if isinstance(self._token, StaticToken):
                self._token.clear()

    def select_node(self, node):
        if not isinstance(self._node, StaticNode):
            raise TypeError('select_node() needs the built-in node selector')
        self._node.select(node)

    def close(self):
        close = getattr(self._transport, 'close', None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
