#
#
#

"""The single choke point between typed calls and the HTTP/JSON API.

``ApiAdapter.call`` encodes the fields, attaches the token and the selected
cluster node, sends the request through the transport, decodes the
envelope and either returns the payload or raises one of:

- ``TechnitiumTransportError``: the server could not be reached
- ``TechnitiumDecodeError``: the body is not the expected JSON
- ``TechnitiumApiError``: status=error (``TechnitiumHttpError`` for non-2xx)
- ``TechnitiumInvalidToken``: status=invalid-token

The adapter keeps no state between calls. Token and node are read from the
collaborators at call time and never written back.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from urllib3 import encode_multipart_formdata

from .clients import NodeSelector, TokenProvider, Transport
from .encoding import RequestEncoder
from .envelope import decode_envelope, unwrap
from .exceptions import TechnitiumDecodeError


class BodyFormat(Enum):
    QUERY = 'query'
    FORM = 'form'
    JSON = 'json'


class _SelectedNode(object):
    def __repr__(self):
        return 'SELECTED_NODE'


# default for `node`: use whatever the node selector says
SELECTED_NODE = _SelectedNode()

_ACCEPT = {'Accept': 'application/json'}
_CONTENT_TYPES = {
    BodyFormat.FORM: 'application/x-www-form-urlencoded',
    BodyFormat.JSON: 'application/json',
}


def _is_envelope(raw: bytes) -> bool:
    if not raw.lstrip().startswith(b'{'):
        return False
    try:
        data = json.loads(raw)
    except ValueError:
        return False
    return isinstance(data, dict) and 'status' in data


class ApiAdapter(object):
    def __init__(
        self,
        base_url: str,
        transport: Transport,
        token_provider: TokenProvider,
        node_selector: Optional[NodeSelector] = None,
        encoder: Optional[RequestEncoder] = None,
    ):
        self.log = logging.getLogger('technitium_api.adapter')
        self.base_url = base_url.rstrip('/')
        self.transport = transport
        self.token_provider = token_provider
        self.node_selector = node_selector
        self.encoder = encoder or RequestEncoder()

    def _url(self, endpoint: str, query: List[Tuple[str, str]]) -> str:
        url = f'{self.base_url}/api{endpoint}'
        if query:
            url = f'{url}?{urlencode(query)}'
        return url

    def _auth(self, endpoint: str, authenticated: bool):
        if not authenticated:
            return []
        token = self.token_provider.token()
        if not token:
            raise RuntimeError(
                f'{endpoint} requires a session token, login first'
            )
        return [('token', token)]

    def _fields(self, params: Optional[Mapping[str, Any]], node) -> Dict:
        fields = dict(params or {})
        if node is SELECTED_NODE:
            node = None
            if self.node_selector is not None:
                node = self.node_selector.selected_node()
        if node is not None and 'node' not in fields:
            fields['node'] = node
        return fields

    def _send(self, method, endpoint, query, headers, body, fields) -> bytes:
        self.log.debug(
            '_send: %s %s, token=***, fields=%s',
            method,
            endpoint,
            ','.join(sorted(fields)),
        )
        return self.transport.send(
            method, self._url(endpoint, query), headers, body
        )

    def call(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        payload_type=None,
        method: Optional[str] = None,
        body_format: BodyFormat = BodyFormat.QUERY,
        node=SELECTED_NODE,
        authenticated: bool = True,
        payload_at_root: bool = False,
    ) -> Any:
        """Call an endpoint and return its decoded payload.

        Args:
            endpoint: Path below /api, e.g. '/zones/list'
            params: Client-side field names to values, encoded through the
                rule table
            payload_type: Expected type of the envelope's response member,
                None when the endpoint returns nothing
            method: HTTP method, defaults to GET for query transport and
                POST for form and JSON bodies
            body_format: Where the fields travel
            node: Cluster node; default reads the node selector, None sends
                no node, a string overrides the selection
            authenticated: Attach the session token
            payload_at_root: Read the payload from the envelope root

        Returns:
            The payload, or NO_PAYLOAD when payload_type is None

        Raises:
            RuntimeError: If authenticated and there is no token
            TechnitiumClientException: See module docstring
        """
        query = self._auth(endpoint, authenticated)
        fields = self._fields(params, node)
        if method is None:
            method = 'GET' if body_format is BodyFormat.QUERY else 'POST'

        headers = dict(_ACCEPT)
        body = None
        if body_format is BodyFormat.QUERY:
            query += self.encoder.encode_params(fields)
        elif body_format is BodyFormat.FORM:
            headers['Content-Type'] = _CONTENT_TYPES[body_format]
            body = urlencode(self.encoder.encode_params(fields)).encode()
        else:
            headers['Content-Type'] = _CONTENT_TYPES[body_format]
            body = json.dumps(self.encoder.encode_body(fields)).encode()

        raw = self._send(method, endpoint, query, headers, body, fields)
        envelope = decode_envelope(raw, payload_type, payload_at_root)
        return unwrap(envelope, payload_type)

    def fetch_raw(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        node=SELECTED_NODE,
    ) -> bytes:
        """GET an endpoint that answers with a file instead of an envelope.

        Failures still come back as an envelope with HTTP 200.

        Raises:
            TechnitiumInvalidToken: status=invalid-token
            TechnitiumApiError: status=error
            TechnitiumDecodeError: An ok envelope where a file was expected
        """
        query = self._auth(endpoint, True)
        fields = self._fields(params, node)
        query += self.encoder.encode_params(fields)
        raw = self._send('GET', endpoint, query, {}, None, fields)
        if _is_envelope(raw):
            unwrap(decode_envelope(raw))
            raise TechnitiumDecodeError(
                f'{endpoint} answered with an envelope instead of a file'
            )
        return raw

    def upload(
        self,
        endpoint: str,
        field: str,
        filename: str,
        content: bytes,
        content_type: str = 'application/octet-stream',
        params: Optional[Mapping[str, Any]] = None,
        payload_type=None,
        node=SELECTED_NODE,
    ) -> Any:
        '''POST a file as multipart/form-data, fields in the query string.'''
        query = self._auth(endpoint, True)
        fields = self._fields(params, node)
        query += self.encoder.encode_params(fields)
        body, multipart_type = encode_multipart_formdata(
            {field: (filename, content, content_type)}
        )
        headers = dict(_ACCEPT)
        headers['Content-Type'] = multipart_type
        raw = self._send('POST', endpoint, query, headers, body, fields)
        return unwrap(decode_envelope(raw, payload_type), payload_type)
