#
#
#

"""Request encoding rules.

The server is picky about a handful of fields. Rather than special-casing
them at every call site, each field that needs treatment has one entry in
``ENCODING_RULES`` and the adapter runs every outgoing field through a
``RequestEncoder``:

- simple arrays (ports, addresses, URLs, ACL entries) go out as arrays of
  strings, ``[53, 5380]`` -> ``["53", "5380"]``
- object arrays (TSIG keys, DHCP reservations) go out as native JSON, nested
  numbers untouched
- some client-side names are renamed on the wire
"""

import json
from enum import Enum
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple

from .json_value import JsonValue


class FieldKind(Enum):
    AUTO = 'auto'
    SIMPLE_ARRAY = 'simple-array'
    OBJECT_ARRAY = 'object-array'


class FieldRule(NamedTuple):
    wire_name: Optional[str] = None
    kind: FieldKind = FieldKind.AUTO


_SIMPLE = FieldRule(kind=FieldKind.SIMPLE_ARRAY)
_OBJECTS = FieldRule(kind=FieldKind.OBJECT_ARRAY)

ENCODING_RULES: Dict[str, FieldRule] = {
    # renames
    'proxyBypassList': FieldRule('proxyBypass', FieldKind.SIMPLE_ARRAY),
    'queryProtocol': FieldRule('protocol'),
    'importRecords': FieldRule('import'),
    'currentPassword': FieldRule('pass'),
    # settings
    'dnsServerLocalEndPoints': _SIMPLE,
    'dnsServerIPv4SourceAddresses': _SIMPLE,
    'dnsServerIPv6SourceAddresses': _SIMPLE,
    'webServiceLocalAddresses': _SIMPLE,
    'dnsOverUdpProxyPorts': _SIMPLE,
    'udpPorts': _SIMPLE,
    'forwarders': _SIMPLE,
    'blockListUrls': _SIMPLE,
    'allowListUrls': _SIMPLE,
    'recursionNetworkACL': _SIMPLE,
    'tsigKeys': _OBJECTS,
    # zone options
    'queryAccessNetworkACL': _SIMPLE,
    'zoneTransferNetworkACL': _SIMPLE,
    'zoneTransferTsigKeyNames': _SIMPLE,
    'updateNetworkACL': _SIMPLE,
    'notifyNameServers': _SIMPLE,
    'primaryNameServerAddresses': _SIMPLE,
    # dhcp scopes
    'dnsServers': _SIMPLE,
    'winsServers': _SIMPLE,
    'ntpServers': _SIMPLE,
    'ntpServerDomainNames': _SIMPLE,
    'domainSearchList': _SIMPLE,
    'reservedLeases': _OBJECTS,
    'exclusions': _OBJECTS,
    'staticRoutes': _OBJECTS,
    'vendorInfo': _OBJECTS,
    'genericOptions': _OBJECTS,
}


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _native(value: Any) -> Any:
    if isinstance(value, JsonValue):
        return value.to_python()
    if isinstance(value, tuple):
        return [_native(v) for v in value]
    return value


class RequestEncoder(object):
    '''Applies a rule table to outgoing fields.

    One encoder serves every endpoint; it holds no per-call state.
    '''

    def __init__(self, rules: Optional[Mapping[str, FieldRule]] = None):
        self.rules = dict(ENCODING_RULES if rules is None else rules)

    def rule(self, name: str) -> FieldRule:
        return self.rules.get(name, FieldRule())

    def wire_name(self, name: str) -> str:
        return self.rule(name).wire_name or name

    def kind(self, name: str, value: Any) -> FieldKind:
        kind = self.rule(name).kind
        if kind is not FieldKind.AUTO:
            return kind
        value = _native(value)
        if isinstance(value, (list, tuple)):
            if value and isinstance(value[0], Mapping):
                return FieldKind.OBJECT_ARRAY
            return FieldKind.SIMPLE_ARRAY
        return FieldKind.AUTO

    def encode_body(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Encode fields for a JSON request body.

        Args:
            fields: Client-side field names to values

        Returns:
            Dict keyed by wire names, ready for ``json.dumps``
        """
        ret = {}
        for name, value in fields.items():
            kind = self.kind(name, value)
            value = _native(value)
            if value is None:
                continue
            if kind is FieldKind.SIMPLE_ARRAY and isinstance(value, list):
                value = [_scalar(v) for v in value]
            ret[self.wire_name(name)] = value
        return ret

    def encode_params(self, fields: Mapping[str, Any]) -> List[Tuple[str, str]]:
        """Encode fields for a query string or a form body.

        Args:
            fields: Client-side field names to values

        Returns:
            List of (wire name, string value) pairs
        """
        ret = []
        for name, value in fields.items():
            kind = self.kind(name, value)
            native = _native(value)
            if native is None:
                continue
            if kind is FieldKind.SIMPLE_ARRAY and isinstance(native, list):
                encoded = ','.join(_scalar(v) for v in native)
            elif isinstance(native, (list, dict)):
                # object arrays and mappings travel as a JSON string
                encoded = json.dumps(native, separators=(',', ':'))
            else:
                encoded = _scalar(value)
            ret.append((self.wire_name(name), encoded))
        return ret
