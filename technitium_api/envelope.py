#
#
#

"""The response envelope every API call is wrapped in::

    {"status": "ok" | "error" | "invalid-token",
     "response": <payload>,
     "errorMessage": "..."}
"""

import json
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    TechnitiumApiError,
    TechnitiumDecodeError,
    TechnitiumInvalidToken,
)


class ResponseStatus(Enum):
    OK = 'ok'
    ERROR = 'error'
    INVALID_TOKEN = 'invalid-token'


class _NoPayload(object):
    '''Success marker for endpoints that return no payload.'''

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NO_PAYLOAD'


NO_PAYLOAD = _NoPayload()


@dataclass(frozen=True)
class ResponseEnvelope:
    status: ResponseStatus
    response: Any = None
    error_message: Optional[str] = None


@lru_cache(maxsize=None)
def _adapter(payload_type):
    return TypeAdapter(payload_type)


def _reject_constant(name):
    raise ValueError(f'{name} is not valid JSON')


def decode_envelope(
    raw: bytes, payload_type=None, payload_at_root: bool = False
) -> ResponseEnvelope:
    """Decode a raw response body into an envelope.

    Args:
        raw: Response body
        payload_type: Type of the ``response`` member (a pydantic model,
            JsonValue, or anything pydantic can validate), None when the
            endpoint returns no payload
        payload_at_root: The endpoint puts its fields next to ``status``
            instead of under ``response`` (login, session, createToken)

    Returns:
        ResponseEnvelope; ``response`` is only set when status is ok

    Raises:
        TechnitiumDecodeError: If raw is not JSON, lacks a valid status, or
            the payload is missing or does not match payload_type
    """
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise TechnitiumDecodeError(f'Response is not valid JSON: {e}') from e
    if not isinstance(data, dict):
        raise TechnitiumDecodeError('Response is not a JSON object')

    try:
        status = ResponseStatus(data['status'])
    except KeyError:
        raise TechnitiumDecodeError('Response has no status') from None
    except (ValueError, TypeError):
        raise TechnitiumDecodeError(
            f'Unknown response status {data["status"]!r}'
        ) from None

    error_message = data.get('errorMessage')
    if error_message is not None and not isinstance(error_message, str):
        raise TechnitiumDecodeError('errorMessage is not a string')

    if status is not ResponseStatus.OK or payload_type is None:
        return ResponseEnvelope(status, None, error_message)

    if payload_at_root:
        payload = data
    else:
        payload = data.get('response')
    if payload is None:
        raise TechnitiumDecodeError('Response has no payload')
    try:
        response = _adapter(payload_type).validate_python(payload)
    except ValidationError as e:
        raise TechnitiumDecodeError(
            f'Unexpected {getattr(payload_type, "__name__", payload_type)} '
            f'payload: {e}'
        ) from e
    return ResponseEnvelope(status, response, error_message)


def unwrap(envelope: ResponseEnvelope, payload_type=None) -> Any:
    """Turn an envelope into its payload or the matching exception."""
    if envelope.status is ResponseStatus.INVALID_TOKEN:
        raise TechnitiumInvalidToken()
    if envelope.status is ResponseStatus.ERROR:
        raise TechnitiumApiError(envelope.error_message or 'Unknown error')
    if payload_type is None:
        return NO_PAYLOAD
    return envelope.response
