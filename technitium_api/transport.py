#
#
#

import logging
import re
from typing import Mapping, Optional

from requests import ConnectionError as RequestsConnectionError
from requests import RequestException, Session, Timeout

from .exceptions import (
    TechnitiumHttpError,
    TechnitiumTimeout,
    TechnitiumTransportError,
)

DEFAULT_TIMEOUT = 30

_TOKEN_RE = re.compile(r'(token=)[^&\s]+')


def redact(text: str) -> str:
    '''Mask session tokens embedded in URLs.'''
    return _TOKEN_RE.sub(r'\1***', text)


class RequestsTransport(object):
    '''Transport backed by a ``requests.Session``.

    The session's connection pool is shared by all calls; it is safe to use
    one transport from several threads.
    '''

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True,
        user_agent: Optional[str] = None,
        session: Optional[Session] = None,
    ):
        self.log = logging.getLogger('technitium_api.transport')
        self.timeout = timeout
        self.verify = verify
        if session is None:
            session = Session()
        if user_agent is None:
            from . import __version__

            user_agent = f'technitium-api/{__version__}'
        session.headers.update({'User-Agent': user_agent})
        self._session = session

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> bytes:
        try:
            # the context manager hands the connection back to the pool on
            # every way out, including KeyboardInterrupt mid-read
            with self._session.request(
                method,
                url,
                headers=dict(headers),
                data=body,
                timeout=self.timeout,
                verify=self.verify,
            ) as response:
                if not 200 <= response.status_code < 300:
                    self.log.debug(
                        'send: %s -> HTTP %d', method, response.status_code
                    )
                    raise TechnitiumHttpError(response.status_code)
                return response.content
        except Timeout as e:
            raise TechnitiumTimeout(
                f'Request timed out after {self.timeout}s'
            ) from e
        except RequestsConnectionError as e:
            raise TechnitiumTransportError(
                f'Connection failed: {redact(str(e))}'
            ) from e
        except RequestException as e:
            raise TechnitiumTransportError(redact(str(e))) from e

    def close(self) -> None:
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
