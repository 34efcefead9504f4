#
#
#

"""Protocol definitions for the adapter's collaborators.

This module defines structural typing (PEP 544) for the pieces the adapter
reads from but does not own: where the session token comes from, which
cluster node is selected, and how bytes get to the server. Anything with
the right methods will do; no inheritance required.
"""

import threading
from typing import Mapping, Optional, Protocol


class TokenProvider(Protocol):
    """Source of the current session token."""

    def token(self) -> Optional[str]:
        """Return the current session token.

        Returns:
            The token, or None when unauthenticated
        """
        ...


class NodeSelector(Protocol):
    """Source of the currently selected cluster node."""

    def selected_node(self) -> Optional[str]:
        """Return the selected cluster node.

        Returns:
            Node name or address, or None when no node is selected
        """
        ...


class Transport(Protocol):
    """Moves one request to the server and its response body back."""

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> bytes:
        """Send a single HTTP request.

        Args:
            method: HTTP method, GET or POST
            url: Absolute URL including the query string
            headers: Request headers
            body: Request body for POST, already encoded

        Returns:
            The raw response body

        Raises:
            TechnitiumTransportError: If the server could not be reached
            TechnitiumHttpError: If the server answered with a non-2xx status
        """
        ...


class StaticToken(object):
    '''In-memory TokenProvider.'''

    def __init__(self, token: Optional[str] = None):
        self._lock = threading.Lock()
        self._token = token

    def token(self) -> Optional[str]:
        with self._lock:
            return self._token

    def set(self, token: Optional[str]) -> None:
        with self._lock:
            self._token = token

    def clear(self) -> None:
        self.set(None)


class StaticNode(object):
    '''In-memory NodeSelector.'''

    def __init__(self, node: Optional[str] = None):
        self._lock = threading.Lock()
        self._node = node

    def selected_node(self) -> Optional[str]:
        with self._lock:
            return self._node

    def select(self, node: Optional[str]) -> None:
        with self._lock:
            self._node = node
