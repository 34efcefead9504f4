#
#
#

"""Client configuration."""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .transport import DEFAULT_TIMEOUT

ENV_PREFIX = 'TECHNITIUM_'


class ClientConfig(BaseModel):
    """Connection settings for one Technitium DNS Server."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description='Server base URL, e.g. http://dns:5380')
    token: Optional[str] = Field(
        default=None, description='API or session token'
    )
    node: Optional[str] = Field(
        default=None, description='Cluster node to target'
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description='Request timeout in seconds'
    )
    verify_tls: bool = Field(
        default=True, description='Verify the server certificate'
    )

    @field_validator('url')
    @classmethod
    def _strip_url(cls, v: str) -> str:
        v = v.strip().rstrip('/')
        if not v.startswith(('http://', 'https://')):
            raise ValueError('url must start with http:// or https://')
        return v

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> 'ClientConfig':
        """Build a config from TECHNITIUM_* environment variables.

        TECHNITIUM_URL is required; TECHNITIUM_TOKEN, TECHNITIUM_NODE,
        TECHNITIUM_TIMEOUT and TECHNITIUM_VERIFY_TLS are optional.
        """
        environ = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}
        for name in ('url', 'token', 'node', 'timeout', 'verify_tls'):
            value = environ.get(f'{ENV_PREFIX}{name.upper()}')
            if value:
                kwargs[name] = value
        # pydantic coerces "30" and "false"
        return ClientConfig(**kwargs)
