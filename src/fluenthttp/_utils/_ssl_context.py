import os
import ssl
from typing import TYPE_CHECKING, Any, Optional

from ._user_agent import user_agent_value
from .constants import (
    ENV_REQUESTS_CA_BUNDLE,
    ENV_SSL_CERT_DIR,
    ENV_SSL_CERT_FILE,
    HEADER_USER_AGENT,
)

if TYPE_CHECKING:
    from .._config import Config


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def ca_locations() -> tuple[str, Optional[str]]:
    """CA file and directory used when the system trust store is unavailable.

    `SSL_CERT_FILE` wins over `REQUESTS_CA_BUNDLE`; the certifi bundle is the
    last resort. `SSL_CERT_DIR` is passed through as the CA directory. Both
    accept `~` and `$VAR` references.
    """
    import certifi

    cafile = (
        _env_path(ENV_SSL_CERT_FILE)
        or _env_path(ENV_REQUESTS_CA_BUNDLE)
        or certifi.where()
    )
    return cafile, _env_path(ENV_SSL_CERT_DIR)


def create_ssl_context() -> ssl.SSLContext:
    """Build the context every executor-owned transport verifies TLS with.

    With the `truststore` extra installed, certificates are checked against the
    operating system's store, so corporate and custom CAs are picked up.
    Otherwise the locations from `ca_locations()` are loaded.
    """
    try:
        import truststore
    except ImportError:
        cafile, capath = ca_locations()
        return ssl.create_default_context(cafile=cafile, capath=capath)

    return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)


def get_httpx_client_kwargs(config: "Config") -> dict[str, Any]:
    """Keyword arguments for an `httpx.AsyncClient` built from the config."""
    return {
        "base_url": config.base_url,
        "timeout": config.timeout,
        "follow_redirects": config.follow_redirects,
        "verify": create_ssl_context(),
        "headers": {HEADER_USER_AGENT: user_agent_value()},
    }
