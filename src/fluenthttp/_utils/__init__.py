from ._logs import setup_logging
from ._ssl_context import ca_locations, create_ssl_context, get_httpx_client_kwargs
from ._user_agent import user_agent_value

__all__ = [
    "ca_locations",
    "create_ssl_context",
    "get_httpx_client_kwargs",
    "setup_logging",
    "user_agent_value",
]
