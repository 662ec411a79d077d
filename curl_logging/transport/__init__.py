"""httpx transports that log outgoing calls as curl commands.

This module provides the interception layer with:
- Request rendering and logging before the real call is dispatched
- Timing of the downstream call, including failed calls
- Optional response summaries
- Failure isolation: logging problems never affect the real call
"""

from curl_logging.transport.client import (
    AsyncCurlLoggingTransport,
    CurlLoggingTransport,
    create_async_client,
    create_client,
)


__all__ = [
    # Transports
    "CurlLoggingTransport",
    "AsyncCurlLoggingTransport",
    # Factories
    "create_client",
    "create_async_client",
]
