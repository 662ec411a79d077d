"""Log outgoing httpx requests as copy-pasteable curl commands.

This package provides:
- Policy-driven redaction of headers, query parameters and JSON body fields
- Deterministic curl rendering that keeps non-sensitive data byte-for-byte
- Optional response summaries with elapsed time
- Sync and async httpx transports that never let logging break a call
"""

from curl_logging.observability.logging import configure_logging, get_logger
from curl_logging.redaction import (
    DEFAULT_PLACEHOLDER,
    RedactionPolicy,
    SensitiveMatcher,
)
from curl_logging.render import (
    BODY_UNAVAILABLE_SEGMENT,
    CommandSerializer,
    RenderedRequest,
    ResponseSummarizer,
    redact_url,
)
from curl_logging.settings import (
    ConfigValidationError,
    CurlLoggingSettings,
    get_settings,
    load_policy,
    load_settings,
)
from curl_logging.transport import (
    AsyncCurlLoggingTransport,
    CurlLoggingTransport,
    create_async_client,
    create_client,
)


__version__ = "0.1.0"

__all__ = [
    # Transports
    "CurlLoggingTransport",
    "AsyncCurlLoggingTransport",
    "create_client",
    "create_async_client",
    # Redaction
    "RedactionPolicy",
    "SensitiveMatcher",
    "DEFAULT_PLACEHOLDER",
    # Rendering
    "CommandSerializer",
    "ResponseSummarizer",
    "RenderedRequest",
    "redact_url",
    "BODY_UNAVAILABLE_SEGMENT",
    # Settings
    "CurlLoggingSettings",
    "ConfigValidationError",
    "get_settings",
    "load_settings",
    "load_policy",
    # Logging
    "configure_logging",
    "get_logger",
]
