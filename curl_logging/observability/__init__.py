"""Observability module for logging."""

from curl_logging.observability.logging import configure_logging, get_logger


__all__ = [
    "configure_logging",
    "get_logger",
]
