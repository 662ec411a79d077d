"""Curl logging settings loading."""

from .app import CurlLoggingSettings, get_settings
from .loader import ConfigValidationError, load_policy, load_settings


__all__ = [
    "ConfigValidationError",
    "CurlLoggingSettings",
    "get_settings",
    "load_policy",
    "load_settings",
]
