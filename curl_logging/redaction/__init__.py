"""Redaction policy and sensitive data matching."""

from curl_logging.redaction.constants import (
    BUILTIN_SENSITIVE_BODY_FIELDS,
    BUILTIN_SENSITIVE_HEADERS,
    BUILTIN_SENSITIVE_QUERY_PARAMS,
    DEFAULT_PLACEHOLDER,
)
from curl_logging.redaction.matcher import SensitiveMatcher, build_field_pattern
from curl_logging.redaction.policy import RedactionPolicy


__all__ = [
    # Policy
    "RedactionPolicy",
    # Matcher
    "SensitiveMatcher",
    "build_field_pattern",
    # Constants
    "DEFAULT_PLACEHOLDER",
    "BUILTIN_SENSITIVE_HEADERS",
    "BUILTIN_SENSITIVE_QUERY_PARAMS",
    "BUILTIN_SENSITIVE_BODY_FIELDS",
]
