"""Sensitive name matching and JSON body redaction."""

import re

from curl_logging.redaction.constants import (
    BUILTIN_SENSITIVE_BODY_FIELDS,
    BUILTIN_SENSITIVE_HEADERS,
    BUILTIN_SENSITIVE_QUERY_PARAMS,
)
from curl_logging.redaction.policy import RedactionPolicy


# Quoted string with backslash escapes, number, or JSON literal
_JSON_VALUE = r'("[^"\\]*(?:\\.[^"\\]*)*"|[0-9]+(?:\.[0-9]+)?|true|false|null)'


def build_field_pattern(field_name: str) -> re.Pattern[str]:
    """Compile the pattern matching a JSON ``"field": value`` pair.

    Group 1 captures the quoted key and colon, group 2 the value.

    Args:
        field_name: Exact field name, matched case-insensitively.

    Returns:
        Compiled pattern.
    """
    return re.compile(
        rf'("{re.escape(field_name)}"\s*:\s*){_JSON_VALUE}',
        re.IGNORECASE,
    )


class SensitiveMatcher:
    """Decides which headers, query parameters and body fields are sensitive.

    All state is derived once from a RedactionPolicy and never mutated,
    so a single matcher can be shared by any number of concurrent calls.
    """

    def __init__(self, policy: RedactionPolicy) -> None:
        """Initialize the matcher.

        Args:
            policy: Redaction policy to derive matching state from.
        """
        self._policy = policy
        self._sensitive_headers = frozenset(
            name.lower()
            for name in BUILTIN_SENSITIVE_HEADERS | policy.additional_sensitive_headers
        )
        self._excluded_headers = frozenset(
            name.lower() for name in policy.excluded_headers
        )
        self._sensitive_query_params = frozenset(
            name.lower()
            for name in BUILTIN_SENSITIVE_QUERY_PARAMS
            | policy.additional_sensitive_query_params
        )
        self._body_patterns = tuple(
            (field, build_field_pattern(field))
            for field in (
                *BUILTIN_SENSITIVE_BODY_FIELDS,
                *policy.additional_sensitive_body_fields,
            )
        )

    @property
    def policy(self) -> RedactionPolicy:
        """Get the policy this matcher was built from."""
        return self._policy

    @property
    def enabled(self) -> bool:
        """Check whether redaction is active."""
        return self._policy.enabled

    @property
    def placeholder(self) -> str:
        """Get the replacement text for sensitive values."""
        return self._policy.placeholder

    @property
    def sensitive_header_names(self) -> frozenset[str]:
        """Get lower-cased sensitive header names."""
        return self._sensitive_headers

    @property
    def sensitive_query_param_names(self) -> frozenset[str]:
        """Get lower-cased sensitive query parameter names."""
        return self._sensitive_query_params

    @property
    def excluded_header_names(self) -> frozenset[str]:
        """Get lower-cased excluded header names."""
        return self._excluded_headers

    @property
    def body_field_patterns(self) -> tuple[tuple[str, re.Pattern[str]], ...]:
        """Get (field name, pattern) pairs in application order."""
        return self._body_patterns

    def is_header_sensitive(self, name: str) -> bool:
        """Check if a header name is sensitive.

        Args:
            name: Header name in any casing.

        Returns:
            True if the header value should be redacted.
        """
        return name.lower() in self._sensitive_headers

    def is_header_excluded(self, name: str) -> bool:
        """Check if a header should be omitted entirely.

        Args:
            name: Header name in any casing.

        Returns:
            True if the header must not be emitted, not even redacted.
        """
        return name.lower() in self._excluded_headers

    def is_query_param_sensitive(self, name: str) -> bool:
        """Check if a query parameter name is sensitive.

        Args:
            name: Query parameter name in any casing.

        Returns:
            True if the parameter value should be redacted.
        """
        return name.lower() in self._sensitive_query_params

    def redact_header(self, name: str, value: str) -> str:
        """Redact a header value if the header is sensitive.

        Args:
            name: Header name.
            value: Header value.

        Returns:
            The placeholder for sensitive headers, otherwise the value.
        """
        if self._policy.enabled and self.is_header_sensitive(name):
            return self._policy.placeholder
        return value

    def redact_body(self, content: str) -> str:
        """Redact sensitive JSON field values in body text.

        Every field pattern is applied in order over the whole text. Only
        the value is replaced, always by the quoted placeholder, whatever
        the original value type was.

        Args:
            content: Body text.

        Returns:
            Body text with sensitive values replaced.
        """
        if not content or not self._policy.enabled:
            return content

        replacement = f'"{self._policy.placeholder}"'
        result = content
        for _, pattern in self._body_patterns:
            result = pattern.sub(lambda m: m.group(1) + replacement, result)
        return result
