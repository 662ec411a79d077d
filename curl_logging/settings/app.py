"""Curl logging settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from curl_logging.redaction.constants import DEFAULT_PLACEHOLDER
from curl_logging.redaction.policy import RedactionPolicy


class CurlLoggingSettings(BaseSettings):
    """Configuration surface read from CURL_LOGGING_* environment variables.

    List values are given as JSON arrays, e.g.
    ``CURL_LOGGING_EXCLUDED_HEADERS='["User-Agent"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CURL_LOGGING_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    enable_redaction: bool = True
    log_response: bool = True
    redacted_placeholder: str = DEFAULT_PLACEHOLDER
    additional_sensitive_headers: list[str] = Field(default_factory=list)
    excluded_headers: list[str] = Field(default_factory=list)
    additional_sensitive_query_params: list[str] = Field(default_factory=list)
    additional_sensitive_body_fields: list[str] = Field(default_factory=list)

    def to_policy(self) -> RedactionPolicy:
        """Build the immutable redaction policy from these settings."""
        return RedactionPolicy(
            enabled=self.enable_redaction,
            placeholder=self.redacted_placeholder,
            additional_sensitive_headers=frozenset(self.additional_sensitive_headers),
            excluded_headers=frozenset(self.excluded_headers),
            additional_sensitive_query_params=frozenset(
                self.additional_sensitive_query_params
            ),
            additional_sensitive_body_fields=tuple(
                self.additional_sensitive_body_fields
            ),
            log_response=self.log_response,
        )


def get_settings() -> CurlLoggingSettings:
    """Get a settings instance."""
    return CurlLoggingSettings()
