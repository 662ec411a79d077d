"""Redaction policy model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from curl_logging.redaction.constants import DEFAULT_PLACEHOLDER


class RedactionPolicy(BaseModel):
    """Immutable configuration for sensitive data redaction.

    Constructed once at setup and passed explicitly to every component
    that derives matching state from it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = Field(default=True, description="Whether redaction is active")
    placeholder: str = Field(
        default=DEFAULT_PLACEHOLDER, description="Replacement for sensitive values"
    )
    additional_sensitive_headers: frozenset[str] = Field(
        default_factory=frozenset,
        description="Header names to redact beyond the built-in list",
    )
    excluded_headers: frozenset[str] = Field(
        default_factory=frozenset,
        description="Header names omitted from output entirely",
    )
    additional_sensitive_query_params: frozenset[str] = Field(
        default_factory=frozenset,
        description="Query parameter names to redact beyond the built-in list",
    )
    additional_sensitive_body_fields: tuple[str, ...] = Field(
        default=(),
        description="JSON field names to redact, applied after the built-ins",
    )
    log_response: bool = Field(
        default=True, description="Whether to log response summaries"
    )

    @field_validator("placeholder")
    @classmethod
    def validate_placeholder(cls, v: str) -> str:
        """Reject placeholders that would break quoted body replacement."""
        if '"' in v:
            msg = "Placeholder must not contain a double quote"
            raise ValueError(msg)
        return v

    @field_validator(
        "additional_sensitive_headers",
        "excluded_headers",
        "additional_sensitive_query_params",
        "additional_sensitive_body_fields",
    )
    @classmethod
    def validate_names(
        cls, v: frozenset[str] | tuple[str, ...]
    ) -> frozenset[str] | tuple[str, ...]:
        """Ensure every configured name is non-blank."""
        for name in v:
            if not name.strip():
                msg = "Names must not be blank"
                raise ValueError(msg)
        return v

    @classmethod
    def default(cls) -> "RedactionPolicy":
        """Policy with redaction enabled and no custom names."""
        return cls()

    @classmethod
    def no_redaction(cls) -> "RedactionPolicy":
        """Policy that logs everything verbatim."""
        return cls(enabled=False)
