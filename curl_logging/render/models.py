"""Data models for the render layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderedRequest:
    """Redacted snapshot of a request, ready for layout.

    Attributes:
        method: HTTP method.
        url: URL with sensitive query values replaced.
        headers: Ordered (name, value) pairs, excluded headers dropped
            and sensitive values replaced.
        body: Redacted body text, or None when there is no body.
        body_unavailable: Whether reading the body failed.
    """

    method: str
    url: str
    headers: tuple[tuple[str, str], ...] = ()
    body: str | None = None
    body_unavailable: bool = False
