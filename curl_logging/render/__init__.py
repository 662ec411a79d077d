"""Rendering of requests as curl commands and responses as summaries."""

from curl_logging.render.constants import (
    BODY_UNAVAILABLE_SEGMENT,
    LINE_CONTINUATION,
    RESPONSE_SUMMARY_TEMPLATE,
)
from curl_logging.render.curl import (
    CommandSerializer,
    decode_header_pairs,
    redact_url,
    redact_url_credentials,
)
from curl_logging.render.models import RenderedRequest
from curl_logging.render.response import ResponseSummarizer


__all__ = [
    # Serializers
    "CommandSerializer",
    "ResponseSummarizer",
    # Models
    "RenderedRequest",
    # Helpers
    "decode_header_pairs",
    "redact_url",
    "redact_url_credentials",
    # Constants
    "BODY_UNAVAILABLE_SEGMENT",
    "LINE_CONTINUATION",
    "RESPONSE_SUMMARY_TEMPLATE",
]
