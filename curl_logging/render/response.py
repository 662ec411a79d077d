"""Response summaries for logging."""

import httpx

from curl_logging.redaction.matcher import SensitiveMatcher
from curl_logging.render.constants import RESPONSE_SUMMARY_TEMPLATE
from curl_logging.render.curl import decode_header_pairs, redact_url


class ResponseSummarizer:
    """Summarizes a response with status, headers, body and elapsed time.

    Headers and body go through the same matcher as requests.
    """

    def __init__(self, matcher: SensitiveMatcher) -> None:
        """Initialize the summarizer.

        Args:
            matcher: Matcher built from the active redaction policy.
        """
        self._matcher = matcher

    def summarize(self, response: httpx.Response, elapsed_ms: float) -> str:
        """Read the response body and build the summary.

        Args:
            response: Response with its originating request attached.
            elapsed_ms: Duration of the downstream call.

        Returns:
            Multi-line summary.
        """
        response.read()
        return self._format(response, elapsed_ms)

    async def asummarize(self, response: httpx.Response, elapsed_ms: float) -> str:
        """Async variant of summarize."""
        await response.aread()
        return self._format(response, elapsed_ms)

    def format_headers(self, headers: httpx.Headers) -> str:
        """Format headers one name per line, repeated values comma-joined.

        Args:
            headers: Response headers.

        Returns:
            Header block with exclusions and redaction applied.
        """
        grouped: dict[str, tuple[str, list[str]]] = {}
        for name, value in decode_header_pairs(headers):
            if self._matcher.is_header_excluded(name):
                continue
            _, values = grouped.setdefault(name.lower(), (name, []))
            values.append(self._matcher.redact_header(name, value))

        return "\n".join(
            f"{name}: {', '.join(values)}" for name, values in grouped.values()
        )

    def _format(self, response: httpx.Response, elapsed_ms: float) -> str:
        return RESPONSE_SUMMARY_TEMPLATE.format(
            url=redact_url(str(response.request.url), self._matcher),
            elapsed_ms=elapsed_ms,
            status_code=response.status_code,
            headers=self.format_headers(response.headers),
            body=self._matcher.redact_body(response.text),
        )
