"""httpx transports that log requests as curl commands."""

import time
from typing import Any

import httpx
import structlog

from curl_logging.redaction.matcher import SensitiveMatcher
from curl_logging.redaction.policy import RedactionPolicy
from curl_logging.render.curl import CommandSerializer, redact_url
from curl_logging.render.response import ResponseSummarizer


logger = structlog.get_logger()


def _elapsed_ms(start_time_ns: int) -> float:
    return round((time.perf_counter_ns() - start_time_ns) / 1_000_000, 2)


class _CurlLoggingBase:
    """Shared setup for the sync and async transports."""

    def __init__(self, policy: RedactionPolicy | None) -> None:
        self._policy = policy or RedactionPolicy.default()
        self._matcher = SensitiveMatcher(self._policy)
        self._serializer = CommandSerializer(self._matcher)
        self._summarizer = ResponseSummarizer(self._matcher)
        self._log = logger.bind(component="curl_logging")

    @property
    def policy(self) -> RedactionPolicy:
        """Get the active redaction policy."""
        return self._policy

    def _bind_request(self, request: httpx.Request) -> structlog.stdlib.BoundLogger:
        try:
            url = redact_url(str(request.url), self._matcher)
        except Exception:  # noqa: BLE001
            url = "<unavailable>"
        return self._log.bind(method=request.method, url=url)


class CurlLoggingTransport(_CurlLoggingBase, httpx.BaseTransport):
    """Transport that logs each request as curl before forwarding it.

    Rendering and response logging never affect the real call: their
    failures are logged and suppressed. Errors from the wrapped transport,
    including failures while reading the response body, are timed, logged
    and re-raised unchanged.
    """

    def __init__(
        self,
        policy: RedactionPolicy | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            policy: Redaction policy (default: RedactionPolicy.default()).
            transport: Transport that performs the real call
                (default: httpx.HTTPTransport()).
        """
        super().__init__(policy)
        self._transport = transport or httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Log the request, forward it, then log the response."""
        log = self._bind_request(request)

        try:
            log.info("http_request_as_curl", curl=self._serializer.render(request))
        except Exception:  # noqa: BLE001
            log.error("curl_render_failed", exc_info=True)

        start_time_ns = time.perf_counter_ns()
        try:
            response = self._transport.handle_request(request)
        except Exception:
            log.error(
                "http_request_failed",
                elapsed_ms=_elapsed_ms(start_time_ns),
                exc_info=True,
            )
            raise

        if not self._policy.log_response:
            return response

        response.request = request
        try:
            response.read()
        except Exception:
            response.close()
            log.error(
                "http_request_failed",
                elapsed_ms=_elapsed_ms(start_time_ns),
                exc_info=True,
            )
            raise

        elapsed_ms = _elapsed_ms(start_time_ns)
        try:
            summary = self._summarizer.summarize(response, elapsed_ms)
            log.info(
                "http_response",
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
                summary=summary,
            )
        except Exception:  # noqa: BLE001
            log.error("response_log_failed", exc_info=True)

        return response

    def close(self) -> None:
        """Close the wrapped transport."""
        self._transport.close()


class AsyncCurlLoggingTransport(_CurlLoggingBase, httpx.AsyncBaseTransport):
    """Async counterpart of CurlLoggingTransport.

    Request and response bodies are read with ``aread`` so logging never
    blocks the event loop.
    """

    def __init__(
        self,
        policy: RedactionPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            policy: Redaction policy (default: RedactionPolicy.default()).
            transport: Transport that performs the real call
                (default: httpx.AsyncHTTPTransport()).
        """
        super().__init__(policy)
        self._transport = transport or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Log the request, forward it, then log the response."""
        log = self._bind_request(request)

        try:
            log.info(
                "http_request_as_curl", curl=await self._serializer.arender(request)
            )
        except Exception:  # noqa: BLE001
            log.error("curl_render_failed", exc_info=True)

        start_time_ns = time.perf_counter_ns()
        try:
            response = await self._transport.handle_async_request(request)
        except Exception:
            log.error(
                "http_request_failed",
                elapsed_ms=_elapsed_ms(start_time_ns),
                exc_info=True,
            )
            raise

        if not self._policy.log_response:
            return response

        response.request = request
        try:
            await response.aread()
        except Exception:
            await response.aclose()
            log.error(
                "http_request_failed",
                elapsed_ms=_elapsed_ms(start_time_ns),
                exc_info=True,
            )
            raise

        elapsed_ms = _elapsed_ms(start_time_ns)
        try:
            summary = await self._summarizer.asummarize(response, elapsed_ms)
            log.info(
                "http_response",
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
                summary=summary,
            )
        except Exception:  # noqa: BLE001
            log.error("response_log_failed", exc_info=True)

        return response

    async def aclose(self) -> None:
        """Close the wrapped transport."""
        await self._transport.aclose()


def create_client(
    policy: RedactionPolicy | None = None,
    transport: httpx.BaseTransport | None = None,
    **client_kwargs: Any,
) -> httpx.Client:
    """Create an httpx client that logs every request as curl.

    Args:
        policy: Redaction policy.
        transport: Transport performing the real calls.
        **client_kwargs: Passed through to httpx.Client.

    Returns:
        Configured client.
    """
    return httpx.Client(
        transport=CurlLoggingTransport(policy=policy, transport=transport),
        **client_kwargs,
    )


def create_async_client(
    policy: RedactionPolicy | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    **client_kwargs: Any,
) -> httpx.AsyncClient:
    """Create an httpx async client that logs every request as curl.

    Args:
        policy: Redaction policy.
        transport: Transport performing the real calls.
        **client_kwargs: Passed through to httpx.AsyncClient.

    Returns:
        Configured client.
    """
    return httpx.AsyncClient(
        transport=AsyncCurlLoggingTransport(policy=policy, transport=transport),
        **client_kwargs,
    )
