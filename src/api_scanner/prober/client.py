"""Synchronous HTTP client shared by all probes."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

import httpx

from api_scanner.core.config import ProberSettings
from api_scanner.core.exceptions import NetworkTimeoutError, RequestFailedError
from api_scanner.core.logging import get_logger
from api_scanner.core.models import NO_RESPONSE

logger = get_logger(__name__)


@dataclass
class ProbeResponse:
    """The parts of an HTTP response the probes look at."""

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    text: str = ""
    elapsed_ms: float = 0.0


class HTTPClient:
    """
    Thin wrapper around ``httpx.Client`` issuing one request at a time.

    Failures surface as ``ProbeError`` subclasses; nothing is retried.
    A custom ``transport`` can be injected, which is how the tests
    substitute ``httpx.MockTransport`` for the network.
    """

    def __init__(
        self,
        settings: ProberSettings,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings
        self._client = httpx.Client(
            timeout=httpx.Timeout(settings.timeout),
            follow_redirects=settings.follow_redirects,
            verify=settings.verify_ssl,
            headers={
                "User-Agent": settings.user_agent,
            },
            transport=transport,
        )

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> ProbeResponse:
        """
        Send a single request without a body.

        Args:
            method: HTTP method
            url: Absolute URL, passed through unvalidated
            headers: Extra request headers
            timeout: Overrides the configured timeout for this request

        Returns:
            ProbeResponse with status, headers and decoded body

        Raises:
            NetworkTimeoutError: the request timed out
            RequestFailedError: any other transport or URL failure
        """
        kwargs: dict = {"headers": headers}
        if timeout is not None:
            kwargs["timeout"] = timeout

        start_time = time.time()

        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.debug("request_timeout", method=method, url=url)
            raise NetworkTimeoutError(f"{method} {url} timed out") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("request_failed", method=method, url=url, error=str(e))
            raise RequestFailedError(f"{method} {url} failed: {e}") from e

        elapsed_ms = (time.time() - start_time) * 1000
        logger.debug(
            "request_complete",
            method=method,
            url=url,
            status=response.status_code,
            elapsed_ms=round(elapsed_ms, 1),
        )

        return ProbeResponse(
            status_code=response.status_code,
            headers=response.headers,
            text=response.text,
            elapsed_ms=elapsed_ms,
        )

    def status(self, method: str, url: str, timeout: Optional[float] = None) -> int:
        """Return only the status code, or ``NO_RESPONSE`` if the request failed."""
        try:
            return self.request(method, url, timeout=timeout).status_code
        except (NetworkTimeoutError, RequestFailedError):
            return NO_RESPONSE
