"""HTTP transport built on httpx."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType

import httpx
from typing_extensions import Self

from .._version import __version__
from ..correlation import get_correlation_id
from ..ports.sender import ITransport, TransportResponse
from ..sanitization import redact_url

logger = logging.getLogger(__name__)


class HttpTransport(ITransport):
    """
    Delivers payloads with a single HTTP POST per attempt.

    Requests carry the current correlation ID in ``X-Correlation-ID``. Any
    non-2xx status and any network failure is reported as a failed
    ``TransportResponse``; nothing is retried here.

    Pass an ``httpx.AsyncClient`` to share a connection pool (or to test with
    ``httpx.MockTransport``); otherwise a client is opened per request. Use
    ``async with`` to keep one owned client for the transport's lifetime.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = f"alert-dispatch/{__version__}",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._client = client
        self._owns_client = False

    async def __aenter__(self) -> Self:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def send(
        self,
        url: str,
        body: bytes,
        content_type: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        request_headers = {
            "Content-Type": content_type,
            "User-Agent": self.user_agent,
            "X-Correlation-ID": get_correlation_id() or "",
        }
        request_headers.update(headers or {})
        effective_timeout = timeout if timeout is not None else self.timeout

        try:
            if self._client is not None:
                response = await self._client.post(
                    url, content=body, headers=request_headers, timeout=effective_timeout
                )
            else:
                async with httpx.AsyncClient(timeout=effective_timeout) as client:
                    response = await client.post(url, content=body, headers=request_headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP {e.response.status_code} from {redact_url(url)}: "
                f"{e.response.text[:200]}"
            )
            return TransportResponse.failure(
                f"HTTP {e.response.status_code}", status_code=e.response.status_code
            )
        except httpx.TimeoutException as e:
            logger.error(f"Request to {redact_url(url)} timed out: {e!r}")
            return TransportResponse.failure(f"timed out after {effective_timeout}s")
        except httpx.HTTPError as e:
            logger.error(f"Failed to send request to {redact_url(url)}: {e!r}")
            return TransportResponse.failure(str(e) or type(e).__name__)

        logger.debug(f"Delivered {len(body)} bytes to {redact_url(url)} ({response.status_code})")
        return TransportResponse.success(status_code=response.status_code)
