"""In-memory transport for test assertions."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ..ports.sender import ITransport, TransportResponse
from ..primitives.exceptions import TransportError


@dataclass
class SentRequest:
    """Record of a delivered request for test assertions."""

    url: str
    body: bytes
    content_type: str
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: float | None = None

    def text(self) -> str:
        return self.body.decode("utf-8")


class InMemoryTransport(ITransport):
    """
    Test double (Fake) that stores requests in a list instead of sending them.

    ``fail_urls`` maps a URL to the error reported for it, ``raise_urls`` lists
    URLs whose delivery raises ``TransportError`` and ``delays`` maps a URL to
    seconds to sleep before answering (timeouts and cancellation become observable).
    """

    def __init__(
        self,
        fail_urls: Mapping[str, str] | None = None,
        delays: Mapping[str, float] | None = None,
        raise_urls: Iterable[str] | None = None,
    ) -> None:
        self.fail_urls: dict[str, str] = dict(fail_urls or {})
        self.raise_urls: set[str] = set(raise_urls or ())
        self.delays: dict[str, float] = dict(delays or {})
        self.sent_requests: list[SentRequest] = []
        self.attempts: list[str] = []

    async def send(
        self,
        url: str,
        body: bytes,
        content_type: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        self.attempts.append(url)
        delay = self.delays.get(url)
        if delay:
            await asyncio.sleep(delay)

        if url in self.raise_urls:
            raise TransportError(url, "connection refused")
        if url in self.fail_urls:
            return TransportResponse.failure(self.fail_urls[url], status_code=500)

        self.sent_requests.append(
            SentRequest(url, body, content_type, dict(headers or {}), timeout)
        )
        return TransportResponse.success(status_code=200)

    def requests_to(self, url: str) -> list[SentRequest]:
        return [r for r in self.sent_requests if r.url == url]

    def assert_sent(self, url: str, count: int = 1) -> None:
        """Helper for test assertions."""
        matches = self.requests_to(url)
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} requests to {url}, but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear all recorded requests."""
        self.sent_requests.clear()
        self.attempts.clear()
