"""Transport port: performs the network delivery of an encoded payload."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Outcome of a single send attempt."""

    ok: bool
    status_code: int | None = None
    error: str | None = None

    @classmethod
    def success(cls, status_code: int | None = None) -> TransportResponse:
        return cls(ok=True, status_code=status_code)

    @classmethod
    def failure(cls, error: str, status_code: int | None = None) -> TransportResponse:
        return cls(ok=False, status_code=status_code, error=error)


@runtime_checkable
class ITransport(Protocol):
    """
    Framework-agnostic port for delivering one payload to one endpoint.

    One call per delivery attempt. Implementations must not retry internally;
    retry policy belongs to whoever wraps the whole dispatch.
    """

    async def send(
        self,
        url: str,
        body: bytes,
        content_type: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """Send the body and report success or failure."""
        ...
