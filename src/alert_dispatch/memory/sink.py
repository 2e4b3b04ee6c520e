"""In-memory result sink."""

from __future__ import annotations

from ..delivery import DeliveryStatus, NotificationResult
from ..ports.sink import IResultSink


class InMemoryResultSink(IResultSink):
    """Keeps every recorded result in a list, for tests and development."""

    def __init__(self) -> None:
        self.results: list[NotificationResult] = []

    async def record(self, result: NotificationResult) -> None:
        self.results.append(result)

    def by_status(self, status: DeliveryStatus) -> list[NotificationResult]:
        return [r for r in self.results if r.status is status]

    def clear(self) -> None:
        self.results.clear()
