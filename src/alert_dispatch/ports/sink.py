"""Result sink port."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..delivery import NotificationResult


@runtime_checkable
class IResultSink(Protocol):
    """Protocol for handing dispatch results to an audit/history store."""

    async def record(self, result: NotificationResult) -> None:
        """Persist or forward one notification result."""
        ...
