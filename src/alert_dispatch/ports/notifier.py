"""Channel notifier port: one implementation per provider kind."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..config import ChannelConfig, DispatchSettings
from ..delivery import Payload

if TYPE_CHECKING:
    from ..summary import BatchSummary


@runtime_checkable
class INotifier(Protocol):
    """
    Builds one provider's wire body and decides whether recoveries are sent.

    Implementations validate their settings on construction and raise
    ``ConfigurationError`` there, so a misconfigured channel never reaches delivery.
    """

    kind: str
    config: ChannelConfig
    url: str

    def should_notify_on_resolve(self) -> bool:
        """Whether a resolved batch produces an outbound message at all."""
        ...

    def build_payload(self, summary: BatchSummary, now: datetime) -> Payload:
        """Encode the provider body for this summary."""
        ...


NotifierFactory = Callable[[ChannelConfig, DispatchSettings], INotifier]
