"""Delivery outcome types and the wire payload handed to a transport."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from .config import ChannelConfig


class DeliveryStatus(Enum):
    """Terminal states of one channel's pipeline."""

    SUPPRESSED = "suppressed"
    DELIVERED = "delivered"
    FAILED = "failed"


class FailureReason(Enum):
    """Why a channel ended up ``FAILED``."""

    CONFIGURATION = "configuration"
    SERIALIZATION = "serialization"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Payload:
    """Encoded provider body ready for delivery."""

    body: bytes
    content_type: str = "application/json"
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class NotificationResult:
    """Immutable record of one dispatch attempt for one channel."""

    channel_uid: str
    channel_name: str
    kind: str
    status: DeliveryStatus
    error: str | None = None
    reason: FailureReason | None = None
    status_code: int | None = None
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if self.timestamp is None:
            object.__setattr__(self, "timestamp", datetime.now(timezone.utc))

    @property
    def ok(self) -> bool:
        return self.status is not DeliveryStatus.FAILED

    @classmethod
    def delivered(
        cls, config: ChannelConfig, status_code: int | None = None
    ) -> NotificationResult:
        """Create a successful delivery result."""
        return cls(
            channel_uid=config.uid,
            channel_name=config.name,
            kind=config.kind,
            status=DeliveryStatus.DELIVERED,
            status_code=status_code,
        )

    @classmethod
    def suppressed(cls, config: ChannelConfig) -> NotificationResult:
        """Create a result for a resolve notification the channel opted out of."""
        return cls(
            channel_uid=config.uid,
            channel_name=config.name,
            kind=config.kind,
            status=DeliveryStatus.SUPPRESSED,
        )

    @classmethod
    def failed(
        cls,
        config: ChannelConfig,
        reason: FailureReason,
        error: str | None = None,
        status_code: int | None = None,
    ) -> NotificationResult:
        """Create a failed delivery result."""
        return cls(
            channel_uid=config.uid,
            channel_name=config.name,
            kind=config.kind,
            status=DeliveryStatus.FAILED,
            reason=reason,
            error=error,
            status_code=status_code,
        )
