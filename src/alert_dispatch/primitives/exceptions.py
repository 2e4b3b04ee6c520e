"""Exception hierarchy for alert dispatch.

Every error below is channel-scoped except :class:`InvalidInputError`, which
rejects a whole dispatch before any channel is touched.
"""

from __future__ import annotations


class AlertDispatchError(Exception):
    """Root exception for the alert dispatch engine."""


class InvalidInputError(AlertDispatchError):
    """Raised when the dispatch input itself is unusable (e.g. an empty batch)."""


class ConfigurationError(AlertDispatchError):
    """Raised when a channel is missing a required setting or names an unknown kind.

    Detected when the channel's notifier is constructed, never at delivery time.
    """

    def __init__(self, reason: str, channel: str | None = None) -> None:
        self.reason = reason
        self.channel = channel
        if channel:
            super().__init__(f"Channel {channel!r} is misconfigured: {reason}")
        else:
            super().__init__(reason)


class RenderError(AlertDispatchError):
    """Raised (or recorded) when a template cannot be compiled or evaluated."""

    def __init__(self, template_name: str, reason: str) -> None:
        self.template_name = template_name
        self.reason = reason
        super().__init__(f"Failed to render template {template_name!r}: {reason}")


class TransportError(AlertDispatchError):
    """Raised when a payload could not be delivered to its endpoint."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to deliver to {url}: {reason}")


class SerializationError(AlertDispatchError):
    """Raised when a payload cannot be encoded to the provider's wire format."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Failed to encode {kind} payload: {reason}")
