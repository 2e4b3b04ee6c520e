"""Alert notification dispatch engine.

Turns a batch of alert state changes into at most one notification per
configured channel: aggregate status, shared templates, provider-specific
payloads, isolated per-channel delivery.
"""

from __future__ import annotations

from ._version import __version__
from .alerts import Alert, AlertBatch, AlertStatus
from .config import ChannelConfig, DispatchSettings, load_channel_configs
from .correlation import correlation_scope, get_correlation_id, set_correlation_id
from .delivery import DeliveryStatus, FailureReason, NotificationResult, Payload
from .dispatch import DispatchCoordinator

# Memory adapters for testing
from .memory import ConsoleTransport, InMemoryResultSink, InMemoryTransport
from .notifiers import (
    NotifierRegistry,
    SlackNotifier,
    VictorOpsNotifier,
    WebhookNotifier,
    default_registry,
    default_should_notify_on_resolve,
)
from .ports import INotifier, IResultSink, ITemplateProvider, ITransport, TransportResponse
from .primitives.exceptions import (
    AlertDispatchError,
    ConfigurationError,
    InvalidInputError,
    RenderError,
    SerializationError,
    TransportError,
)
from .sanitization import MetadataSanitizer
from .summary import BatchSummary, Summarizer
from .template import (
    FileSystemTemplateProvider,
    InMemoryTemplateProvider,
    RenderedText,
    TemplateContext,
    TemplateSet,
)
from .transport import HttpTransport

__all__ = [
    "__version__",
    "Alert",
    "AlertBatch",
    "AlertStatus",
    "ChannelConfig",
    "DispatchSettings",
    "load_channel_configs",
    "correlation_scope",
    "get_correlation_id",
    "set_correlation_id",
    "DeliveryStatus",
    "FailureReason",
    "NotificationResult",
    "Payload",
    "DispatchCoordinator",
    "ConsoleTransport",
    "InMemoryResultSink",
    "InMemoryTransport",
    "NotifierRegistry",
    "SlackNotifier",
    "VictorOpsNotifier",
    "WebhookNotifier",
    "default_registry",
    "default_should_notify_on_resolve",
    "INotifier",
    "IResultSink",
    "ITemplateProvider",
    "ITransport",
    "TransportResponse",
    "AlertDispatchError",
    "ConfigurationError",
    "InvalidInputError",
    "RenderError",
    "SerializationError",
    "TransportError",
    "MetadataSanitizer",
    "BatchSummary",
    "Summarizer",
    "FileSystemTemplateProvider",
    "InMemoryTemplateProvider",
    "RenderedText",
    "TemplateContext",
    "TemplateSet",
    "HttpTransport",
]
