"""Port definitions for the dispatch engine."""

from __future__ import annotations

from .notifier import INotifier, NotifierFactory
from .provider import ITemplateProvider
from .sink import IResultSink
from .sender import ITransport, TransportResponse

__all__ = [
    "INotifier",
    "NotifierFactory",
    "ITemplateProvider",
    "IResultSink",
    "ITransport",
    "TransportResponse",
]
