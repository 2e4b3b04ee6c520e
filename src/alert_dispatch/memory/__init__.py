"""Memory adapters for testing and development."""

from __future__ import annotations

from .console import ConsoleTransport
from .fake import InMemoryTransport, SentRequest
from .sink import InMemoryResultSink

__all__ = ["ConsoleTransport", "InMemoryResultSink", "InMemoryTransport", "SentRequest"]
