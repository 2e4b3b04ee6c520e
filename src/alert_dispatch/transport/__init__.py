"""Network transports."""

from __future__ import annotations

from .http import HttpTransport

__all__ = ["HttpTransport"]
