"""Shared primitives for the dispatch engine."""

from __future__ import annotations

from .exceptions import (
    AlertDispatchError,
    ConfigurationError,
    InvalidInputError,
    RenderError,
    SerializationError,
    TransportError,
)

__all__ = [
    "AlertDispatchError",
    "ConfigurationError",
    "InvalidInputError",
    "RenderError",
    "SerializationError",
    "TransportError",
]
