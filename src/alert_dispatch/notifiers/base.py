"""Shared helpers every notifier variant calls explicitly."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..config import ChannelConfig
from ..delivery import Payload
from ..primitives.exceptions import ConfigurationError, SerializationError

JSON_CONTENT_TYPE = "application/json"


def default_should_notify_on_resolve(config: ChannelConfig) -> bool:
    """Recoveries are sent unless the channel disabled resolve messages."""
    return not config.disable_resolve_message


def require_url(config: ChannelConfig) -> str:
    """Return the channel's endpoint URL or fail channel setup."""
    url = config.url()
    if not url:
        raise ConfigurationError(
            f"Could not find {config.kind} url property in settings", channel=config.label
        )
    return url


def encode_json(
    kind: str,
    body: Mapping[str, Any],
    headers: Mapping[str, str] | None = None,
) -> Payload:
    """Encode a JSON body, turning encoder failures into ``SerializationError``."""
    try:
        data = json.dumps(body, ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(kind, str(e)) from e
    return Payload(body=data, content_type=JSON_CONTENT_TYPE, headers=dict(headers or {}))
