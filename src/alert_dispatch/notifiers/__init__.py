"""Channel notifier variants, one per provider kind."""

from __future__ import annotations

from .base import default_should_notify_on_resolve, encode_json, require_url
from .registry import NotifierRegistry, default_registry
from .slack import SlackNotifier
from .victorops import VictorOpsNotifier
from .webhook import WebhookNotifier, calculate_signature

__all__ = [
    "NotifierRegistry",
    "SlackNotifier",
    "VictorOpsNotifier",
    "WebhookNotifier",
    "calculate_signature",
    "default_registry",
    "default_should_notify_on_resolve",
    "encode_json",
    "require_url",
]
