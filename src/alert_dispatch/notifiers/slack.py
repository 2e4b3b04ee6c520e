"""Slack notifier: incoming-webhook chat message with one attachment."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from ..alerts import AlertStatus
from ..config import ChannelConfig, DispatchSettings
from ..delivery import Payload
from ..ports.notifier import INotifier
from ..primitives.exceptions import ConfigurationError
from ..summary import BatchSummary
from .base import default_should_notify_on_resolve, encode_json, require_url

logger = logging.getLogger(__name__)

_COLORS = {
    AlertStatus.FIRING: "danger",
    AlertStatus.RESOLVED: "good",
}
_MENTIONS = {"": "", "here": "<!here|here>", "channel": "<!channel|channel>"}


class SlackNotifier(INotifier):
    """
    Posts to a Slack incoming webhook.

    Settings: ``url`` (required), ``channel``, ``username``, ``icon_emoji``,
    ``text`` (prefix line) and ``mention_channel`` (``here`` or ``channel``).
    """

    kind = "slack"

    def __init__(self, config: ChannelConfig, settings: DispatchSettings) -> None:
        self.config = config
        self.settings = settings
        self.url = require_url(config)
        mention = config.get_str("mention_channel").strip().lower()
        if mention not in _MENTIONS:
            raise ConfigurationError(
                f"invalid mention_channel {mention!r}, expected 'here' or 'channel'",
                channel=config.label,
            )
        self.mention = _MENTIONS[mention]

    def should_notify_on_resolve(self) -> bool:
        return default_should_notify_on_resolve(self.config)

    def build_payload(self, summary: BatchSummary, now: datetime) -> Payload:
        logger.debug(f"Building slack payload for {self.config.label}")
        text = " ".join(p for p in (self.mention, self.config.get_str("text")) if p)
        body: dict[str, Any] = {
            "attachments": [
                {
                    "title": summary.title,
                    "title_link": self.settings.alerting_list_url(),
                    "text": summary.message,
                    "fallback": summary.title,
                    "color": _COLORS[summary.status],
                    "footer": self.settings.monitoring_tool,
                    "ts": int(now.timestamp()),
                }
            ],
        }
        if text:
            body["text"] = text
        for key in ("channel", "username", "icon_emoji"):
            value = self.config.get_str(key)
            if value:
                body[key] = value
        return encode_json(self.kind, body)
