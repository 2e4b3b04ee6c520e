"""Generic webhook notifier with optional HMAC signature."""

from __future__ import annotations

import hashlib
import hmac
import logging
from datetime import datetime
from typing import Any

from ..config import ChannelConfig, DispatchSettings
from ..delivery import Payload
from ..ports.notifier import INotifier
from ..primitives.exceptions import ConfigurationError
from ..summary import BatchSummary
from .base import default_should_notify_on_resolve, encode_json, require_url

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Webhook-Signature"


class WebhookNotifier(INotifier):
    """
    Posts the whole batch as JSON to an arbitrary HTTP endpoint.

    Settings:
      - ``url`` (required)
      - ``secret``: when set, the body is signed with HMAC-SHA256 and the
        signature sent in ``X-Webhook-Signature`` as ``sha256=<hex>``
      - ``max_alerts``: cap on the number of alerts included; the number left
        out is reported as ``truncatedAlerts``
    """

    kind = "webhook"

    def __init__(self, config: ChannelConfig, settings: DispatchSettings) -> None:
        self.config = config
        self.settings = settings
        self.url = require_url(config)
        self.secret = config.get_str("secret") or None
        self.max_alerts = self._parse_max_alerts(config)

    def should_notify_on_resolve(self) -> bool:
        return default_should_notify_on_resolve(self.config)

    def build_payload(self, summary: BatchSummary, now: datetime) -> Payload:
        variables = summary.context.variables
        alerts: list[dict[str, Any]] = list(variables["alerts"])
        truncated = 0
        if self.max_alerts and len(alerts) > self.max_alerts:
            truncated = len(alerts) - self.max_alerts
            alerts = alerts[: self.max_alerts]
        logger.debug(f"Building webhook payload for {self.config.label} ({len(alerts)} alerts)")

        body: dict[str, Any] = {
            "receiver": self.config.label,
            "status": summary.status.value,
            "title": summary.title,
            "message": summary.message,
            "groupKey": summary.batch.group_key(),
            "externalURL": self.settings.external_url,
            "version": "1",
            "alerts": alerts,
            "truncatedAlerts": truncated,
            "groupLabels": dict(variables["group_labels"]),
            "commonLabels": dict(variables["common_labels"]),
            "commonAnnotations": dict(variables["common_annotations"]),
            "timestamp": now.isoformat(),
        }

        payload = encode_json(self.kind, body)
        if not self.secret:
            return payload
        signature = calculate_signature(payload.body.decode("utf-8"), self.secret)
        return Payload(
            body=payload.body,
            content_type=payload.content_type,
            headers={SIGNATURE_HEADER: signature},
        )

    @staticmethod
    def verify_signature(payload: str, signature: str, secret: str) -> bool:
        """
        Verify a webhook signature using constant-time comparison.

        Use this in webhook receivers to authenticate incoming notifications.
        ``payload`` is the raw request body as received.
        """
        expected = calculate_signature(payload, secret)
        return hmac.compare_digest(expected, signature)

    @staticmethod
    def _parse_max_alerts(config: ChannelConfig) -> int:
        raw = config.settings.get("max_alerts", 0)
        try:
            value = int(raw or 0)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"max_alerts must be an integer, got {raw!r}", channel=config.label
            ) from e
        if value < 0:
            raise ConfigurationError("max_alerts must not be negative", channel=config.label)
        return value


def calculate_signature(payload: str, secret: str) -> str:
    """Calculate the HMAC-SHA256 signature for a webhook payload."""
    digest = hmac.new(
        key=secret.encode("utf-8"),
        msg=payload.encode("utf-8"),
        digestmod=hashlib.sha256,
    ).hexdigest()
    return f"sha256={digest}"
