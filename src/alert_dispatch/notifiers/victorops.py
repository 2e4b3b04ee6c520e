"""VictorOps notifier: posts incidents to the VictorOps REST integration endpoint."""

from __future__ import annotations

import logging
from datetime import datetime

from ..alerts import AlertStatus
from ..config import ChannelConfig, DispatchSettings
from ..delivery import Payload
from ..ports.notifier import INotifier
from ..summary import BatchSummary
from .base import default_should_notify_on_resolve, encode_json, require_url

logger = logging.getLogger(__name__)

# VictorOps uses "CRITICAL" to indicate the alerting state.
VICTOROPS_STATE_CRITICAL = "CRITICAL"
VICTOROPS_STATE_RECOVERY = "RECOVERY"

_MESSAGE_TYPES = {
    AlertStatus.FIRING: VICTOROPS_STATE_CRITICAL,
    AlertStatus.RESOLVED: VICTOROPS_STATE_RECOVERY,
}


class VictorOpsNotifier(INotifier):
    """
    Formats the POST body according to the VictorOps alert ingestion API.

    ``entity_id`` is the batch's group key, so every message about the same
    alert group lands on the same VictorOps incident.
    """

    kind = "victorops"

    def __init__(self, config: ChannelConfig, settings: DispatchSettings) -> None:
        self.config = config
        self.settings = settings
        self.url = require_url(config)

    def should_notify_on_resolve(self) -> bool:
        return default_should_notify_on_resolve(self.config)

    def build_payload(self, summary: BatchSummary, now: datetime) -> Payload:
        logger.debug(f"Building victorops payload for {self.config.label}")
        body = {
            "message_type": _MESSAGE_TYPES[summary.status],
            "entity_id": summary.batch.group_key(),
            "entity_display_name": summary.title,
            "timestamp": int(now.timestamp()),
            "state_message": summary.message,
            "monitoring_tool": self.settings.monitoring_tool,
            "alert_url": self.settings.alerting_list_url(),
        }
        return encode_json(self.kind, body)
