"""Read-only template context derived from an alert batch."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Any

from ..alerts import AlertBatch
from ..config import DispatchSettings


@dataclass(frozen=True)
class TemplateContext:
    """
    View combining one alert batch with engine settings.

    Lives for a single dispatch call. ``variables`` is what templates see:

    - ``receiver``, ``status``, ``alerts``, ``firing_alerts``, ``resolved_alerts``
    - ``group_labels``, ``common_labels``, ``common_annotations``
    - ``external_url``, ``alerting_list_url``, ``version``, ``group_key``
    """

    batch: AlertBatch
    settings: DispatchSettings = field(default_factory=DispatchSettings)
    receiver: str = ""

    @cached_property
    def variables(self) -> Mapping[str, Any]:
        batch = self.batch
        common_labels = batch.common_labels()
        return MappingProxyType(
            {
                "receiver": self.receiver,
                "status": batch.status().value,
                "alerts": [a.to_template_dict() for a in batch.alerts],
                "firing_alerts": [a.to_template_dict() for a in batch.firing()],
                "resolved_alerts": [a.to_template_dict() for a in batch.resolved()],
                "group_labels": dict(batch.group_labels) or common_labels,
                "common_labels": common_labels,
                "common_annotations": batch.common_annotations(),
                "external_url": self.settings.external_url,
                "alerting_list_url": self.settings.alerting_list_url(),
                "version": self.settings.build_version,
                "group_key": batch.group_key(),
            }
        )
