"""Alert data model: individual alerts and the batch that yields one notification decision."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .primitives.exceptions import InvalidInputError


class AlertStatus(str, Enum):
    """Lifecycle state of an alert, and of a batch in aggregate."""

    FIRING = "firing"
    RESOLVED = "resolved"


def _hash_labels(labels: Mapping[str, str]) -> str:
    stable = json.dumps(dict(sorted(labels.items())), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(stable.encode("utf-8")).hexdigest()


class Alert(BaseModel):
    """
    One observed alert as handed over by the upstream evaluator.

    Immutable. Accepts both the snake_case field names and the camelCase
    names used on the wire (``startsAt``, ``endsAt``, ``generatorURL``).

    When no explicit status is given, it is derived the Alertmanager way when
    the alert is constructed (observed) and never changes afterwards:
    an alert whose ``ends_at`` is not in the future is resolved, otherwise firing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    starts_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="startsAt"
    )
    ends_at: datetime | None = Field(default=None, alias="endsAt")
    generator_url: str = Field(default="", alias="generatorURL")
    explicit_status: AlertStatus | None = Field(default=None, alias="status")

    _observed_status: AlertStatus = PrivateAttr(default=AlertStatus.FIRING)

    def model_post_init(self, __context: Any) -> None:
        if self.explicit_status is not None:
            self._observed_status = self.explicit_status
        elif self.ends_at is not None and self.ends_at <= _now_like(self.ends_at):
            self._observed_status = AlertStatus.RESOLVED
        else:
            self._observed_status = AlertStatus.FIRING

    @property
    def status(self) -> AlertStatus:
        return self._observed_status

    @property
    def fingerprint(self) -> str:
        """Stable identity derived from the label set."""
        return _hash_labels(self.labels)

    @property
    def name(self) -> str:
        return self.labels.get("alertname", "")

    def is_resolved(self) -> bool:
        return self.status is AlertStatus.RESOLVED

    def to_template_dict(self) -> dict[str, Any]:
        """Plain view of the alert as exposed to templates and JSON payloads."""
        return {
            "status": self.status.value,
            "labels": dict(self.labels),
            "annotations": dict(self.annotations),
            "startsAt": self.starts_at.isoformat(),
            "endsAt": self.ends_at.isoformat() if self.ends_at else None,
            "generatorURL": self.generator_url,
            "fingerprint": self.fingerprint,
        }


def _now_like(reference: datetime) -> datetime:
    # Naive timestamps are compared against naive UTC.
    if reference.tzinfo is None:
        return datetime.now(timezone.utc).replace(tzinfo=None)
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AlertBatch:
    """
    Ordered, non-empty group of alerts evaluated together for one notification.

    ``group_labels`` are the labels the upstream grouper grouped by; when empty,
    the labels common to every alert stand in for them.
    """

    alerts: tuple[Alert, ...]
    group_labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.alerts:
            raise InvalidInputError("An alert batch must contain at least one alert")
        object.__setattr__(self, "alerts", tuple(self.alerts))
        object.__setattr__(self, "group_labels", dict(self.group_labels))

    @classmethod
    def of(cls, *alerts: Alert, group_labels: Mapping[str, str] | None = None) -> AlertBatch:
        return cls(alerts=tuple(alerts), group_labels=group_labels or {})

    @classmethod
    def from_payload(
        cls,
        alerts: Iterable[Mapping[str, Any]],
        group_labels: Mapping[str, str] | None = None,
    ) -> AlertBatch:
        """Build a batch from upstream JSON-like alert records."""
        return cls(
            alerts=tuple(Alert.model_validate(raw) for raw in alerts),
            group_labels=group_labels or {},
        )

    def __len__(self) -> int:
        return len(self.alerts)

    def __iter__(self) -> Iterator[Alert]:
        return iter(self.alerts)

    def status(self) -> AlertStatus:
        """Resolved only when every alert is resolved; any firing alert keeps the batch firing."""
        if all(alert.is_resolved() for alert in self.alerts):
            return AlertStatus.RESOLVED
        return AlertStatus.FIRING

    def firing(self) -> list[Alert]:
        return [a for a in self.alerts if not a.is_resolved()]

    def resolved(self) -> list[Alert]:
        return [a for a in self.alerts if a.is_resolved()]

    def common_labels(self) -> dict[str, str]:
        return _common(a.labels for a in self.alerts)

    def common_annotations(self) -> dict[str, str]:
        return _common(a.annotations for a in self.alerts)

    def group_key(self) -> str:
        """Stable identifier of the alert group, hashed from its grouping labels."""
        return _hash_labels(self.group_labels or self.common_labels())


def _common(mappings: Iterable[Mapping[str, str]]) -> dict[str, str]:
    iterator = iter(mappings)
    common = dict(next(iterator, {}))
    for mapping in iterator:
        common = {k: v for k, v in common.items() if mapping.get(k) == v}
    return common
