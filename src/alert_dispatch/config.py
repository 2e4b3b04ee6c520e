"""Channel and engine configuration models."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._version import __version__


class ChannelConfig(BaseModel):
    """
    Persisted settings of one notification channel instance.

    Owned by configuration management; read-only to the engine. Accepts the
    camelCase names emitted by the configuration store (``disableResolveMessage``,
    ``endpointURL``) as well as the snake_case field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uid: str = ""
    name: str = ""
    kind: str
    endpoint_url: str | None = Field(default=None, alias="endpointURL")
    disable_resolve_message: bool = Field(default=False, alias="disableResolveMessage")
    settings: dict[str, Any] = Field(default_factory=dict)
    timeout: float | None = Field(default=None, gt=0)

    @field_validator("kind")
    @classmethod
    def _normalize_kind(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("kind must not be empty")
        return value

    @property
    def label(self) -> str:
        """Human-readable channel identity for logs and errors."""
        return self.name or self.uid or self.kind

    def url(self) -> str:
        """Endpoint URL, falling back to the ``url`` provider setting."""
        return str(self.endpoint_url or self.settings.get("url") or "").strip()

    def get_str(self, key: str, default: str = "") -> str:
        value = self.settings.get(key, default)
        if value is None:
            return default
        return str(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.get(key, default)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)


class DispatchSettings(BaseModel):
    """Engine-wide settings shared by every dispatch."""

    model_config = ConfigDict(frozen=True)

    external_url: str = "http://localhost:3000/"
    product_name: str = "alert-dispatch"
    build_version: str = __version__
    default_timeout: float = Field(default=10.0, gt=0)
    max_concurrency: int = Field(default=16, ge=1)
    user_agent: str = f"alert-dispatch/{__version__}"

    @property
    def monitoring_tool(self) -> str:
        return f"{self.product_name} v{self.build_version}"

    def alerting_list_url(self) -> str:
        """External URL of the alert list page."""
        return self.external_url.rstrip("/") + "/alerting/list"


def load_channel_configs(raw: Iterable[Mapping[str, Any]]) -> list[ChannelConfig]:
    """Validate channel records coming from the configuration store."""
    return [ChannelConfig.model_validate(dict(item)) for item in raw]
