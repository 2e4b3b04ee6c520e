"""Settings sanitization: keeps provider credentials out of logs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit, urlunsplit

REDACTED = "***"

_DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "secret",
        "token",
        "access_token",
        "authorization",
        "api_key",
        "apikey",
        "integration_key",
        "routing_key",
        "private_key",
    }
)


class MetadataSanitizer:
    """
    Sanitizes channel settings before they are logged.

    Channel settings routinely carry credentials: API keys, HMAC secrets, and
    webhook URLs whose path or query *is* the credential (Slack, VictorOps).
    Keys are matched case-insensitively at any nesting depth; URL values keep
    only scheme and host.
    """

    def __init__(
        self,
        *,
        sensitive_fields: set[str] | None = None,
        url_fields: set[str] | None = None,
    ) -> None:
        sensitive = set(sensitive_fields or _DEFAULT_SENSITIVE_FIELDS)
        self._sensitive_fields = {f.lower() for f in sensitive}
        self._url_fields = {f.lower() for f in (url_fields or {"url", "endpoint_url"})}

    def sanitize(self, settings: Mapping[str, Any]) -> dict[str, Any]:
        """Return a sanitized copy safe for logging."""
        return {
            str(key): self._sanitize_value(value, str(key).lower())
            for key, value in settings.items()
        }

    def _sanitize_value(self, value: Any, field_name: str) -> Any:
        if isinstance(value, Mapping):
            return self.sanitize(value)
        if isinstance(value, list):
            return [self._sanitize_value(item, field_name) for item in value]
        if field_name in self._sensitive_fields:
            return REDACTED
        if field_name in self._url_fields and isinstance(value, str):
            return redact_url(value)
        return value


def redact_url(url: str) -> str:
    """Keep scheme and host of a URL, masking path, query and userinfo."""
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        return REDACTED if url else url
    netloc = parts.hostname if parts.port is None else f"{parts.hostname}:{parts.port}"
    masked = REDACTED if (parts.path.strip("/") or parts.query) else ""
    return urlunsplit((parts.scheme, netloc, f"/{masked}" if masked else "", "", ""))


default_sanitizer = MetadataSanitizer()
