"""Tests for settings sanitization."""

import pytest

from alert_dispatch.sanitization import REDACTED, MetadataSanitizer, redact_url


def test_sensitive_fields_are_masked_at_any_depth():
    settings = {
        "Secret": "s3cret",
        "channel": "#ops",
        "auth": {"api_key": "k", "region": "eu"},
        "routes": [{"routing_key": "r"}],
    }

    sanitized = MetadataSanitizer().sanitize(settings)

    assert sanitized["Secret"] == REDACTED
    assert sanitized["channel"] == "#ops"
    assert sanitized["auth"] == {"api_key": REDACTED, "region": "eu"}
    assert sanitized["routes"] == [{"routing_key": REDACTED}]
    assert settings["Secret"] == "s3cret"


def test_url_fields_keep_only_scheme_and_host():
    sanitized = MetadataSanitizer().sanitize(
        {"url": "https://alert.victorops.com/integrations/generic/KEY/alert/route"}
    )

    assert sanitized["url"] == "https://alert.victorops.com/***"


def test_custom_fields():
    sanitizer = MetadataSanitizer(sensitive_fields={"pin"}, url_fields={"callback"})

    sanitized = sanitizer.sanitize({"pin": "1234", "secret": "x", "callback": "http://h/p"})

    assert sanitized == {"pin": REDACTED, "secret": "x", "callback": "http://h/***"}


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://hooks.slack.com/services/T/B/X", "https://hooks.slack.com/***"),
        ("https://user:pw@example.com:8443/", "https://example.com:8443"),
        ("http://example.com?token=abc", "http://example.com/***"),
        ("http://example.com", "http://example.com"),
        ("not a url", REDACTED),
        ("", ""),
    ],
)
def test_redact_url(url, expected):
    assert redact_url(url) == expected
