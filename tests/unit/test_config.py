"""Tests for channel and engine configuration."""

import pytest
from pydantic import ValidationError

from alert_dispatch.config import ChannelConfig, DispatchSettings, load_channel_configs


def test_channel_config_accepts_store_names():
    config = ChannelConfig.model_validate(
        {
            "uid": "c1",
            "name": "ops",
            "kind": " VictorOps ",
            "endpointURL": "https://vo.example/hook",
            "disableResolveMessage": True,
        }
    )

    assert config.kind == "victorops"
    assert config.url() == "https://vo.example/hook"
    assert config.disable_resolve_message is True


def test_url_falls_back_to_settings():
    config = ChannelConfig(kind="webhook", settings={"url": " https://hook "})

    assert config.url() == "https://hook"


def test_label_prefers_name_then_uid():
    assert ChannelConfig(kind="slack", name="n", uid="u").label == "n"
    assert ChannelConfig(kind="slack", uid="u").label == "u"
    assert ChannelConfig(kind="slack").label == "slack"


def test_empty_kind_is_invalid():
    with pytest.raises(ValidationError):
        ChannelConfig(kind="  ")


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        ChannelConfig(kind="webhook", timeout=0)


def test_settings_helpers():
    config = ChannelConfig(kind="slack", settings={"flag": "true", "off": "no", "n": None})

    assert config.get_bool("flag") is True
    assert config.get_bool("off") is False
    assert config.get_str("n", "fallback") == "fallback"
    assert config.get_str("missing") == ""


def test_load_channel_configs():
    configs = load_channel_configs(
        [
            {"uid": "a", "kind": "webhook", "settings": {"url": "https://a"}},
            {"uid": "b", "kind": "slack", "settings": {"url": "https://b"}},
        ]
    )

    assert [c.uid for c in configs] == ["a", "b"]


def test_dispatch_settings_derived_values():
    settings = DispatchSettings(
        external_url="http://grafana.local/", product_name="Grafana", build_version="8.0.0"
    )

    assert settings.monitoring_tool == "Grafana v8.0.0"
    assert settings.alerting_list_url() == "http://grafana.local/alerting/list"


def test_dispatch_settings_validation():
    with pytest.raises(ValidationError):
        DispatchSettings(max_concurrency=0)
    with pytest.raises(ValidationError):
        DispatchSettings(default_timeout=-1)
