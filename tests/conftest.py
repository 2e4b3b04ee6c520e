"""Shared fixtures for the alert dispatch test suite."""

from datetime import datetime, timezone

import pytest

from alert_dispatch.alerts import Alert, AlertBatch, AlertStatus
from alert_dispatch.config import ChannelConfig, DispatchSettings
from alert_dispatch.dispatch import DispatchCoordinator
from alert_dispatch.memory.fake import InMemoryTransport
from alert_dispatch.memory.sink import InMemoryResultSink
from alert_dispatch.template.registry import TemplateSet

FIXED_NOW = datetime(2021, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings():
    """Engine settings with a recognizable product identity."""
    return DispatchSettings(
        external_url="http://grafana.local/",
        product_name="Grafana",
        build_version="8.0.0",
    )


@pytest.fixture
def templates():
    """Template set holding only the built-in definitions."""
    return TemplateSet()


@pytest.fixture
def firing_alert():
    return Alert(
        labels={"alertname": "HighCPU", "instance": "server1"},
        annotations={"summary": "CPU usage above 90%"},
        generator_url="http://grafana.local/alerting/1/view",
        status=AlertStatus.FIRING,
    )


@pytest.fixture
def resolved_alert():
    return Alert(
        labels={"alertname": "HighCPU", "instance": "server2"},
        annotations={"summary": "CPU usage back to normal"},
        generator_url="http://grafana.local/alerting/1/view",
        status=AlertStatus.RESOLVED,
    )


@pytest.fixture
def firing_batch(firing_alert):
    return AlertBatch.of(firing_alert)


@pytest.fixture
def resolved_batch(resolved_alert):
    return AlertBatch.of(resolved_alert)


@pytest.fixture
def victorops_config():
    return ChannelConfig(
        uid="vo-1",
        name="victorops-oncall",
        kind="victorops",
        settings={"url": "https://x"},
    )


@pytest.fixture
def transport():
    return InMemoryTransport()


@pytest.fixture
def sink():
    return InMemoryResultSink()


@pytest.fixture
def coordinator(templates, transport, settings, sink):
    return DispatchCoordinator(
        templates,
        transport,
        settings=settings,
        sink=sink,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def now():
    """Fixed clock value used by the coordinator fixture."""
    return FIXED_NOW
