"""Tests for the in-memory and console adapters."""

import pytest

from alert_dispatch.config import ChannelConfig
from alert_dispatch.delivery import DeliveryStatus, FailureReason, NotificationResult
from alert_dispatch.memory import ConsoleTransport, InMemoryResultSink, InMemoryTransport
from alert_dispatch.ports import IResultSink, ITransport
from alert_dispatch.primitives.exceptions import TransportError


def test_adapters_satisfy_ports():
    assert isinstance(InMemoryTransport(), ITransport)
    assert isinstance(ConsoleTransport(), ITransport)
    assert isinstance(InMemoryResultSink(), IResultSink)


@pytest.mark.asyncio
async def test_console_transport_prints(capsys):
    response = await ConsoleTransport().send(
        "https://x", b'{"ok": true}', "application/json", headers={"X-Sig": "1"}
    )

    out = capsys.readouterr().out
    assert response.ok
    assert "NOTIFICATION POSTED TO https://x" in out
    assert "X-Sig" in out
    assert '{"ok": true}' in out


@pytest.mark.asyncio
async def test_console_transport_can_stay_quiet(capsys):
    await ConsoleTransport(output_to_stdout=False).send("https://x", b"{}", "application/json")

    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_in_memory_transport_records_and_fails():
    transport = InMemoryTransport(fail_urls={"https://bad": "nope"}, raise_urls=["https://down"])

    ok = await transport.send("https://good", b"1", "text/plain", timeout=3.0)
    bad = await transport.send("https://bad", b"2", "text/plain")
    with pytest.raises(TransportError):
        await transport.send("https://down", b"3", "text/plain")

    assert ok.ok and ok.status_code == 200
    assert (bad.ok, bad.error, bad.status_code) == (False, "nope", 500)
    assert transport.attempts == ["https://good", "https://bad", "https://down"]
    transport.assert_sent("https://good")
    transport.assert_sent("https://bad", count=0)
    assert transport.sent_requests[0].timeout == 3.0
    with pytest.raises(AssertionError):
        transport.assert_sent("https://good", count=2)

    transport.clear()
    assert transport.attempts == [] and transport.sent_requests == []


@pytest.mark.asyncio
async def test_result_sink_filters_by_status():
    config = ChannelConfig(uid="c", kind="webhook")
    sink = InMemoryResultSink()

    await sink.record(NotificationResult.delivered(config, status_code=200))
    await sink.record(NotificationResult.failed(config, FailureReason.TIMEOUT))

    assert len(sink.results) == 2
    assert [r.reason for r in sink.by_status(DeliveryStatus.FAILED)] == [FailureReason.TIMEOUT]
    sink.clear()
    assert sink.results == []
