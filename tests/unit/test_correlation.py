"""Tests for correlation ID scoping."""

import asyncio

import pytest

from alert_dispatch.correlation import (
    correlation_scope,
    get_correlation_id,
    set_correlation_id,
)


def test_scope_generates_and_restores():
    assert get_correlation_id() is None

    with correlation_scope() as cid:
        assert cid
        assert get_correlation_id() == cid

    assert get_correlation_id() is None


def test_scope_reuses_active_id():
    with correlation_scope("outer"):
        with correlation_scope() as inner:
            assert inner == "outer"
        with correlation_scope("explicit") as explicit:
            assert explicit == "explicit"
        assert get_correlation_id() == "outer"


@pytest.mark.asyncio
async def test_id_is_visible_in_child_tasks():
    async def read():
        return get_correlation_id()

    with correlation_scope("cid-7"):
        assert await asyncio.create_task(read()) == "cid-7"


def test_set_correlation_id():
    set_correlation_id("manual")
    try:
        assert get_correlation_id() == "manual"
    finally:
        set_correlation_id(None)
