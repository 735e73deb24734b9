"""Tests for deferred values."""

import asyncio
import warnings

import pytest

from deepmock import Deferred, create_recorder, rejected, resolved


@pytest.mark.asyncio
async def test_resolved_deferred():
    """Test awaiting a resolved deferred."""
    assert await resolved({"id": "1"}) == {"id": "1"}


@pytest.mark.asyncio
async def test_rejected_deferred_raises_same_error():
    """Test that a rejected deferred raises the configured error by identity."""
    error = ConnectionError("Network error")
    with pytest.raises(ConnectionError) as exc_info:
        await rejected(error)
    assert exc_info.value is error


@pytest.mark.asyncio
async def test_deferred_can_be_awaited_repeatedly():
    """Test that a deferred settles the same way on every await."""
    deferred = resolved(7)
    assert await deferred == 7
    assert await deferred == 7


@pytest.mark.asyncio
async def test_deferred_works_with_gather():
    """Test that deferreds are accepted by asyncio.gather."""
    results = await asyncio.gather(resolved(1), resolved(2))
    assert results == [1, 2]


@pytest.mark.asyncio
async def test_deferred_settles_after_yielding_to_loop():
    """Test that resolution happens under event loop scheduling."""
    order = []

    async def other():
        order.append("other")

    task = asyncio.create_task(other())
    order.append(await resolved("deferred"))
    await task

    assert order == ["other", "deferred"]


def test_unawaited_deferred_does_not_warn():
    """Test that dropping a deferred without awaiting it is silent."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        recorder = create_recorder().mock_resolved_value("unused")
        result = recorder()
        del result


def test_deferred_repr():
    """Test deferred repr for both outcomes."""
    assert repr(resolved(1)) == "<Deferred resolved=1>"
    assert "rejected" in repr(rejected(ValueError("x")))
    assert isinstance(resolved(), Deferred)
    assert not resolved().rejected
    assert rejected(ValueError()).rejected


@pytest.mark.asyncio
async def test_resolved_value_on_recorder():
    """Test mock_resolved_value and mock_resolved_value_once."""
    recorder = create_recorder()
    recorder.mock_resolved_value_once("first")
    recorder.mock_resolved_value("default")

    assert await recorder() == "first"
    assert await recorder() == "default"


@pytest.mark.asyncio
async def test_rejected_value_on_recorder():
    """Test that a configured rejection surfaces on await, not on call."""
    error = ValueError("rejected")
    recorder = create_recorder().mock_rejected_value(error)

    pending = recorder()
    assert recorder.mock.results[0].type == "return"

    with pytest.raises(ValueError) as exc_info:
        await pending
    assert exc_info.value is error


@pytest.mark.asyncio
async def test_rejected_value_once_falls_back():
    """Test that a one-shot rejection only affects the next call."""
    error = ValueError("once")
    recorder = create_recorder().mock_resolved_value("ok").mock_rejected_value_once(error)

    with pytest.raises(ValueError):
        await recorder()
    assert await recorder() == "ok"
