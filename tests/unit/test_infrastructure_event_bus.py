"""Unit tests for InMemoryEventBus.

Tests cover:
- Publishing with no subscribers is a no-op
- Every subscriber runs, even when an earlier one fails
- First failure in registration order is raised; all failures are logged
- Exact type matching (no inheritance dispatch)
- Fan-out timeout
- Background delivery: start/stop lifecycle, ordering, failure logging
"""

import asyncio
from unittest.mock import Mock

import pytest

from bookstore.domain.events.account_events import PasswordResetRequested, UserCreated
from bookstore.infrastructure.events import InMemoryEventBus


def make_event(username: str = "alice") -> UserCreated:
    return UserCreated(username=username, base_url="https://shop.example")


@pytest.fixture
def logger():
    return Mock()


@pytest.fixture
def bus(logger):
    return InMemoryEventBus(logger=logger, publish_timeout=1.0)


@pytest.mark.unit
class TestPublish:
    """Test synchronous fan-out."""

    async def test_no_subscribers_is_noop(self, bus):
        await bus.publish(make_event())

    async def test_all_subscribers_receive_event(self, bus):
        received: list[str] = []

        async def first(event):
            received.append("first")

        async def second(event):
            received.append("second")

        bus.subscribe(UserCreated, first)
        bus.subscribe(UserCreated, second)

        await bus.publish(make_event())

        assert sorted(received) == ["first", "second"]

    async def test_exact_type_matching(self, bus):
        calls: list[object] = []

        async def on_reset(event):
            calls.append(event)

        bus.subscribe(PasswordResetRequested, on_reset)

        await bus.publish(make_event())

        assert calls == []

    async def test_failure_does_not_stop_other_subscribers(self, bus, logger):
        # Arrange
        completed: list[str] = []

        async def failing(event):
            raise ValueError("first failure")

        async def also_failing(event):
            raise KeyError("second failure")

        async def succeeding(event):
            completed.append("ok")

        bus.subscribe(UserCreated, failing)
        bus.subscribe(UserCreated, succeeding)
        bus.subscribe(UserCreated, also_failing)

        # Act
        with pytest.raises(ValueError, match="first failure"):
            await bus.publish(make_event())

        # Assert
        assert completed == ["ok"]
        failure_logs = [
            call
            for call in logger.warning.call_args_list
            if call.args[0] == "event_handler_failed"
        ]
        assert len(failure_logs) == 2

    async def test_publish_timeout(self, logger):
        bus = InMemoryEventBus(logger=logger, publish_timeout=0.01)

        async def slow(event):
            await asyncio.sleep(1)

        bus.subscribe(UserCreated, slow)

        with pytest.raises(TimeoutError):
            await bus.publish(make_event())

    def test_handlers_for_returns_registration_order(self, bus):
        async def a(event):
            pass

        async def b(event):
            pass

        bus.subscribe(UserCreated, a)
        bus.subscribe(UserCreated, b)

        assert bus.handlers_for(UserCreated) == [a, b]
        assert bus.handlers_for(PasswordResetRequested) == []


@pytest.mark.unit
class TestPublishLater:
    """Test background delivery."""

    async def test_requires_started_worker(self, bus):
        with pytest.raises(RuntimeError):
            await bus.publish_later(make_event())

    async def test_delivers_in_publish_order(self, bus):
        received: list[str] = []

        async def record(event):
            await asyncio.sleep(0)
            received.append(event.username)

        bus.subscribe(UserCreated, record)
        bus.start()

        for name in ["a", "b", "c"]:
            await bus.publish_later(make_event(name))
        await bus.stop()

        assert received == ["a", "b", "c"]
        assert bus.is_running is False

    async def test_failures_are_logged_not_raised(self, bus, logger):
        async def failing(event):
            raise RuntimeError("smtp down")

        bus.subscribe(UserCreated, failing)
        bus.start()

        await bus.publish_later(make_event())
        await bus.stop()

        logger.error.assert_called_once()
        assert logger.error.call_args.args[0] == "event_delivery_failed"

    async def test_start_is_idempotent(self, bus):
        bus.start()
        bus.start()

        assert bus.is_running is True
        await bus.stop()

    async def test_restart_after_stop_delivers_to_new_queue(self, bus):
        received: list[str] = []

        async def record(event):
            received.append(event.username)

        bus.subscribe(UserCreated, record)
        bus.start()
        await bus.publish_later(make_event("first"))
        await bus.stop()

        bus.start()
        await bus.publish_later(make_event("second"))
        await bus.stop()

        assert received == ["first", "second"]

    async def test_publish_later_after_stop_raises(self, bus):
        bus.start()
        await bus.stop()

        with pytest.raises(RuntimeError):
            await bus.publish_later(make_event())
