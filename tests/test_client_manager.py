"""Tests for reputation client recycling."""

import threading

import pytest

from weblog.errors import ConfigurationError
from weblog.reputation.manager import ReputationClientManager


class _FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class _FakeClient:
    def __init__(self):
        self.closed = False

    def check(self, params):
        return False

    def submit_spam(self, params):
        return None

    def close(self):
        self.closed = True


def _manager(clock, built):
    def factory():
        client = _FakeClient()
        built.append(client)
        return client

    return ReputationClientManager(factory, recycle_seconds=600, clock=clock)


def test_current_reuses_handle_within_threshold():
    clock = _FakeClock()
    built = []
    manager = _manager(clock, built)

    first = manager.current()
    clock.now += 600
    second = manager.current()

    assert first is second
    assert len(built) == 1


def test_current_recycles_handle_after_threshold():
    clock = _FakeClock()
    built = []
    manager = _manager(clock, built)

    first = manager.current()
    clock.now += 601
    second = manager.current()

    assert second is not first
    assert second.created_at == clock.now
    assert second.created_at > first.created_at
    assert first.retired
    assert first.client.closed
    assert not second.client.closed


def test_recycle_waits_for_in_flight_call_before_closing():
    clock = _FakeClock()
    built = []
    manager = _manager(clock, built)

    with manager.acquire() as handle:
        clock.now += 700
        replacement = manager.current()
        assert replacement is not handle
        assert not handle.client.closed

    assert handle.client.closed
    assert not replacement.client.closed


def test_close_closes_live_handle():
    clock = _FakeClock()
    built = []
    manager = _manager(clock, built)
    handle = manager.current()

    manager.close()

    assert handle.client.closed
    assert manager.current() is not handle


def test_concurrent_access_builds_single_handle():
    clock = _FakeClock()
    built = []
    manager = _manager(clock, built)
    barrier = threading.Barrier(8)
    handles = []

    def worker():
        barrier.wait()
        handles.append(manager.current())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(built) == 1
    assert all(handle is handles[0] for handle in handles)


def test_factory_value_error_surfaces_as_configuration_error():
    def factory():
        raise ValueError("Missing Akismet API key")

    manager = ReputationClientManager(factory)

    with pytest.raises(ConfigurationError, match="Missing Akismet API key"):
        with manager.acquire():
            pass
