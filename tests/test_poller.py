import select
import socket

import pytest

from cerberus.errors import SystemCallError
from cerberus.poller import (
    MAX_EVENTS,
    PollEvent,
    Poller,
    event_is_hup,
    event_is_read,
    event_is_write,
)


@pytest.fixture
def poller():
    p = Poller()
    yield p
    p.close()


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    yield a, b
    a.close()
    b.close()


def test_event_predicates():
    assert event_is_hup(select.EPOLLRDHUP) is True
    assert event_is_read(select.EPOLLIN) is True
    assert event_is_write(select.EPOLLOUT) is True
    assert event_is_hup(0) is False
    assert event_is_read(select.EPOLLOUT) is False
    assert event_is_write(select.EPOLLIN | select.EPOLLRDHUP) is False


def test_wait_with_max_events_returns_all_ready(poller):
    a1, b1 = socket.socketpair()
    a2, b2 = socket.socketpair()
    try:
        poller.add_write(a1.fileno(), 1)
        poller.add_write(a2.fileno(), 2)
        events = poller.wait(max_events=MAX_EVENTS, timeout=1000)
        assert sorted(e.data for e in events) == [1, 2]
    finally:
        for s in (a1, b1, a2, b2):
            s.close()


def test_readable_event_carries_data(poller, pair):
    a, b = pair
    conn = object()
    poller.add_read(a.fileno(), conn)
    b.sendall(b"+PING\r\n")
    events = poller.wait(timeout=1000)
    assert len(events) == 1
    assert events[0].data is conn
    assert event_is_read(events[0].events)
    assert not event_is_write(events[0].events)


def test_nothing_ready_returns_empty(poller, pair):
    a, _ = pair
    poller.add_read(a.fileno(), "client")
    assert poller.wait(timeout=0) == []


def test_add_write_reports_writable(poller, pair):
    a, _ = pair
    poller.add_write(a.fileno(), "server")
    events = poller.wait(timeout=1000)
    assert events == [PollEvent(events[0].events, "server")]
    assert event_is_write(events[0].events)


def test_set_read_drops_write_interest(poller, pair):
    a, _ = pair
    poller.add_write(a.fileno(), "server")
    poller.set_read(a.fileno(), "server")
    assert poller.wait(timeout=0) == []


def test_set_write_replaces_data(poller, pair):
    a, _ = pair
    poller.add_read(a.fileno(), "old")
    poller.set_write(a.fileno(), "new")
    events = poller.wait(timeout=1000)
    assert [e.data for e in events] == ["new"]
    assert event_is_write(events[0].events)


def test_hang_up_is_reported(poller, pair):
    a, b = pair
    poller.add_read(a.fileno(), "client")
    b.close()
    events = poller.wait(timeout=1000)
    assert len(events) == 1
    assert event_is_hup(events[0].events)


def test_delete_stops_reporting(poller, pair):
    a, b = pair
    poller.add_read(a.fileno(), "client")
    poller.delete(a.fileno())
    b.sendall(b"x")
    assert poller.wait(timeout=0) == []
    poller.delete(a.fileno())
    assert poller.wait(timeout=0) == []


def test_max_events_limits_result(poller):
    a1, b1 = socket.socketpair()
    a2, b2 = socket.socketpair()
    try:
        poller.add_write(a1.fileno(), 1)
        poller.add_write(a2.fileno(), 2)
        first = poller.wait(max_events=1, timeout=1000)
        assert len(first) == 1
        assert first[0].data in (1, 2)
    finally:
        for s in (a1, b1, a2, b2):
            s.close()


def test_add_twice_raises(poller, pair):
    a, _ = pair
    poller.add_read(a.fileno(), "client")
    with pytest.raises(SystemCallError) as exc:
        poller.add_read(a.fileno(), "client")
    assert str(exc.value).startswith("epoll_ctl ")


def test_modify_unregistered_raises(poller, pair):
    a, _ = pair
    with pytest.raises(SystemCallError):
        poller.set_read(a.fileno(), "client")


def test_context_manager_closes():
    with Poller() as p:
        assert p.closed is False
    assert p.closed is True