"""Edge-triggered readiness polling of connection descriptors."""

from __future__ import annotations

import select
from dataclasses import dataclass
from typing import Any

from cerberus.errors import SystemCallError

MAX_EVENTS = 1024

_ADD_READ = select.EPOLLET | select.EPOLLIN | select.EPOLLRDHUP
_ADD_WRITE = select.EPOLLET | select.EPOLLIN | select.EPOLLOUT | select.EPOLLRDHUP
_MOD_READ = select.EPOLLET | select.EPOLLIN
_MOD_WRITE = select.EPOLLET | select.EPOLLIN | select.EPOLLOUT


def event_is_hup(events: int) -> bool:
    """Tell whether the peer hung up."""
    return (events & select.EPOLLRDHUP) != 0


def event_is_read(events: int) -> bool:
    """Tell whether the descriptor is readable."""
    return (events & select.EPOLLIN) != 0


def event_is_write(events: int) -> bool:
    """Tell whether the descriptor is writable."""
    return (events & select.EPOLLOUT) != 0


@dataclass(frozen=True)
class PollEvent:
    """One readiness report: the event mask and the data registered with the fd."""

    events: int
    data: Any


class Poller:
    """An epoll instance that hands back the data registered with each fd."""

    def __init__(self) -> None:
        try:
            self._epoll = select.epoll(MAX_EVENTS)
        except OSError as exc:
            raise SystemCallError("epoll_create", exc.errno or 0) from exc
        self._data: dict[int, Any] = {}

    @property
    def closed(self) -> bool:
        """Whether the poller has been closed."""
        return self._epoll.closed

    def wait(self, max_events: int = MAX_EVENTS, timeout: int = -1) -> list[PollEvent]:
        """Wait up to ``timeout`` milliseconds (-1: forever) for ready descriptors."""
        seconds = -1 if timeout < 0 else timeout / 1000
        try:
            ready = self._epoll.poll(seconds, max_events)
        except InterruptedError:
            return []
        except OSError as exc:
            raise SystemCallError("epoll_wait", exc.errno or 0) from exc
        return [PollEvent(events, self._data.get(fd)) for fd, events in ready]

    def _control(self, action, fd: int, mask: int, data: Any) -> None:
        try:
            action(fd, mask)
        except OSError as exc:
            raise SystemCallError("epoll_ctl", exc.errno or 0) from exc
        self._data[fd] = data

    def add_read(self, fd: int, data: Any) -> None:
        """Start watching ``fd`` for input and hang-up."""
        self._control(self._epoll.register, fd, _ADD_READ, data)

    def add_write(self, fd: int, data: Any) -> None:
        """Start watching ``fd`` for input, output and hang-up."""
        self._control(self._epoll.register, fd, _ADD_WRITE, data)

    def set_read(self, fd: int, data: Any) -> None:
        """Watch an already registered ``fd`` for input only."""
        self._control(self._epoll.modify, fd, _MOD_READ, data)

    def set_write(self, fd: int, data: Any) -> None:
        """Watch an already registered ``fd`` for input and output."""
        self._control(self._epoll.modify, fd, _MOD_WRITE, data)

    def delete(self, fd: int) -> None:
        """Stop watching ``fd``; unknown descriptors are ignored."""
        self._data.pop(fd, None)
        try:
            self._epoll.unregister(fd)
        except (OSError, ValueError):
            pass

    def close(self) -> None:
        """Release the epoll instance."""
        self._epoll.close()
        self._data.clear()

    def __enter__(self) -> Poller:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()