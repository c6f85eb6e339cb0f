"""Socket setup helpers working on raw file descriptors."""

from __future__ import annotations

import contextlib
import errno
import os
import socket
from collections.abc import Iterator

from cerberus.errors import (
    ConnectionRefused,
    IOFailure,
    SystemCallError,
    UnknownHost,
)

LISTEN_BACKLOG = 20


@contextlib.contextmanager
def _borrowed(fd: int) -> Iterator[socket.socket]:
    """Wrap ``fd`` in a socket object without taking ownership of it."""
    sock = socket.socket(fileno=fd)
    try:
        yield sock
    finally:
        sock.detach()


def set_tcpnodelay(fd: int) -> None:
    """Turn off Nagle's algorithm on a TCP socket."""
    try:
        with _borrowed(fd) as sock:
            sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
    except OSError as exc:
        raise SystemCallError("setsockopt:nodelay", exc.errno or 0) from exc


def set_nonblocking(fd: int) -> None:
    """Put a descriptor into non-blocking mode."""
    try:
        os.set_blocking(fd, False)
    except OSError as exc:
        raise SystemCallError("fcntl:setfl", exc.errno or 0) from exc


def new_stream_socket() -> int:
    """Create an IPv4 TCP socket and return its descriptor."""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise IOFailure("Socket create", exc.errno or 0) from exc
    return sock.detach()


def connect_fd(host: str, port: int, fd: int) -> None:
    """Connect ``fd`` to ``host:port``; an in-progress connect counts as done."""
    with contextlib.suppress(SystemCallError):
        set_tcpnodelay(fd)
    try:
        socket.inet_pton(socket.AF_INET, host)
    except OSError as exc:
        raise UnknownHost(host) from exc
    try:
        with _borrowed(fd) as sock:
            code = sock.connect_ex((host, port))
    except OSError as exc:
        raise ConnectionRefused(host, port, exc.errno or 0) from exc
    if code not in (0, errno.EINPROGRESS):
        raise ConnectionRefused(host, port, code)


def bind_to(fd: int, port: int) -> None:
    """Bind ``fd`` to ``port`` on all interfaces and start listening."""
    options = [socket.SO_REUSEADDR]
    reuse_port = getattr(socket, "SO_REUSEPORT", None)
    if reuse_port is not None:
        options.append(reuse_port)
    try:
        with _borrowed(fd) as sock:
            for option in options:
                sock.setsockopt(socket.SOL_SOCKET, option, 1)
    except OSError as exc:
        raise SystemCallError("set reuseport", exc.errno or 0) from exc
    try:
        with _borrowed(fd) as sock:
            sock.bind(("0.0.0.0", port))
    except OSError as exc:
        raise SystemCallError("bind", exc.errno or 0) from exc
    with contextlib.suppress(OSError), _borrowed(fd) as sock:
        sock.listen(LISTEN_BACKLOG)