"""Thin file-descriptor I/O used by the connections of the proxy."""

from __future__ import annotations

import os
import socket
from collections.abc import Iterable

from cerberus.errors import SocketAcceptError


def read(fd: int, count: int) -> bytes:
    """Read at most ``count`` bytes from ``fd``.

    Returns an empty bytes object when the peer has hung up. Raises
    ``OSError`` (``BlockingIOError`` when a non-blocking descriptor has
    nothing to read).
    """
    return os.read(fd, count)


def write(fd: int, data: bytes) -> int:
    """Write ``data`` to ``fd`` and return how many bytes were written."""
    return os.write(fd, data)


def writev(fd: int, buffers: Iterable[bytes]) -> int:
    """Write several buffers with one call and return the bytes written."""
    return os.writev(fd, list(buffers))


def close(fd: int) -> None:
    """Close a file descriptor."""
    os.close(fd)


def accept(accfd: int) -> int:
    """Accept a connection on the listening descriptor and return its fd.

    Raises ``SocketAcceptError`` when no connection could be accepted.
    """
    try:
        with socket.fromfd(accfd, socket.AF_INET, socket.SOCK_STREAM) as listener:
            conn, _ = listener.accept()
    except OSError as exc:
        raise SocketAcceptError(exc.errno or 0) from exc
    return conn.detach()