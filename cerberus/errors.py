"""Exception hierarchy and shared constants of the proxy."""

from __future__ import annotations

import os
import traceback

VERSION = "0.8.0-2018-05-02"
CLUSTER_SLOT_COUNT = 16384


def error_message(errcode: int) -> str:
    """Return the system's description of an errno value."""
    return os.strerror(errcode)


class ProxyError(RuntimeError):
    """Base class of all errors raised by the proxy."""


class BadRedisMessage(ProxyError):
    """A message from a peer does not follow the protocol."""

    def __init__(self, token: int | str) -> None:
        if isinstance(token, int):
            message = f"Unexpected token {chr(token)} ({token})"
        else:
            message = str(token)
        super().__init__(message)


class SystemCallError(ProxyError):
    """A system call failed; the stack at the point of failure is kept."""

    def __init__(self, what: str, errcode: int) -> None:
        super().__init__(f"{what} {error_message(errcode)}")
        self.errcode = errcode
        self.stack_trace = "".join(traceback.format_stack()[:-1])


class UnknownHost(ProxyError):
    """A host name could not be turned into an address."""

    def __init__(self, host: str) -> None:
        super().__init__("Unknown host: " + (host or "(empty string)"))
        self.host = host


class IOErrorBase(ProxyError):
    """Base class of errors raised while doing socket I/O."""


class ConnectionHungUp(IOErrorBase):
    """The peer closed the connection."""

    def __init__(self) -> None:
        super().__init__("Connection hung up")


class IOFailure(IOErrorBase):
    """An I/O operation failed with an errno value."""

    def __init__(self, what: str, errcode: int) -> None:
        super().__init__(f"{what} {error_message(errcode)}")
        self.errcode = errcode


class SocketAcceptError(IOFailure):
    """Accepting a new connection failed."""

    def __init__(self, errcode: int) -> None:
        super().__init__("accept", errcode)


class ConnectionRefused(IOErrorBase):
    """Connecting to a remote host failed."""

    def __init__(self, host: str, port: int, errcode: int) -> None:
        super().__init__(f"{error_message(errcode)} {host}:{port}")
        self.host = host
        self.port = port
        self.errcode = errcode