"""Host and port pairs of cluster nodes."""

from __future__ import annotations

from dataclasses import dataclass

from cerberus.strutil import atoi, split_str


@dataclass(frozen=True, order=True)
class Address:
    """A host and port, ordered by host and then by port."""

    host: str
    port: int

    @classmethod
    def from_host_port(cls, addr: str) -> Address:
        """Parse ``host:port`` or ``host:port@busport``."""
        host_port = split_str(addr, ":")
        if len(host_port) != 2:
            raise ValueError("Invalid address: " + addr)
        port = split_str(host_port[1], "@")[0]
        return cls(host_port[0], atoi(port))

    @classmethod
    def from_hosts_ports(cls, addrs: str) -> set[Address]:
        """Parse a comma separated list of addresses, skipping empty items."""
        result = {cls.from_host_port(s) for s in split_str(addrs, ",") if s}
        if not result:
            raise ValueError("remote address is empty.")
        return result

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"