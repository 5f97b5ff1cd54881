"""UDP address parsing and resolution."""

from __future__ import annotations

import logging
import socket
from dataclasses import dataclass

from wolgate.errors import AddressError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UDPAddress:
    """A resolved UDP endpoint."""

    host: str
    port: int
    family: int = socket.AF_INET
    flowinfo: int = 0
    scope_id: int = 0

    @property
    def sockaddr(self) -> tuple:
        if self.family == socket.AF_INET6:
            return (self.host, self.port, self.flowinfo, self.scope_id)
        return (self.host, self.port)

    def __str__(self) -> str:
        if self.family == socket.AF_INET6:
            if self.scope_id:
                return f"[{self.host}%{self.scope_id}]:{self.port}"
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


def split_host_port(text: str) -> tuple[str, str]:
    """Split ``host:port``, ``[host]:port`` or ``:port`` into its parts.

    The port may be empty, the separating colon may not be missing.
    """
    if text.startswith("["):
        end = text.find("]")
        if end < 0:
            raise AddressError(f"address {text}: missing ']' in address")
        host, rest = text[1:end], text[end + 1:]
        if not rest.startswith(":"):
            if rest:
                raise AddressError(f"address {text}: unexpected text after ']'")
            raise AddressError(f"address {text}: missing port in address")
        port = rest[1:]
    else:
        if "]" in text:
            raise AddressError(f"address {text}: unexpected ']' in address")
        colons = text.count(":")
        if colons == 0:
            raise AddressError(f"address {text}: missing port in address")
        if colons > 1:
            raise AddressError(f"address {text}: too many colons in address")
        host, port = text.split(":", 1)

    if ":" in port or "[" in port or "]" in port:
        raise AddressError(f"address {text}: invalid port")
    return host, port


def resolve_udp_addr(text: str) -> UDPAddress:
    """Resolve ``host:port`` to a :class:`UDPAddress`.

    The host may be a name or a literal, the port a number or a service
    name. An empty host resolves to the wildcard address and an empty
    port to 0.
    """
    host, port = split_host_port(text)

    service: int | str
    if port == "":
        service = 0
    elif not port.isascii():
        raise AddressError(f"address {text}: invalid port")
    elif port.isdigit():
        service = int(port)
        if service > 65535:
            raise AddressError(f"address {text}: invalid port")
    else:
        service = port

    flags = socket.AI_PASSIVE if not host else 0
    try:
        infos = socket.getaddrinfo(host or None, service, 0, socket.SOCK_DGRAM, 0, flags)
    except (socket.gaierror, UnicodeError) as e:
        raise AddressError(f"lookup {text}: {e}") from e

    # Prefer IPv4 the way a broadcast target normally is
    infos.sort(key=lambda info: info[0] != socket.AF_INET)
    family, _, _, _, sockaddr = infos[0]
    addr = UDPAddress(sockaddr[0], sockaddr[1], family, *sockaddr[2:4])
    logger.debug("Resolved %s to %s", text, addr)
    return addr
