"""Wake-on-LAN (WOL) parsing and send helpers."""

from __future__ import annotations

import binascii
import re
import socket

from wakeonlan import create_magic_packet

from wolgate.config import settings
from wolgate.errors import MacAddressError, PasswordError
from wolgate.utils.addr import UDPAddress, resolve_udp_addr

_MAC_PATTERNS = (
    re.compile(r"([0-9a-f]{2})" + r":([0-9a-f]{2})" * 5, re.IGNORECASE),
    re.compile(r"([0-9a-f]{2})" + r"-([0-9a-f]{2})" * 5, re.IGNORECASE),
    re.compile(r"([0-9a-f]{4})" + r"\.([0-9a-f]{4})" * 2, re.IGNORECASE),
)

PASSWORD_HEX_DIGITS = 12


def parse_mac(text: str) -> str:
    """
    Parse a 6-octet hardware address.

    Accepts "aa:bb:cc:dd:ee:ff", "aa-bb-cc-dd-ee-ff" or "aabb.ccdd.eeff".
    Returns the lower-case colon separated form.
    """
    for pattern in _MAC_PATTERNS:
        match = pattern.fullmatch(text)
        if match:
            digits = "".join(match.groups()).lower()
            return ":".join(digits[i:i + 2] for i in range(0, 12, 2))
    raise MacAddressError(f"address {text}: invalid MAC address")


def parse_password(text: str) -> bytes | None:
    """Decode a SecureOn password given as 12 hex digits. Empty means none."""
    if not text:
        return None
    if len(text) != PASSWORD_HEX_DIGITS:
        raise PasswordError(f"invalid password: must be 12 hex digits long: {text!r}")
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise PasswordError(f"failed to parse password: {e}") from e


def send_wol(
    mac_address: str,
    password: bytes | None = None,
    local: UDPAddress | None = None,
    remote: UDPAddress | None = None,
) -> None:
    """
    Send a Wake-on-LAN magic packet.

    Args:
        mac_address: MAC address as returned by parse_mac()
        password: Optional 6 byte SecureOn password appended to the packet
        local: Local address to send from (default: any)
        remote: Destination address (default: settings.default_remote)
    """
    if remote is None:
        remote = resolve_udp_addr(settings.default_remote)

    packet = create_magic_packet(mac_address)
    if password:
        packet += password

    with socket.socket(remote.family, socket.SOCK_DGRAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        if local is not None:
            sock.bind(local.sockaddr)
        sock.sendto(packet, remote.sockaddr)
