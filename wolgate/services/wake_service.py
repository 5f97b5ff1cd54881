"""Serial wake loop shared by the CLI and the HTTP endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from wolgate.errors import MacAddressError
from wolgate.utils.addr import UDPAddress
from wolgate.utils.wol import parse_mac, send_wol

logger = logging.getLogger(__name__)

Sender = Callable[..., None]


@dataclass
class WakeResult:
    """Outcome for one requested target."""

    target: str
    mac: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def wake_targets(
    targets: Iterable[str],
    password: bytes | None = None,
    local: UDPAddress | None = None,
    remote: UDPAddress | None = None,
    sender: Sender | None = None,
) -> list[WakeResult]:
    """Wake each target in order, one at a time.

    A target that fails to parse or send is reported and the loop moves on.
    """
    sender = sender or send_wol
    results: list[WakeResult] = []
    for target in targets:
        try:
            mac = parse_mac(target)
        except MacAddressError as e:
            msg = f"could not parse {target!r} as a valid MAC address: {e}"
            logger.error(msg)
            results.append(WakeResult(target=target, error=msg))
            continue

        try:
            sender(mac, password, local, remote)
        except (OSError, ValueError) as e:
            msg = f"error attempting to wake {mac}: {e}"
            logger.error(msg)
            results.append(WakeResult(target=target, mac=mac, error=msg))
            continue

        logger.info("sent wake packet to %r", mac)
        results.append(WakeResult(target=target, mac=mac))
    return results
