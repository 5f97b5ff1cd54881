"""Local source address discovery via the kernel routing table."""

from __future__ import annotations

import logging
import subprocess

from wolgate.config import settings
from wolgate.errors import RouteError
from wolgate.utils.addr import split_host_port

logger = logging.getLogger(__name__)

SRC_SELECTOR = " src "
NO_DEVICE_PREFIX = "Cannot find device"


def route(dev: str) -> str:
    """Resolve a device name, optionally with ``:port``, to ``src:port``.

    ``dev`` that is not a known device is returned unchanged so it can be
    parsed as an address by the caller. An empty ``dev`` yields ``""``.
    """
    if not dev:
        return ""

    host, port = dev, ""
    if ":" in host:
        host, port = split_host_port(dev)

    argv = [*settings.route_argv, host]
    try:
        proc = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            timeout=settings.route_timeout_seconds,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise RouteError(f"ip: {e}") from e

    if proc.returncode != 0:
        if proc.stderr.startswith(NO_DEVICE_PREFIX) or proc.stdout.startswith(NO_DEVICE_PREFIX):
            logger.debug("%r is not a device, using it as an address", host)
            return dev
        raise RouteError(f"ip: exit status {proc.returncode}: {proc.stderr.strip()}")

    out = proc.stdout
    idx = out.find(SRC_SELECTOR)
    if idx < 0:
        raise RouteError(f"no src selector: {out!r}")
    src = out[idx + len(SRC_SELECTOR):].split(" ", 1)[0].strip()

    local = f"{src}:{port or '0'}"
    logger.info("Route for device %s: sending from %s", host, local)
    return local
