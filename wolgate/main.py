"""wolgate FastAPI application factory and server entry point."""

from __future__ import annotations

import argparse
import ipaddress
import logging
import socket
from typing import Any, Sequence

from fastapi import FastAPI

from wolgate import __version__
from wolgate.config import settings
from wolgate.errors import AddressError
from wolgate.utils.addr import split_host_port

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app() -> FastAPI:
    """Application factory."""
    from wolgate.api.routes import api_router

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
    )
    app.include_router(api_router)
    return app


def is_loopback(host: str) -> bool:
    """Report whether every address ``host`` resolves to is a loopback address."""
    try:
        infos = socket.getaddrinfo(host or None, None, 0, socket.SOCK_STREAM, 0, socket.AI_PASSIVE)
    except socket.gaierror as e:
        raise AddressError(f"lookup {host}: {e}") from e
    return all(ipaddress.ip_address(info[4][0].split("%", 1)[0]).is_loopback for info in infos)


def run(http_addr: str | None = None, **kwargs: Any) -> None:
    import uvicorn

    http_addr = http_addr or settings.http_addr
    host, port = split_host_port(http_addr)
    if port and not (port.isascii() and port.isdigit()):
        raise AddressError(f"address {http_addr}: invalid port")
    if not is_loopback(host):
        logger.warning("listening on a non-loopback device")

    logger.info("wolgate v%s listening on %s", __version__, http_addr)
    uvicorn.run(
        create_app(),
        host=host or "0.0.0.0",
        port=int(port or 0),
        log_level=settings.log_level.lower(),
        **kwargs,
    )


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="wolgate-server",
        description="HTTP endpoint to broadcast Wake-on-LAN packets.",
    )
    parser.add_argument(
        "--http",
        default=settings.http_addr,
        help="HTTP service address and port (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    setup_logging()
    try:
        run(args.http)
    except AddressError as e:
        parser.error(str(e))


app = create_app()


if __name__ == "__main__":
    main()
