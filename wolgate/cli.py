"""wolgate-wake — send Wake-on-LAN packets from the command line.

Usage:
    wolgate-wake [--via ADDR] [--remote ADDR] [--pass HEX] MAC [MAC ...]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from wolgate import __version__
from wolgate.config import settings
from wolgate.errors import AddressError, PasswordError
from wolgate.services.wake_service import wake_targets
from wolgate.utils.addr import resolve_udp_addr
from wolgate.utils.wol import parse_password

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wolgate-wake",
        description="Broadcast Wake-on-LAN magic packets to the given MAC addresses.",
    )
    parser.add_argument(
        "--via",
        default="",
        help="specify the local address to send on",
    )
    parser.add_argument(
        "--remote",
        default=settings.default_remote,
        help="specify the remote address to send to (default: %(default)s)",
    )
    parser.add_argument(
        "--pass",
        dest="password",
        default="",
        help="specify the wake password for all targets - 12 digit hex number",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="report every packet sent",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("macs", nargs="*", metavar="MAC", help="target MAC address")
    return parser


def _setup_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    logging.getLogger("wolgate").setLevel(level)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if not args.macs:
        logger.error("must specify at least one target MAC address")
        parser.print_usage(sys.stderr)
        return 1

    try:
        remote = resolve_udp_addr(args.remote)
    except AddressError as e:
        logger.error("could not parse remote %r as a valid UDP address: %s", args.remote, e)
        return 1

    local = None
    if args.via:
        try:
            local = resolve_udp_addr(args.via)
        except AddressError as e:
            logger.error("could not parse local %r as a valid UDP address: %s", args.via, e)
            return 1

    try:
        password = parse_password(args.password)
    except PasswordError as e:
        logger.error("%s", e)
        return 1

    results = wake_targets(args.macs, password=password, local=local, remote=remote)
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
