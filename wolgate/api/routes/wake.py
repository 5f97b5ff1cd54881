"""Wake routes — GET /<comma separated mac address list>?params

Where valid params are:
    via: the local address or device to send on
    remote: the remote address to send to (default: 255.255.255.255:9)
    pass: the wake password for all targets - 12 digit hex number
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse
from starlette.datastructures import QueryParams

from wolgate.config import settings
from wolgate.errors import AddressError, ParameterError, PasswordError, RouteError
from wolgate.services.route_service import route
from wolgate.services.wake_service import wake_targets
from wolgate.utils.addr import resolve_udp_addr
from wolgate.utils.wol import parse_password

logger = logging.getLogger(__name__)
router = APIRouter()

NO_TARGETS = "must specify at least one target MAC address"


def parameter(params: QueryParams, name: str) -> str:
    """Return the single value of a query parameter, or "" when absent."""
    values = params.getlist(name)
    if not values:
        return ""
    if len(values) > 1:
        raise ParameterError(f"too many parameters: {values}")
    return values[0]


def _bad_request(msg: str) -> HTTPException:
    logger.warning(msg)
    return HTTPException(400, msg)


@router.get("/", response_class=PlainTextResponse)
def wake_root():
    """The root path names no targets."""
    raise _bad_request(NO_TARGETS)


@router.get("/{macs}", response_class=PlainTextResponse)
def wake(macs: str, request: Request):
    """Send a wake packet to every MAC address in the path."""
    targets = macs.split(",")
    if not any(targets):
        raise _bad_request(NO_TARGETS)

    params = request.query_params
    try:
        via = parameter(params, "via")
        local_text = route(via)
        remote_text = parameter(params, "remote") or settings.default_remote
        pass_text = parameter(params, "pass")
    except (ParameterError, AddressError, RouteError) as e:
        raise _bad_request(f"invalid parameter: {e}")

    try:
        remote = resolve_udp_addr(remote_text)
    except AddressError as e:
        raise _bad_request(f"could not parse remote {remote_text!r} as a valid UDP address: {e}")

    local = None
    if local_text:
        try:
            local = resolve_udp_addr(local_text)
        except AddressError as e:
            raise _bad_request(f"could not parse local {local_text!r} as a valid UDP address: {e}")

    try:
        password = parse_password(pass_text)
    except PasswordError as e:
        raise _bad_request(str(e))

    results = wake_targets(targets, password=password, local=local, remote=remote)
    body = "".join(f"\N{WAVING HAND SIGN} {r.mac}\n" for r in results if r.ok)
    return PlainTextResponse(body)
