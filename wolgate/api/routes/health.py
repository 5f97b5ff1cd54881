"""Health check — reports wake defaults and whether device routing works."""

import shutil

from fastapi import APIRouter

from wolgate import __version__
from wolgate.config import settings
from wolgate.schemas.system import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check. ``route_available`` is false when ``via=<device>`` cannot be resolved."""
    argv = settings.route_argv
    return HealthResponse(
        version=__version__,
        default_remote=settings.default_remote,
        route_command=settings.route_command,
        route_available=bool(argv) and shutil.which(argv[0]) is not None,
    )
