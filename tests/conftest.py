"""Test fixtures — FastAPI test client and loopback UDP receiver."""

import logging
import socket

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wolgate.main import create_app


@pytest_asyncio.fixture
async def client():
    """Provide an async test client for a fresh application."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def receiver():
    """A UDP socket bound to an ephemeral loopback port."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


@pytest.fixture(autouse=True)
def _reset_wolgate_log_level():
    """The CLI sets the package logger level, undo it between tests."""
    yield
    logging.getLogger("wolgate").setLevel(logging.NOTSET)
