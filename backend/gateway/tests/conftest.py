"""Shared fixtures for the gateway tests."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from mediagate.main import app


@pytest.fixture
async def client():
    """In-process client; upstream calls are intercepted by respx_mock."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
