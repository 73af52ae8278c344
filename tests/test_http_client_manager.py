"""Tests for the shared HTTP client manager."""

import httpx
import pytest

from cep_mcp.core.config import settings
from cep_mcp.core.services.http_client_manager import HTTPClientManager, get_http_client_manager


def ok(request):
    return httpx.Response(200, json={"user_agent": request.headers["User-Agent"]})


async def test_per_call_client_is_closed_after_scope():
    manager = HTTPClientManager(transport=httpx.MockTransport(ok))

    async with manager.client() as client:
        response = await client.get("https://brasilapi.com.br/api/cep/v1/01310100")
        assert response.json()["user_agent"] == settings.USER_AGENT

    assert client.is_closed
    assert not manager.is_initialized


async def test_per_call_client_is_closed_on_error():
    manager = HTTPClientManager(transport=httpx.MockTransport(ok))

    with pytest.raises(RuntimeError):
        async with manager.client() as client:
            raise RuntimeError("boom")

    assert client.is_closed


async def test_shared_client_is_reused_until_closed():
    manager = HTTPClientManager(transport=httpx.MockTransport(ok))
    await manager.initialize()
    shared = manager.get_client()

    async with manager.client() as first:
        pass
    async with manager.client() as second:
        pass

    assert first is shared and second is shared
    assert not shared.is_closed

    await manager.close()
    assert shared.is_closed
    assert not manager.is_initialized


async def test_initialize_is_idempotent():
    manager = HTTPClientManager(transport=httpx.MockTransport(ok))
    await manager.initialize()
    client = manager.get_client()
    await manager.initialize()

    assert manager.get_client() is client
    await manager.close()


def test_get_client_requires_initialize():
    with pytest.raises(RuntimeError):
        HTTPClientManager().get_client()


def test_get_http_client_manager_is_singleton():
    assert get_http_client_manager() is get_http_client_manager()


async def test_built_client_uses_five_second_timeout():
    client = HTTPClientManager(transport=httpx.MockTransport(ok))._build_client()

    assert client.timeout == httpx.Timeout(5.0)
    await client.aclose()
