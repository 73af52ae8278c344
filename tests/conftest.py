"""
Pytest configuration for the CEP lookup tests.

The upstream API is simulated with httpx.MockTransport, nothing here touches the network.
"""

import httpx
import pytest

from cep_mcp.core.services.http_client_manager import HTTPClientManager


PAULISTA_ADDRESS = {
    "cep": "01310100",
    "state": "SP",
    "city": "São Paulo",
    "neighborhood": "Bela Vista",
    "street": "Avenida Paulista",
    "service": "open-cep",
}


class FakeCepAPI:
    """Records requests and answers them from a CEP -> (status, body) table."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        cep = request.url.path.rsplit("/", 1)[-1]
        status_code, body = self.responses.get(cep, (404, {"message": "CEP não encontrado", "type": "service_error"}))
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, text=body)


@pytest.fixture
def fake_api():
    return FakeCepAPI({"01310100": (200, PAULISTA_ADDRESS)})


@pytest.fixture
def client_manager(fake_api, monkeypatch):
    """Per-call client manager wired to the fake API and used by the lookup tool."""
    manager = HTTPClientManager(transport=httpx.MockTransport(fake_api))
    monkeypatch.setattr("cep_mcp.core.tools.lookup_address.get_http_client_manager", lambda: manager)
    return manager


@pytest.fixture
async def mock_client(fake_api):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api)) as client:
        yield client

