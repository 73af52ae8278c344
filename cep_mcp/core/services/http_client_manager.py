import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator, Optional

import httpx

from cep_mcp.core.config import REQUEST_TIMEOUT, settings

logger = logging.getLogger(__name__)


class HTTPClientManager:
    """
    HTTPClientManager owns the process-wide httpx.AsyncClient used for upstream
    CEP lookups.

    The server lifespan calls initialize() and close(); while initialized, every
    lookup shares the same connection pool. Outside of it, client() hands out a
    short-lived client that is closed when the caller's scope exits.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the client instance to None."""
        # The client will be created on initialize()
        self._client: Optional[httpx.AsyncClient] = None
        self._transport = transport

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def _build_client(self) -> httpx.AsyncClient:
        # Define limits for connection pooling
        limits = httpx.Limits(
            max_keepalive_connections=settings.HTTPX_MAX_KEEPALIVE,
            max_connections=settings.HTTPX_MAX_CONNECTIONS,
            keepalive_expiry=settings.HTTPX_KEEPALIVE_EXPIRY,
        )

        headers = {
            "User-Agent": settings.USER_AGENT,
            "Accept": "application/json",
        }

        return httpx.AsyncClient(
            timeout=httpx.Timeout(REQUEST_TIMEOUT),
            limits=limits,
            headers=headers,
            follow_redirects=True,
            verify=settings.HTTPX_VERIFY_SSL,
            transport=self._transport,
        )

    async def initialize(self) -> None:
        """
        Creates the shared client. Should only be called once, typically from
        the server lifespan.
        """
        if self._client is not None:
            return
        self._client = self._build_client()
        logger.debug("Shared HTTP client created.")

    def get_client(self) -> httpx.AsyncClient:
        """
        Provides direct access to the shared client.
        Raises an error if the client has not been initialized.
        """
        if not self._client:
            raise RuntimeError("HTTPClientManager has not been initialized. Call initialize() first.")
        return self._client

    @asynccontextmanager
    async def client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Yields the shared client, or a per-call client closed on every exit path."""
        if self._client is not None:
            yield self._client
            return

        async with self._build_client() as client:
            yield client

    async def close(self) -> None:
        """
        Gracefully closes the shared client and its connection pool.
        This must be called during server shutdown.
        """
        if self._client:
            try:
                await self._client.aclose()
            except Exception as e:
                logger.warning(f"Failed to close HTTP client: {e}")
            finally:
                self._client = None


@lru_cache
def get_http_client_manager() -> HTTPClientManager:
    """
    Singleton accessor using lru_cache.
    Returns the single instance of the HTTPClientManager.
    """
    return HTTPClientManager()
