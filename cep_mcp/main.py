import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from cep_mcp.core.bootstrap import bootstrap_server
from cep_mcp.core.config import settings
from cep_mcp.core.services import get_http_client_manager

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    # stdout carries the MCP stdio transport, so logs go to stderr
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(server: Server) -> AsyncIterator[dict]:
    """
    Handles server startup and shutdown, making sure the HTTP client pool is
    initialized and cleaned up properly.
    """
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}...")

    manager = get_http_client_manager()
    logger.info("Initializing HTTP Client Pool...")
    await manager.initialize()

    try:
        yield {}
    finally:
        logger.info("Closing HTTP Client Pool...")
        await manager.close()
        logger.info("Server stopped.")


def create_server() -> Server:
    server = Server(settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    return bootstrap_server(server)


async def serve() -> None:
    server = create_server()
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    configure_logging()
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
