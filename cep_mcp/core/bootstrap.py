import logging
from typing import Any, Optional

from mcp import types
from mcp.server.lowlevel import Server

from cep_mcp.core.tools import LOOKUP_ADDRESS_TOOL, handle_lookup_address
from cep_mcp.core.tools.lookup_address import error_result

logger = logging.getLogger(__name__)

TOOL_HANDLERS = {
    LOOKUP_ADDRESS_TOOL.name: handle_lookup_address,
}


async def list_tools() -> list[types.Tool]:
    return [LOOKUP_ADDRESS_TOOL]


async def call_tool(name: str, arguments: Optional[dict[str, Any]]) -> types.CallToolResult:
    """Dispatches a tool call, turning unknown tools and unexpected faults into error results."""
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return error_result(f"Unknown tool: {name}")

    try:
        return await handler(arguments)
    except Exception as exc:
        # Log the full error server-side
        logger.error(f"Unhandled exception in tool {name}: {exc}", exc_info=True)
        return error_result(f"Internal error: {exc}")


def bootstrap_server(server: Server) -> Server:
    # Arguments are checked by the handlers themselves so callers get the tool's own messages
    server.list_tools()(list_tools)
    server.call_tool(validate_input=False)(call_tool)
    logger.debug(f"Registered tools: {', '.join(TOOL_HANDLERS)}")
    return server
