import logging
from typing import Any, Mapping, Optional

from mcp import types

from cep_mcp.core.models.exceptions import ExternalAPIError, InvalidCEPError
from cep_mcp.core.services.cep_service import fetch_address_by_cep, format_address, validate_cep
from cep_mcp.core.services.http_client_manager import get_http_client_manager

logger = logging.getLogger(__name__)

TOOL_NAME = "lookup_address"

LOOKUP_ADDRESS_TOOL = types.Tool(
    name=TOOL_NAME,
    description=(
        "Get address information from a Brazilian ZIP code (CEP). "
        "Accepts formats like 01310-100 or 01310100."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "cep": {
                "type": "string",
                "description": "Brazilian ZIP code (CEP) with or without hyphen (e.g., 01310-100 or 01310100)",
            },
        },
        "required": ["cep"],
    },
)


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def error_result(text: str) -> types.CallToolResult:
    return text_result(text, is_error=True)


async def handle_lookup_address(arguments: Optional[Mapping[str, Any]]) -> types.CallToolResult:
    """
    Resolves a CEP into a formatted address.

    Input and upstream failures come back as error results instead of being
    raised, so the host always receives a CallToolResult.
    """
    arguments = arguments or {}

    if "cep" not in arguments:
        return error_result("CEP parameter is required")

    cep = arguments["cep"]
    if not isinstance(cep, str):
        return error_result("CEP must be a string")

    try:
        cleaned = validate_cep(cep)
    except InvalidCEPError as e:
        return error_result(e.message)

    logger.info(f"Looking up address for CEP {cleaned}")

    try:
        async with get_http_client_manager().client() as client:
            address = await fetch_address_by_cep(cleaned, client)
    except ExternalAPIError as e:
        logger.warning(f"Lookup for CEP {cleaned} failed: {e.message}")
        return error_result(f"Failed to fetch address: {e.message}")

    return text_result(format_address(address))
