import asyncio
import logging
import re
from typing import Optional

import httpx
from pydantic import ValidationError

from cep_mcp.core.config import CEP_API_URL, REQUEST_TIMEOUT
from cep_mcp.core.models.exceptions import CEPNotFoundError, ExternalAPIError, InvalidCEPError
from cep_mcp.core.schemas.cep import AddressResponse

logger = logging.getLogger(__name__)

INVALID_CEP_MESSAGE = "Invalid CEP format. Expected 8 digits (e.g., 01310100 or 01310-100)"

_NON_DIGITS = re.compile(r"[^0-9]")
_CEP_PATTERN = re.compile(r"[0-9]{8}")

# Label and attribute, in display order
ADDRESS_FIELDS = (
    ("Street", "street"),
    ("Neighborhood", "neighborhood"),
    ("City", "city"),
    ("State", "state"),
    ("CEP", "cep"),
)


def clean_cep(cep: str) -> str:
    """Removes every non-digit character from a CEP."""
    return _NON_DIGITS.sub("", cep)


def is_valid_cep(cep: str) -> bool:
    """Checks if the CEP has exactly 8 digits."""
    return _CEP_PATTERN.fullmatch(cep) is not None


def validate_cep(cep: str) -> str:
    """Returns the digit-only CEP, or raises InvalidCEPError."""
    cleaned = clean_cep(cep)
    if not is_valid_cep(cleaned):
        raise InvalidCEPError(INVALID_CEP_MESSAGE)
    return cleaned


async def fetch_address_by_cep(cep: str, client: httpx.AsyncClient, timeout: Optional[float] = None) -> AddressResponse:
    """
    Calls BrasilAPI for an already validated CEP.

    The whole request, including reading the body, is bounded by `timeout`
    seconds (REQUEST_TIMEOUT by default). Any failure is raised as
    ExternalAPIError, with CEPNotFoundError for a 404.
    """
    url = CEP_API_URL.format(cep=cep)
    timeout = REQUEST_TIMEOUT if timeout is None else timeout

    try:
        async with asyncio.timeout(timeout):
            response = await client.get(url)
    except TimeoutError:
        raise ExternalAPIError(f"failed to execute request: request timed out after {timeout:g}s")
    except httpx.HTTPError as e:
        raise ExternalAPIError(f"failed to execute request: {str(e) or e.__class__.__name__}")

    if response.status_code == httpx.codes.NOT_FOUND:
        raise CEPNotFoundError()

    if not response.is_success:
        raise ExternalAPIError(
            f"API returned status {response.status_code}: {response.text}",
            status_code=response.status_code,
        )

    try:
        return AddressResponse.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise ExternalAPIError(f"failed to decode response: {e}", status_code=response.status_code)


def format_address(address: AddressResponse) -> str:
    """Creates a human-readable string from the address, skipping empty fields."""
    parts = []
    for label, field in ADDRESS_FIELDS:
        value = getattr(address, field)
        if value:
            parts.append(f"{label}: {value}")
    return "\n".join(parts)
