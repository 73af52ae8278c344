from typing import Any

from pydantic import field_validator

from cep_mcp.core.schemas.base import BaseSchema


class AddressResponse(BaseSchema):
    """Address returned by BrasilAPI for a CEP. Fields the upstream leaves out are empty strings."""

    cep: str = ""
    state: str = ""
    city: str = ""
    neighborhood: str = ""
    street: str = ""
    service: str = ""

    @field_validator("cep", "state", "city", "neighborhood", "street", "service", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value
