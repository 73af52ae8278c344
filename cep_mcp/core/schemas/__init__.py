from cep_mcp.core.schemas.base import BaseSchema
from cep_mcp.core.schemas.cep import AddressResponse
