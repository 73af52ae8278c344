from cep_mcp.core.config import settings
