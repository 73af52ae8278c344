from pydantic_settings import BaseSettings, SettingsConfigDict

# Upstream endpoint and overall request deadline are fixed, not configurable
CEP_API_URL = "https://brasilapi.com.br/api/cep/v1/{cep}"
REQUEST_TIMEOUT = 5.0


class Settings(BaseSettings):
    """
    Manages the ambient server settings. Loads CEP_MCP_-prefixed variables from the environment.
    """

    model_config = SettingsConfigDict(env_prefix="CEP_MCP_", case_sensitive=True, extra="ignore")

    # --- Server Metadata ---
    PROJECT_NAME: str = "Brazilian ZIP code (CEP) Lookup 🇧🇷"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    USER_AGENT: str = "cep-lookup-mcp/1.0.0"

    # --- HTTP Client Pool ---
    # Prefer True in production for certificate validation
    HTTPX_VERIFY_SSL: bool = True
    HTTPX_MAX_KEEPALIVE: int = 20
    HTTPX_MAX_CONNECTIONS: int = 100
    HTTPX_KEEPALIVE_EXPIRY: int = 60

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()


settings = Settings()
