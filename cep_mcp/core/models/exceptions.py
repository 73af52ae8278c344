from typing import Optional


class CEPError(Exception):
    """Base exception for CEP lookups."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidCEPError(CEPError):
    """Raised when the tool input is missing, mistyped or not a well-formed CEP."""
    pass


class ExternalAPIError(CEPError):
    """Custom exception for upstream CEP API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class CEPNotFoundError(ExternalAPIError):
    """Exception raised when the upstream API does not know the CEP."""

    def __init__(self, message: str = "CEP not found"):
        super().__init__(message, status_code=404)
