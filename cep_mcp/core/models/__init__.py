from .exceptions import CEPError, InvalidCEPError, ExternalAPIError, CEPNotFoundError
