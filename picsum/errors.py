from typing import Optional

class PicsumError(Exception):
    pass

class InvalidParameter(PicsumError, ValueError):
    """Raised for bad local input, before any request is sent."""

class ConfigurationError(PicsumError):
    pass

class TransportError(PicsumError):
    pass

class DeserializationError(PicsumError):
    pass

class HTTPStatusError(PicsumError):
    def __init__(self, status_code: int, url: str, message: Optional[str] = None):
        self.status_code = status_code
        self.url = url

        super().__init__(message or f"status_code={status_code}, url={url}")

class NotFound(HTTPStatusError):
    pass

class BadRequest(HTTPStatusError):
    pass

class ServerError(HTTPStatusError):
    pass

class UnexpectedStatus(HTTPStatusError):
    pass
