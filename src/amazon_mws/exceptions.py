"""Common exceptions for the amazon-mws package."""

from typing import Optional


class MWSError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(MWSError, ValueError):
    """Raised when credentials are missing or the marketplace is unknown."""


class UnknownOperation(MWSError, KeyError):
    """Raised when an operation name is not in the endpoint catalog."""

    def __init__(self, operation: str) -> None:
        super().__init__(operation)
        self.operation = operation

    def __str__(self) -> str:
        return f"Unknown MWS operation: {self.operation}"


class CallConstraintViolation(MWSError, ValueError):
    """Raised when a call exceeds a per-operation cardinality limit."""

    def __init__(self, message: str, limit: int, given: int) -> None:
        super().__init__(message)
        self.limit = limit
        self.given = given


class RemoteError(MWSError):
    """Raised when MWS answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: Optional[str] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.body = body


class TransportError(MWSError):
    """Raised when the HTTP transport fails before a response arrives."""


class XMLDecodeError(MWSError, ValueError):
    """Raised when a payload is not well-formed XML."""
