"""Exception hierarchy for the sheetfdw package."""


class FdwError(Exception):
    """Base exception for all sheetfdw errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(FdwError):
    """Raised when a required option is missing or an option is invalid."""

    pass


class TransportError(FdwError):
    """Raised when the outbound HTTP request fails."""

    pass


class ProtocolError(FdwError):
    """Raised when a response violates the remote service's known contract."""

    pass


class ParseError(FdwError):
    """Raised when a response body is not valid JSON."""

    pass


class UnsupportedTypeError(FdwError):
    """Raised when a column declares a type with no coercion rule."""

    pass


class NotSupportedError(FdwError):
    """Raised for operations the connector deliberately does not implement."""

    pass
