"""
Custom exceptions for the Paycor client library.

Every error carries a ``kind`` tag, a numeric ``code``, a human readable
``message`` and optional ``data`` with the raw context of the failure.
"""


class PaycorError(Exception):
    """Base exception for Paycor client errors."""

    kind = "error"

    def __init__(self, code, message, data=None):
        super().__init__(code, message, data)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self):
        return f"{self.code} {self.message}"


class TransportError(PaycorError):
    """Raised when no parsable reply came back from the server."""

    kind = "transport"


class ApplicationError(PaycorError):
    """Raised when the server answered with a non-success status."""

    kind = "application"


class ConfigurationError(PaycorError):
    """Raised when client configuration is invalid."""

    kind = "configuration"

    def __init__(self, message, data=None):
        super().__init__(None, message, data)

    def __str__(self):
        return self.message
