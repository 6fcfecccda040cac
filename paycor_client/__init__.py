"""
Paycor Client Library

A light-weight client for Paycor's REST API. It signs every request with
the ``paycorapi`` HMAC-SHA1 header, sends PUT/POST data as JSON and
returns the decoded JSON reply.

Example usage:
    from paycor_client import PaycorClient

    client = PaycorClient("public-key", "private-key")
    categories = client.get("categories")
"""

from .client import PaycorClient
from .exceptions import (
    PaycorError,
    TransportError,
    ApplicationError,
    ConfigurationError
)
from .constants import (
    PAYCOR_HOST,
    HEADER_PAYCOR_AUTH,
    DEFAULT_CONFIG
)
from .signer import Signer, build_message
from .transport import SessionTransport, Transport

__version__ = "1.0.0"
__all__ = [
    "PaycorClient",
    "PaycorError",
    "TransportError",
    "ApplicationError",
    "ConfigurationError",
    "PAYCOR_HOST",
    "HEADER_PAYCOR_AUTH",
    "DEFAULT_CONFIG",
    "Signer",
    "build_message",
    "SessionTransport",
    "Transport"
]
