"""
HMAC-SHA1 request signing for the Paycor API.

The signed message is five newline separated fields::

    METHOD
    <empty>
    <empty>
    Date header value
    full request URL

and the signature is the base64 encoded HMAC-SHA1 of that message keyed
with the caller's private key.
"""

import base64
import hashlib
import hmac
from typing import Optional


def build_message(method: str, date: Optional[str], url: str) -> str:
    """
    Build the string that gets signed.

    Fields two and three are always empty. A missing date leaves its
    field empty too; the server will reject such a signature.
    """
    return "\n".join([method, "", "", date or "", url])


class Signer:
    """Computes Paycor signatures and auth header values."""

    def __init__(self, public_key: str, private_key: str):
        self.public_key = public_key
        self.private_key = private_key

    def sign(self, method: str, url: str, date: Optional[str]) -> str:
        """
        Generate the base64 HMAC-SHA1 signature for a request.

        Args:
            method: HTTP method
            url: Absolute request URL, query string included
            date: Value of the request's Date header

        Returns:
            Base64 encoded signature
        """
        message = build_message(method, date, url)
        mac = hmac.new(
            self.private_key.encode('utf-8'),
            message.encode('utf-8'),
            hashlib.sha1
        )
        return base64.b64encode(mac.digest()).decode('ascii')

    def auth_header_value(self, method: str, url: str, date: Optional[str]) -> str:
        """Return ``"<public_key> <signature>"`` for the paycorapi header."""
        return f"{self.public_key} {self.sign(method, url, date)}"
