"""
HTTP transports used by the Paycor client.

A transport is anything with ``send(prepared_request) -> requests.Response``.
A plain ``requests.Session`` qualifies, as does :class:`SessionTransport`,
the default, which also keeps a persistent in-memory cookie jar and
applies the configured timeout.
"""

import logging
from typing import Optional, Protocol

import requests
from requests.cookies import RequestsCookieJar

from .constants import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Capability to send a prepared request and return its response."""

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        ...


class SessionTransport:
    """
    Default transport backed by ``requests.Session``.

    Cookies set by the server are stored in the session jar and sent back
    on later requests from the same transport.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT,
                 cookie_jar: Optional[RequestsCookieJar] = None):
        self.timeout = timeout
        self.session = requests.Session()
        if cookie_jar is not None:
            self.session.cookies = cookie_jar

    @property
    def cookies(self) -> RequestsCookieJar:
        return self.session.cookies

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """
        Send a prepared request, adding stored cookies first.

        Redirects are not followed: the signature covers the URL, so a
        3xx reply is handed back as is.
        """
        request.prepare_cookies(self.session.cookies)
        logger.debug("sending %s %s", request.method, request.url)
        return self.session.send(request, timeout=self.timeout, allow_redirects=False)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()
