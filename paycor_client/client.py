"""
Paycor REST API client.

Hides the request cycle: builds the URL, encodes parameters, signs the
request with the ``paycorapi`` header, sends it and decodes the JSON reply.
"""

import json
import logging
from email.utils import formatdate
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import requests

from .constants import (
    DEFAULT_CONFIG,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    HEADER_PAYCOR_AUTH,
    JSON_CONTENT_TYPE,
    TRANSPORT_ERROR_CODE,
    UNPARSABLE_CONTENT_MESSAGE
)
from .exceptions import ApplicationError, ConfigurationError, TransportError
from .http_text import format_request, format_response
from .signer import Signer
from .transport import SessionTransport, Transport

logger = logging.getLogger(__name__)


class PaycorClient:
    """
    Client for making authenticated requests to Paycor's REST API.

    The client does not model Paycor's resources; it returns whatever
    JSON structure the service sends back.

    ``last_response`` always holds the response of the most recent call,
    with its request attached, even when that call raised. It is shared
    state, so one instance should not be used from several threads at once.
    """

    def __init__(self, public_key: str, private_key: str, debug_flag: bool = False,
                 agent: Optional[Transport] = None, **config):
        """
        Initialize Paycor client.

        Args:
            public_key: Public key identifying the caller
            private_key: Private key used as the HMAC secret
            debug_flag: Spare writable flag; when set, full request/response
                pairs are logged at DEBUG level
            agent: Transport with ``send(prepared_request)``; built lazily
                when omitted
            **config: Configuration options (base_url, timeout)
        """
        self._public_key = public_key
        self._private_key = private_key
        self.debug_flag = debug_flag
        self._agent = agent
        self.last_response = None

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.base_url = self.config['base_url'].rstrip('/')
        self._signer = Signer(public_key, private_key)

    @property
    def public_key(self) -> str:
        return self._public_key

    @property
    def private_key(self) -> str:
        return self._private_key

    @property
    def agent(self) -> Transport:
        """HTTP transport, created on first use if none was supplied."""
        if self._agent is None:
            self._agent = self._build_agent()
        return self._agent

    def _build_agent(self) -> Transport:
        return SessionTransport(timeout=self.config['timeout'])

    def _validate_config(self):
        """Validate client configuration."""
        if not self._public_key:
            raise ConfigurationError("public_key cannot be empty")

        if not self._private_key:
            raise ConfigurationError("private_key cannot be empty")

        base_url = self.config['base_url']
        if not base_url:
            raise ConfigurationError("base_url cannot be empty")

        if not isinstance(base_url, str) or urlsplit(base_url).scheme not in ('http', 'https'):
            raise ConfigurationError("base_url must be an http or https URL")

        timeout = self.config['timeout']
        if timeout is not None:
            # requests also takes a (connect, read) pair
            parts = timeout if isinstance(timeout, tuple) else (timeout,)
            if isinstance(timeout, tuple) and len(timeout) != 2:
                raise ConfigurationError("timeout must be a number or a (connect, read) pair")
            for part in parts:
                if isinstance(part, bool) or not isinstance(part, (int, float)):
                    raise ConfigurationError("timeout must be a number or a (connect, read) pair")
                if part <= 0:
                    raise ConfigurationError("timeout must be positive")

    def _create_url(self, path: str) -> str:
        """Join a relative path onto the API host."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def _build_request(self, method: str, path: str, params=None,
                       as_json: bool = False) -> requests.PreparedRequest:
        """
        Build the request for one call.

        Parameters go to the query string, or to a JSON body when
        ``as_json`` is set. The Date header is always stamped because the
        signature covers it.
        """
        headers = {HEADER_DATE: formatdate(usegmt=True)}
        request = requests.Request(method, self._create_url(path), headers=headers)

        if as_json:
            request.data = json.dumps(params if params is not None else {},
                                      separators=(',', ':'))
            headers[HEADER_CONTENT_TYPE] = JSON_CONTENT_TYPE
        else:
            request.params = params or {}

        try:
            return request.prepare()
        except requests.RequestException as e:
            self.last_response = None
            logger.warning("%s %s could not be built: %s", method, request.url, e)
            raise TransportError(
                TRANSPORT_ERROR_CODE,
                f"Invalid request: {e}",
                {'error': e}
            ) from e

    def _add_auth_header(self, request: requests.PreparedRequest):
        """Sign the request and set the paycorapi header."""
        request.headers[HEADER_PAYCOR_AUTH] = self._signer.auth_header_value(
            request.method,
            request.url,
            request.headers.get(HEADER_DATE)
        )

    def _process_request(self, request: requests.PreparedRequest) -> Any:
        """
        Sign, send and decode one request.

        Raises:
            TransportError: If the request failed or the reply is not JSON
            ApplicationError: If the server answered with a non-2xx status
        """
        self._add_auth_header(request)

        try:
            response = self.agent.send(request)
        except requests.RequestException as e:
            self.last_response = None
            logger.warning("%s %s failed: %s", request.method, request.url, e)
            raise TransportError(
                TRANSPORT_ERROR_CODE,
                f"HTTP request failed: {e}",
                {'error': e}
            ) from e

        response.request = request
        self.last_response = response
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        if self.debug_flag:
            logger.debug("request/response pair:\n%s", self.describe_last_exchange())

        return self._process_response(response)

    def _process_response(self, response: requests.Response) -> Any:
        """Decode a response, or raise the error it stands for."""
        content = response.text
        try:
            result = json.loads(content)
        except ValueError as e:
            logger.warning("unparsable content (status %s)", response.status_code)
            raise TransportError(
                TRANSPORT_ERROR_CODE,
                UNPARSABLE_CONTENT_MESSAGE,
                {'error': str(e), 'content': content}
            ) from e

        if 200 <= response.status_code < 300:
            return result

        raise ApplicationError(response.status_code, format_response(response))

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Read data; params are sent as query parameters."""
        return self._process_request(self._build_request('GET', path, params))

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Delete data; params are sent as query parameters."""
        return self._process_request(self._build_request('DELETE', path, params))

    def put(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Update data; params are sent as a JSON body."""
        return self._process_request(self._build_request('PUT', path, params, as_json=True))

    def post(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Create data; params are sent as a JSON body."""
        return self._process_request(self._build_request('POST', path, params, as_json=True))

    def describe_last_exchange(self) -> str:
        """
        Render the last request/response pair as text.

        Paycor support usually asks for exactly this when a call misbehaves.
        The signature in the paycorapi header is masked.
        """
        if self.last_response is None:
            return ""
        return (format_request(self.last_response.request)
                + "\n\n" + format_response(self.last_response))

    def close(self):
        """Close the transport if it supports closing."""
        if self._agent is not None and hasattr(self._agent, 'close'):
            self._agent.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
