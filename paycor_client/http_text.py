"""
Plain text rendering of requests and responses, for debug logs and for
the error message of an :class:`~paycor_client.exceptions.ApplicationError`.
"""

from typing import Optional

import requests

from .constants import HEADER_PAYCOR_AUTH


def _mask_auth(value: str) -> str:
    public_key, _, signature = value.partition(" ")
    return f"{public_key} ****" if signature else value


def _body_text(body) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode('utf-8', errors='replace')
    return str(body)


def _protocol(response) -> str:
    # urllib3 reports the version as 10 or 11
    version = getattr(response.raw, 'version', None)
    if isinstance(version, int) and version > 0:
        return f"HTTP/{version // 10}.{version % 10}"
    return ""


def _header_lines(headers, mask: bool = False):
    lines = []
    for name, value in headers.items():
        if mask and name.lower() == HEADER_PAYCOR_AUTH:
            value = _mask_auth(value)
        lines.append(f"{name}: {value}")
    return lines


def format_request(request: Optional[requests.PreparedRequest], mask: bool = True) -> str:
    """Render a prepared request as request line, headers and body."""
    if request is None:
        return ""
    lines = [f"{request.method} {request.url}"]
    lines.extend(_header_lines(request.headers, mask=mask))
    return "\n".join(lines) + "\n\n" + _body_text(request.body)


def format_response(response: Optional[requests.Response]) -> str:
    """Render a response as status line, headers and body."""
    if response is None:
        return ""
    status_line = f"{response.status_code} {response.reason or ''}".rstrip()
    protocol = _protocol(response)
    if protocol:
        status_line = f"{protocol} {status_line}"
    lines = [status_line]
    lines.extend(_header_lines(response.headers))
    return "\n".join(lines) + "\n\n" + response.text
