"""Gateway: urllib-based HTTP transport -- implements HttpTransport port."""

from __future__ import annotations

import logging
import urllib.error
import urllib.request

from voxnote.l1_entities.errors import RateLimitedError, TransportError
from voxnote.l2_use_cases.ports.http_transport import HttpResponse, MultipartPayload

log = logging.getLogger('vxn.http')

DEFAULT_TIMEOUT = 30.0  # seconds; urllib applies it to the connect and to each read
HTTP_BAD_REQUEST = 400
HTTP_TOO_MANY_REQUESTS = 429


def classify_response(status: int, body: bytes) -> HttpResponse:
    """Return the response for status < 400, otherwise raise the matching error."""
    if status == HTTP_TOO_MANY_REQUESTS:
        raise RateLimitedError('HTTP 429: too many requests', status=status, body=_decode(body))
    if status >= HTTP_BAD_REQUEST:
        text = _decode(body)
        log.error('HTTP error %d: %s', status, text)
        raise TransportError(f'HTTP error {status}: {text}', status=status, body=text)
    return HttpResponse(status=status, body=body)


def _decode(body: bytes) -> str:
    return body.decode('utf-8', errors='replace')


class UrllibHttpTransport:
    """POSTs multipart bodies with urllib.request.

    The body is fully encoded before a connection is opened, and the response
    object is closed on every path.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    def send(self, url: str, headers: dict[str, str], body: MultipartPayload) -> HttpResponse:
        data = body.encode()
        request = urllib.request.Request(url, data=data, method='POST')
        request.add_header('Content-Type', body.content_type)
        for key, value in headers.items():
            request.add_header(key, value)

        log.debug('POST %s (%d bytes)', url, len(data))
        try:
            with urllib.request.urlopen(request, timeout=self._timeout) as response:  # noqa: S310 -- URL is fixed by the caller
                return classify_response(response.status, response.read())
        except urllib.error.HTTPError as exc:
            try:
                payload = exc.read() or b''
            finally:
                exc.close()
            return classify_response(exc.code, payload)
        except urllib.error.URLError as exc:
            raise TransportError(f'Connection to {url} failed: {exc.reason}') from exc
        except OSError as exc:
            raise TransportError(f'I/O error talking to {url}: {exc}') from exc
