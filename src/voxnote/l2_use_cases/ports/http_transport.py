"""Port: HTTP transport for multipart uploads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class HttpResponse:
    """A successful (status < 400) HTTP response."""

    status: int
    body: bytes


class MultipartPayload(Protocol):
    """Anything that can render itself as a multipart/form-data body."""

    @property
    def content_type(self) -> str: ...

    def encode(self) -> bytes: ...


class HttpTransport(Protocol):
    """Abstract POST transport. Zero framework types leak through."""

    def send(self, url: str, headers: dict[str, str], body: MultipartPayload) -> HttpResponse:
        """POST *body* to *url*.

        Raises RateLimitedError on 429 and TransportError on any other status >= 400
        or on connection failure.
        """
        ...
