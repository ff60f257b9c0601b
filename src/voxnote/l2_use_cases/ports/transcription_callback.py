"""Port: result observer registered by the caller."""

from __future__ import annotations

from typing import Protocol


class TranscriptionCallback(Protocol):
    """Four mutually exclusive terminal notifications; exactly one fires per request."""

    def on_success(self, text: str) -> None: ...

    def on_empty(self) -> None: ...

    def on_failed(self, detail: str) -> None: ...

    def on_too_many_requests(self) -> None: ...
