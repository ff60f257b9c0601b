"""Gateway: multipart/form-data body encoder (RFC 2388 style)."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from voxnote.l1_entities.errors import MultipartEncodingError

LINE_FEED = b'\r\n'
_BOUNDARY_PREFIX = '----VoxnoteBoundary'
_HEADER_UNSAFE = ('"', '\r', '\n')


@dataclass(frozen=True)
class FilePart:
    field_name: str
    file_name: str
    mime_type: str
    data: bytes


def _make_boundary() -> str:
    return _BOUNDARY_PREFIX + secrets.token_hex(16)


def _check_header_value(kind: str, value: str) -> None:
    if any(ch in value for ch in _HEADER_UNSAFE):
        raise MultipartEncodingError(f'{kind} contains a quote or line break: {value!r}')


class MultipartEncoder:
    """Ordered form fields plus at most one file part, rendered to exact bytes.

    Fields are written in insertion order, then the file part. The boundary is
    random per encoder; ``encode()`` refuses to produce a body in which the
    boundary occurs inside a field value or the file bytes.
    """

    def __init__(self, boundary: str | None = None) -> None:
        self._boundary = boundary or _make_boundary()
        _check_header_value('boundary', self._boundary)
        self._fields: list[tuple[str, str]] = []
        self._file: FilePart | None = None

    @property
    def boundary(self) -> str:
        return self._boundary

    @property
    def content_type(self) -> str:
        return f'multipart/form-data; boundary={self._boundary}'

    @property
    def fields(self) -> list[tuple[str, str]]:
        return list(self._fields)

    def add_field(self, name: str, value: str) -> None:
        _check_header_value('field name', name)
        self._fields.append((name, value))

    def add_file(self, field_name: str, file_name: str, mime_type: str, data: bytes) -> None:
        if self._file is not None:
            raise MultipartEncodingError('only one file part is supported')
        _check_header_value('field name', field_name)
        _check_header_value('file name', file_name)
        _check_header_value('mime type', mime_type)
        self._file = FilePart(field_name=field_name, file_name=file_name, mime_type=mime_type, data=data)

    def encode(self) -> bytes:
        delimiter = f'--{self._boundary}'.encode('ascii')
        out = bytearray()

        for name, value in self._fields:
            raw_value = value.encode('utf-8')
            if delimiter in raw_value:
                raise MultipartEncodingError(f'boundary collides with value of field {name!r}')
            out += delimiter + LINE_FEED
            out += f'Content-Disposition: form-data; name="{name}"'.encode() + LINE_FEED
            out += LINE_FEED
            out += raw_value + LINE_FEED

        if self._file is not None:
            part = self._file
            if delimiter in part.data:
                raise MultipartEncodingError(f'boundary collides with contents of {part.file_name!r}')
            out += delimiter + LINE_FEED
            out += (
                f'Content-Disposition: form-data; name="{part.field_name}"; filename="{part.file_name}"'.encode()
                + LINE_FEED
            )
            out += f'Content-Type: {part.mime_type}'.encode() + LINE_FEED
            out += LINE_FEED
            out += part.data + LINE_FEED

        out += delimiter + b'--' + LINE_FEED
        return bytes(out)
