"""Wire representations for request bodies.

``Blob``/``File`` stand in for raw binary payloads tagged with a media
type, ``UrlEncodedParams`` for an encoded parameter map and ``FormData``
for a multi-part container that ``requests`` can encode.
"""

import os
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl, urlencode

import requests

BUFFER_TYPES = (bytes, bytearray, memoryview)


def is_buffer(value: Any) -> bool:
    return isinstance(value, BUFFER_TYPES)


def is_stream(value: Any) -> bool:
    # file objects, io.BytesIO, urllib3 responses, ...
    return not isinstance(value, (str, Blob)) and callable(getattr(value, "read", None))


@dataclass(frozen=True)
class Blob:
    """Immutable binary payload tagged with a media type."""

    data: bytes
    content_type: str = ""

    def __post_init__(self):
        if isinstance(self.data, str):
            object.__setattr__(self, "data", self.data.encode("utf-8"))
        elif not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @property
    def size(self) -> int:
        return len(self.data)

    def text(self, encoding: str = "utf-8") -> str:
        return self.data.decode(encoding)


@dataclass(frozen=True)
class File(Blob):
    """A Blob with a file name, as uploaded from disk."""

    filename: str = "file"


def to_form_string(value: Any) -> str:
    """String coercion for form fields: booleans and None the way JSON spells them.

    Buffers are decoded as UTF-8 text.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if is_buffer(value):
        return bytes(value).decode("utf-8")
    if isinstance(value, (list, tuple)):
        return ",".join(to_form_string(item) for item in value)
    return str(value)


class UrlEncodedParams:
    """Ordered multi-map for ``application/x-www-form-urlencoded`` bodies."""

    def __init__(self, pairs=()):
        self._pairs: list[tuple[str, str]] = [(str(k), to_form_string(v)) for k, v in pairs]

    @classmethod
    def from_string(cls, query: str) -> "UrlEncodedParams":
        if query.startswith("?"):
            query = query[1:]
        return cls(parse_qsl(query, keep_blank_values=True))

    def append(self, name: str, value: Any) -> None:
        self._pairs.append((str(name), to_form_string(value)))

    def get(self, name: str) -> str | None:
        for key, value in self._pairs:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> list[str]:
        return [value for key, value in self._pairs if key == name]

    def items(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def encode(self) -> str:
        return urlencode(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UrlEncodedParams):
            return NotImplemented
        return self._pairs == other._pairs

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"UrlEncodedParams({self._pairs!r})"


def _read_stream(stream: Any) -> Blob:
    # open files keep their base name, like a browser File
    name = getattr(stream, "name", None)
    data = stream.read()
    if isinstance(name, str) and os.path.basename(name):
        return File(data, filename=os.path.basename(name))
    return Blob(data)


class FormData:
    """Ordered ``multipart/form-data`` container of text and binary fields."""

    def __init__(self):
        self._fields: list[tuple[str, str | Blob]] = []

    def append(self, name: str, value: Any) -> None:
        if is_buffer(value):
            value = Blob(bytes(value))
        elif is_stream(value):
            value = _read_stream(value)
        elif not isinstance(value, (str, Blob)):
            value = to_form_string(value)
        self._fields.append((str(name), value))

    def get(self, name: str) -> str | Blob | None:
        for key, value in self._fields:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> list[str | Blob]:
        return [value for key, value in self._fields if key == name]

    def items(self) -> list[tuple[str, str | Blob]]:
        return list(self._fields)

    def to_requests_files(self) -> list[tuple[str, tuple]]:
        """Fields in the ``files=`` shape ``requests`` expects, text fields without a file name."""
        files = []
        for name, value in self._fields:
            if isinstance(value, Blob):
                filename = getattr(value, "filename", "blob")
                files.append((name, (filename, value.data, value.content_type or None)))
            else:
                files.append((name, (None, value)))
        return files

    def encode(self) -> tuple[bytes, str]:
        """Serialize to ``(body, content_type_header)``."""
        if not self._fields:
            return b"", "multipart/form-data"
        prepared = requests.Request("POST", "http://localhost/", files=self.to_requests_files()).prepare()
        return prepared.body, prepared.headers["Content-Type"]

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._fields)

    def __repr__(self) -> str:
        return f"FormData({[name for name, _ in self._fields]!r})"
