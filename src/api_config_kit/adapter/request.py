"""Request body coercion.

Turns an arbitrary payload into the wire representation a request content
type requires, doing as little work as possible. ``safe_convert_request_body``
is the entry point call sites should use: it leaves bodies that already
have the right shape untouched.
"""

import dataclasses
import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError
from pydantic_core import to_json as _dump_json

from api_config_kit.adapter.response import media_type_of
from api_config_kit.adapter.wire import (
    Blob,
    FormData,
    UrlEncodedParams,
    is_buffer,
    is_stream,
    to_form_string,
)
from api_config_kit.errors import UnsupportedConversionError
from api_config_kit.schema.catalog import DEFAULT_CONTENT_TYPE

logger = logging.getLogger(__name__)

REQUEST_FAMILIES = MappingProxyType({
    "application/json": "json",
    "application/ld+json": "json",
    "application/vnd.api+json": "json",
    "application/json-patch+json": "json",
    "application/merge-patch+json": "json",
    "application/vnd.github+json": "json",
    "application/graphql": "graphql",
    "application/x-www-form-urlencoded": "form-urlencoded",
    "multipart/form-data": "multipart",
    "application/octet-stream": "binary",
    "application/pdf": "binary",
    "application/zip": "binary",
    "application/gzip": "binary",
    "text/plain": "text",
    "text/html": "text",
    "text/xml": "text",
    "text/csv": "text",
    "text/markdown": "text",
    "text/yaml": "text",
    "application/xml": "xml",
    "application/msgpack": "pre-encoded",
    "application/x-protobuf": "pre-encoded",
    "image/png": "media",
    "image/jpeg": "media",
    "image/gif": "media",
    "image/webp": "media",
    "image/svg+xml": "media",
    "audio/mpeg": "media",
    "audio/wav": "media",
    "audio/ogg": "media",
    "video/mp4": "media",
    "video/mpeg": "media",
    "video/webm": "media",
})


def request_family(content_type: str) -> str | None:
    """Coercion family of a request content type, None when unrecognized."""
    return REQUEST_FAMILIES.get(media_type_of(content_type))


def _is_binary(value: Any) -> bool:
    return isinstance(value, Blob) or is_buffer(value) or is_stream(value)


def _is_blob_or_buffer(value: Any) -> bool:
    return isinstance(value, Blob) or is_buffer(value)


# Representations each family already accepts as-is.
_ACCEPTS = MappingProxyType({
    "json": lambda value: isinstance(value, str),
    "graphql": lambda value: isinstance(value, str),
    "text": lambda value: isinstance(value, str),
    "xml": lambda value: isinstance(value, str),
    "form-urlencoded": lambda value: isinstance(value, UrlEncodedParams),
    "multipart": lambda value: isinstance(value, FormData),
    "binary": _is_binary,
    "pre-encoded": _is_blob_or_buffer,
    "media": _is_blob_or_buffer,
})


def _as_mapping(value: Any) -> Mapping | None:
    if isinstance(value, Mapping):
        return value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return None


def _is_structured(value: Any) -> bool:
    if isinstance(value, (Mapping, list, tuple, BaseModel)):
        return True
    if isinstance(value, (type, Blob, Enum)) or callable(value) or is_stream(value):
        return False
    # dataclasses and plain objects serialize through their attributes
    return dataclasses.is_dataclass(value) or hasattr(value, "__dict__")


def _own_properties(value: Any) -> Any:
    if hasattr(value, "__dict__"):
        return vars(value)
    raise PydanticSerializationError(f"{type(value).__name__} has no JSON representation")


def to_json(value: Any, content_type: str = DEFAULT_CONTENT_TYPE) -> str:
    """Compact JSON, the way ``JSON.stringify`` writes it.

    Plain objects are written as their instance attributes.
    """
    try:
        return _dump_json(value, by_alias=False, inf_nan_mode="null", fallback=_own_properties).decode("utf-8")
    except PydanticSerializationError as exc:
        raise UnsupportedConversionError(content_type, str(exc)) from exc


def _to_text(value: Any, content_type: str = DEFAULT_CONTENT_TYPE) -> str:
    if _is_structured(value):
        return to_json(value, content_type)
    return to_form_string(value)


def _convert_json(payload: Any, content_type: str) -> Any:
    if isinstance(payload, str):
        return payload
    return to_json(payload, content_type)


def _convert_graphql(payload: Any, content_type: str) -> Any:
    if isinstance(payload, str):
        return payload
    mapping = _as_mapping(payload)
    if mapping is not None and "query" in mapping:
        return to_json(mapping, content_type)
    return to_form_string(payload)


def _convert_form_urlencoded(payload: Any, content_type: str) -> Any:
    if isinstance(payload, UrlEncodedParams):
        return payload
    mapping = _as_mapping(payload)
    if mapping is not None:
        params = UrlEncodedParams()
        for key, value in mapping.items():
            if value is not None:
                params.append(key, _to_text(value, content_type) if isinstance(value, Mapping) else value)
        return params
    if isinstance(payload, str):
        return UrlEncodedParams.from_string(payload)
    return payload


def _convert_multipart(payload: Any, content_type: str) -> Any:
    if isinstance(payload, FormData):
        return payload
    mapping = _as_mapping(payload)
    if mapping is None:
        return payload

    form = FormData()
    for key, value in mapping.items():
        if value is None:
            continue
        if _is_binary(value):
            form.append(key, value)
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                form.append(f"{key}[{index}]", item if _is_binary(item) else _to_text(item, content_type))
        elif _is_structured(value):
            form.append(key, to_json(value, content_type))
        else:
            form.append(key, to_form_string(value))
    return form


def _convert_binary(payload: Any, content_type: str) -> Any:
    if _is_binary(payload):
        return payload
    if isinstance(payload, str):
        return Blob(payload.encode("utf-8"), content_type)
    if _is_structured(payload):
        return Blob(to_json(payload, content_type).encode("utf-8"), content_type)
    return payload


def _convert_text(payload: Any, content_type: str) -> Any:
    if isinstance(payload, str):
        return payload
    return _to_text(payload, content_type)


def _convert_xml(payload: Any, content_type: str) -> Any:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, (int, float)):
        return to_form_string(payload)
    raise UnsupportedConversionError(
        content_type, "XML bodies must be passed as strings, objects are not converted to XML"
    )


def _convert_pre_encoded(payload: Any, content_type: str) -> Any:
    if _is_blob_or_buffer(payload):
        return payload
    raise UnsupportedConversionError(
        content_type, "expected pre-encoded bytes or a Blob, encode the payload first"
    )


def _convert_media(payload: Any, content_type: str) -> Any:
    if isinstance(payload, Blob):
        return payload
    if is_buffer(payload):
        return Blob(bytes(payload), content_type)
    raise UnsupportedConversionError(content_type, "expected a File, Blob or bytes")


_CONVERTERS = MappingProxyType({
    "json": _convert_json,
    "graphql": _convert_graphql,
    "form-urlencoded": _convert_form_urlencoded,
    "multipart": _convert_multipart,
    "binary": _convert_binary,
    "text": _convert_text,
    "xml": _convert_xml,
    "pre-encoded": _convert_pre_encoded,
    "media": _convert_media,
})


def needs_conversion(payload: Any, content_type: str) -> bool:
    """True when ``payload`` is not yet in the representation ``content_type`` needs."""
    if payload is None:
        return False
    family = request_family(content_type)
    if family is None:
        return False
    return not _ACCEPTS[family](payload)


def convert_request_body(payload: Any, content_type: str) -> Any:
    """Convert ``payload`` into the wire representation for ``content_type``.

    Raises UnsupportedConversionError when the representation cannot be
    derived safely (XML from objects, msgpack/protobuf from anything but
    bytes, media uploads from non-binary input).
    """
    if payload is None:
        return payload
    family = request_family(content_type)
    if family is None:
        return payload
    converted = _CONVERTERS[family](payload, content_type)
    logger.debug("Converted %s body for %s (%s)", type(payload).__name__, content_type, family)
    return converted


def safe_convert_request_body(payload: Any, content_type: str) -> Any:
    """Convert only when needed; already valid bodies are returned as the same object."""
    if not needs_conversion(payload, content_type):
        return payload
    return convert_request_body(payload, content_type)
