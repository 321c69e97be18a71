"""Response envelopes: wrap a payload schema as a single item or a paginated list."""

from typing import Any

from pydantic import Field

from .base import ObjectSchema, Schema, as_object_schema, as_schema, object_schema

DEFAULT_ENVELOPE_KEY = "data"


class ResponseShape:
    """Builds envelope schemas around one payload schema under ``key``."""

    def __init__(self, payload: Any, key: str = DEFAULT_ENVELOPE_KEY):
        self.payload: Schema = as_schema(payload)
        self.key = key

    def item(self) -> ObjectSchema:
        """``{key: payload}``"""
        return object_schema({self.key: self.payload.annotation}, name="ItemEnvelope")

    def list(self, meta: Any) -> ObjectSchema:
        """``{key: [payload, ...]}`` merged with the fields of ``meta``."""
        meta_schema = as_object_schema(meta)
        if self.key in meta_schema.keys():
            raise ValueError(f"Metadata schema already declares the envelope key {self.key!r}")
        envelope = object_schema({self.key: list[self.payload.annotation]}, name="ListEnvelope")
        return envelope.merge(meta_schema)


def make_response_success_shape(payload: Any, key: str = DEFAULT_ENVELOPE_KEY) -> ResponseShape:
    return ResponseShape(payload, key)


def pagination_schema() -> ObjectSchema:
    """Standard pagination metadata for list responses."""
    return object_schema(
        {
            "currentPage": (int, Field(ge=1)),
            "totalItems": (int, Field(ge=0)),
            "itemsPerPage": (int, Field(ge=1)),
            # may be omitted, but not sent as null
            "totalPages": (int, Field(default=None, ge=0)),
        },
        name="Pagination",
    )
