"""Endpoint descriptor model.

One immutable descriptor per endpoint. Field values are checked against
the static catalogs when the descriptor is built; helpers downstream
assume that check already passed.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api_config_kit.schema.base import (
    ObjectSchema,
    Schema,
    any_schema,
    as_object_schema,
    as_schema,
    empty_object_schema,
)
from api_config_kit.schema.catalog import HttpMethod, RequestContentType, ResponseContentType


class RequestSchemas(BaseModel):
    """Schemas for body and the four parameter locations."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    body: Schema = Field(default_factory=any_schema)
    params: ObjectSchema = Field(default_factory=empty_object_schema)
    query: ObjectSchema = Field(default_factory=empty_object_schema)
    headers: ObjectSchema = Field(default_factory=empty_object_schema)
    cookies: ObjectSchema = Field(default_factory=empty_object_schema)

    @field_validator("body", mode="before")
    @classmethod
    def _coerce_body(cls, value):
        return as_schema(value)

    @field_validator("params", "query", "headers", "cookies", mode="before")
    @classmethod
    def _coerce_object(cls, value):
        try:
            return as_object_schema(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc


class ResponseSchemas(BaseModel):
    """Schemas for 2xx and 4xx/5xx payloads."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    success: Schema = Field(default_factory=any_schema)
    error: Schema = Field(default_factory=any_schema)

    @field_validator("success", "error", mode="before")
    @classmethod
    def _coerce(cls, value):
        return as_schema(value)


class EndpointDescriptor(BaseModel):
    """A single API endpoint: method, path template, schemas and metadata."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    method: HttpMethod
    path: str  # /users/:id or /users/{id}
    tags: tuple[str, ...] = ()
    auth: bool = False
    disable: bool = False
    summary: str = ""
    description: str = ""
    request: RequestSchemas = Field(default_factory=RequestSchemas)
    response: ResponseSchemas = Field(default_factory=ResponseSchemas)
    request_content_type: RequestContentType | None = Field(default=None, alias="requestContentType")
    response_content_type: ResponseContentType | None = Field(default=None, alias="responseContentType")

    @field_validator("path")
    @classmethod
    def _path_starts_with_slash(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("path must start with '/'")
        return value

    @field_validator("tags")
    @classmethod
    def _tags_start_with_hash(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for tag in value:
            if not tag.startswith("#"):
                raise ValueError(f"tag {tag!r} must start with '#'")
        return value

    @property
    def http_method(self) -> str:
        return self.method.upper()
