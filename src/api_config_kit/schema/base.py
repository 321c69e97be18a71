"""Minimal schema capability surface over pydantic.

Everything else in the package talks to schemas only through
``validate`` / ``is_valid`` and, for object schemas, ``keys`` / ``merge``.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, create_model
from pydantic.fields import FieldInfo


class Schema:
    """A validator for any type annotation pydantic understands."""

    def __init__(self, annotation: Any):
        self.annotation = annotation
        self._adapter = TypeAdapter(annotation)

    def validate(self, value: Any) -> Any:
        """Validate ``value``; raises ``pydantic.ValidationError`` on mismatch."""
        return self._adapter.validate_python(value)

    def is_valid(self, value: Any) -> bool:
        try:
            self.validate(value)
        except ValidationError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.annotation!r})"


class ObjectSchema(Schema):
    """An object-shaped schema backed by a pydantic model class."""

    def __init__(self, model: type[BaseModel]):
        super().__init__(model)
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__name__

    def keys(self) -> tuple[str, ...]:
        return tuple(self.model.model_fields)

    def merge(self, other: "ObjectSchema") -> "ObjectSchema":
        """Shallow union of both field sets; ``other`` wins on collisions."""
        fields = _field_definitions(self.model)
        fields.update(_field_definitions(other.model))
        merged = create_model(
            f"{self.name}{other.name}",
            __config__=ConfigDict(**self.model.model_config),
            **fields,
        )
        return ObjectSchema(merged)


def _field_definitions(model: type[BaseModel]) -> dict[str, tuple]:
    return {name: (info.annotation, info) for name, info in model.model_fields.items()}


def _field_definition(value: Any) -> tuple:
    # {name: type | (type, default) | FieldInfo | Schema}
    if isinstance(value, tuple):
        return value
    if isinstance(value, FieldInfo):
        return (value.annotation if value.annotation is not None else Any, value)
    if isinstance(value, Schema):
        return (value.annotation, ...)
    return (value, ...)


def object_schema(
    fields: Mapping[str, Any] | None = None,
    name: str = "ObjectSchema",
    extra: str = "ignore",
) -> ObjectSchema:
    """Build an object schema from ``{field_name: definition}``."""
    definitions = {key: _field_definition(value) for key, value in (fields or {}).items()}
    model = create_model(name, __config__=ConfigDict(extra=extra), **definitions)
    return ObjectSchema(model)


def any_schema() -> Schema:
    return Schema(Any)


def empty_object_schema(extra: str = "ignore") -> ObjectSchema:
    return object_schema(name="EmptyObject", extra=extra)


def as_schema(value: Any) -> Schema:
    """Normalize user input into a Schema."""
    if isinstance(value, Schema):
        return value
    if isinstance(value, type) and issubclass(value, BaseModel):
        return ObjectSchema(value)
    if isinstance(value, Mapping):
        return object_schema(value)
    return Schema(value)


def as_object_schema(value: Any) -> ObjectSchema:
    """Normalize user input into an ObjectSchema, rejecting non-object schemas."""
    if value is None:
        return empty_object_schema()
    if isinstance(value, ObjectSchema):
        return value
    if isinstance(value, type) and issubclass(value, BaseModel):
        return ObjectSchema(value)
    if isinstance(value, Mapping):
        return object_schema(value)
    raise TypeError(f"Expected an object schema, got {value!r}")
