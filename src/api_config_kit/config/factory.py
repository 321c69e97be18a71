"""Configuration factory: binds path and content type helpers to one endpoint."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from api_config_kit.adapter.request import safe_convert_request_body
from api_config_kit.adapter.response import convert_response_type
from api_config_kit.config.descriptor import EndpointDescriptor
from api_config_kit.path.template import placeholders, resolve, to_canonical_form
from api_config_kit.schema.base import Schema
from api_config_kit.schema.catalog import DEFAULT_CONTENT_TYPE

logger = logging.getLogger(__name__)

EXAMPLE_FIELDS = ("body", "params", "query", "headers", "cookies", "success", "error")


@dataclass(frozen=True)
class ApiConfig:
    """An endpoint descriptor plus helpers bound to its path and content types.

    Descriptor fields (``method``, ``path``, ``request``, ...) are readable
    directly on the config.
    """

    descriptor: EndpointDescriptor
    examples: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == "descriptor":
            raise AttributeError(name)
        return getattr(self.descriptor, name)

    # Narrowing helpers: they return their argument unchanged and only
    # exist so call sites can annotate against the endpoint's schemas.

    def make_body(self, body: Any) -> Any:
        return body

    def make_params(self, params: Any) -> Any:
        return params

    def make_queries(self, queries: Any) -> Any:
        return queries

    def make_headers(self, headers: Any) -> Any:
        return headers

    def make_cookies(self, cookies: Any) -> Any:
        return cookies

    def make_success_response(self, data: Any) -> Any:
        return data

    def make_error_response(self, data: Any) -> Any:
        return data

    @property
    def path_placeholders(self) -> list[str]:
        return placeholders(self.descriptor.path)

    def make_full_path(self, params: Mapping[str, Any]) -> str:
        """Resolve the path template with ``params``, e.g. ``/users/7``."""
        return resolve(self.descriptor.path, params)

    def make_openapi_path(self) -> str:
        """The path template in OpenAPI brace notation."""
        return to_canonical_form(self.descriptor.path)

    def convert_response_type(self, adapter: str) -> dict[str, str]:
        """Response directive for ``adapter`` from the declared response content type."""
        return convert_response_type(self.descriptor.response_content_type or DEFAULT_CONTENT_TYPE, adapter)

    def convert_request_body(self, payload: Any) -> Any:
        """Coerce ``payload`` for the declared request content type, only if needed."""
        return safe_convert_request_body(payload, self.descriptor.request_content_type or DEFAULT_CONTENT_TYPE)

    def _example_schema(self, name: str) -> Schema:
        if name in ("success", "error"):
            return getattr(self.descriptor.response, name)
        return getattr(self.descriptor.request, name)

    def with_examples(self, **examples: Any) -> "ApiConfig":
        """Return a copy carrying example values, each validated by its schema."""
        unknown = sorted(set(examples) - set(EXAMPLE_FIELDS))
        if unknown:
            raise TypeError(f"Unknown example field(s): {', '.join(unknown)}")
        for name, value in examples.items():
            self._example_schema(name).validate(value)
        return replace(self, examples=MappingProxyType({**self.examples, **examples}))


def make_api_config(descriptor: EndpointDescriptor | None = None, /, **fields: Any) -> ApiConfig:
    """Build an ApiConfig from a descriptor or from descriptor fields.

    >>> config = make_api_config(method="GET", path="/users/:id")
    >>> config.make_full_path({"id": 7})
    '/users/7'
    """
    if descriptor is None:
        descriptor = EndpointDescriptor(**fields)
    elif fields:
        raise TypeError("Pass either a descriptor or descriptor fields, not both")
    logger.debug("Configured %s %s", descriptor.http_method, descriptor.path)
    return ApiConfig(descriptor)
