"""Error types raised by api-config-kit.

Schema mismatches are not wrapped here: they surface as
``pydantic.ValidationError`` straight from the validation layer.
"""


class ApiConfigError(Exception):
    """Base class for every error raised by this package."""


class UnsupportedConversionError(ApiConfigError, ValueError):
    """A request body cannot be coerced into the wire format a content type needs."""

    def __init__(self, content_type: str, reason: str = ""):
        self.content_type = content_type
        message = f"Cannot convert request body to {content_type}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidAdapterError(ApiConfigError, ValueError):
    """The requested HTTP client adapter is not supported."""

    def __init__(self, adapter: object):
        self.adapter = adapter
        super().__init__(f"Unsupported adapter: {adapter!r}")


class ManifestError(ApiConfigError):
    """A route manifest file is malformed."""
