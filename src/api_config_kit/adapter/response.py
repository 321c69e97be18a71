"""Response content type adapters.

Maps an OpenAPI response content type to the directive each supported
HTTP client convention needs in order to read the response body:

- axios / alova-axios: ``{responseType, responseEncoding?}``
- alova-uniapp: ``{responseType, dataType?}``
- alova-xhr: ``{responseType}``
- alova-taro: ``{responseType, dataType?}``
- fetch: ``{responseMethod}``
"""

import logging
import re
from collections.abc import Iterable
from types import MappingProxyType
from typing import Literal, NamedTuple

from api_config_kit.errors import InvalidAdapterError

logger = logging.getLogger(__name__)

Category = Literal["json", "binary", "xml", "formdata", "text"]

ClientKind = Literal["axios", "alova-axios", "alova-uniapp", "alova-xhr", "alova-taro", "fetch"]

DEFAULT_ENCODING = "utf-8"


class CategoryRule(NamedTuple):
    category: str
    exact: frozenset = frozenset()
    prefixes: tuple = ()
    contains: tuple = ()
    contains_all: tuple = ()

    def matches(self, content_type: str) -> bool:
        if content_type in self.exact:
            return True
        if self.prefixes and content_type.startswith(self.prefixes):
            return True
        if any(marker in content_type for marker in self.contains):
            return True
        return bool(self.contains_all) and all(marker in content_type for marker in self.contains_all)


# First matching rule wins; anything unmatched is text.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        "json",
        exact=frozenset({
            "application/json",
            "application/ld+json",
            "application/vnd.api+json",
            "application/json-patch+json",
            "application/merge-patch+json",
            "application/x-ndjson",
        }),
        contains_all=("application/vnd.github", "json"),
    ),
    CategoryRule(
        "binary",
        exact=frozenset({
            "application/octet-stream",
            "application/pdf",
            "application/zip",
            "application/gzip",
            "application/msgpack",
            "application/x-protobuf",
        }),
        prefixes=("image/", "audio/", "video/"),
        contains=("application/vnd.ms-", "application/vnd.openxmlformats-officedocument"),
    ),
    CategoryRule(
        "xml",
        exact=frozenset({"application/xml", "text/xml"}),
        contains=("+xml",),
    ),
    CategoryRule(
        "formdata",
        exact=frozenset({"multipart/form-data", "application/x-www-form-urlencoded"}),
    ),
)

_AXIOS = MappingProxyType({
    "json": {"responseType": "json"},
    "binary": {"responseType": "blob"},
    "xml": {"responseType": "document"},
    "formdata": {"responseType": "blob"},
    "text": {"responseType": "text"},
})

RESPONSE_DIRECTIVES = MappingProxyType({
    "axios": _AXIOS,
    "alova-axios": _AXIOS,
    "alova-uniapp": MappingProxyType({
        "json": {"responseType": "text", "dataType": "json"},
        "binary": {"responseType": "arraybuffer"},
        "xml": {"responseType": "text", "dataType": "other"},
        "formdata": {"responseType": "text", "dataType": "other"},
        "text": {"responseType": "text", "dataType": "other"},
    }),
    "alova-xhr": MappingProxyType({
        "json": {"responseType": "json"},
        "binary": {"responseType": "blob"},
        "xml": {"responseType": "document"},
        "formdata": {"responseType": "text"},
        "text": {"responseType": "text"},
    }),
    "alova-taro": MappingProxyType({
        "json": {"responseType": "text", "dataType": "json"},
        "binary": {"responseType": "arraybuffer", "dataType": "arraybuffer"},
        "xml": {"responseType": "text", "dataType": "text"},
        "formdata": {"responseType": "text", "dataType": "text"},
        "text": {"responseType": "text", "dataType": "text"},
    }),
    "fetch": MappingProxyType({
        "json": {"responseMethod": "json"},
        "binary": {"responseMethod": "blob"},
        "xml": {"responseMethod": "text"},
        "formdata": {"responseMethod": "formData"},
        "text": {"responseMethod": "text"},
    }),
})

CLIENT_KINDS: tuple[str, ...] = tuple(RESPONSE_DIRECTIVES)

# Only the axios family reads text bodies with an explicit encoding.
ENCODED_CLIENTS = frozenset({"axios", "alova-axios"})
ENCODED_RESPONSE_TYPES = frozenset({"text", "document"})

CHARSET_ALIASES = MappingProxyType({
    "utf-8": "utf-8",
    "utf8": "utf8",
    "ascii": "ascii",
    "latin1": "latin1",
    "iso-8859-1": "latin1",
    "binary": "binary",
    "base64": "base64",
    "hex": "hex",
})

_CHARSET = re.compile(r"charset=([a-zA-Z0-9-]+)", re.IGNORECASE)


def media_type_of(content_type: str) -> str:
    """``"Text/HTML; charset=UTF-8"`` -> ``"text/html"``"""
    return content_type.split(";", 1)[0].strip().lower()


def classify(content_type: str) -> str:
    """Return the content type family used for adapter and coercion lookups."""
    media_type = media_type_of(content_type)
    for rule in CATEGORY_RULES:
        if rule.matches(media_type):
            return rule.category
    return "text"


def extract_charset(content_type: str) -> str:
    """Map a ``charset=`` parameter to an axios response encoding."""
    match = _CHARSET.search(content_type)
    if not match:
        return DEFAULT_ENCODING
    return CHARSET_ALIASES.get(match.group(1).lower(), DEFAULT_ENCODING)


def convert_response_type(content_type: str, adapter: str) -> dict[str, str]:
    """Directive telling ``adapter`` how to read a ``content_type`` response body."""
    table = RESPONSE_DIRECTIVES.get(adapter) if isinstance(adapter, str) else None
    if table is None:
        raise InvalidAdapterError(adapter)

    category = classify(content_type)
    directive = dict(table[category])
    if adapter in ENCODED_CLIENTS and directive["responseType"] in ENCODED_RESPONSE_TYPES:
        directive["responseEncoding"] = extract_charset(content_type)

    logger.debug("%s -> %s (%s) for %s", content_type, directive, category, adapter)
    return directive


def convert_response_types(content_types: Iterable[str], adapter: str) -> list[dict[str, str]]:
    """Batch form of ``convert_response_type``; keeps input order."""
    return [convert_response_type(content_type, adapter) for content_type in content_types]


def to_axios_response_type(content_type: str) -> dict[str, str]:
    return convert_response_type(content_type, "axios")


def to_uniapp_response_type(content_type: str) -> dict[str, str]:
    return convert_response_type(content_type, "alova-uniapp")


def to_xhr_response_type(content_type: str) -> dict[str, str]:
    return convert_response_type(content_type, "alova-xhr")


def to_taro_response_type(content_type: str) -> dict[str, str]:
    return convert_response_type(content_type, "alova-taro")


def to_fetch_response_method(content_type: str) -> dict[str, str]:
    return convert_response_type(content_type, "fetch")
