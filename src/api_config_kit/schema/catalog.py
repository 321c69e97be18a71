"""Closed catalogs of HTTP methods, media types and status codes.

Values follow the OpenAPI 3.0 / Swagger 2.0 media type and operation
objects. The Literal aliases are what descriptor fields are validated
against; the tuples are the same values for runtime lookups.
"""

from typing import Literal, get_args

HttpMethod = Literal[
    "get", "GET", "Get",
    "post", "POST", "Post",
    "put", "PUT", "Put",
    "delete", "DELETE", "Delete",
    "head", "HEAD", "Head",
    "options", "OPTIONS", "Options",
    "patch", "PATCH", "Patch",
]

ResponseContentType = Literal[
    # application
    "application/json",
    "application/xml",
    "application/octet-stream",
    "application/pdf",
    "application/zip",
    "application/gzip",
    "application/x-www-form-urlencoded",
    "multipart/form-data",
    "application/json-patch+json",
    "application/merge-patch+json",
    "application/vnd.api+json",
    "application/ld+json",
    "application/x-ndjson",
    "application/x-protobuf",
    "application/msgpack",
    # office
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    # text
    "text/plain",
    "text/html",
    "text/css",
    "text/javascript",
    "text/csv",
    "text/xml",
    "text/markdown",
    "text/yaml",
    # image
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    "image/bmp",
    "image/tiff",
    "image/x-icon",
    "image/avif",
    "image/vnd.djvu",
    # audio
    "audio/mpeg",
    "audio/ogg",
    "audio/wav",
    "audio/webm",
    "audio/aac",
    "audio/flac",
    # video
    "video/mp4",
    "video/mpeg",
    "video/ogg",
    "video/webm",
    "video/quicktime",
    "video/x-msvideo",
    # vendor
    "application/vnd.github+json",
    "application/vnd.github.v3+json",
    "application/vnd.github.v3.diff",
    "application/vnd.github.v3.patch",
    "application/vnd.openstreetmap.data+xml",
]

RequestContentType = Literal[
    # application
    "application/json",
    "application/xml",
    "application/x-www-form-urlencoded",
    "multipart/form-data",
    "application/octet-stream",
    "application/pdf",
    "application/zip",
    "application/gzip",
    "application/json-patch+json",
    "application/merge-patch+json",
    "application/vnd.api+json",
    "application/ld+json",
    "application/x-protobuf",
    "application/msgpack",
    "application/graphql",
    # text
    "text/plain",
    "text/html",
    "text/xml",
    "text/csv",
    "text/markdown",
    "text/yaml",
    # image uploads
    "image/png",
    "image/jpeg",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    # audio uploads
    "audio/mpeg",
    "audio/wav",
    "audio/ogg",
    # video uploads
    "video/mp4",
    "video/mpeg",
    "video/webm",
    # vendor
    "application/vnd.github+json",
]

HttpStatusCode = Literal[
    # 2xx
    200, 201, 202, 203, 204, 205, 206,
    # 3xx
    300, 301, 302, 303, 304, 307, 308,
    # 4xx
    400, 401, 402, 403, 404, 405, 406, 407, 408, 409, 410, 411, 412, 413, 414, 415, 416, 417, 418,
    422, 423, 424, 425, 426, 428, 429, 431, 451,
    # 5xx
    500, 501, 502, 503, 504, 505, 506, 507, 508, 510, 511,
]

HTTP_METHODS: tuple[str, ...] = get_args(HttpMethod)
RESPONSE_CONTENT_TYPES: tuple[str, ...] = get_args(ResponseContentType)
REQUEST_CONTENT_TYPES: tuple[str, ...] = get_args(RequestContentType)
HTTP_STATUS_CODES: tuple[int, ...] = get_args(HttpStatusCode)

DEFAULT_CONTENT_TYPE = "application/json"
