"""Route manifest loader.

A manifest lists endpoint metadata in YAML (or JSON):

    endpoints:
      - method: GET
        path: /users/:id
        tags: ["#users"]
        responseContentType: application/json

Schemas cannot be written in a manifest, so every endpoint gets
permissive ones: any body and payloads, open parameter objects.
"""

import logging
from pathlib import Path

import yaml

from api_config_kit.config.descriptor import EndpointDescriptor, RequestSchemas
from api_config_kit.config.factory import ApiConfig, make_api_config
from api_config_kit.errors import ManifestError
from api_config_kit.schema.base import empty_object_schema

logger = logging.getLogger(__name__)

SCHEMA_KEYS = ("request", "response")


def _open_request() -> RequestSchemas:
    return RequestSchemas(
        params=empty_object_schema(extra="allow"),
        query=empty_object_schema(extra="allow"),
        headers=empty_object_schema(extra="allow"),
        cookies=empty_object_schema(extra="allow"),
    )


def parse_manifest(doc: object) -> list[ApiConfig]:
    """Build configs from an already loaded manifest document."""
    if not isinstance(doc, dict) or not isinstance(doc.get("endpoints"), list):
        raise ManifestError("Manifest must contain an 'endpoints' list")

    configs = []
    for index, entry in enumerate(doc["endpoints"]):
        if not isinstance(entry, dict):
            raise ManifestError(f"Endpoint #{index} must be a mapping, got {type(entry).__name__}")
        declared = [key for key in SCHEMA_KEYS if key in entry]
        if declared:
            raise ManifestError(f"Endpoint #{index} declares schemas ({', '.join(declared)}), which manifests cannot hold")
        descriptor = EndpointDescriptor.model_validate({**entry, "request": _open_request()})
        configs.append(make_api_config(descriptor))
    return configs


def load_manifest(file_path: Path) -> list[ApiConfig]:
    """Load a YAML/JSON route manifest into a list of ApiConfig."""
    text = file_path.read_text(encoding="utf-8")
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Cannot parse {file_path}: {exc}") from exc

    configs = parse_manifest(doc)
    logger.debug("Loaded %d endpoints from %s", len(configs), file_path)
    return configs
