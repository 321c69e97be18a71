"""Path template resolution for ``/users/:id`` and ``/users/{id}`` templates."""

import re
from collections.abc import Mapping
from typing import Any

_IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"
_COLON_PARAM = re.compile(rf":({_IDENTIFIER})")
_BRACE_PARAM = re.compile(rf"\{{({_IDENTIFIER})\}}")


def _placeholder_pattern(key: str) -> re.Pattern:
    name = re.escape(key)
    # ":key" only when it ends the segment; "{key}" anywhere
    return re.compile(rf":{name}(?=/|$)|\{{{name}\}}")


def resolve(template: str, values: Mapping[str, Any]) -> str:
    """Substitute placeholder values into a path template.

    Keys missing from the template are ignored and placeholders missing
    from ``values`` are left as they are.
    """
    path = template
    for key, value in values.items():
        replacement = str(value)
        path = _placeholder_pattern(str(key)).sub(lambda _match: replacement, path)
    return path


def to_canonical_form(template: str) -> str:
    """Rewrite ``:name`` placeholders into the OpenAPI ``{name}`` notation."""
    return _COLON_PARAM.sub(r"{\1}", template)


def placeholders(template: str) -> list[str]:
    """Placeholder names in order of first appearance, either notation."""
    names: list[str] = []
    for name in _BRACE_PARAM.findall(to_canonical_form(template)):
        if name not in names:
            names.append(name)
    return names
