"""Schema parsing and section lookup service."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from .schema_models import SchemaDocument

_LOGGER = logging.getLogger(__name__)

PROPERTIES_KEY = "properties"
DEFINITIONS_KEY = "definitions"


class SchemaError(Exception):
    """Raised for schema parsing failures or missing schema structure."""


def load_schema_document(text: str | bytes) -> SchemaDocument:
    """Parse the complete schema text into a structured document.

    Bytes are decoded as JSON text (UTF-8, UTF-16 or UTF-32). The non-JSON
    constants `NaN`, `Infinity` and `-Infinity` are rejected.
    """
    try:
        root = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid template data schema: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaError(f"Template data schema is not valid UTF-8: {exc}") from exc
    except RecursionError as exc:
        raise SchemaError("Template data schema is nested too deeply to parse.") from exc

    if not isinstance(root, Mapping):
        raise SchemaError("Template data schema root must be a JSON object.")

    _LOGGER.debug("Parsed template data schema with %d top-level keys", len(root))
    return SchemaDocument(root=root)


def require_section(node: Mapping[str, Any], key: str, owner: str) -> Mapping[str, Any]:
    """Return the mapping stored under *key*, failing when it is absent."""
    section = node.get(key)
    if section is None:
        raise SchemaError(f"{owner} has no '{key}' mapping.")
    if not isinstance(section, Mapping):
        raise SchemaError(f"{owner} '{key}' must be a mapping.")
    return section


def iter_entries(
    section: Mapping[str, Any], owner: str
) -> Iterator[tuple[str, Mapping[str, Any]]]:
    """Yield ``(name, fragment)`` pairs in mapping order."""
    for name, fragment in section.items():
        if not isinstance(fragment, Mapping):
            raise SchemaError(f"{owner} entry '{name}' must be an object.")
        yield name, fragment


def description_text(fragment: Mapping[str, Any]) -> str:
    """Return the fragment description verbatim, or an empty string."""
    description = fragment.get("description")
    if description is None:
        return ""
    return display_text(description)


def display_text(value: Any) -> str:
    """Render a JSON value as text the way a JavaScript template literal would."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Sequence):
        return ",".join("" if item is None else display_text(item) for item in value)
    return json.dumps(value, separators=(",", ":"))


def _reject_constant(name: str) -> Any:
    raise SchemaError(f"Invalid template data schema: '{name}' is not a JSON value.")
