"""Property and definition section renderers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from template_data_docs.configuration import RenderSettings
from template_data_docs.schema_management import (
    DEFINITIONS_KEY,
    PROPERTIES_KEY,
    SchemaDocument,
    description_text,
    iter_entries,
    require_section,
)

from .constants import DEFINITION_HEADING_PREFIX, PROPERTY_HEADING_PREFIX
from .property_table_builder import build_property_table

_LOGGER = logging.getLogger(__name__)


def render_properties(document: SchemaDocument, settings: RenderSettings) -> tuple[str, ...]:
    """Render one level-2 section per top-level property, in mapping order."""
    properties = require_section(document.root, PROPERTIES_KEY, "Schema document")
    lines: list[str] = []
    for name, entry in iter_entries(properties, "Schema properties"):
        owner = f"Property '{name}'"
        lines.extend(_section_heading(PROPERTY_HEADING_PREFIX, name, entry))
        table_source = _property_table_source(entry, owner)
        if table_source is None:
            _LOGGER.debug("Property %s has no nested properties; table omitted", name)
            continue
        lines.extend(
            build_property_table(
                table_source,
                owner=owner,
                placeholder=settings.missing_type_placeholder,
            )
        )
    return tuple(lines)


def render_definitions(document: SchemaDocument, settings: RenderSettings) -> tuple[str, ...]:
    """Render one level-3 section with a property table per definition."""
    definitions = require_section(document.root, DEFINITIONS_KEY, "Schema document")
    lines: list[str] = []
    for name, entry in iter_entries(definitions, "Schema definitions"):
        owner = f"Definition '{name}'"
        lines.extend(_section_heading(DEFINITION_HEADING_PREFIX, name, entry))
        lines.extend(
            build_property_table(
                require_section(entry, PROPERTIES_KEY, owner),
                owner=owner,
                placeholder=settings.missing_type_placeholder,
            )
        )
    return tuple(lines)


def _section_heading(prefix: str, name: str, entry: Mapping[str, Any]) -> tuple[str, ...]:
    return (f"{prefix} {name}", "", description_text(entry), "")


def _property_table_source(entry: Mapping[str, Any], owner: str) -> Mapping[str, Any] | None:
    """Pick nested properties, else ``additionalProperties.properties``, else nothing."""
    if entry.get(PROPERTIES_KEY) is not None:
        return require_section(entry, PROPERTIES_KEY, owner)
    additional = entry.get("additionalProperties")
    if isinstance(additional, Mapping) and additional.get(PROPERTIES_KEY) is not None:
        return require_section(additional, PROPERTIES_KEY, f"{owner} additionalProperties")
    return None
