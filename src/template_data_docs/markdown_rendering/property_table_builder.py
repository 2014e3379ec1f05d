"""Markdown property table builder."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from template_data_docs.schema_management import description_text, iter_entries
from template_data_docs.type_resolution import MISSING_TYPE_PLACEHOLDER, resolve_display_type

from .constants import TABLE_HEADER


def build_property_table(
    properties: Mapping[str, Any],
    *,
    owner: str = "properties",
    placeholder: str = MISSING_TYPE_PLACEHOLDER,
) -> tuple[str, ...]:
    """Return header, one row per property in mapping order, and a closing blank line.

    Names and descriptions are written verbatim, without escaping.
    """
    rows = tuple(
        f"| {name} | {resolve_display_type(fragment, placeholder=placeholder)} "
        f"| {description_text(fragment)} |"
        for name, fragment in iter_entries(properties, owner)
    )
    return (*TABLE_HEADER, *rows, "")
