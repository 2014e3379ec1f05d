"""Type resolution exports."""

from .type_resolver import (
    MISSING_TYPE_PLACEHOLDER,
    definition_name,
    reference_link,
    resolve_display_type,
)

__all__ = [
    "MISSING_TYPE_PLACEHOLDER",
    "definition_name",
    "reference_link",
    "resolve_display_type",
]
