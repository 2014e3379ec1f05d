"""Schema management exports."""

from .schema_loading import (
    DEFINITIONS_KEY,
    PROPERTIES_KEY,
    SchemaError,
    description_text,
    display_text,
    iter_entries,
    load_schema_document,
    require_section,
)
from .schema_models import SchemaDocument

__all__ = [
    "DEFINITIONS_KEY",
    "PROPERTIES_KEY",
    "SchemaDocument",
    "SchemaError",
    "description_text",
    "display_text",
    "iter_entries",
    "load_schema_document",
    "require_section",
]
