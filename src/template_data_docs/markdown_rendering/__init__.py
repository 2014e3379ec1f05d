"""Markdown rendering exports."""

from .constants import TABLE_HEADER
from .document_assembler import assemble_document
from .property_table_builder import build_property_table
from .section_renderers import render_definitions, render_properties

__all__ = [
    "TABLE_HEADER",
    "assemble_document",
    "build_property_table",
    "render_definitions",
    "render_properties",
]
