"""Reference document assembly."""

from __future__ import annotations

from template_data_docs.configuration import RenderSettings
from template_data_docs.schema_management import SchemaDocument

from .section_renderers import render_definitions, render_properties


def assemble_document(
    document: SchemaDocument, settings: RenderSettings | None = None
) -> tuple[str, ...]:
    """Return the full reference document as an ordered tuple of lines.

    Order is fixed: title block, property sections, the reference objects
    heading, definition sections. Properties are enumerated before
    definitions, so a missing ``properties`` mapping fails first.
    """
    resolved_settings = settings or RenderSettings()
    return (
        *_title_block(resolved_settings),
        *render_properties(document, resolved_settings),
        *_reference_block(resolved_settings),
        *render_definitions(document, resolved_settings),
    )


def _title_block(settings: RenderSettings) -> tuple[str, ...]:
    lines = [f"# {settings.title}", ""]
    for paragraph in settings.intro_paragraphs:
        lines.extend((paragraph, ""))
    return tuple(lines)


def _reference_block(settings: RenderSettings) -> tuple[str, ...]:
    return (f"## {settings.reference_heading}", "", settings.reference_intro, "")
