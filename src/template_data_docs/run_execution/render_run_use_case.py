"""Render run use-case service."""

from __future__ import annotations

import logging

from template_data_docs.configuration import ConfigurationError, load_render_settings
from template_data_docs.markdown_rendering import assemble_document
from template_data_docs.schema_management import SchemaError, load_schema_document

from .run_contracts import RenderOutcome, RenderRequest

_LOGGER = logging.getLogger(__name__)


class RenderExecutionError(Exception):
    """Raised when a render run cannot be completed."""


def execute_render_run(request: RenderRequest) -> RenderOutcome:
    """Parse the schema text, assemble the document and return the joined text.

    Nothing is produced unless the whole document assembles; there is no
    partial result.
    """
    try:
        settings = load_render_settings(request.settings_path)
    except ConfigurationError as exc:
        raise RenderExecutionError(str(exc)) from exc

    try:
        document = load_schema_document(request.schema_text)
        lines = assemble_document(document, settings)
    except SchemaError as exc:
        raise RenderExecutionError(str(exc)) from exc

    _LOGGER.debug("Assembled reference document with %d lines", len(lines))
    return RenderOutcome(text="\n".join(lines), line_count=len(lines))
