"""Display type resolution for property schema fragments."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from template_data_docs.schema_management import display_text

_LOGGER = logging.getLogger(__name__)

MISSING_TYPE_PLACEHOLDER = "--"


def resolve_display_type(
    fragment: Mapping[str, Any], *, placeholder: str = MISSING_TYPE_PLACEHOLDER
) -> str:
    """Return the type cell text for one property fragment.

    Precedence, first match wins:

    1. the fragment's own ``type``;
    2. the first ``oneOf`` alternative's ``type``, then its ``$ref``;
    3. the fragment's own ``$ref``;
    4. *placeholder*.

    Only the first ``oneOf`` alternative is consulted. When it carries neither
    ``type`` nor ``$ref`` the lookup continues with the outer fragment's
    ``$ref``, not with later alternatives.
    """
    declared_type = fragment.get("type")
    if declared_type:
        return display_text(declared_type)

    first_alternative = _first_alternative(fragment.get("oneOf"))
    if first_alternative is not None:
        if first_alternative.get("type"):
            return display_text(first_alternative["type"])
        if first_alternative.get("$ref"):
            return reference_link(first_alternative["$ref"])

    reference = fragment.get("$ref")
    if reference:
        return reference_link(reference)

    _LOGGER.debug("No display type derivable for fragment keys %s", sorted(fragment))
    return placeholder


def definition_name(pointer: str) -> str:
    """Return the final path segment of a ``#/definitions/<Name>`` pointer."""
    return str(pointer).rsplit("/", 1)[-1]


def reference_link(pointer: str) -> str:
    """Build an in-document Markdown link for a reference pointer.

    The target definition is not looked up; a dangling pointer still yields a
    link.
    """
    name = definition_name(pointer)
    return f"[{name}](#{name})"


def _first_alternative(alternatives: Any) -> Mapping[str, Any] | None:
    if isinstance(alternatives, (str, bytes)) or not isinstance(alternatives, Sequence):
        return None
    if not alternatives:
        return None
    first = alternatives[0]
    return first if isinstance(first, Mapping) else None

