"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed template data schema.

    The root mapping is kept as parsed; the ``properties`` and ``definitions``
    sections are only looked up when a renderer enumerates them.
    """

    root: Mapping[str, Any]
