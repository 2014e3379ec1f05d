"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderRequest:
    """Input contract for rendering one schema."""

    schema_text: str | bytes
    settings_path: str | None = None


@dataclass(frozen=True)
class RenderOutcome:
    """Output contract for one completed render."""

    text: str
    line_count: int
