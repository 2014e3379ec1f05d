"""Render settings loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from .render_settings import RenderSettings

_LOGGER = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(
    {
        "title",
        "intro_paragraphs",
        "reference_heading",
        "reference_intro",
        "missing_type_placeholder",
    }
)


class ConfigurationError(Exception):
    """Raised when the render settings file is invalid."""


def load_render_settings(settings_path: Path | str | None = None) -> RenderSettings:
    """Load render settings, falling back to defaults when no path is given."""
    if settings_path is None:
        return RenderSettings()

    path = Path(settings_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
        parsed = yaml.safe_load(text)
    except OSError as exc:
        raise ConfigurationError(f"Failed to read settings file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    settings = parse_render_settings(parsed)
    _LOGGER.debug("Loaded render settings from %s", path)
    return settings


def parse_render_settings(value: Any) -> RenderSettings:
    """Validate a settings mapping and merge it over the defaults."""
    if not isinstance(value, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    unknown = sorted(str(key) for key in value if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")

    overrides: dict[str, Any] = {}
    for key in ("title", "reference_heading", "reference_intro", "missing_type_placeholder"):
        if key in value:
            overrides[key] = _require_non_empty_string(value[key], key)
    if "intro_paragraphs" in value:
        overrides["intro_paragraphs"] = _require_paragraphs(value["intro_paragraphs"])

    return replace(RenderSettings(), **overrides)


def _require_paragraphs(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return (_require_non_empty_string(value, "intro_paragraphs"),)
    if not isinstance(value, Sequence):
        raise ConfigurationError("intro_paragraphs must be a string or list of strings.")
    return tuple(_require_non_empty_string(item, "intro_paragraphs entries") for item in value)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
