"""Configuration domain exports."""

from .loader import ConfigurationError, load_render_settings, parse_render_settings
from .render_settings import (
    DEFAULT_INTRO_PARAGRAPHS,
    DEFAULT_REFERENCE_HEADING,
    DEFAULT_REFERENCE_INTRO,
    DEFAULT_TITLE,
    RenderSettings,
)

__all__ = [
    "ConfigurationError",
    "DEFAULT_INTRO_PARAGRAPHS",
    "DEFAULT_REFERENCE_HEADING",
    "DEFAULT_REFERENCE_INTRO",
    "DEFAULT_TITLE",
    "RenderSettings",
    "load_render_settings",
    "parse_render_settings",
]
