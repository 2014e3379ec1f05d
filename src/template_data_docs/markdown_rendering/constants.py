"""Shared Markdown rendering constants."""

from __future__ import annotations

TABLE_HEADER: tuple[str, ...] = (
    "| Property | Type | Description |",
    "| -------- | ---- | ----------- |",
)

PROPERTY_HEADING_PREFIX = "##"
DEFINITION_HEADING_PREFIX = "###"
