"""Document assembler tests."""

from __future__ import annotations

import pytest
from template_data_docs.configuration import (
    DEFAULT_INTRO_PARAGRAPHS,
    DEFAULT_REFERENCE_INTRO,
    RenderSettings,
)
from template_data_docs.markdown_rendering import assemble_document
from template_data_docs.schema_management import SchemaDocument, SchemaError, load_schema_document

SCENARIO_INPUT = (
    '{"properties":{"pkg":{"description":"d","type":"object",'
    '"properties":{"origin":{"type":"string","description":"o"}}}},"definitions":{}}'
)


def test_document_starts_with_title_and_intro_paragraphs() -> None:
    lines = assemble_document(SchemaDocument(root={"properties": {}, "definitions": {}}))

    assert lines[:6] == (
        "# Template Data",
        "",
        DEFAULT_INTRO_PARAGRAPHS[0],
        "",
        DEFAULT_INTRO_PARAGRAPHS[1],
        "",
    )


def test_empty_schema_renders_title_and_reference_block_only() -> None:
    lines = assemble_document(SchemaDocument(root={"properties": {}, "definitions": {}}))

    assert lines[6:] == ("## Reference Objects", "", DEFAULT_REFERENCE_INTRO, "")


def test_scenario_renders_property_section_then_empty_reference_objects() -> None:
    lines = assemble_document(load_schema_document(SCENARIO_INPUT))

    assert "## pkg" in lines
    assert "d" in lines
    assert "| origin | string | o |" in lines
    reference_index = lines.index("## Reference Objects")
    assert lines.index("| origin | string | o |") < reference_index
    assert not any(line.startswith("### ") for line in lines)


def test_definitions_follow_all_properties() -> None:
    document = SchemaDocument(
        root={
            "definitions": {"Ident": {"description": "i", "properties": {}}},
            "properties": {
                "first": {"description": "f"},
                "second": {"description": "s", "properties": {"x": {"type": "string"}}},
            },
        }
    )

    headings = [line for line in assemble_document(document) if line.startswith("#")]

    assert headings == [
        "# Template Data",
        "## first",
        "## second",
        "## Reference Objects",
        "### Ident",
    ]


def test_missing_properties_fails_before_definitions_are_read() -> None:
    document = SchemaDocument(root={"definitions": {"broken": {}}})

    with pytest.raises(SchemaError, match="Schema document has no 'properties' mapping"):
        assemble_document(document)


def test_missing_definitions_fails() -> None:
    with pytest.raises(SchemaError, match="'definitions'"):
        assemble_document(SchemaDocument(root={"properties": {}}))


def test_custom_settings_replace_fixed_prose() -> None:
    settings = RenderSettings(
        title="Config Reference",
        intro_paragraphs=("Only one paragraph.",),
        reference_heading="Shared Shapes",
        reference_intro="Shapes used above.",
    )

    lines = assemble_document(SchemaDocument(root={"properties": {}, "definitions": {}}), settings)

    assert lines == (
        "# Config Reference",
        "",
        "Only one paragraph.",
        "",
        "## Shared Shapes",
        "",
        "Shapes used above.",
        "",
    )


def test_assembly_is_deterministic() -> None:
    first = assemble_document(load_schema_document(SCENARIO_INPUT))
    second = assemble_document(load_schema_document(SCENARIO_INPUT))

    assert first == second
