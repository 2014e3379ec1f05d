"""Schema loading service tests."""

from __future__ import annotations

import pytest
from template_data_docs.schema_management import (
    SchemaDocument,
    SchemaError,
    description_text,
    display_text,
    iter_entries,
    load_schema_document,
    require_section,
)


def test_load_schema_document_preserves_key_order() -> None:
    document = load_schema_document(
        '{"properties": {"zeta": {}, "alpha": {}, "mid": {}}, "definitions": {}}'
    )

    assert isinstance(document, SchemaDocument)
    assert list(document.root["properties"]) == ["zeta", "alpha", "mid"]


def test_invalid_schema_text_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="Invalid template data schema"):
        load_schema_document("{not-valid-json}")


def test_empty_input_raises_schema_error() -> None:
    with pytest.raises(SchemaError):
        load_schema_document("")


def test_non_object_root_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="root must be a JSON object"):
        load_schema_document("[1, 2, 3]")


def test_require_section_fails_for_missing_mapping() -> None:
    with pytest.raises(SchemaError, match="Schema document has no 'definitions' mapping"):
        require_section({"properties": {}}, "definitions", "Schema document")


def test_require_section_fails_for_non_mapping() -> None:
    with pytest.raises(SchemaError, match="'properties' must be a mapping"):
        require_section({"properties": ["a"]}, "properties", "Schema document")


def test_iter_entries_rejects_non_object_fragments() -> None:
    with pytest.raises(SchemaError, match="entry 'broken' must be an object"):
        list(iter_entries({"ok": {}, "broken": "text"}, "Schema properties"))


def test_description_text_is_verbatim_or_empty() -> None:
    assert description_text({"description": "Has | pipes and `code`"}) == (
        "Has | pipes and `code`"
    )
    assert description_text({}) == ""


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_json_constants_raise_schema_error(constant) -> None:
    text = f'{{"properties": {{"x": {{"description": {constant}}}}}, "definitions": {{}}}}'

    with pytest.raises(SchemaError, match=f"'{constant}' is not a JSON value"):
        load_schema_document(text)


def test_invalid_utf8_bytes_raise_schema_error() -> None:
    with pytest.raises(SchemaError, match="not valid UTF-8"):
        load_schema_document(b'{"properties": {"\xff": {}}, "definitions": {}}')


def test_excessive_nesting_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="nested too deeply"):
        load_schema_document("[" * 200000 + "]" * 200000)


def test_utf8_bytes_are_accepted() -> None:
    document = load_schema_document('{"properties": {"größe": {}}, "definitions": {}}'.encode())

    assert list(document.root["properties"]) == ["größe"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        (3, "3"),
        (2.0, "2"),
        (1.5, "1.5"),
        (["a", "b"], "a,b"),
        (["a", None, 1], "a,,1"),
        ({"k": "v"}, '{"k":"v"}'),
    ],
)
def test_display_text_formats_json_values_like_template_strings(value, expected) -> None:
    assert display_text(value) == expected


def test_non_string_descriptions_use_json_spelling() -> None:
    assert description_text({"description": False}) == "false"
    assert description_text({"description": ["a", "b"]}) == "a,b"
