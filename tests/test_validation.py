"""Tests for source mapping validation and I/O helpers."""

import json
from pathlib import Path

import pytest

from form_scan.io import parse_query, read_forms, read_jsonl, write_jsonl
from form_scan.validation import (
    SOURCE_SCHEMA_PATH,
    SourceValidationError,
    load_schema,
    validate_source,
)


class TestValidateSource:
    """Tests for validate_source()."""

    def test_bundled_schema_exists(self, source_schema_path: Path) -> None:
        assert SOURCE_SCHEMA_PATH.name == source_schema_path.name
        assert SOURCE_SCHEMA_PATH.exists()
        assert load_schema() == load_schema(source_schema_path)

    def test_valid_mapping(self, signup_form: dict) -> None:
        assert validate_source(signup_form) is signup_form

    def test_empty_mapping_is_valid(self) -> None:
        assert validate_source({}) == {}

    def test_empty_value_list_is_valid(self) -> None:
        """Test zero values pass validation; the scanner reports them."""
        assert validate_source({"a": []}) == {"a": []}

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "age=17",
            {"age": "17"},
            {"age": [17]},
            {"age": [["17"]]},
            {"age": None},
        ],
    )
    def test_invalid_mappings(self, data) -> None:
        with pytest.raises(SourceValidationError, match="Invalid source mapping"):
            validate_source(data)

    def test_error_names_location(self) -> None:
        with pytest.raises(SourceValidationError) as exc_info:
            validate_source({"age": ["17", 18]})

        assert "age/1" in str(exc_info.value)

    def test_custom_schema(self, tmp_path: Path) -> None:
        """Test a stricter schema can be supplied."""
        schema_path = tmp_path / "strict.schema.json"
        schema_path.write_text(
            json.dumps(
                {
                    "type": "object",
                    "additionalProperties": {"type": "array", "maxItems": 1},
                }
            )
        )

        schema = load_schema(schema_path)
        with pytest.raises(SourceValidationError):
            validate_source({"a": ["1", "2"]}, schema)


class TestParseQuery:
    """Tests for query string decoding."""

    def test_repeated_and_blank_values(self) -> None:
        assert parse_query("a=1&b=&a=2") == {"a": ["1", "2"], "b": [""]}

    def test_leading_question_mark(self) -> None:
        assert parse_query("?age=17") == {"age": ["17"]}

    def test_percent_decoding(self) -> None:
        assert parse_query("name=J%C3%BCrgen+Smith") == {"name": ["Jürgen Smith"]}

    def test_empty(self) -> None:
        assert parse_query("") == {}


class TestJsonl:
    """Tests for JSONL reading and writing."""

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "out.jsonl"
        records = [{"a": ["1"]}, {"b": ["x", "y"]}]

        assert write_jsonl(path, records) == 2
        assert list(read_jsonl(path)) == records

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text('{"a": ["1"]}\n\n   \n{"b": ["2"]}\n')

        assert len(list(read_jsonl(path))) == 2

    def test_invalid_json_names_line(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text('{"a": ["1"]}\n{not json}\n')

        with pytest.raises(ValueError, match="line 2"):
            list(read_jsonl(path))

    def test_read_forms_decodes_query_strings(self, tmp_path: Path) -> None:
        path = tmp_path / "forms.jsonl"
        path.write_text('{"age": ["17"]}\n"age=18&active=on"\n')

        assert list(read_forms(path)) == [
            {"age": ["17"]},
            {"age": ["18"], "active": ["on"]},
        ]
