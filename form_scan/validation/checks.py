"""Validation of decoded form data before scanning.

A source mapping must be a JSON object whose values are lists of strings.
Form data read from files or other processes is checked against the bundled
JSON schema so that malformed input is rejected before the scanner sees it.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas"
SOURCE_SCHEMA_PATH = SCHEMA_DIR / "source_mapping.schema.json"


class SourceValidationError(Exception):
    """Raised when form data is not a valid source mapping."""

    pass


def load_schema(schema_path: Path | str | None = None) -> dict[str, Any]:
    """Load a source mapping schema.

    Args:
        schema_path: Path to a schema file. Defaults to the bundled schema.

    Returns:
        The parsed JSON schema.
    """
    with open(schema_path or SOURCE_SCHEMA_PATH) as f:
        return json.load(f)


def validate_source(
    data: Any,
    schema: dict[str, Any] | None = None,
) -> dict[str, list[str]]:
    """Validate form data against the source mapping schema.

    Args:
        data: Candidate source mapping, typically parsed JSON.
        schema: Schema to validate against. Defaults to the bundled schema.

    Returns:
        The same data, typed as a source mapping.

    Raises:
        SourceValidationError: If the data does not match the schema.
    """
    if schema is None:
        schema = load_schema()

    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise SourceValidationError(
            f"Invalid source mapping at {location}: {e.message}"
        ) from e

    return data
