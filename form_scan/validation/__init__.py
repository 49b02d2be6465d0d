"""Validation of decoded form data."""

from form_scan.validation.checks import (
    SOURCE_SCHEMA_PATH,
    SourceValidationError,
    load_schema,
    validate_source,
)

__all__ = [
    "SOURCE_SCHEMA_PATH",
    "SourceValidationError",
    "load_schema",
    "validate_source",
]
