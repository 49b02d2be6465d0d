"""Typed scanning of decoded form fields."""

from form_scan.scanning.convert import BOOL_FALSE, BOOL_TRUE, convert, parse_bool, parse_integer
from form_scan.scanning.destinations import (
    INTEGER_BOUNDS,
    SUPPORTED_KINDS,
    Destination,
    FieldKind,
    ScanField,
)
from form_scan.scanning.errors import (
    BoolLiteralError,
    ConversionError,
    IntegerRangeError,
    IntegerSyntaxError,
    ScanError,
    ScanErrorKind,
)
from form_scan.scanning.scanner import SourceMapping, lookup, scan, scan_one, scan_values

__all__ = [
    "scan",
    "scan_one",
    "scan_values",
    "lookup",
    "SourceMapping",
    "Destination",
    "FieldKind",
    "ScanField",
    "INTEGER_BOUNDS",
    "SUPPORTED_KINDS",
    "convert",
    "parse_bool",
    "parse_integer",
    "BOOL_TRUE",
    "BOOL_FALSE",
    "ScanError",
    "ScanErrorKind",
    "ConversionError",
    "IntegerSyntaxError",
    "IntegerRangeError",
    "BoolLiteralError",
]
