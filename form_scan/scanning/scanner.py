"""Scanner for reading typed values out of decoded form data.

The scanner is strict and mechanical:
- Each requested field must be present with exactly one value
- Values are converted to the destination's declared kind, never guessed
- The first failing request stops the scan and is reported by position and name

Destinations of earlier, successful requests keep the values written to them;
the failing request and every later one are left untouched.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from form_scan.scanning.convert import convert
from form_scan.scanning.destinations import SUPPORTED_KINDS, Destination, FieldKind
from form_scan.scanning.errors import ConversionError, ScanError

SourceMapping = Mapping[str, Sequence[str]]


def lookup(source: SourceMapping, position: int, name: str) -> str:
    """Return the single raw value submitted under ``name``.

    Raises:
        ScanError: NO_SUCH_FIELD if the name is absent, MULTIPLE_VALUES if it
            has zero or several values.
    """
    if name not in source:
        raise ScanError.no_such_field(position, name)

    values = source[name]
    if len(values) != 1:
        raise ScanError.multiple_values(position, name)

    return values[0]


def scan_one(source: SourceMapping, position: int, name: str, kind: FieldKind) -> Any:
    """Look up and convert one field without writing anywhere.

    The kind is checked before the lookup, so an unsupported kind is reported
    whether or not the field was submitted.

    Raises:
        ScanError: If the request fails for any reason.
    """
    if kind not in SUPPORTED_KINDS:
        raise ScanError.incompatible_type(position, name)

    raw = lookup(source, position, name)

    try:
        return convert(raw, kind)
    except ConversionError as e:
        raise ScanError.incompatible_value(position, name, e) from e


def scan(source: SourceMapping, fields: Iterable[tuple[str, Any]]) -> None:
    """Scan form fields into their destinations, in order.

    Args:
        source: Decoded form data, field name -> submitted values.
        fields: Ordered ``(name, destination)`` requests, usually
            ``ScanField`` tuples. Names may repeat.

    Raises:
        ScanError: On the first request that fails. Destinations of earlier
            requests have already been written.
    """
    for position, (name, destination) in enumerate(fields):
        if not isinstance(destination, Destination):
            raise ScanError.incompatible_type(position, name)

        value = scan_one(source, position, name, destination.kind)
        destination.set(value)


def scan_values(
    source: SourceMapping,
    fields: Iterable[tuple[str, FieldKind | str]],
) -> list[Any]:
    """Scan form fields and return the converted values in request order.

    Args:
        source: Decoded form data, field name -> submitted values.
        fields: Ordered ``(name, kind)`` requests.

    Returns:
        One converted value per request.

    Raises:
        ScanError: On the first request that fails. Nothing is returned.
    """
    values: list[Any] = []

    for position, (name, kind) in enumerate(fields):
        if not isinstance(kind, FieldKind):
            kind = FieldKind.from_name(kind)
        values.append(scan_one(source, position, name, kind))

    return values
