"""Pipeline for scanning forms from plain field specifications.

Builds a destination for each requested field, runs the scanner and
packages the outcome as a ScanResult instead of raising.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from form_scan.diagnostics.models import ScanDiagnostic, ScannedValue, ScanResult, ScanStatus
from form_scan.scanning import Destination, FieldKind, ScanError, ScanField, SourceMapping, scan

logger = logging.getLogger(__name__)


class FieldSpec(BaseModel):
    """A requested field: its name and the kind to convert it to."""

    name: str
    kind: str = FieldKind.STRING.value

    @classmethod
    def parse(cls, text: str) -> "FieldSpec":
        """Parse a ``name:kind`` string. A bare name requests a string.

        The kind is split off at the last colon, so names may contain colons.
        """
        name, sep, kind = text.rpartition(":")
        if not sep:
            return cls(name=text)
        if not name:
            raise ValueError(f"Field spec has no name: {text!r}")
        return cls(name=name, kind=kind)

    @classmethod
    def coerce(cls, value: "FieldSpec | str | dict[str, Any]") -> "FieldSpec":
        """Accept a FieldSpec, a ``name:kind`` string, or a dict."""
        if isinstance(value, FieldSpec):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls.model_validate(value)

    @property
    def field_kind(self) -> FieldKind:
        return FieldKind.from_name(self.kind)


def scan_form(
    source: SourceMapping,
    specs: Iterable[FieldSpec | str | dict[str, Any]],
) -> ScanResult:
    """Scan one decoded form against a list of field specs.

    Args:
        source: Decoded form data, field name -> submitted values.
        specs: Ordered field specs. Unknown kinds are reported by the
            scanner as INCOMPATIBLE_TYPE at their position.

    Returns:
        ScanResult with every converted value, or the diagnostic for the
        first failing field.
    """
    field_specs = [FieldSpec.coerce(s) for s in specs]
    fields = [ScanField(s.name, Destination(s.field_kind)) for s in field_specs]

    try:
        scan(source, fields)
    except ScanError as e:
        logger.debug("Scan stopped: %s", e)
        return ScanResult(status=ScanStatus.FAILED, error=ScanDiagnostic.from_error(e))

    logger.debug("Scanned %d fields", len(fields))
    values = [
        ScannedValue(
            position=position,
            name=field.name,
            kind=field.destination.kind.value,
            value=field.destination.value,
        )
        for position, field in enumerate(fields)
    ]
    return ScanResult(status=ScanStatus.SUCCESS, values=values)


def scan_batch(
    sources: Iterable[SourceMapping],
    specs: Iterable[FieldSpec | str | dict[str, Any]],
) -> list[ScanResult]:
    """Scan each form in ``sources`` against the same field specs."""
    field_specs = [FieldSpec.coerce(s) for s in specs]
    return [scan_form(source, field_specs) for source in sources]
