"""Data models for scan results and diagnostics.

Turns the outcome of a scan into a serializable report: the converted values
on success, or a single diagnostic describing the failing field.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, model_validator

from form_scan.scanning.errors import ScanError


class ScanStatus(str, Enum):
    """Status of a form scan."""

    SUCCESS = "success"  # Every requested field scanned
    FAILED = "failed"  # Stopped at the first failing field


class ScanDiagnostic(BaseModel):
    """The error that stopped a scan."""

    code: str  # ScanErrorKind value like "NO_SUCH_FIELD"
    message: str
    position: int
    field_name: str
    detail: str | None = None  # Underlying conversion failure, if any

    @classmethod
    def from_error(cls, error: ScanError) -> "ScanDiagnostic":
        return cls(
            code=error.kind.value,
            message=error.message,
            position=error.position,
            field_name=error.name,
            detail=str(error.sub_error) if error.sub_error is not None else None,
        )


class ScannedValue(BaseModel):
    """A single converted field value."""

    position: int
    name: str
    kind: str
    value: Any


class ScanResult(BaseModel):
    """Result of scanning one form."""

    status: ScanStatus
    values: list[ScannedValue] = []
    error: ScanDiagnostic | None = None

    @model_validator(mode="after")
    def validate_error_matches_status(self) -> "ScanResult":
        """Ensure a failed result carries its error and a successful one does not."""
        failed = self.status == ScanStatus.FAILED
        if failed and self.error is None:
            raise ValueError("A failed scan result must carry an error")
        if not failed and self.error is not None:
            raise ValueError("A successful scan result cannot carry an error")
        return self

    @property
    def success(self) -> bool:
        return self.status == ScanStatus.SUCCESS

    def as_dict(self) -> dict[str, Any]:
        """Return the scanned values keyed by field name.

        Later occurrences of a repeated name win.
        """
        return {item.name: item.value for item in self.values}
