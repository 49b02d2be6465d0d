"""Scan results and diagnostics."""

from form_scan.diagnostics.models import (
    ScanDiagnostic,
    ScannedValue,
    ScanResult,
    ScanStatus,
)

__all__ = [
    "ScanDiagnostic",
    "ScannedValue",
    "ScanResult",
    "ScanStatus",
]
