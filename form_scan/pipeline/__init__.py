"""Pipeline for scanning forms."""

from form_scan.diagnostics.models import ScanResult
from form_scan.pipeline.orchestrator import FieldSpec, scan_batch, scan_form

__all__ = [
    "FieldSpec",
    "ScanResult",
    "scan_batch",
    "scan_form",
]
