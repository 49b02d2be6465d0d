"""form-scan: Typed extraction of values from decoded form data."""

__version__ = "0.1.0"

# These imports must come after __version__ to avoid circular import
from form_scan.callable import CallableResult, execute
from form_scan.diagnostics import ScanDiagnostic, ScanResult, ScanStatus
from form_scan.pipeline import FieldSpec, scan_batch, scan_form
from form_scan.scanning import (
    Destination,
    FieldKind,
    ScanError,
    ScanErrorKind,
    ScanField,
    scan,
    scan_values,
)

__all__ = [
    "__version__",
    # Scanning
    "scan",
    "scan_values",
    "Destination",
    "FieldKind",
    "ScanField",
    "ScanError",
    "ScanErrorKind",
    # Pipeline
    "FieldSpec",
    "scan_form",
    "scan_batch",
    "ScanResult",
    "ScanDiagnostic",
    "ScanStatus",
    # Callable
    "CallableResult",
    "execute",
]
