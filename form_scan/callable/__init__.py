"""Callable protocol for form-scan."""

from form_scan.callable.execute import execute
from form_scan.callable.result import CallableResult

__all__ = ["CallableResult", "execute"]
