"""Execute interface for the form-scan callable protocol.

Provides the in-proc execute() function for callers that hand over plain
dicts instead of building destinations themselves.
"""

from __future__ import annotations

from typing import Any

from form_scan.callable.result import CallableResult
from form_scan.pipeline import FieldSpec, scan_form
from form_scan.validation import load_schema, validate_source


def execute(params: dict[str, Any]) -> dict[str, Any]:
    """Scan one or more decoded forms against a list of field specs.

    Args:
        params: Dictionary containing:
            - form: dict | list[dict] - A source mapping (field name -> list
              of values) or a list of them.
            - fields: list - Field specs, each a ``{"name", "kind"}`` dict or
              a ``"name:kind"`` string.

    Returns:
        CallableResult dict with:
            - schema_version: "1.0"
            - items: list[dict] - One ScanResult per form
            - stats: dict - input, output and errors counts

    Raises:
        ValueError: If required parameters are missing or invalid.
        SourceValidationError: If a form is not a valid source mapping.
    """
    form = params.get("form")
    if form is None:
        raise ValueError("'form' is required in params")

    fields = params.get("fields")
    if fields is None:
        raise ValueError("'fields' is required in params")

    specs = [FieldSpec.coerce(f) for f in fields]
    forms = form if isinstance(form, list) else [form]
    schema = load_schema()

    items: list[dict[str, Any]] = []
    error_count = 0

    for source in forms:
        result = scan_form(validate_source(source, schema), specs)
        if not result.success:
            error_count += 1
        items.append(result.model_dump(mode="json"))

    stats = {
        "input": len(forms),
        "output": len(items),
        "errors": error_count,
    }

    return CallableResult(items=items, stats=stats).to_dict()
