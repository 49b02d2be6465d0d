"""Input/output utilities for form data and JSONL files."""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs


def parse_query(query: str) -> dict[str, list[str]]:
    """Decode a URL-encoded query string or form body into a source mapping.

    Blank values are kept, so ``"a=&b=1"`` yields ``{"a": [""], "b": ["1"]}``.
    A leading ``?`` is ignored.

    Args:
        query: The encoded form data.

    Returns:
        Field name -> submitted values, in submission order.
    """
    return parse_qs(query.removeprefix("?"), keep_blank_values=True)


def read_jsonl(path: Path | str) -> Iterator[Any]:
    """Read a JSONL file and yield each record.

    Args:
        path: Path to the JSONL file.

    Yields:
        Each parsed JSON record.
    """
    with open(path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_num}: {e}") from e


def read_forms(path: Path | str) -> Iterator[Any]:
    """Read forms from a JSONL file.

    Each line is either a JSON object (an already decoded source mapping) or a
    JSON string holding an encoded query string, which is decoded with
    ``parse_query``. Other values are yielded unchanged for the caller to
    validate.
    """
    for record in read_jsonl(path):
        if isinstance(record, str):
            yield parse_query(record)
        else:
            yield record


def write_jsonl(path: Path | str, records: Iterator[dict[str, Any]] | list[dict[str, Any]]) -> int:
    """Write records to a JSONL file.

    Args:
        path: Path to write the JSONL file.
        records: Iterator or list of records to write.

    Returns:
        Number of records written.
    """
    count = 0
    with open(path, "w") as f:
        for record in records:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
            count += 1
    return count
