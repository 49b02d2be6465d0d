"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def source_schema_path(project_root: Path) -> Path:
    """Return the bundled source mapping schema path."""
    return project_root / "form_scan" / "schemas" / "source_mapping.schema.json"


@pytest.fixture
def signup_form() -> dict[str, list[str]]:
    """A decoded signup form with one repeated field."""
    return {
        "age": ["17"],
        "active": ["on"],
        "name": ["a", "b"],
    }


@pytest.fixture
def profile_form() -> dict[str, list[str]]:
    """A decoded profile form where every field has exactly one value."""
    return {
        "user_id": ["4096"],
        "score": ["-12"],
        "newsletter": ["off"],
        "nickname": ["zed"],
        "bio": [""],
    }
