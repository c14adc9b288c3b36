"""
Global pytest configuration and fixtures.
"""

from pathlib import Path

import pytest

from ghostty_lsp.schema import load_schema

FIXTURES_DIR = Path(__file__).parent / "fixtures"
MINIMAL_SCHEMA_PATH = FIXTURES_DIR / "schemas" / "minimal-schema.json"


@pytest.fixture
def minimal_schema_path() -> Path:
    return MINIMAL_SCHEMA_PATH


@pytest.fixture
def minimal_schema():
    """Small schema covering every option variant, two of them deprecated."""
    return load_schema(MINIMAL_SCHEMA_PATH)
