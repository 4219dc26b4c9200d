# tests/conftest.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Root conftest for jsmigrate tests.

Ensures the src directory is in the Python path for all tests.
Provides fixtures for parsing sources and locating fixture cases.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path so jsmigrate is importable without installing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding recipe fixture cases."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def parse():
    """Parse source text into an SgRoot (TSX grammar unless told otherwise)."""
    from jsmigrate.syntax import SgRoot

    def _parse(source: str, language: str = "tsx"):
        return SgRoot(source, language)

    return _parse
