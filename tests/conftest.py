"""Shared test fixtures for the suppression audit tests."""

import os
import sys
from typing import Callable, Dict

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def make_tree(tmp_path) -> Callable[[Dict[str, str]], str]:
    """Build a directory tree from a mapping of relative path -> file content."""

    def _make(files: Dict[str, str]) -> str:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for rel_path, content in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return str(root)

    return _make
