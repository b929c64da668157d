"""Test configuration and fixtures for folder-cleaner."""

from pathlib import Path
from typing import Mapping, Union

import pytest

# Nested mapping of names to file contents (str/bytes) or sub-mappings for folders
TreeLayout = Mapping[str, Union[str, bytes, "TreeLayout"]]


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


def create_tree(base: Path, layout: TreeLayout) -> Path:
    """Create files and folders under ``base`` as described by ``layout``."""
    base.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        path = base / name
        if isinstance(content, Mapping):
            create_tree(path, content)
        elif isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
    return base


@pytest.fixture
def make_tree(tmp_path):
    """Factory fixture building a folder tree below ``tmp_path``."""

    def _make_tree(layout: TreeLayout, name: str = "root") -> Path:
        return create_tree(tmp_path / name, layout)

    return _make_tree
