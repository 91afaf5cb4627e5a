from __future__ import annotations

from pathlib import Path

import pytest

from docdown.models import Document
from tests._fixtures.documents import full_document, widget_document, widget_index, write_index


@pytest.fixture
def widget() -> Document:
    return widget_document()


@pytest.fixture
def parts() -> Document:
    return full_document()


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """A package directory holding the widget index."""
    directory = tmp_path / "widget"
    write_index(directory, widget_index())
    return directory
