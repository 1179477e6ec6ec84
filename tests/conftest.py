"""Pytest configuration and shared fixtures for the md2deck test suite."""

from pathlib import Path

import pytest

from md2deck.ast import Document, Heading, Paragraph, Text, ThematicBreak


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - parser and renderer together")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def two_slide_document() -> Document:
    """Title, paragraph, slide break and subtitle."""
    return Document(
        children=[
            Heading(level=1, content=[Text(content="Title")]),
            Paragraph(content=[Text(content="Body")]),
            ThematicBreak(),
            Heading(level=2, content=[Text(content="Next")]),
        ]
    )


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    """A small Markdown talk on disk."""
    path = tmp_path / "talk.md"
    path.write_text("# Welcome\n\nIntro text\n\n---\n\n## Details\n", encoding="utf-8")
    return path
