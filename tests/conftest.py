from __future__ import annotations

import os
from pathlib import Path

import pytest
from PyQt6.QtWidgets import QApplication

# Headless CI has no display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from mdview.services.code_highlighter import CodeBlockHighlighter
from mdview.services.file_service import FileService
from mdview.services.markdown_renderer import MarkdownRenderer
from mdview.services.renderer_facade import RendererFacade


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def highlighter() -> CodeBlockHighlighter:
    return CodeBlockHighlighter()


@pytest.fixture()
def renderer(highlighter: CodeBlockHighlighter) -> MarkdownRenderer:
    return MarkdownRenderer(highlighter)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def facade(renderer: MarkdownRenderer, file_service: FileService) -> RendererFacade:
    return RendererFacade(renderer, file_service)


@pytest.fixture()
def md_file(tmp_path: Path):
    """Factory writing a markdown file verbatim (no newline translation)."""

    def _make(name: str, text: str) -> Path:
        p = tmp_path / name
        p.write_bytes(text.encode("utf-8"))
        return p

    return _make
