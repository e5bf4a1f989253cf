from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from mdview.domain.models import HighlightedBlock


class IMarkdownRenderer(Protocol):
    """Convert markdown text to an HTML fragment (no <html>/<body> wrapper)."""

    def render(self, markdown_text: str, base_dir: str = "") -> str: ...


class ICodeHighlighter(Protocol):
    """Style the content of one fenced code block according to its language tag."""

    def highlight(self, content: str, language: str | None) -> HighlightedBlock: ...


class IFileService(Protocol):
    """Read text files verbatim (line endings untouched)."""

    def read_text(self, path: Path) -> str: ...


class IPresentationSink(Protocol):
    """Displays whatever the facade hands it."""

    def show_raw(self, text: str) -> None: ...
    def show_html(self, fragment: str) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...
    def log_level(self) -> str: ...
    def log_file(self) -> Path | None: ...
    def start_raw(self) -> bool: ...
