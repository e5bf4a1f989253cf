from __future__ import annotations

from pathlib import Path

from mdview.domain.interfaces import IFileService


class FileService(IFileService):
    """Reads markdown files verbatim; line endings are not translated."""

    def read_text(self, path: Path) -> str:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
