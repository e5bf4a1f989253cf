from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QObject, QRunnable, pyqtSignal

from mdview.domain.interfaces import IFileService


class FileLoadWorkerSignals(QObject):
    """Signals emitted by background file reads."""

    # token, path, text, error message ("" on success)
    finished = pyqtSignal(int, str, str, str)


class FileLoadWorker(QRunnable):
    """Read one markdown file off the UI thread and report back with its load token."""

    def __init__(self, files: IFileService, path: Path, token: int) -> None:
        super().__init__()
        self.files = files
        self.path = path
        self.token = token
        self.signals = FileLoadWorkerSignals()

    def run(self) -> None:
        try:
            text = self.files.read_text(self.path)
        except (OSError, UnicodeDecodeError) as e:
            self.signals.finished.emit(self.token, str(self.path), "", str(e) or type(e).__name__)
            return
        self.signals.finished.emit(self.token, str(self.path), text, "")
