from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QThreadPool
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QTextBrowser,
    QToolBar,
)

from mdview.domain.interfaces import IFileService
from mdview.services.renderer_facade import RendererFacade
from mdview.services.ui.load_worker import FileLoadWorker
from mdview.utils.constants import APP_NAME, CSS_PREVIEW, HTML_TEMPLATE

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Thin Qt shell around RendererFacade: file drop target, Raw toggle, and the
    presentation sink that displays whichever rendering the facade hands over.
    """

    def __init__(
        self,
        facade: RendererFacade,
        file_service: IFileService,
        *,
        thread_pool: QThreadPool | None = None,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self._app_title = app_title
        self.setWindowTitle(app_title)
        self.resize(1000, 800)

        self.facade = facade
        self.file_service = file_service
        self._pool = thread_pool or QThreadPool.globalInstance()
        # Workers are kept alive until they report, their signals object lives on them.
        self._workers: dict[int, FileLoadWorker] = {}

        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)
        self.setCentralWidget(self.preview)

        self._build_actions()
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))

        self.setAcceptDrops(True)

        if start_path:
            self.open_path(start_path)

    # ---------- UI creation ----------
    def _build_actions(self) -> None:
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_raw = QAction(
            "Raw",
            self,
            checkable=True,
            checked=self.facade.show_raw,
            triggered=self._toggle_raw,
        )
        self.act_exit = QAction("&Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(QApplication.instance().quit)
        self.addAction(self.act_exit)

    def _build_toolbar(self) -> None:
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        tb.addAction(self.act_open)
        tb.addSeparator()
        tb.addAction(self.act_raw)
        self.addToolBar(tb)

    # ---------- Presentation sink ----------
    def show_raw(self, text: str) -> None:
        self.preview.setPlainText(text)

    def show_html(self, fragment: str) -> None:
        self.preview.setHtml(HTML_TEMPLATE.format(css=CSS_PREVIEW, body=fragment))

    # ---------- Loading ----------
    def open_path(self, path: Path) -> bool:
        """Start an asynchronous load; returns False when the file is not accepted."""
        if not self.facade.accepts([path]):
            logger.debug("Rejected %s", path)
            return False

        token = self.facade.begin_load(path)
        worker = FileLoadWorker(self.file_service, path, token)
        worker.signals.finished.connect(self._on_loaded)
        self._workers[token] = worker
        self.statusBar().showMessage(f"Loading {path.name}…")
        self._pool.start(worker)
        return True

    def _on_loaded(self, token: int, path_str: str, text: str, error: str) -> None:
        self._workers.pop(token, None)
        path = Path(path_str)
        if error:
            if token != self.facade.generation:
                return
            logger.error("Failed to read %s: %s", path, error)
            self.statusBar().showMessage(f"Failed to open {path.name}", 3000)
            QMessageBox.critical(self, "Open Error", f"Failed to open file:\n{error}")
            return

        if not self.facade.complete_load(token, path, text):
            return
        self.setWindowTitle(f"{path.name} — {self._app_title}")
        self.statusBar().showMessage(f"Loaded: {path}", 3000)
        self.facade.present(self)

    def _open_dialog(self) -> None:
        path_str, _ = QFileDialog.getOpenFileName(self, "Open Markdown", "", "Markdown (*.md)")
        if path_str:
            self.open_path(Path(path_str))

    # ---------- Raw toggle ----------
    def _toggle_raw(self, on: bool) -> None:
        self.facade.set_raw(on)
        self.facade.present(self)

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dragMoveEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        paths = [Path(u.toLocalFile()) for u in e.mimeData().urls() if u.isLocalFile()]
        if self.facade.accepts(paths):
            self.open_path(paths[0])
        e.acceptProposedAction()

    # ---------- Close ----------
    def closeEvent(self, event):
        self._pool.waitForDone(2000)
        super().closeEvent(event)
