# mdview/services/renderer_facade.py
from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from mdview.domain.interfaces import IFileService, IMarkdownRenderer, IPresentationSink
from mdview.domain.models import Document
from mdview.utils.constants import MARKDOWN_EXT

logger = logging.getLogger(__name__)


def base_dir_of(path: Path) -> str:
    """Directory of the file with a trailing slash, used to resolve relative images."""
    return f"{path.parent.as_posix()}/"


class RendererFacade:
    """
    Owns the current Document and its rendered HTML.

    Loads are split in two so the read can happen elsewhere (a worker thread):
    begin_load() hands out a generation token, complete_load() only takes effect
    if that token is still the newest one. A drop that arrives while a previous
    read is in flight therefore wins, whatever order the reads finish in.
    """

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        files: IFileService,
        *,
        show_raw: bool = False,
    ) -> None:
        self.renderer = renderer
        self.files = files
        self.show_raw = show_raw

        self._document: Document | None = None
        self._pretty: str = ""
        self._generation = 0
        self._ready = False

    # ---------- acceptance ----------

    @staticmethod
    def accepts(paths: Sequence[Path]) -> bool:
        if len(paths) != 1:
            return False
        path = paths[0]
        return path.name.endswith(MARKDOWN_EXT) and not path.is_dir()

    # ---------- loading ----------

    def begin_load(self, path: Path) -> int:
        self._generation += 1
        self._ready = False
        logger.debug("Load #%d started: %s", self._generation, path)
        return self._generation

    def complete_load(self, token: int, path: Path, text: str) -> bool:
        if token != self._generation:
            logger.debug("Discarding stale load #%d of %s (current #%d)", token, path, self._generation)
            return False

        doc = Document(
            raw_text=text,
            base_dir=base_dir_of(path),
            path=path,
            eol=Document.detect_eol(text),
        )
        self._pretty = self.renderer.render(doc.raw_text, doc.base_dir)
        self._document = doc
        self._ready = True
        logger.info("Loaded %s (%d chars, eol=%r)", path, len(text), doc.eol)
        return True

    def load(self, path: Path) -> bool:
        """Synchronous accept + read + render. Read errors propagate to the caller."""
        if not self.accepts([path]):
            logger.debug("Ignoring unsupported file: %s", path)
            return False
        token = self.begin_load(path)
        text = self.files.read_text(path)
        return self.complete_load(token, path, text)

    # ---------- accessors ----------

    @property
    def document(self) -> Document | None:
        return self._document

    @property
    def generation(self) -> int:
        return self._generation

    def is_ready(self) -> bool:
        return self._ready

    def get_raw(self) -> str:
        return self._document.raw_text if self._document else ""

    def get_pretty(self) -> str:
        return self._pretty

    # ---------- presentation ----------

    def set_raw(self, on: bool) -> None:
        self.show_raw = on

    def present(self, sink: IPresentationSink) -> bool:
        """Push the selected rendering to the sink. Never re-renders."""
        if not self._ready:
            return False
        if self.show_raw:
            sink.show_raw(self.get_raw())
        else:
            sink.show_html(self.get_pretty())
        return True
