from __future__ import annotations

from pathlib import Path

from mdview.domain.interfaces import ICodeHighlighter, IFileService, IMarkdownRenderer
from mdview.services.code_highlighter import CodeBlockHighlighter
from mdview.services.config.app_config import AppConfig, build_app_config
from mdview.services.file_service import FileService
from mdview.services.markdown_renderer import MarkdownRenderer
from mdview.services.renderer_facade import RendererFacade
from mdview.utils.constants import APP_NAME


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the facade with the configured initial Raw state
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        highlighter: ICodeHighlighter | None = None,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.highlighter: ICodeHighlighter = highlighter or CodeBlockHighlighter()
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(self.highlighter)
        self.file_service: IFileService = files or FileService()
        self.facade = RendererFacade(
            self.renderer,
            self.file_service,
            show_raw=self.config.start_raw(),
        )

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        return Container(config=build_app_config(explicit_ini=explicit_ini))

    # ---------- UI factories ----------

    def build_main_window(self, *, start_path: Path | None = None, app_title: str = APP_NAME):
        # Imported here so the non-Qt services can be used without a QApplication.
        from mdview.services.ui.main_window import MainWindow

        return MainWindow(
            facade=self.facade,
            file_service=self.file_service,
            start_path=start_path,
            app_title=app_title,
        )
