"""Concrete service implementations: parser, highlighter, facade and file source."""

from .code_highlighter import CodeBlockHighlighter
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .renderer_facade import RendererFacade

__all__ = ["CodeBlockHighlighter", "FileService", "MarkdownRenderer", "RendererFacade"]
