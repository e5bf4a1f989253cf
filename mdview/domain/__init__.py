"""Domain layer: interfaces and simple models (dataclasses and enums)."""

from .interfaces import (
    IAppConfig,
    ICodeHighlighter,
    IConfigService,
    IFileService,
    IMarkdownRenderer,
    IPresentationSink,
)
from .models import BlockKind, BlockMatch, Document, HighlightedBlock, HighlightStyle, InlineRule

__all__ = [
    "IMarkdownRenderer",
    "ICodeHighlighter",
    "IFileService",
    "IPresentationSink",
    "IConfigService",
    "IAppConfig",
    "Document",
    "BlockKind",
    "BlockMatch",
    "InlineRule",
    "HighlightStyle",
    "HighlightedBlock",
]
