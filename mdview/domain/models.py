from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Document:
    """One loaded markdown file. Replaced wholesale on every load, never mutated."""

    raw_text: str
    base_dir: str
    path: Path | None = None
    eol: str = "\n"

    @staticmethod
    def detect_eol(text: str) -> str:
        return "\r\n" if "\r" in text else "\n"


class BlockKind(Enum):
    # Declaration order is the order the block parser substitutes them in.
    CODE_FENCE = "code_fence"
    HEADING = "heading"
    IMAGE = "image"
    LIST_RUN = "list_run"


@dataclass(frozen=True)
class BlockMatch:
    raw_span: str
    kind: BlockKind
    groups: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class InlineRule:
    """A single pattern rewrite; its precedence is its position in the rule list."""

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


class HighlightStyle(Enum):
    DEFAULT = "default"
    BASH = "bash"
    JSON = "json"
    INI = "ini"

    @classmethod
    def from_tag(cls, tag: str | None) -> HighlightStyle:
        key = (tag or "").strip().lower()
        for style in (cls.BASH, cls.JSON, cls.INI):
            if style.value == key:
                return style
        return cls.DEFAULT


@dataclass(frozen=True)
class HighlightedBlock:
    content: str
