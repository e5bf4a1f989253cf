# mdview/services/code_highlighter.py
from __future__ import annotations

import html
import json
import logging
import math
import re
from collections.abc import Callable, Iterable

from mdview.domain.interfaces import ICodeHighlighter
from mdview.domain.models import HighlightedBlock, HighlightStyle
from mdview.utils.constants import (
    CLS_BASH_COMMENT,
    CLS_INI_COMMENT,
    CLS_INI_KEY,
    CLS_INI_SECTION,
    LINE_BREAK,
)

logger = logging.getLogger(__name__)

_JSON_TOKEN_RE = re.compile(
    r'("(\\u[a-zA-Z0-9]{4}|\\[^u]|[^\\"])*"(\s*:)?'
    r"|\b(true|false|null)\b"
    r"|-?\d+(?:\.\d*)?(?:[eE][+\-]?\d+)?)"
)
_INI_SECTION_RE = re.compile(r"^\[[a-z]+\]")
_INI_ITEM_RE = re.compile(r"^[a-zA-Z_.]+=")


def _lines(content: str) -> list[str]:
    # The fence body ends with the line break before the closing fence; that is not a line.
    if content.endswith("\n"):
        content = content[:-1]
    return content.split("\n")


def _wrap(body: str) -> HighlightedBlock:
    return HighlightedBlock(content=f"{LINE_BREAK}{body}{LINE_BREAK}")


def _paragraphs(lines: Iterable[str]) -> str:
    return "".join(f"<p>{line}</p>" for line in lines)


def _json_token_class(token: str) -> str:
    if token.startswith('"'):
        return "json-key" if token.endswith(":") else "json-string"
    if token in ("true", "false"):
        return "json-boolean"
    if token == "null":
        return "json-null"
    return "json-number"


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def _parse_float(token: str) -> float | int | None:
    # Printed the way a browser serialises numbers: overflow is null, 100.0 is 100.
    value = float(token)
    if not math.isfinite(value):
        return None
    if value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


class CodeBlockHighlighter(ICodeHighlighter):
    """
    Line-oriented stylers for fenced code blocks.

    Each style has exactly one handler; the handler table is checked against
    HighlightStyle at construction so a new style can't be left unhandled.
    """

    def __init__(self) -> None:
        self._handlers: dict[HighlightStyle, Callable[[str], HighlightedBlock]] = {
            HighlightStyle.DEFAULT: self._default,
            HighlightStyle.BASH: self._bash,
            HighlightStyle.JSON: self._json,
            HighlightStyle.INI: self._ini,
        }
        missing = set(HighlightStyle) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No highlighter for: {sorted(s.value for s in missing)}")

    def highlight(self, content: str, language: str | None) -> HighlightedBlock:
        style = HighlightStyle.from_tag(language)
        return self._handlers[style](content)

    # -------------------- stylers --------------------

    def _default(self, content: str) -> HighlightedBlock:
        # Injected as raw inner HTML, no escaping.
        return _wrap(_paragraphs(_lines(content)))

    def _bash(self, content: str) -> HighlightedBlock:
        return _wrap(_paragraphs(self._bash_line(line) for line in _lines(content)))

    def _json(self, content: str) -> HighlightedBlock:
        try:
            data = json.loads(content, parse_constant=_reject_constant, parse_float=_parse_float)
            pretty = json.dumps(data, indent="\t", ensure_ascii=False, allow_nan=False)
        except (ValueError, RecursionError) as e:
            logger.error("Cannot parse fenced JSON block, rendering as plain text: %s", e)
            escaped = [html.escape(line, quote=False) for line in _lines(content)]
            return _wrap(_paragraphs(escaped))
        return _wrap(f"<pre>{self._colorize_json(pretty)}</pre>")

    def _ini(self, content: str) -> HighlightedBlock:
        return _wrap(_paragraphs(self._ini_line(line) for line in _lines(content)))

    # -------------------- helpers --------------------

    @staticmethod
    def _bash_line(line: str) -> str:
        if line.startswith("#"):
            return f'<span class="{CLS_BASH_COMMENT}">{line}</span>'
        return line

    @staticmethod
    def _colorize_json(text: str) -> str:
        text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

        def _span(m: re.Match[str]) -> str:
            token = m.group(0)
            return f'<span class="{_json_token_class(token)}">{token}</span>'

        return _JSON_TOKEN_RE.sub(_span, text)

    @staticmethod
    def _ini_comment(text: str) -> str | None:
        if text.startswith("#"):
            return f'<span class="{CLS_INI_COMMENT}">{text}</span>'
        return None

    @classmethod
    def _ini_line(cls, line: str) -> str:
        # First rule that matches wins; comment > section > item.
        comment = cls._ini_comment(line)
        if comment is not None:
            return comment
        if _INI_SECTION_RE.match(line):
            return f'<span class="{CLS_INI_SECTION}">{line}</span>'
        if _INI_ITEM_RE.match(line):
            key, _, value = line.partition("=")
            styled_value = cls._ini_comment(value)
            return f'<span class="{CLS_INI_KEY}">{key}</span>={styled_value or value}'
        return line


def highlight(content: str, language: str | None) -> HighlightedBlock:
    """Module-level shortcut for a one-off highlight."""
    return CodeBlockHighlighter().highlight(content, language)
