# mdview/services/markdown_renderer.py
from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator

from mdview.domain.interfaces import ICodeHighlighter, IMarkdownRenderer
from mdview.domain.models import BlockKind, BlockMatch
from mdview.services.code_highlighter import CodeBlockHighlighter
from mdview.services.inline_rules import apply_inline
from mdview.utils.constants import CLS_CODE_BLOCK, CLS_IMAGE

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(
    r"^```(?P<lang>[a-zA-Z0-9]+)?[ \t]*\n(?P<body>(?:.*\n)*?)```[ \t]*$",
    re.MULTILINE,
)
_HEADING_RE = re.compile(r"^(?P<hashes>#{1,10}) (?P<content>.+)$", re.MULTILINE)
_IMAGE_RE = re.compile(
    r"!\[(?P<alt>[a-zA-Z0-9À-ÿ \-_]*)\]\((?P<src>[a-zA-Z0-9À-ÿ \-_/.]+)\)"
)
_UL_ITEM_RE = re.compile(r"^[-*] (?P<content>.+)$")
_OL_ITEM_RE = re.compile(r"^\d+\. (?P<content>.+)$")
_HEADING_CODE_RE = re.compile(r"`<(.+?)>`")

_PARAGRAPH_SEP = "\n\n"


class MarkdownRenderer(IMarkdownRenderer):
    """
    Two-pass markdown to HTML fragment converter.

    Pass one substitutes block constructs kind by kind (code fences, headings,
    images, then list runs), each kind matched against the buffer the previous
    kind left behind. Pass two splits on blank lines and wraps whatever was not
    already turned into a tag in <p>, running inline rules over it.
    """

    def __init__(self, highlighter: ICodeHighlighter | None = None) -> None:
        self.highlighter: ICodeHighlighter = highlighter or CodeBlockHighlighter()
        self._block_passes: list[tuple[BlockKind, re.Pattern[str], Callable[[BlockMatch, str], str]]] = [
            (BlockKind.CODE_FENCE, _CODE_FENCE_RE, self._render_code_fence),
            (BlockKind.HEADING, _HEADING_RE, self._render_heading),
            (BlockKind.IMAGE, _IMAGE_RE, self._render_image),
        ]

    def render(self, markdown_text: str, base_dir: str = "") -> str:
        buffer = markdown_text.replace("\r\n", "\n").replace("\r", "\n")

        for kind, pattern, render_fn in self._block_passes:
            buffer = self._substitute(buffer, kind, pattern, render_fn, base_dir)
        buffer = self._substitute_lists(buffer, base_dir)

        paragraphs: list[str] = []
        for segment in buffer.split(_PARAGRAPH_SEP):
            segment = segment.strip("\n").rstrip()
            if not segment:
                continue
            if segment.startswith("<"):
                paragraphs.append(segment)
            else:
                paragraphs.append(f"<p>{apply_inline(segment)}</p>")
        return _PARAGRAPH_SEP.join(paragraphs)

    # -------------------- block passes --------------------

    @staticmethod
    def _substitute(
        buffer: str,
        kind: BlockKind,
        pattern: re.Pattern[str],
        render_fn: Callable[[BlockMatch, str], str],
        base_dir: str,
    ) -> str:
        # Matches are replaced where they were found, in document order, so two
        # byte-identical spans each get their own rendering exactly once.
        count = 0

        def _replace(m: re.Match[str]) -> str:
            nonlocal count
            count += 1
            groups = {k: v for k, v in m.groupdict().items() if v is not None}
            return render_fn(BlockMatch(raw_span=m.group(0), kind=kind, groups=groups), base_dir)

        result = pattern.sub(_replace, buffer)
        if count:
            logger.debug("Substituted %d %s block(s)", count, kind.value)
        return result

    def _render_code_fence(self, match: BlockMatch, _base_dir: str) -> str:
        block = self.highlighter.highlight(match.groups.get("body", ""), match.groups.get("lang"))
        return f'<div class="{CLS_CODE_BLOCK}">{block.content}</div>'

    @staticmethod
    def _render_heading(match: BlockMatch, _base_dir: str) -> str:
        level = len(match.groups["hashes"])
        content = _HEADING_CODE_RE.sub(r"&lt;\1&gt;", match.groups["content"])
        return f"<h{level}>{content}</h{level}>"

    @staticmethod
    def _render_image(match: BlockMatch, base_dir: str) -> str:
        alt = match.groups.get("alt", "")
        src = resolve_image_src(match.groups["src"], base_dir)
        return f'<img alt="{alt}" class="{CLS_IMAGE}" src="{src}">'

    def _substitute_lists(self, buffer: str, base_dir: str) -> str:
        out: list[str] = []
        runs = 0
        for tag, lines in _list_runs(buffer.split("\n")):
            if tag is None:
                out.extend(lines)
                continue
            runs += 1
            match = BlockMatch(raw_span="\n".join(lines), kind=BlockKind.LIST_RUN, groups={"tag": tag})
            out.append(self._render_list(match, base_dir))
        if runs:
            logger.debug("Substituted %d %s block(s)", runs, BlockKind.LIST_RUN.value)
        return "\n".join(out)

    @staticmethod
    def _render_list(match: BlockMatch, _base_dir: str) -> str:
        tag = match.groups["tag"]
        items = (_list_item(line)[1] for line in match.raw_span.split("\n"))
        body = "".join(f"<li>{apply_inline(item)}</li>" for item in items)
        return f"<{tag}>{body}</{tag}>"


def _list_item(line: str) -> tuple[str, str] | None:
    m = _UL_ITEM_RE.match(line)
    if m:
        return "ul", m.group("content")
    m = _OL_ITEM_RE.match(line)
    if m:
        return "ol", m.group("content")
    return None


def _list_runs(lines: list[str]) -> Iterator[tuple[str | None, list[str]]]:
    """
    Yield (tag, source lines) for each maximal run of same-kind list lines and
    (None, [line]) for every other line. A blank line is a non-list line, so a
    run never crosses one.
    """
    tag: str | None = None
    run: list[str] = []
    for line in lines:
        item = _list_item(line)
        if item is not None and item[0] == tag:
            run.append(line)
            continue
        if tag is not None:
            yield tag, run
            tag, run = None, []
        if item is None:
            yield None, [line]
        else:
            tag, run = item[0], [line]
    if tag is not None:
        yield tag, run


def resolve_image_src(src: str, base_dir: str) -> str:
    """Absolute sources are kept; relative ones (with or without "./") hang off base_dir."""
    if src.startswith("/"):
        return src
    if src.startswith("./"):
        src = src[2:]
    if not base_dir:
        return src
    return f"{base_dir.rstrip('/')}/{src}"
