# mdview/services/inline_rules.py
"""
Inline substitution engine.

INLINE_RULES is applied strictly in order over the whole string, and every rule
sees the HTML emitted by the rules before it. Later rules can therefore match
inside attributes written by earlier ones (a number inside a link text, an
underscore pair spanning two tags). That ordering is part of the output format:
do not reorder the list or make rules aware of each other.

The one exception is the code span: its inner text is stashed behind a
placeholder while the remaining rules run, so `*x*` inside backticks stays literal.
"""

from __future__ import annotations

import re

from mdview.domain.models import InlineRule
from mdview.utils.constants import CLS_NUMBER

# Letters, digits, accented letters, space and the emphasis punctuation allowlist.
_EMPHASIS_CHARS = r"a-zA-Z0-9À-ÿ \._\-\\/#:%+=$~€()<>"

_CODE_SPAN_RE = re.compile(r"`([^`]+)`")
_PLACEHOLDER = "\x00CODE{}\x00"
_PLACEHOLDER_RE = re.compile(r"\x00CODE(\d+)\x00")

INLINE_RULES: tuple[InlineRule, ...] = (
    InlineRule(
        name="external link",
        pattern=re.compile(r"\[([a-zA-Z0-9 \-_:]+)\]\((https?://[a-zA-Z0-9./:]+)\)"),
        replacement=r'<a href="\2">\1</a>',
    ),
    InlineRule(
        name="bare link",
        # Needs one leading character that isn't part of an attribute or closing tag.
        pattern=re.compile(r'([^">/])(https?://[a-zA-Z0-9./:]+)'),
        replacement=r'\1<a href="\2">\2</a>',
    ),
    InlineRule(
        name="email",
        pattern=re.compile(r"([a-z0-9]+(?:[_.\-][a-z0-9]+)*@[a-z0-9]+(?:[_.\-][a-z0-9]+)*\.[a-z]{2,6})"),
        replacement=r'<a href="mailto:\1">\1</a>',
    ),
    InlineRule(
        name="number",
        pattern=re.compile(r"(?<![\w.#&/=:])(\d+(?:\.\d+)?)(?![\w./:\])\"<])"),
        replacement=rf'<span class="{CLS_NUMBER}">\1</span>',
    ),
    InlineRule(
        name="bold (**)",
        pattern=re.compile(rf"\*{{2}}([{_EMPHASIS_CHARS}]+)\*{{2}}"),
        replacement=r"<strong>\1</strong>",
    ),
    InlineRule(
        name="bold (__)",
        pattern=re.compile(rf"_{{2}}([{_EMPHASIS_CHARS}]+)_{{2}}"),
        replacement=r"<strong>\1</strong>",
    ),
    InlineRule(
        name="italic (*)",
        pattern=re.compile(rf"\*([{_EMPHASIS_CHARS}]+)\*"),
        replacement=r"<i>\1</i>",
    ),
    InlineRule(
        name="italic (_)",
        pattern=re.compile(rf"_([{_EMPHASIS_CHARS}]+)_"),
        replacement=r"<i>\1</i>",
    ),
)


def rule_names() -> list[str]:
    """Effective order, code span first."""
    return ["code span"] + [rule.name for rule in INLINE_RULES]


def apply_inline(text: str) -> str:
    stash: list[str] = []

    def _stash(m: re.Match[str]) -> str:
        stash.append(f"<code>{m.group(1)}</code>")
        return _PLACEHOLDER.format(len(stash) - 1)

    # NUL is reserved for code span placeholders.
    result = _CODE_SPAN_RE.sub(_stash, text.replace("\x00", ""))
    for rule in INLINE_RULES:
        result = rule.apply(result)

    if not stash:
        return result
    return _PLACEHOLDER_RE.sub(lambda m: stash[int(m.group(1))], result)
