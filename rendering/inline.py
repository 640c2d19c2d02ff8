"""Inline emphasis rules shared by the HTML and line renderers.

Bold (`**text**`) is applied before italic (`*text*`); spans do not nest and
escaped asterisks are not recognized.
"""

import re
from dataclasses import dataclass
from typing import List

BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
ITALIC_RE = re.compile(r"\*(.+?)\*")
INLINE_CODE_RE = re.compile(r"`([^`]+)`")


@dataclass(frozen=True)
class InlineSpan:
    text: str
    style: str = "plain"  # plain | strong | em


def emphasis_to_html(text: str) -> str:
    text = BOLD_RE.sub(r"<strong>\1</strong>", text)
    return ITALIC_RE.sub(r"<em>\1</em>", text)


def code_spans_to_html(text: str) -> str:
    return INLINE_CODE_RE.sub(r"<code>\1</code>", text)


def _split(text: str, pattern: re.Pattern, style: str) -> List[InlineSpan]:
    # re.split with one group alternates plain / captured parts
    spans = []
    for i, part in enumerate(pattern.split(text)):
        if i % 2 == 1:
            spans.append(InlineSpan(part, style))
        elif part:
            spans.append(InlineSpan(part))
    return spans


def split_inline(text: str) -> List[InlineSpan]:
    """Tokenize one line into plain / strong / em spans."""
    spans = []
    for span in _split(text, BOLD_RE, "strong"):
        if span.style == "plain":
            spans.extend(_split(span.text, ITALIC_RE, "em"))
        else:
            spans.append(span)
    return spans
