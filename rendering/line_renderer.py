"""Line-at-a-time structured markdown render for lightweight display.

Unlike `to_html`, this renderer has no table or fenced-code support: each line
is classified on its own. Only paragraphs and list items get inline emphasis.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from rendering.inline import InlineSpan, split_inline


_NUMBERED_RE = re.compile(r"^\d+\.\s")


@dataclass(frozen=True)
class RenderedLine:
    kind: str  # heading | bullet | numbered | quote | blank | paragraph
    text: str = ""
    level: int = 0
    spans: List[InlineSpan] = field(default_factory=list)


def render_line(line: str) -> RenderedLine:
    if line.startswith("### "):
        return RenderedLine("heading", line[4:], level=3)
    if line.startswith("## "):
        return RenderedLine("heading", line[3:], level=2)
    if line.startswith("# "):
        return RenderedLine("heading", line[2:], level=1)
    if line.startswith("- ") or line.startswith("* "):
        text = line[2:]
        return RenderedLine("bullet", text, spans=split_inline(text))
    if _NUMBERED_RE.match(line):
        text = _NUMBERED_RE.sub("", line, count=1)
        return RenderedLine("numbered", text, spans=split_inline(text))
    if line.startswith("> "):
        return RenderedLine("quote", line[2:])
    if not line.strip():
        return RenderedLine("blank")
    return RenderedLine("paragraph", line, spans=split_inline(line))


def render_lines(markdown: Optional[str]) -> List[RenderedLine]:
    """Classify every line of `markdown`. Empty or None input gives []."""
    if not markdown:
        return []
    return [render_line(line) for line in markdown.split("\n")]
