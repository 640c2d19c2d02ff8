"""Markdown to HTML fragment conversion for preview and export.

Rules run in a fixed order so earlier constructs are not re-processed by
later ones:
  1. fenced code blocks (escaped, shielded from every later rule)
  2. pipe tables
  3. # / ## / ### headings
  4. > blockquotes
  5. --- horizontal rules
  6. **bold** then *italic*
  7. `inline code`
  8. ordered and unordered list items (one <li> each, no <ol>/<ul> wrapper)
  9. remaining text lines become paragraphs
Finally runs of blank lines are collapsed.

Only code block contents are HTML-escaped. Other text is passed through as
written; callers embed the result as a trusted fragment.
"""

import html
import re
from typing import List, Optional

from rendering.inline import emphasis_to_html, code_spans_to_html


_CODE_BLOCK_RE = re.compile(r"```(\w*)\n([\s\S]*?)```")
# input is stripped of NUL before stashing, so it cannot contain a placeholder
_CODE_PLACEHOLDER = '<pre data-code-block="\x00{index}"></pre>'
_CODE_PLACEHOLDER_RE = re.compile(r'<pre data-code-block="\x00(\d+)"></pre>')

_TABLE_RE = re.compile(r"^(\|.+\|)\n(\|[-:| ]+\|)\n((?:\|.+\|\n?)*)", re.MULTILINE)

_H3_RE = re.compile(r"^### (.+)$", re.MULTILINE)
_H2_RE = re.compile(r"^## (.+)$", re.MULTILINE)
_H1_RE = re.compile(r"^# (.+)$", re.MULTILINE)
_BLOCKQUOTE_RE = re.compile(r"^> (.+)$", re.MULTILINE)
_HR_RE = re.compile(r"^---$", re.MULTILINE)
_ORDERED_ITEM_RE = re.compile(r"^(\d+)\. (.+)$", re.MULTILINE)
_UNORDERED_ITEM_RE = re.compile(r"^[-*] (.+)$", re.MULTILINE)
_PARAGRAPH_RE = re.compile(
    r"^(?![ \t]*$)(?!<(?:h[1-6]|blockquote|hr|li|table|pre)\b)(.+)$", re.MULTILINE
)
_BLANK_RUN_RE = re.compile(r"\n{2,}")


def split_table_row(row: str) -> List[str]:
    """Trimmed cells of a pipe row; the empty cells outside the outer pipes are dropped."""
    row = row.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def _render_table(match: re.Match) -> str:
    header, _separator, body = match.groups()
    parts = ["<table><thead><tr>"]
    parts += [f"<th>{cell}</th>" for cell in split_table_row(header)]
    parts.append("</tr></thead><tbody>")
    for row in body.strip().split("\n"):
        if not row.strip():
            continue
        parts.append("<tr>")
        parts += [f"<td>{cell}</td>" for cell in split_table_row(row)]
        parts.append("</tr>")
    parts.append("</tbody></table>")
    # keep the line break the pattern consumed so the next line stays separate
    if match.group(0).endswith("\n"):
        parts.append("\n")
    return "".join(parts)


def to_html(markdown: Optional[str]) -> str:
    """Convert markdown to an HTML fragment. Empty or None input gives ''."""
    if not markdown:
        return ""

    code_blocks: List[str] = []

    def _stash_code(match: re.Match) -> str:
        code_blocks.append(html.escape(match.group(2), quote=False))
        return _CODE_PLACEHOLDER.format(index=len(code_blocks) - 1)

    text = _CODE_BLOCK_RE.sub(_stash_code, markdown.replace("\x00", ""))
    text = _TABLE_RE.sub(_render_table, text)

    text = _H3_RE.sub(r"<h3>\1</h3>", text)
    text = _H2_RE.sub(r"<h2>\1</h2>", text)
    text = _H1_RE.sub(r"<h1>\1</h1>", text)
    text = _BLOCKQUOTE_RE.sub(r"<blockquote>\1</blockquote>", text)
    text = _HR_RE.sub("<hr />", text)

    text = emphasis_to_html(text)
    text = code_spans_to_html(text)

    text = _ORDERED_ITEM_RE.sub(r'<li class="list-decimal">\2</li>', text)
    text = _UNORDERED_ITEM_RE.sub(r'<li class="list-disc">\1</li>', text)
    text = _PARAGRAPH_RE.sub(r"<p>\1</p>", text)
    text = _BLANK_RUN_RE.sub("\n", text)

    return _CODE_PLACEHOLDER_RE.sub(
        lambda m: f"<pre><code>{code_blocks[int(m.group(1))]}</code></pre>", text
    )
