"""Markdown rendering: HTML fragments, line-wise display and file exports."""

from .inline import InlineSpan, split_inline, emphasis_to_html
from .markdown_html import to_html, split_table_row
from .line_renderer import RenderedLine, render_line, render_lines
from .export import export_content, render_html_document, write_export

__all__ = [
    "InlineSpan",
    "split_inline",
    "emphasis_to_html",
    "to_html",
    "split_table_row",
    "RenderedLine",
    "render_line",
    "render_lines",
    "export_content",
    "render_html_document",
    "write_export",
]
