"""Write PRD exports (markdown or standalone HTML) to disk."""

import html
from pathlib import Path
from typing import Union

from contracts import GeneratedPRD
from errors import ExportError
from rendering.markdown_html import to_html
from synthesis.reconstruction import downloadable_markdown, export_filename


HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>{title}</title>
<style>
body {{ font-family: Georgia, serif; max-width: 48rem; margin: 2rem auto; line-height: 1.6; }}
table {{ border-collapse: collapse; width: 100%; }}
th, td {{ border: 1px solid #ccc; padding: 0.4rem 0.75rem; text-align: left; }}
pre {{ background: #f5f5f5; padding: 1rem; overflow-x: auto; }}
blockquote {{ border-left: 2px solid #888; padding-left: 1rem; font-style: italic; }}
li.list-decimal {{ list-style-type: decimal; margin-left: 1.5rem; }}
li.list-disc {{ list-style-type: disc; margin-left: 1.5rem; }}
</style>
</head>
<body>
{body}
</body>
</html>
"""


def export_content(prd: GeneratedPRD) -> str:
    """Markdown to export; raises ExportError when there is nothing to write."""
    content = downloadable_markdown(prd)
    if not content or not content.strip():
        raise ExportError("PRD content is empty. Cannot download.")
    return content


def render_html_document(prd: GeneratedPRD) -> str:
    return HTML_TEMPLATE.format(
        title=html.escape(prd.title or "PRD"),
        body=to_html(export_content(prd)),
    )


def write_export(prd: GeneratedPRD, output_dir: Union[str, Path], fmt: str = "md") -> Path:
    """Write the PRD as `<slug>.md` or `<slug>.html` under output_dir.

    Raises:
        ExportError: Empty content, unknown format, a path outside output_dir,
            or the file could not be written.
    """
    if fmt == "md":
        content = export_content(prd)
    elif fmt == "html":
        content = render_html_document(prd)
    else:
        raise ExportError(f"Unknown export format: {fmt}")

    out_dir = Path(output_dir)
    path = out_dir / export_filename(prd.title, suffix=f".{fmt}")
    if path.resolve().parent != out_dir.resolve():
        raise ExportError(f"Export path {path} is outside {out_dir}")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Download failed: {e}") from e
    return path
