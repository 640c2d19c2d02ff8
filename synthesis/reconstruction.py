"""Rebuild exportable markdown for PRDs whose body was never captured."""

import re

from contracts import GeneratedPRD


_PATH_SEPARATORS = re.compile(r"[/\\]")

MISSING_CONTENT_NOTE = (
    "*(Content generated by AI; section details were not captured in markdown format)*"
)


def reconstruct_markdown(prd: GeneratedPRD) -> str:
    """Markdown skeleton from title, request echo, emphasis areas and sections."""
    lines = []
    if prd.title:
        lines += [f"# {prd.title}", ""]

    meta = []
    if prd.industry:
        meta.append(f"**Industry:** {prd.industry}")
    if prd.product_type:
        meta.append(f"**Product Type:** {prd.product_type}")
    if prd.detail_level:
        meta.append(f"**Detail Level:** {prd.detail_level}")
    if meta:
        lines += [" | ".join(meta), ""]

    if prd.metadata.emphasis_areas:
        lines += [f"**Emphasis Areas:** {', '.join(prd.metadata.emphasis_areas)}", ""]

    if prd.sections:
        lines += ["## Table of Contents", ""]
        for i, section in enumerate(prd.sections, start=1):
            lines.append(f"{i}. {section.title}")
        lines.append("")
        for section in prd.sections:
            lines += [f"## {section.title}", "", MISSING_CONTENT_NOTE, ""]

    return "\n".join(lines)


def downloadable_markdown(prd: GeneratedPRD) -> str:
    """The captured body when present, else the reconstruction."""
    if prd.markdown_body and prd.markdown_body.strip():
        return prd.markdown_body
    return reconstruct_markdown(prd)


def export_filename(title: str, suffix: str = ".md") -> str:
    """`"Widget Tracker"` -> `"widget-tracker.md"`.

    Path separators become hyphens and leading dots/hyphens are dropped, so
    the result is always a plain file name.
    """
    name = _PATH_SEPARATORS.sub("-", title or "")
    name = re.sub(r"\s+", "-", name).lower().lstrip(".-")
    return (name or "prd") + suffix
