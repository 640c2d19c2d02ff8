"""Infer PRD structure (title, sections, word count) from raw markdown."""

import re
from typing import List, Optional

from contracts import PRDSection


_TITLE_RE = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
_SECTION_RE = re.compile(r"^##[ \t]+(.+)$", re.MULTILINE)
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_CHAR = re.compile(r"\s")


def slugify_anchor(heading: str) -> str:
    """URL-safe anchor for a heading.

    Punctuation is dropped and every whitespace character becomes its own
    hyphen; hyphen runs are kept, so "KPIs & Metrics" -> "kpis--metrics".
    """
    slug = _NON_SLUG_CHARS.sub("", heading.strip().lower())
    slug = _WHITESPACE_CHAR.sub("-", slug)
    return slug.strip("-")


def infer_title(text: str) -> Optional[str]:
    """Text of the first top-level (`# `) heading, if any."""
    match = _TITLE_RE.search(text or "")
    if match:
        title = match.group(1).strip()
        return title or None
    return None


def infer_sections(text: str) -> List[PRDSection]:
    """Second-level (`## `) headings in document order."""
    sections = []
    for match in _SECTION_RE.finditer(text or ""):
        title = match.group(1).strip()
        if title:
            sections.append(PRDSection(title=title, anchor=slugify_anchor(title)))
    return sections


def count_words(text: str) -> int:
    return len((text or "").split())
