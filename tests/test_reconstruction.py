"""Tests for rebuilding exportable markdown."""

from contracts import GeneratedPRD, PRDMetadata, PRDSection
from synthesis.reconstruction import (
    MISSING_CONTENT_NOTE,
    downloadable_markdown,
    export_filename,
    reconstruct_markdown,
)


def _prd(**overrides):
    values = dict(
        title="Launch Plan",
        industry="SaaS",
        product_type="B2B",
        detail_level="Lean",
        markdown_body="",
        sections=[PRDSection(title="Goals", anchor="goals"), PRDSection(title="Risks", anchor="risks")],
        metadata=PRDMetadata(emphasis_areas=["Timeline", "Risk Analysis"]),
    )
    values.update(overrides)
    return GeneratedPRD(**values)


class TestReconstructMarkdown:
    """Skeleton built from metadata when no body was captured."""

    def test_layout(self):
        md = reconstruct_markdown(_prd())
        assert md.startswith("# Launch Plan\n")
        assert "**Industry:** SaaS | **Product Type:** B2B | **Detail Level:** Lean" in md
        assert "**Emphasis Areas:** Timeline, Risk Analysis" in md
        assert "## Table of Contents\n\n1. Goals\n2. Risks\n" in md

    def test_sections_in_order_with_note(self):
        md = reconstruct_markdown(_prd())
        assert md.index("## Goals") < md.index("## Risks")
        assert md.count(MISSING_CONTENT_NOTE) == 2

    def test_no_sections_no_toc(self):
        md = reconstruct_markdown(_prd(sections=[]))
        assert "Table of Contents" not in md
        assert MISSING_CONTENT_NOTE not in md

    def test_empty_record(self):
        prd = GeneratedPRD(title="")
        assert reconstruct_markdown(prd) == ""


class TestDownloadableMarkdown:

    def test_body_preferred(self):
        prd = _prd(markdown_body="# Launch Plan\n\nReal body.")
        assert downloadable_markdown(prd) == "# Launch Plan\n\nReal body."

    def test_blank_body_reconstructed(self):
        prd = _prd(markdown_body="   \n")
        assert downloadable_markdown(prd) == reconstruct_markdown(prd)


class TestExportFilename:

    def test_lowercased_hyphenated(self):
        assert export_filename("Widget Tracker") == "widget-tracker.md"

    def test_whitespace_runs_collapse(self):
        assert export_filename("AI  Inventory\tSystem", suffix=".html") == "ai-inventory-system.html"

    def test_empty_title(self):
        assert export_filename("") == "prd.md"

    def test_path_separators_replaced(self):
        assert export_filename("A/B Testing Platform") == "a-b-testing-platform.md"
        assert export_filename("Docs\\Plan") == "docs-plan.md"

    def test_parent_references_removed(self):
        assert export_filename("../../escaped") == "escaped.md"
        assert export_filename("...") == "prd.md"
