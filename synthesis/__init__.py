"""Synthesis of typed records from agent results."""

from .markdown_inference import slugify_anchor, infer_title, infer_sections, count_words
from .document_synthesizer import DocumentSynthesis, synthesize_document_profile, title_from_file_name
from .prd_synthesizer import synthesize_prd, DEFAULT_PRD_TITLE, PARSE_FAILED_MESSAGE
from .reconstruction import reconstruct_markdown, downloadable_markdown, export_filename, MISSING_CONTENT_NOTE

__all__ = [
    "slugify_anchor",
    "infer_title",
    "infer_sections",
    "count_words",
    "DocumentSynthesis",
    "synthesize_document_profile",
    "title_from_file_name",
    "synthesize_prd",
    "DEFAULT_PRD_TITLE",
    "PARSE_FAILED_MESSAGE",
    "reconstruct_markdown",
    "downloadable_markdown",
    "export_filename",
    "MISSING_CONTENT_NOTE",
]
