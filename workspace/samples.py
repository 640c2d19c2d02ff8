"""Sample workspace content for demos and UI previews."""

from datetime import datetime, timezone

from contracts import (
    ActivityEntry,
    ActivityKind,
    FormattingPatterns,
    GeneratedPRD,
    PRDMetadata,
    PRDSection,
    SectionExtracted,
    SuggestedTags,
    UploadedDocumentProfile,
)
from synthesis.markdown_inference import slugify_anchor
from workspace.store import WorkspaceState


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


SAMPLE_DOCUMENTS = (
    UploadedDocumentProfile(
        id="sample-1",
        file_name="marketplace-prd-v2.pdf",
        document_title="E-Commerce Marketplace Platform PRD",
        sections=[
            SectionExtracted(heading="Executive Summary", level=1, summary="High-level overview of the marketplace platform and its core value proposition."),
            SectionExtracted(heading="Problem Statement", level=1, summary="Identifies fragmented seller experience and buyer discovery challenges."),
            SectionExtracted(heading="User Personas", level=2, summary="Details three primary personas: Seller, Buyer, and Platform Admin."),
            SectionExtracted(heading="Feature Requirements", level=1, summary="Comprehensive listing of P0 and P1 features with acceptance criteria."),
            SectionExtracted(heading="KPI Framework", level=2, summary="GMV, take rate, NPS, and seller activation metrics."),
        ],
        suggested_tags=SuggestedTags(industry="E-commerce", product_type="B2C", complexity="High", structural_type="Full PRD"),
        kpi_frameworks=["GMV Growth Rate", "Take Rate Optimization", "Net Promoter Score", "Seller Activation Rate"],
        formatting_patterns=FormattingPatterns(tone="Professional", style="Structured"),
        content_summary="A comprehensive product requirements document for a two-sided marketplace platform focusing on seller tools, buyer discovery, and transaction management.",
        uploaded_at=_ts("2026-02-15T10:30:00"),
        starred=True,
    ),
    UploadedDocumentProfile(
        id="sample-2",
        file_name="analytics-dashboard-spec.docx",
        document_title="Analytics Dashboard Product Specification",
        sections=[
            SectionExtracted(heading="Overview", level=1, summary="Real-time analytics dashboard for SaaS metrics."),
            SectionExtracted(heading="Technical Architecture", level=1, summary="Event-driven architecture using streaming pipelines."),
            SectionExtracted(heading="Data Visualization Requirements", level=2, summary="Chart types, refresh rates, and drill-down capabilities."),
        ],
        suggested_tags=SuggestedTags(industry="SaaS", product_type="B2B", complexity="Medium", structural_type="Technical Spec"),
        kpi_frameworks=["Monthly Active Users", "Dashboard Load Time", "Data Freshness SLA"],
        formatting_patterns=FormattingPatterns(tone="Technical", style="Modular"),
        content_summary="Technical product specification for a real-time analytics dashboard targeting SaaS companies, with emphasis on data pipeline architecture and visualization.",
        uploaded_at=_ts("2026-02-14T14:15:00"),
        custom_tags=["data-viz"],
    ),
    UploadedDocumentProfile(
        id="sample-3",
        file_name="patient-portal-lean-prd.txt",
        document_title="Patient Portal - Lean PRD",
        sections=[
            SectionExtracted(heading="Problem", level=1, summary="Patients lack a unified view of health records and appointments."),
            SectionExtracted(heading="Solution Hypothesis", level=1, summary="Mobile-first portal with appointment scheduling and record access."),
            SectionExtracted(heading="Success Metrics", level=2, summary="Appointment booking rate, patient satisfaction score."),
        ],
        suggested_tags=SuggestedTags(industry="Healthcare", product_type="B2C", complexity="Low", structural_type="Lean PRD"),
        kpi_frameworks=["Appointment Booking Rate", "Patient Satisfaction Score"],
        formatting_patterns=FormattingPatterns(tone="Empathetic", style="Lean"),
        content_summary="A lean product requirements document for a patient-facing health portal focused on appointment scheduling and electronic health record access.",
        uploaded_at=_ts("2026-02-13T09:00:00"),
        custom_tags=["HIPAA"],
    ),
)

_INVENTORY_MARKDOWN = """# AI-Powered Inventory Management System

## Executive Summary

This PRD outlines the requirements for an AI-powered inventory management system designed for mid-to-large retail operations. The system leverages machine learning to predict demand, optimize stock levels, and reduce waste.

## Problem Statement

Retailers lose approximately 8% of revenue annually due to inventory mismanagement, including overstocking, stockouts, and perishable goods waste.

## Target Users

- **Inventory Managers**: Primary users who monitor and adjust stock levels daily
- **Store Managers**: Need visibility into store-level inventory health
- **Supply Chain Directors**: Require cross-location analytics and forecasting

## Key Features

### P0 - Must Have
- Real-time inventory tracking across all locations
- AI demand forecasting with 90%+ accuracy target
- Automated reorder point calculations

## KPIs & Metrics

| Metric | Target | Measurement |
|--------|--------|-------------|
| Forecast Accuracy | >90% | Weekly |
| Stockout Rate | <2% | Daily |

## Timeline

1. **Phase 1 (Q1)**: Core tracking and alerting
2. **Phase 2 (Q2)**: AI forecasting engine

## Risk Analysis

- **Data Quality**: Legacy systems may produce inconsistent data
- **Change Management**: Staff adoption may require dedicated training programs"""

_INVENTORY_SECTIONS = [
    "Executive Summary", "Problem Statement", "Target Users", "Key Features",
    "KPIs & Metrics", "Timeline", "Risk Analysis",
]

SAMPLE_PRDS = (
    GeneratedPRD(
        id="gen-1",
        title="AI-Powered Inventory Management System",
        industry="Retail",
        product_type="B2B",
        detail_level="Comprehensive",
        markdown_body=_INVENTORY_MARKDOWN,
        sections=[PRDSection(title=t, anchor=slugify_anchor(t)) for t in _INVENTORY_SECTIONS],
        metadata=PRDMetadata(
            word_count=287,
            emphasis_areas=["KPIs & Metrics", "Risk Analysis", "Timeline"],
            reference_documents_used=2,
        ),
        created_at=_ts("2026-02-16T16:45:00"),
    ),
)

SAMPLE_ACTIVITY = (
    ActivityEntry(kind=ActivityKind.GENERATION, title="AI-Powered Inventory Management System", timestamp=_ts("2026-02-16T16:45:00")),
    ActivityEntry(kind=ActivityKind.UPLOAD, title="E-Commerce Marketplace Platform PRD", timestamp=_ts("2026-02-15T10:30:00")),
    ActivityEntry(kind=ActivityKind.UPLOAD, title="Analytics Dashboard Product Specification", timestamp=_ts("2026-02-14T14:15:00")),
    ActivityEntry(kind=ActivityKind.UPLOAD, title="Patient Portal - Lean PRD", timestamp=_ts("2026-02-13T09:00:00")),
)


def load_sample_state() -> WorkspaceState:
    return WorkspaceState(documents=SAMPLE_DOCUMENTS, prds=SAMPLE_PRDS, activity=SAMPLE_ACTIVITY)
