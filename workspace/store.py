"""In-memory workspace state and its transitions.

State is a frozen snapshot of three newest-first tuples. Every transition
builds a new snapshot (prepend, filter-out-by-id, map-with-id-match); records
are never mutated in place, so an observed state never changes.
"""

import math
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Tuple, TypeVar

from contracts import ActivityEntry, ActivityKind, GeneratedPRD, UploadedDocumentProfile

R = TypeVar("R")


def insert_front(items: Sequence[R], item: R) -> Tuple[R, ...]:
    """Prepend `item`; ids must stay unique within the collection."""
    item_id = getattr(item, "id", None)
    if item_id is not None and any(getattr(existing, "id", None) == item_id for existing in items):
        raise ValueError(f"Duplicate id: {item_id}")
    return (item, *items)


def delete_by_id(items: Sequence[R], item_id: str) -> Tuple[R, ...]:
    return tuple(item for item in items if item.id != item_id)


def update_by_id(items: Sequence[R], item_id: str, update: Callable[[R], R]) -> Tuple[R, ...]:
    return tuple(update(item) if item.id == item_id else item for item in items)


@dataclass(frozen=True)
class DashboardMetrics:
    document_count: int
    prd_count: int
    avg_reference_documents: Optional[int]  # None until a PRD exists


@dataclass(frozen=True)
class WorkspaceState:
    documents: Tuple[UploadedDocumentProfile, ...] = ()
    prds: Tuple[GeneratedPRD, ...] = ()
    activity: Tuple[ActivityEntry, ...] = ()


class WorkspaceStore:
    """Holds the current WorkspaceState and applies transitions to it."""

    def __init__(self, state: Optional[WorkspaceState] = None):
        self._state = state or WorkspaceState()

    @property
    def state(self) -> WorkspaceState:
        return self._state

    def reset(self, state: Optional[WorkspaceState] = None) -> None:
        self._state = state or WorkspaceState()

    # Documents

    def add_document(self, profile: UploadedDocumentProfile) -> None:
        entry = ActivityEntry(kind=ActivityKind.UPLOAD, title=profile.document_title, timestamp=profile.uploaded_at)
        self._state = replace(
            self._state,
            documents=insert_front(self._state.documents, profile),
            activity=insert_front(self._state.activity, entry),
        )

    def remove_document(self, document_id: str) -> None:
        self._state = replace(self._state, documents=delete_by_id(self._state.documents, document_id))

    def find_document(self, document_id: str) -> Optional[UploadedDocumentProfile]:
        return next((d for d in self._state.documents if d.id == document_id), None)

    def toggle_star(self, document_id: str) -> None:
        self._state = replace(self._state, documents=update_by_id(
            self._state.documents, document_id,
            lambda d: d.model_copy(update={"starred": not d.starred}),
        ))

    def add_custom_tag(self, document_id: str, tag: str) -> None:
        tag = tag.strip()
        if not tag:
            return
        self._state = replace(self._state, documents=update_by_id(
            self._state.documents, document_id,
            lambda d: d if tag in d.custom_tags else d.model_copy(update={"custom_tags": [*d.custom_tags, tag]}),
        ))

    def remove_custom_tag(self, document_id: str, tag: str) -> None:
        self._state = replace(self._state, documents=update_by_id(
            self._state.documents, document_id,
            lambda d: d.model_copy(update={"custom_tags": [t for t in d.custom_tags if t != tag]}),
        ))

    def filter_documents(self, query: str = "", industry: str = "all") -> Tuple[UploadedDocumentProfile, ...]:
        """Case-insensitive title/file-name search plus exact industry match ('all' matches any)."""
        needle = query.strip().lower()

        def matches(doc: UploadedDocumentProfile) -> bool:
            if needle and needle not in doc.document_title.lower() and needle not in doc.file_name.lower():
                return False
            return industry == "all" or doc.suggested_tags.industry.lower() == industry.lower()

        return tuple(d for d in self._state.documents if matches(d))

    # PRDs

    def add_prd(self, prd: GeneratedPRD) -> None:
        entry = ActivityEntry(kind=ActivityKind.GENERATION, title=prd.title, timestamp=prd.created_at)
        self._state = replace(
            self._state,
            prds=insert_front(self._state.prds, prd),
            activity=insert_front(self._state.activity, entry),
        )

    def remove_prd(self, prd_id: str) -> None:
        self._state = replace(self._state, prds=delete_by_id(self._state.prds, prd_id))

    def find_prd(self, prd_id: str) -> Optional[GeneratedPRD]:
        return next((p for p in self._state.prds if p.id == prd_id), None)

    # Dashboard

    def recent_activity(self, limit: int = 8) -> Tuple[ActivityEntry, ...]:
        return self._state.activity[:limit]

    def dashboard_metrics(self) -> DashboardMetrics:
        prds = self._state.prds
        avg = None
        if prds:
            total = sum(p.metadata.reference_documents_used for p in prds)
            avg = math.floor(total / len(prds) + 0.5)
        return DashboardMetrics(
            document_count=len(self._state.documents),
            prd_count=len(prds),
            avg_reference_documents=avg,
        )
