"""Workspace session: store, transitions and workflows."""

from .store import (
    WorkspaceState,
    WorkspaceStore,
    DashboardMetrics,
    insert_front,
    delete_by_id,
    update_by_id,
)
from .samples import load_sample_state
from .studio import PRDStudio, OperationResult

__all__ = [
    "WorkspaceState",
    "WorkspaceStore",
    "DashboardMetrics",
    "insert_front",
    "delete_by_id",
    "update_by_id",
    "load_sample_state",
    "PRDStudio",
    "OperationResult",
]
