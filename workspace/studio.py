"""PRDStudio: one UI session's upload, generation, deletion and export workflows.

Each workflow runs validate -> remote call(s) -> local commit, and returns an
OperationResult instead of raising. Failures leave the store untouched, with
one exception: an upload whose analysis failed still commits a degraded
document profile.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Union

from agents import AgentClient, build_analysis_prompt, build_generation_prompt
from contracts import FileValidation, PRDRequest
from errors import PRDStudioError, FileValidationError, UploadError, AgentCallError, ExportError
from knowledge_base import validate_file
from rendering import write_export
from synthesis import synthesize_document_profile, synthesize_prd
from workspace.store import WorkspaceStore
from workspace.samples import load_sample_state
from logging_config import get_logger
from config import settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class OperationResult:
    """What the caller shows the user after a workflow."""
    ok: bool
    message: str
    record: Any = None
    error: Optional[PRDStudioError] = None


class PRDStudio:
    """Session facade over the workspace store and the external collaborators."""

    def __init__(
        self,
        agent_client: Optional[AgentClient] = None,
        knowledge_base: Optional[Any] = None,
        knowledge_base_id: Optional[str] = None,
        validator: Callable[[Union[str, Path]], FileValidation] = validate_file,
        store: Optional[WorkspaceStore] = None,
    ):
        """Initialize the session.

        Args:
            agent_client: Agent-call collaborator (defaults to AgentClient())
            knowledge_base: KnowledgeBaseClient; None skips remote upload/delete
            knowledge_base_id: Target dataset (defaults to settings.knowledge_base_id)
            validator: Pre-upload file check
            store: Workspace store (defaults to an empty one)
        """
        self.agent_client = agent_client or AgentClient(knowledge_base=knowledge_base)
        self.knowledge_base = knowledge_base
        self.knowledge_base_id = knowledge_base_id or settings.knowledge_base_id
        self.validator = validator
        self.store = store or WorkspaceStore()

    def use_sample_data(self, enabled: bool) -> None:
        """Swap the whole workspace for sample content, or clear it."""
        self.store.reset(load_sample_state() if enabled else None)

    def upload_document(self, file_path: Union[str, Path]) -> OperationResult:
        path = Path(file_path)

        validation = self.validator(path)
        if not validation.valid:
            error = FileValidationError(validation.error or "Unsupported file type. Use PDF, DOCX, or TXT.")
            return OperationResult(ok=False, message=str(error), error=error)

        if self.knowledge_base is not None:
            logger.info("uploading %s to knowledge base %s", path.name, self.knowledge_base_id)
            outcome = self.knowledge_base.upload_and_train_document(self.knowledge_base_id, path)
            if not outcome.success:
                error = UploadError(outcome.error or "Upload failed")
                return OperationResult(ok=False, message=str(error), error=error)

        logger.info("analyzing document structure for %s", path.name)
        agent_result = self.agent_client.call_agent(
            build_analysis_prompt(path.name), settings.document_ingestion_agent_id
        )
        synthesis = synthesize_document_profile(path.name, agent_result)
        self.store.add_document(synthesis.profile)

        if not synthesis.analysis_ok:
            logger.warning("analysis failed for %s; degraded profile stored", path.name)
        return OperationResult(ok=synthesis.analysis_ok, message=synthesis.status_message, record=synthesis.profile)

    def generate_prd(self, request: PRDRequest) -> OperationResult:
        if not request.product_name.strip():
            return OperationResult(ok=False, message="Please provide a product name.")
        if not request.industry:
            return OperationResult(ok=False, message="Please select an industry.")

        logger.info("generating %s PRD for %s", request.detail_level, request.product_name)
        agent_result = self.agent_client.call_agent(
            build_generation_prompt(request), settings.prd_generation_agent_id
        )
        try:
            prd = synthesize_prd(request, agent_result)
        except PRDStudioError as e:
            if not isinstance(e, AgentCallError):
                logger.warning("PRD response unusable: %s", e)
            return OperationResult(ok=False, message=str(e), error=e)

        self.store.add_prd(prd)
        return OperationResult(ok=True, message=f'"{prd.title}" generated successfully', record=prd)

    def delete_document(self, document_id: str) -> OperationResult:
        doc = self.store.find_document(document_id)
        if doc is None:
            return OperationResult(ok=False, message="Document not found")

        if self.knowledge_base is not None:
            try:
                self.knowledge_base.delete_documents(self.knowledge_base_id, [doc.file_name])
            except Exception as e:
                # remote cleanup is best effort; local removal always proceeds
                logger.warning("knowledge base delete failed for %s: %s", doc.file_name, e)

        self.store.remove_document(document_id)
        return OperationResult(ok=True, message=f'"{doc.document_title}" removed', record=doc)

    def delete_prd(self, prd_id: str) -> OperationResult:
        prd = self.store.find_prd(prd_id)
        if prd is None:
            return OperationResult(ok=False, message="PRD not found")
        self.store.remove_prd(prd_id)
        return OperationResult(ok=True, message=f'"{prd.title}" removed', record=prd)

    def export_prd(
        self,
        prd_id: str,
        output_dir: Optional[Union[str, Path]] = None,
        fmt: str = "md",
    ) -> OperationResult:
        prd = self.store.find_prd(prd_id)
        if prd is None:
            return OperationResult(ok=False, message="No PRD available to download.")
        try:
            path = write_export(prd, output_dir or settings.get_output_path(), fmt=fmt)
        except ExportError as e:
            return OperationResult(ok=False, message=str(e), error=e)
        return OperationResult(ok=True, message=f"Saved {path}", record=path)
