"""Tests for the PRDStudio session workflows with mocked collaborators."""

import json
from unittest.mock import MagicMock

import pytest

from contracts import FileValidation, PRDRequest, UploadOutcome
from errors import AgentCallError, FileValidationError, UploadError
from workspace import PRDStudio


ANALYSIS = json.dumps({
    "document_title": "Analytics Dashboard Spec",
    "suggested_tags": {"industry": "SaaS"},
})

PRD_RESULT = json.dumps({
    "prd_title": "Widget Tracker",
    "prd_markdown": "# Widget Tracker\n\n## Goals\nTrack every widget.",
    "sections": [{"title": "Goals"}],
})


def _ok(result):
    return {"success": True, "response": {"result": result, "message": None}}


@pytest.fixture
def agent_client():
    client = MagicMock()
    client.call_agent.return_value = _ok(ANALYSIS)
    return client


@pytest.fixture
def knowledge_base():
    kb = MagicMock()
    kb.upload_and_train_document.return_value = UploadOutcome(success=True, document_id="doc-1")
    return kb


@pytest.fixture
def studio(agent_client, knowledge_base):
    return PRDStudio(
        agent_client=agent_client,
        knowledge_base=knowledge_base,
        knowledge_base_id="ds-1",
        validator=lambda path: FileValidation(valid=True),
    )


class TestUploadDocument:
    """validate -> knowledge-base upload -> analysis -> commit."""

    def test_success(self, studio, agent_client, knowledge_base):
        result = studio.upload_document("specs/dashboard.pdf")

        assert result.ok is True
        assert result.message == 'Successfully uploaded and analyzed "Analytics Dashboard Spec"'
        knowledge_base.upload_and_train_document.assert_called_once()
        assert knowledge_base.upload_and_train_document.call_args[0][0] == "ds-1"
        prompt, agent_id = agent_client.call_agent.call_args[0]
        assert "dashboard.pdf" in prompt
        assert agent_id == "document-ingestion"
        assert studio.store.state.documents[0].document_title == "Analytics Dashboard Spec"
        assert studio.store.state.documents[0].file_name == "dashboard.pdf"

    def test_validation_failure_makes_no_calls(self, agent_client, knowledge_base):
        studio = PRDStudio(
            agent_client=agent_client,
            knowledge_base=knowledge_base,
            validator=lambda path: FileValidation(valid=False, error="Unsupported file type. Use PDF, DOCX, TXT."),
        )
        result = studio.upload_document("malware.exe")

        assert result.ok is False
        assert isinstance(result.error, FileValidationError)
        assert result.message == "Unsupported file type. Use PDF, DOCX, TXT."
        knowledge_base.upload_and_train_document.assert_not_called()
        agent_client.call_agent.assert_not_called()
        assert studio.store.state.documents == ()

    def test_upload_failure_stops_workflow(self, studio, agent_client, knowledge_base):
        knowledge_base.upload_and_train_document.return_value = UploadOutcome(success=False, error="Quota exceeded")
        result = studio.upload_document("a.pdf")

        assert result.ok is False
        assert isinstance(result.error, UploadError)
        assert result.message == "Quota exceeded"
        agent_client.call_agent.assert_not_called()
        assert studio.store.state.documents == ()

    def test_failed_analysis_commits_degraded_profile(self, studio, agent_client):
        agent_client.call_agent.return_value = {"success": False, "error": "Agent timeout"}
        result = studio.upload_document("roadmap.v2.pdf")

        assert result.ok is False
        assert result.message == "Document uploaded but analysis failed. Metadata may be incomplete."
        doc = studio.store.state.documents[0]
        assert doc.document_title == "roadmap.v2"
        assert doc.sections == []
        assert studio.store.state.activity[0].title == "roadmap.v2"

    def test_without_knowledge_base(self, agent_client):
        studio = PRDStudio(agent_client=agent_client, validator=lambda path: FileValidation(valid=True))
        assert studio.upload_document("a.txt").ok is True


class TestGeneratePRD:
    """Input checks -> generation call -> synthesis -> commit."""

    def test_success(self, studio, agent_client):
        agent_client.call_agent.return_value = _ok(PRD_RESULT)
        request = PRDRequest(product_name="Widget Tracker", industry="SaaS", emphasis_areas=["Timeline"])
        result = studio.generate_prd(request)

        assert result.ok is True
        assert result.message == '"Widget Tracker" generated successfully'
        prompt, agent_id = agent_client.call_agent.call_args[0]
        assert agent_id == "prd-generation"
        assert "Product Name: Widget Tracker" in prompt
        assert "Emphasize these sections: Timeline" in prompt
        assert studio.store.state.prds[0].title == "Widget Tracker"
        assert studio.store.state.activity[0].title == "Widget Tracker"

    def test_blank_product_name(self, studio, agent_client):
        result = studio.generate_prd(PRDRequest(product_name="  ", industry="SaaS"))
        assert result.ok is False
        assert result.message == "Please provide a product name."
        agent_client.call_agent.assert_not_called()

    def test_missing_industry(self, studio, agent_client):
        result = studio.generate_prd(PRDRequest(product_name="X", industry=""))
        assert result.message == "Please select an industry."
        agent_client.call_agent.assert_not_called()

    def test_call_failure_leaves_state_unchanged(self, studio, agent_client):
        agent_client.call_agent.return_value = {"success": False, "error": "Model overloaded"}
        before = studio.store.state
        result = studio.generate_prd(PRDRequest(product_name="X", industry="SaaS"))

        assert result.ok is False
        assert result.message == "Model overloaded"
        assert isinstance(result.error, AgentCallError)
        assert studio.store.state == before

    def test_unusable_response(self, studio, agent_client):
        agent_client.call_agent.return_value = _ok("No.")
        result = studio.generate_prd(PRDRequest(product_name="X", industry="SaaS"))
        assert result.ok is False
        assert result.message == "Failed to parse PRD response. Please try again."
        assert studio.store.state.prds == ()


class TestDeleteAndExport:

    def test_remote_delete_failure_still_removes_locally(self, studio, knowledge_base):
        studio.upload_document("a.pdf")
        doc_id = studio.store.state.documents[0].id
        knowledge_base.delete_documents.side_effect = RuntimeError("connection refused")

        result = studio.delete_document(doc_id)

        assert result.ok is True
        knowledge_base.delete_documents.assert_called_once_with("ds-1", ["a.pdf"])
        assert studio.store.state.documents == ()

    def test_delete_unknown_document(self, studio):
        assert studio.delete_document("missing").ok is False

    def test_delete_prd(self, studio, agent_client):
        agent_client.call_agent.return_value = _ok(PRD_RESULT)
        prd = studio.generate_prd(PRDRequest(product_name="Widget Tracker", industry="SaaS")).record
        assert studio.delete_prd(prd.id).ok is True
        assert studio.store.state.prds == ()
        assert studio.delete_prd(prd.id).ok is False

    def test_export(self, studio, agent_client, tmp_path):
        agent_client.call_agent.return_value = _ok(PRD_RESULT)
        prd = studio.generate_prd(PRDRequest(product_name="Widget Tracker", industry="SaaS")).record

        result = studio.export_prd(prd.id, output_dir=tmp_path)

        assert result.ok is True
        assert result.record == tmp_path / "widget-tracker.md"
        assert result.record.read_text(encoding="utf-8").startswith("# Widget Tracker")

    def test_export_unknown_prd(self, studio, tmp_path):
        result = studio.export_prd("missing", output_dir=tmp_path)
        assert result.ok is False
        assert result.message == "No PRD available to download."

    def test_export_bad_format(self, studio, agent_client, tmp_path):
        agent_client.call_agent.return_value = _ok(PRD_RESULT)
        prd = studio.generate_prd(PRDRequest(product_name="Widget Tracker", industry="SaaS")).record
        result = studio.export_prd(prd.id, output_dir=tmp_path, fmt="docx")
        assert result.ok is False
        assert "Unknown export format" in result.message


class TestSampleData:

    def test_toggle(self, studio):
        studio.use_sample_data(True)
        assert len(studio.store.state.documents) == 3
        studio.use_sample_data(False)
        assert studio.store.state.documents == ()
        assert studio.store.state.activity == ()
