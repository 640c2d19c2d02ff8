"""Tests for the RAGFlow knowledge-base client (HTTP mocked, no live server)."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from knowledge_base import KnowledgeBaseClient


def _response(payload):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status = MagicMock()
    return resp


@pytest.fixture
def client():
    return KnowledgeBaseClient(base_url="http://ragflow.local/", api_key="test-key", timeout=5)


class TestAvailability:

    def test_requires_api_key(self):
        assert KnowledgeBaseClient(api_key="").is_available() is False

    def test_available_with_key(self, client):
        assert client.is_available() is True
        assert client.base_url == "http://ragflow.local"


class TestUpload:

    def test_upload_document_uploads_then_parses(self, client, tmp_path):
        doc = tmp_path / "prd.pdf"
        doc.write_bytes(b"%PDF-1.4")
        upload = _response({"code": 0, "data": [{"id": "doc-1"}]})
        parse = _response({"code": 0})

        with patch("requests.post", side_effect=[upload, parse]) as mock_post:
            doc_id = client.upload_document("ds-1", doc)

        assert doc_id == "doc-1"
        first, second = mock_post.call_args_list
        assert first[0][0] == "http://ragflow.local/api/v1/datasets/ds-1/documents"
        assert first[1]["headers"] == {"Authorization": "Bearer test-key"}
        assert second[0][0] == "http://ragflow.local/api/v1/datasets/ds-1/chunks"
        assert second[1]["json"] == {"document_ids": ["doc-1"]}

    def test_upload_missing_file(self, client, tmp_path):
        with pytest.raises(FileNotFoundError):
            client.upload_document("ds-1", tmp_path / "missing.pdf")

    def test_api_error_becomes_failed_outcome(self, client, tmp_path):
        doc = tmp_path / "prd.txt"
        doc.write_text("hello")
        with patch("requests.post", return_value=_response({"code": 102, "message": "Quota exceeded"})):
            outcome = client.upload_and_train_document("ds-1", doc)
        assert outcome.success is False
        assert outcome.error == "Quota exceeded"

    def test_transport_error_becomes_failed_outcome(self, client, tmp_path):
        doc = tmp_path / "prd.txt"
        doc.write_text("hello")
        with patch("requests.post", side_effect=requests.ConnectionError("refused")):
            outcome = client.upload_and_train_document("ds-1", doc)
        assert outcome.success is False
        assert "refused" in outcome.error

    def test_non_object_body_becomes_failed_outcome(self, client, tmp_path):
        doc = tmp_path / "prd.txt"
        doc.write_text("hello")
        with patch("requests.post", return_value=_response(["not", "an", "object"])):
            outcome = client.upload_and_train_document("ds-1", doc)
        assert outcome.success is False
        assert outcome.error == "upload failed: unexpected response body"

    def test_successful_outcome(self, client, tmp_path):
        doc = tmp_path / "prd.txt"
        doc.write_text("hello")
        responses = [_response({"code": 0, "data": {"id": "doc-9"}}), _response({"code": 0})]
        with patch("requests.post", side_effect=responses):
            outcome = client.upload_and_train_document("ds-1", doc)
        assert outcome.success is True
        assert outcome.document_id == "doc-9"


class TestDeleteAndList:

    def test_delete_matching_names(self, client):
        listing = _response({"code": 0, "data": {"docs": [
            {"id": "d1", "name": "a.pdf"},
            {"id": "d2", "name": "b.pdf"},
        ]}})
        with patch("requests.get", return_value=listing), \
                patch("requests.delete", return_value=_response({"code": 0})) as mock_delete:
            deleted = client.delete_documents("ds-1", ["a.pdf"])

        assert deleted == 1
        assert mock_delete.call_args[1]["json"] == {"ids": ["d1"]}

    def test_delete_nothing_matching(self, client):
        listing = _response({"code": 0, "data": []})
        with patch("requests.get", return_value=listing), patch("requests.delete") as mock_delete:
            assert client.delete_documents("ds-1", ["a.pdf"]) == 0
        mock_delete.assert_not_called()

    def test_list_documents_normalizes(self, client):
        listing = _response({"code": 0, "data": [{"id": "d1", "display_name": "x.txt"}]})
        with patch("requests.get", return_value=listing):
            docs = client.list_documents("ds-1")
        assert docs == [{"id": "d1", "name": "x.txt", "run": "UNSTART", "chunk_count": 0}]


class TestSearch:

    def test_search_returns_chunks(self, client):
        payload = {"code": 0, "data": {"chunks": [
            {"content": "KPI framework", "similarity": 0.91},
            {"text": "Risk register"},
        ]}}
        with patch("requests.post", return_value=_response(payload)) as mock_post:
            chunks = client.search("  kpis  ", dataset_id="ds-1", top_k=5, similarity_threshold=0.2)

        assert chunks == [
            {"content": "KPI framework", "similarity": 0.91},
            {"content": "Risk register", "similarity": None},
        ]
        body = mock_post.call_args[1]["json"]
        assert body == {"dataset_ids": ["ds-1"], "question": "kpis", "top_k": 5, "similarity_threshold": 0.2}

    def test_search_api_error_raises(self, client):
        with patch("requests.post", return_value=_response({"code": 500, "message": "down"})):
            with pytest.raises(RuntimeError, match="down"):
                client.search("q", dataset_id="ds-1")
