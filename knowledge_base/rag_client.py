"""RAGFlow knowledge-base client for reference document upload, cleanup and retrieval."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from contracts import UploadOutcome
from logging_config import get_logger
from config import settings

logger = get_logger(__name__)


class KnowledgeBaseClient:
    """Thin wrapper over the RAGFlow HTTP API (datasets = knowledge bases)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.ragflow_api_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.ragflow_api_key
        self.timeout = timeout or settings.ragflow_timeout_sec

    def is_available(self) -> bool:
        """Return True if an API key is set (no ping)."""
        return bool(self.api_key)

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    @staticmethod
    def _payload(response: Any, action: str) -> Any:
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise RuntimeError(f"{action} failed: unexpected response body")
        if data.get("code") != 0:
            raise RuntimeError(data.get("message", f"{action} failed"))
        return data.get("data")

    def upload_document(self, dataset_id: str, file_path: Path | str) -> str:
        """Upload a single file and trigger parsing. Return the document ID."""
        import requests

        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(str(path))

        r = requests.post(
            f"{self.base_url}/api/v1/datasets/{dataset_id}/documents",
            headers=self._headers(),
            files={"file": (path.name, path.read_bytes())},
            timeout=self.timeout,
        )
        payload = self._payload(r, "upload")
        if isinstance(payload, list) and payload:
            first = payload[0]
            doc_id = first.get("id") if isinstance(first, dict) else None
        elif isinstance(payload, dict):
            doc_id = payload.get("id")
        else:
            doc_id = None
        if not doc_id:
            raise RuntimeError("upload response missing document id")

        # Parsing (chunking + embedding) is what makes the document retrievable
        r = requests.post(
            f"{self.base_url}/api/v1/datasets/{dataset_id}/chunks",
            headers=self._headers(json_body=True),
            json={"document_ids": [doc_id]},
            timeout=self.timeout,
        )
        self._payload(r, "parse")
        return doc_id

    def upload_and_train_document(self, dataset_id: str, file_path: Path | str) -> UploadOutcome:
        """Upload + parse, reporting failure as an UploadOutcome instead of raising."""
        import requests

        try:
            doc_id = self.upload_document(dataset_id, file_path)
        except (requests.RequestException, RuntimeError, OSError) as e:
            logger.warning("knowledge base upload failed file=%s error=%s", file_path, e)
            return UploadOutcome(success=False, error=str(e) or "Upload failed")
        return UploadOutcome(success=True, document_id=doc_id)

    def list_documents(self, dataset_id: str) -> List[Dict[str, Any]]:
        """Return [{id, name, run, chunk_count}] for every document in the dataset."""
        import requests

        r = requests.get(
            f"{self.base_url}/api/v1/datasets/{dataset_id}/documents",
            headers=self._headers(),
            params={"page": 1, "page_size": 100},
            timeout=self.timeout,
        )
        payload = self._payload(r, "list documents")
        if isinstance(payload, dict) and "docs" in payload:
            items = payload["docs"] or []
        elif isinstance(payload, list):
            items = payload
        else:
            items = []
        return [
            {
                "id": d.get("id", ""),
                "name": d.get("name") or d.get("display_name", ""),
                "run": d.get("run", "UNSTART"),
                "chunk_count": d.get("chunk_count", 0),
            }
            for d in items
            if isinstance(d, dict)
        ]

    def delete_documents(self, dataset_id: str, file_names: List[str]) -> int:
        """Delete documents whose name is in file_names. Return how many were deleted.

        Raises on transport or API errors; callers decide whether that matters.
        """
        import requests

        wanted = set(file_names)
        ids = [d["id"] for d in self.list_documents(dataset_id) if d["name"] in wanted and d["id"]]
        if not ids:
            return 0
        r = requests.delete(
            f"{self.base_url}/api/v1/datasets/{dataset_id}/documents",
            headers=self._headers(json_body=True),
            json={"ids": ids},
            timeout=self.timeout,
        )
        self._payload(r, "delete documents")
        return len(ids)

    def search(
        self,
        query: str,
        dataset_id: str,
        top_k: int = 5,
        similarity_threshold: Optional[float] = None,
    ) -> List[Dict[str, Any]]:
        """Return top-k chunks for the query from the dataset."""
        import requests

        body = {
            "dataset_ids": [dataset_id],
            "question": query.strip(),
            "top_k": top_k,
        }
        if similarity_threshold is not None:
            body["similarity_threshold"] = similarity_threshold
        r = requests.post(
            f"{self.base_url}/api/v1/retrieval",
            headers=self._headers(json_body=True),
            json=body,
            timeout=self.timeout,
        )
        payload = self._payload(r, "retrieval")
        chunks = payload.get("chunks", []) if isinstance(payload, dict) else []
        if not isinstance(chunks, list):
            chunks = []
        return [
            {
                "content": c.get("content", c.get("text", "")),
                "similarity": c.get("similarity"),
            }
            for c in chunks[:top_k]
            if isinstance(c, dict)
        ]
