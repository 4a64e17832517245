"""Integration tests for the FastAPI application."""

import json

import pytest
from fastapi.testclient import TestClient

from doc_extraction.api.app import app, get_scorer

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture
def client(fake_scorer):
    app.dependency_overrides[get_scorer] = lambda: fake_scorer
    yield TestClient(app)
    app.dependency_overrides.clear()


def _upload(path, name=None, media_type=DOCX_MEDIA_TYPE):
    return {"file": (name or path.name, path.read_bytes(), media_type)}


class TestExtractEndpoint:
    """Tests for POST /api/extract."""

    def test_json_extraction(self, client, sample_docx):
        response = client.post("/api/extract", files=_upload(sample_docx))

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        data = json.loads(response.content)
        assert data["metadata"]["file_name"] == "policy.docx"
        assert data["summary"]["total_items"] == 5

    def test_csv_with_form_options(self, client, sample_docx):
        response = client.post(
            "/api/extract",
            files=_upload(sample_docx),
            data={"format": "csv", "threshold": "0.8", "tables": "false", "include_metadata": "false"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        lines = response.text.strip().splitlines()
        assert lines[0] == "ID,Type,Content,Confidence,Page,Paragraph,Has Table Data"
        assert len(lines) == 3

    def test_xlsx_download(self, client, sample_docx):
        response = client.post("/api/extract", files=_upload(sample_docx), data={"format": "xlsx"})

        assert response.status_code == 200
        assert response.content[:2] == b"PK"
        assert "policy_extracted.xlsx" in response.headers["content-disposition"]

    def test_unsupported_type(self, client, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        response = client.post("/api/extract", files=_upload(path, media_type="text/plain"))

        assert response.status_code == 415

    def test_corrupted_document(self, client, tmp_path):
        path = tmp_path / "broken.docx"
        path.write_bytes(b"garbage")

        response = client.post("/api/extract", files=_upload(path))

        assert response.status_code == 422
        assert response.json()["detail"]["error_type"] == "DocumentCorruptedError"

    def test_invalid_threshold(self, client, sample_docx):
        response = client.post("/api/extract", files=_upload(sample_docx), data={"threshold": "1.5"})

        assert response.status_code == 400
        assert response.json()["detail"]["errors"]

    def test_unknown_format(self, client, sample_docx):
        response = client.post("/api/extract", files=_upload(sample_docx), data={"format": "xml"})

        assert response.status_code == 400


def test_info_endpoint(client):
    response = client.get("/api/info")

    assert response.status_code == 200
    data = response.json()
    assert data["supported_file_formats"] == [".docx", ".pdf"]
    assert data["supported_export_formats"] == ["json", "csv", "xlsx"]
    assert "business_rule" in data["default_classification_labels"]
