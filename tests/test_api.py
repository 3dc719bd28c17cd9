"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from docsim.api.deps import get_detection_pipeline
from docsim.core.config import Settings
from docsim.main import app
from docsim.services.detection_pipeline import DetectionPipeline


@pytest.fixture
def client():
    app.dependency_overrides[get_detection_pipeline] = lambda: DetectionPipeline(Settings())
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["api_prefix"] == "/api/v1"


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestCompare:
    def test_kitten_sitting(self, client):
        response = client.post(
            "/api/v1/similarity/compare",
            json={"text_a": "kitten", "text_b": "sitting", "min_length": 2},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["edit_distance"] == 3
        assert data["similarity"] == pytest.approx(5 / 7)
        assert "<mark>" in data["left_html"]

    def test_invalid_min_length(self, client):
        response = client.post(
            "/api/v1/similarity/compare",
            json={"text_a": "a", "text_b": "b", "min_length": 0},
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVALID_PARAMETER"


class TestDetect:
    def test_small_corpus(self, client, small_corpus):
        response = client.post(
            "/api/v1/similarity/detect",
            json={"documents": small_corpus, "min_length": 2, "top_k": 2},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["ranked_pairs"] == [[0, 1], [0, 2], [1, 2]]
        assert data["matrix"][0][0] == 0.0
        assert len(data["entries"]) == 2
        assert data["entries"][0]["containment"] == pytest.approx(0.4)

    def test_empty_corpus(self, client):
        response = client.post("/api/v1/similarity/detect", json={"documents": []})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "EMPTY_INPUT"

    def test_resource_ceiling(self, client):
        app.dependency_overrides[get_detection_pipeline] = lambda: DetectionPipeline(
            Settings(containment_max_length=3)
        )

        response = client.post(
            "/api/v1/similarity/detect",
            json={"documents": ["abcdef", "abcdeg"], "min_length": 2},
        )

        assert response.status_code == 413
        error = response.json()["error"]
        assert error["code"] == "RESOURCE_EXHAUSTED"
        assert error["details"]["pair"] == [0, 1]


class TestReport:
    def test_html_report(self, client, small_corpus):
        response = client.post(
            "/api/v1/similarity/report",
            json={"documents": small_corpus, "names": ["a", "b", "c"], "min_length": 2, "top_k": 1},
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<h3>a:</h3>" in response.text
        assert "Pair 1 (Similarity: 1.00" in response.text

    def test_names_must_match_documents(self, client, small_corpus):
        response = client.post(
            "/api/v1/similarity/report",
            json={"documents": small_corpus, "names": ["only-one"]},
        )

        assert response.status_code == 422
        assert response.json()["error"]["details"]["parameter"] == "names"


class _BrokenPipeline:
    def compare(self, text_a, text_b, min_length):
        raise RuntimeError("secret internal state")


class TestUnexpectedErrors:
    def _post(self):
        app.dependency_overrides[get_detection_pipeline] = lambda: _BrokenPipeline()
        try:
            with TestClient(app, raise_server_exceptions=False) as test_client:
                return test_client.post(
                    "/api/v1/similarity/compare",
                    json={"text_a": "a", "text_b": "b", "min_length": 1},
                )
        finally:
            app.dependency_overrides.clear()

    def test_message_hidden_by_default(self):
        response = self._post()

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_ERROR"
        assert error["message"] == "Internal server error"
        assert error["details"]["type"] == "RuntimeError"

    def test_message_shown_in_development(self, monkeypatch):
        monkeypatch.setenv("DOCSIM_ENVIRONMENT", "development")

        response = self._post()

        assert response.status_code == 500
        assert response.json()["error"]["message"] == "secret internal state"
