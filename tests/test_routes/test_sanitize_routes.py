"""Integration tests for the sanitize blueprint."""
import pytest

from xssan import create_app
from xssan.config import Settings


class TestSanitizeEndpoint:
    """Tests for POST /sanitize."""

    def test_default_strategy(self, client):
        resp = client.post("/sanitize", json={"text": "<h1>hi!</h1>"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data == {
            "success": True,
            "strategy": "strip_tags",
            "result": "hi!",
            "input_length": 12,
            "output_length": 3,
        }

    def test_entities_strategy(self, client):
        resp = client.post("/sanitize", json={"text": "<h1>hi!</h1>", "strategy": "entities"})
        assert resp.get_json()["result"] == "&lt;h1&rt;hi!&lt;/h1&rt;"

    def test_blank_strategy_uses_default(self, client):
        resp = client.post("/sanitize", json={"text": "<b>x</b>", "strategy": "  "})
        assert resp.get_json()["strategy"] == "strip_tags"

    def test_empty_text_is_allowed(self, client):
        resp = client.post("/sanitize", json={"text": ""})
        assert resp.status_code == 200
        assert resp.get_json()["result"] == ""

    def test_unicode_round_trip(self, client):
        resp = client.post("/sanitize", json={"text": "<p>你好</p>"})
        assert resp.get_json()["result"] == "你好"

    def test_invalid_json(self, client):
        resp = client.post("/sanitize", data="{not json", content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json()["success"] is False

    def test_missing_text(self, client):
        resp = client.post("/sanitize", json={"strategy": "entities"})
        assert resp.status_code == 422
        assert "text" in resp.get_json()["error"]["message"]

    def test_non_object_body(self, client):
        resp = client.post("/sanitize", json=["<b>x</b>"])
        assert resp.status_code == 422

    def test_unknown_strategy(self, client):
        resp = client.post("/sanitize", json={"text": "x", "strategy": "bleach"})
        assert resp.status_code == 422
        assert resp.get_json()["error"]["code"] == 422

    def test_input_too_large(self, client):
        resp = client.post("/sanitize", json={"text": "a" * 1001})
        assert resp.status_code == 413

    def test_get_not_allowed(self, client):
        resp = client.get("/sanitize")
        assert resp.status_code == 405
        assert resp.get_json()["error"]["message"] == "Method not allowed"


class TestBatchEndpoint:
    """Tests for POST /sanitize/batch."""

    def test_batch(self, client):
        resp = client.post(
            "/sanitize/batch",
            json={"texts": ["<b>a</b>", "<<c"], "strategy": "strip_brackets"},
        )
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["results"] == ["ba/b", "c"]
        assert data["count"] == 2
        assert data["strategy"] == "strip_brackets"

    def test_batch_strip_tags(self, client):
        resp = client.post(
            "/sanitize/batch",
            json={"texts": ["<b>a</b>", "b<i>", "b<i", "<h1<p>>hi!</h1>"], "strategy": "strip_tags"},
        )
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["results"] == ["a", "b", "b<i", "hi!"]
        assert data["count"] == 4

    def test_batch_default_strategy(self, client):
        resp = client.post("/sanitize/batch", json={"texts": ["x<y>z"]})
        data = resp.get_json()
        assert data["strategy"] == "strip_tags"
        assert data["results"] == ["xz"]

    def test_empty_batch_rejected(self, client):
        resp = client.post("/sanitize/batch", json={"texts": []})
        assert resp.status_code == 422

    def test_batch_too_large(self, client):
        resp = client.post("/sanitize/batch", json={"texts": ["x"] * 6})
        assert resp.status_code == 413


class TestStrategiesEndpoint:
    def test_lists_strategies(self, client):
        resp = client.get("/strategies")
        data = resp.get_json()
        assert data["default"] == "strip_tags"
        names = [s["name"] for s in data["strategies"]]
        assert names == ["entities", "escape", "strip_tags", "strip_brackets"]


class TestRequestId:
    def test_echoes_client_request_id(self, client):
        resp = client.post("/sanitize", json={"text": "x"}, headers={"X-Request-ID": "abc-123"})
        assert resp.headers["X-Request-ID"] == "abc-123"

    def test_generates_request_id(self, client):
        resp = client.get("/strategies")
        assert len(resp.headers["X-Request-ID"]) == 36

    def test_oversized_request_id_is_replaced(self, client):
        resp = client.get("/strategies", headers={"X-Request-ID": "x" * 500})
        assert len(resp.headers["X-Request-ID"]) == 36


class TestErrors:
    def test_unknown_route(self, client):
        resp = client.get("/does-not-exist")
        assert resp.status_code == 404
        assert resp.get_json() == {"success": False, "error": {"message": "Not found", "code": 404}}


class TestRequestBodyLimit:
    """Bodies over MAX_REQUEST_BYTES are refused before parsing."""

    @pytest.fixture
    def small_client(self):
        settings = Settings(LOG_LEVEL="WARNING", LOG_FORMAT="console", MAX_REQUEST_BYTES=64)
        return create_app(settings).test_client()

    def test_oversized_body(self, small_client):
        resp = small_client.post("/sanitize", json={"text": "x" * 200})
        assert resp.status_code == 413
        assert resp.get_json() == {
            "success": False,
            "error": {"message": "Request body too large", "code": 413},
        }

    def test_body_under_limit(self, small_client):
        resp = small_client.post("/sanitize", json={"text": "<b>x</b>"})
        assert resp.status_code == 200
        assert resp.get_json()["result"] == "x"
