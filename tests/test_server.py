"""
Tests for prose_vader/server.py

Run from the project root:
    pytest tests/test_server.py -v
"""
import math
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from prose_vader.core.models import Token


@pytest.fixture
def client(analyzer):
    import prose_vader.server as srv_module

    with patch.object(srv_module, "get_analyzer", return_value=analyzer):
        yield TestClient(srv_module.app)


class TestRoot:
    def test_root_returns_welcome_message(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Welcome to Prose Vader API"

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "lexicon_size": 8, "idiom_count": 2}


class TestSentenceEndpoint:
    def test_scores_tokens(self, client):
        payload = {"tokens": [{"value": "good", "pos_tag": "JJ"}, {"value": "!", "pos_tag": "."}]}
        resp = client.post("/api/v1/sentence", json=payload)
        assert resp.status_code == 200
        data = resp.json()
        expected = (1.9 + 0.292) / math.sqrt((1.9 + 0.292) ** 2 + 15.0)
        assert data["score"]["compound"] == pytest.approx(round(expected, 4))
        assert data["score"]["pos"] == 1.0
        assert data["word_scores"] == pytest.approx([1.9])
        assert data["sentence"] == "good !"
        assert data["score"]["display"].startswith("{'neg': 0.000")

    def test_empty_tokens_score_zero(self, client):
        resp = client.post("/api/v1/sentence", json={"tokens": []})
        assert resp.status_code == 200
        assert resp.json()["score"]["compound"] == 0.0
        assert resp.json()["score"]["neu"] == 0.0

    def test_missing_tokens_score_zero(self, client):
        resp = client.post("/api/v1/sentence", json={})
        assert resp.status_code == 200
        assert resp.json()["word_scores"] == []


class TestTextEndpoint:
    def test_empty_text_returns_422(self, client):
        resp = client.post("/api/v1/text", json={"text": ""})
        assert resp.status_code == 422

    def test_scores_each_sentence(self, client, analyzer):
        results = [
            analyzer.analyse([Token("good"), Token(".")]),
            analyzer.analyse([Token("bad"), Token("day"), Token(".")]),
        ]
        with patch("prose_vader.server.analyse_text", return_value=results) as analyse:
            resp = client.post("/api/v1/text", json={"text": "Good. Bad day."})
        analyse.assert_called_once_with("Good. Bad day.")
        assert resp.status_code == 200
        data = resp.json()
        assert data["count"] == 2
        assert [s["sentence"] for s in data["sentences"]] == ["good .", "bad day ."]
        assert data["sentences"][0]["score"]["compound"] > 0
        assert data["sentences"][1]["score"]["compound"] < 0
