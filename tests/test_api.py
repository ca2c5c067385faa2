"""Tests for the HTTP API."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from conftest import ScriptedProvider, agent_json
from worldview.api import create_fastapi_app
from worldview.app import Application
from worldview.config import Settings
from worldview.llm import LLMError
from worldview.research import ResultCache


@pytest.fixture
def provider():
    return ScriptedProvider(
        responses={
            "local_insights": agent_json("Locals recommend the old town", spots=[{"name": "Alfama"}]),
            "news_sentiment": LLMError("LLM API error: 500"),
        }
    )


@pytest.fixture
def client(provider):
    """TestClient around an Application with a scripted provider."""
    application = Application(
        settings=Settings(agent_timeout_ms=1000),
        llm_provider=provider,
        cache=ResultCache(max_size=10),
    )
    with TestClient(create_fastapi_app(application)) as test_client:
        yield test_client


class TestResearchRoute:
    """Tests for GET /api/research."""

    def test_requires_state(self, client):
        response = client.get("/api/research")
        assert response.status_code == 400

    def test_returns_aggregate(self, client):
        response = client.get("/api/research", params={"state": "Lisbon", "country": "Portugal"})

        assert response.status_code == 200
        data = response.json()
        assert data["location"] == {"state": "Lisbon", "country": "Portugal"}
        assert data["consensus"]["agents_responded"] == 3
        assert data["consensus"]["confidence"] == "high"
        assert data["agents_summary"]["total_agents"] == 4
        assert len(data["sources"]) == 3
        assert data["summary"] == "Locals recommend the old town"
        assert data["spots"] == [{"name": "Alfama"}]
        assert set(data["data"]) == {
            "local_insights",
            "reddit_sentiment",
            "tripadvisor_sentiment",
            "news_sentiment",
        }
        assert "cached" not in data

    def test_second_request_is_cached(self, client, provider):
        client.get("/api/research", params={"state": "Lisbon"})
        response = client.get("/api/research", params={"state": "Lisbon"})

        assert response.json()["cached"] is True
        assert len(provider.calls) == 4

    def test_orchestration_failure_is_500(self, client):
        with patch("worldview.research.service.compose", side_effect=RuntimeError("broken")):
            response = client.get("/api/research", params={"state": "Lisbon"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Parallel agent system failed"
        assert body["sources"] == []
        assert body["agents_summary"]["total_agents"] == 4


class TestAgentRoute:
    """Tests for GET /api/agent/{agent_name}."""

    def test_single_agent(self, client):
        response = client.get("/api/agent/local_insights", params={"state": "Lisbon"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["agent"] == "local_insights"
        assert body["data"]["summary"] == "Locals recommend the old town"

    def test_failed_agent(self, client):
        response = client.get("/api/agent/news_sentiment", params={"state": "Lisbon"})

        body = response.json()
        assert body["success"] is False
        assert body["data"]["summary"] == "Data temporarily unavailable for news_sentiment"

    def test_invalid_agent(self, client):
        response = client.get("/api/agent/yelp", params={"state": "Lisbon"})
        assert response.status_code == 400

    def test_requires_state(self, client):
        response = client.get("/api/agent/local_insights")
        assert response.status_code == 400


class TestLocationRoute:
    """Tests for POST /api/location."""

    def test_suggestion_failure_is_502(self, client):
        # The scripted provider answers with an agent payload, not a location
        response = client.post("/api/location", json={"query": "beaches"})
        assert response.status_code == 502

    def test_empty_query_is_400(self, client):
        response = client.post("/api/location", json={"query": ""})
        assert response.status_code == 400


class TestCacheRoutes:
    """Tests for cache administration."""

    def test_stats_and_clear(self, client):
        client.get("/api/research", params={"state": "Lisbon", "country": "Portugal"})

        stats = client.get("/api/cache/stats").json()
        assert stats["size"] == 1
        assert stats["keys_sample"] == ["Lisbon,Portugal"]

        cleared = client.post("/api/cache/clear").json()
        assert cleared["cleared"] is True
        assert cleared["previous_size"] == 1
        assert cleared["message"] == "Cleared 1 cached items"

        assert client.get("/api/cache/stats").json()["size"] == 0

    def test_clear_via_get(self, client):
        response = client.get("/api/cache/clear")
        assert response.json()["previous_size"] == 0


class TestHealthRoute:
    """Tests for GET /health."""

    def test_health(self, client):
        body = client.get("/health").json()

        assert body["status"] == "ok"
        assert body["provider_configured"] is True
        assert body["cache_size"] == 0
        assert body["agents"] == [
            "local_insights",
            "reddit_sentiment",
            "tripadvisor_sentiment",
            "news_sentiment",
        ]
        assert body["uptime"].endswith("s")
