"""
Tests for the operational endpoints: /__health, /__gtg, ping and build info.
"""
import pytest


class TestHealth:
    def test_healthy(self, client):
        response = client.get("/__health")

        assert response.status_code == 200
        data = response.json()
        assert data["schemaVersion"] == 1
        assert data["systemCode"] == "public-six-degrees-api"
        assert data["name"] == "Public Six Degrees API"
        assert data["ok"] is True
        assert "severity" not in data
        assert len(data["checks"]) == 1
        check = data["checks"][0]
        assert check["ok"] is True
        assert check["severity"] == 3
        assert check["checkOutput"] == "Connectivity to neo4j is ok"
        assert check["businessImpact"] == "Unable to respond to Public Six Degrees"
        assert check["lastUpdated"]

    def test_unhealthy_still_returns_200(self, client, dummy_driver, caplog):
        dummy_driver.should_fail = True

        response = client.get("/__health")

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is False
        assert data["severity"] == 3
        assert data["checks"][0]["ok"] is False
        assert data["checks"][0]["checkOutput"] == "Error connecting to neo4j"
        assert any("Neo4j health check failed" in r.message for r in caplog.records)


class TestGoodToGo:
    def test_good_to_go(self, client):
        response = client.get("/__gtg")
        assert response.status_code == 200
        assert response.text == "OK"

    def test_not_good_to_go(self, client, dummy_driver):
        dummy_driver.should_fail = True
        response = client.get("/__gtg")
        assert response.status_code == 503


@pytest.mark.parametrize("path", ["/__ping", "/ping"])
def test_ping(client, path):
    response = client.get(path)
    assert response.status_code == 200
    assert response.text == "pong"


@pytest.mark.parametrize("path", ["/__build-info", "/build-info"])
def test_build_info(client, path):
    response = client.get(path)
    assert response.status_code == 200
    assert set(response.json()) == {"version", "repository", "revision", "builder", "dateTime"}
