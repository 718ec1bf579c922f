"""
Pytest configuration and fixtures for testing the six degrees API.

This module provides:
- Test client fixture for the FastAPI app
- A recording stub of the query service, injected through dependency_overrides
- Mock Neo4j driver/session fixtures for the Cypher query service
- Environment overrides so no real database is contacted
"""
import os
import time

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from tests.mock_helpers import KNOWN_UUID, DummyDriver, make_mock_driver

# Calendar dates are parsed as local midnight; pin the zone so epochs are stable.
os.environ["TZ"] = "UTC"
if hasattr(time, "tzset"):
    time.tzset()

os.environ.setdefault("NEO4J_URI", "bolt://localhost:7687")
os.environ.setdefault("NEO4J_USER", "neo4j")
os.environ.setdefault("NEO4J_PASSWORD", "test-password")
os.environ["CACHE_DURATION"] = "6m"
os.environ["API_BASE_URL"] = "http://api.ft.com"
os.environ["REQUEST_LOGGING_ON"] = "true"

# Import app after env vars are set
from main import app  # noqa: E402

@pytest.fixture
def test_app():
    return app


@pytest.fixture
def dummy_driver():
    """Recording stub of the query service; tests reconfigure it as needed."""
    return DummyDriver(known_uuid=KNOWN_UUID)


@pytest.fixture(autouse=True)
def override_query_service(test_app, dummy_driver):
    """
    Route every endpoint to the dummy_driver fixture.

    Uses FastAPI's dependency_overrides so the real Neo4j driver is never
    built.
    """
    from db_neo4j import get_query_service

    test_app.dependency_overrides[get_query_service] = lambda: dummy_driver
    yield
    test_app.dependency_overrides.pop(get_query_service, None)


@pytest.fixture
def client(test_app):
    """
    TestClient with raise_server_exceptions=False so exception handlers
    produce responses as they would in production.
    """
    return TestClient(test_app, raise_server_exceptions=False)


@pytest.fixture
def mock_neo4j_session():
    """MagicMock session; configure session.run.return_value per test."""
    return MagicMock()


@pytest.fixture
def mock_neo4j_driver(mock_neo4j_session):
    """MagicMock driver whose session() context manager yields mock_neo4j_session."""
    return make_mock_driver(mock_neo4j_session)


@pytest.fixture
def caplog(caplog):
    import logging
    caplog.set_level(logging.DEBUG)
    return caplog
