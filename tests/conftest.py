"""Shared pytest fixtures for string analyzer tests."""

import pytest
from fastapi.testclient import TestClient

from string_analyzer.main import app
from string_analyzer.store import StringStore


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def client():
    """Test client with a fresh, empty store (startup runs per client)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client):
    for value in ("racecar", "hello world", "a", "noon", "Was it a car"):
        response = client.post("/strings", json={"value": value})
        assert response.status_code == 201
    return client
