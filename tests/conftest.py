"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from mockapi.main import app


@pytest.fixture
def client():
    """Test client bound to the application, with lifespan events run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    """Headers carrying an arbitrary bearer token."""
    return {"Authorization": "Bearer some-token"}
