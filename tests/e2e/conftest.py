"""Fixtures for end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from tests.di import build_test_container


def signed_up_client(app, email: str, name: str) -> TestClient:
    """Create a client and sign it up; the session cookie stays in the client."""
    client = TestClient(app)
    response = client.post(
        "/auth/signup",
        json={"email": email, "password": "secret123", "name": name},
    )
    assert response.status_code == 201
    return client


@pytest.fixture
def app():
    """App wired to a fresh all-mock container."""
    return create_app(build_test_container())


@pytest.fixture
def alice(app):
    """Client signed in as Alice."""
    return signed_up_client(app, "alice@example.com", "Alice")


@pytest.fixture
def bob(app):
    """Client signed in as Bob."""
    return signed_up_client(app, "bob@example.com", "Bob")


@pytest.fixture
def anonymous(app):
    """Client without a session."""
    return TestClient(app)
