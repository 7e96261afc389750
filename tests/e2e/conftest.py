"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from fritter.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client
