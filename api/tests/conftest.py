"""
Pytest configuration for API tests

Fixtures and configuration for FastAPI endpoint testing.
The Immutable X API is replaced by an in-memory mock, so no test needs network access.
"""

import functools
import os

# Settings are read at import time of api.main
os.environ.setdefault("ADMIN_API_KEY", "test_api_key")
os.environ.setdefault("IMX_CHAIN_ID", "88")

import pytest
from fastapi.testclient import TestClient

from api.dependencies.imx import get_imx_helper
from api.main import app
from api.tests.mocks import FakeSignerProvider, MockImmutableXAPI
from imx_offchain.client import ImmutableXClient
from imx_offchain.config import ImmutableXSettings
from imx_offchain.helper import ImmutableXHelper


@pytest.fixture
def mock_imx_api():
    """Mock Immutable X REST API"""
    return MockImmutableXAPI()


@pytest.fixture
def imx_helper(mock_imx_api):
    """Helper for the test network wired to the mock API"""
    settings = ImmutableXSettings(imx_testnet_api_url="https://api.ropsten.x.immutable.test")
    return ImmutableXHelper(
        88,
        settings=settings,
        signer_provider=FakeSignerProvider(),
        client_factory=functools.partial(ImmutableXClient.build, transport=mock_imx_api.transport),
    )


@pytest.fixture
def client(imx_helper):
    """Create FastAPI test client"""
    app.dependency_overrides[get_imx_helper] = lambda: imx_helper
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# Auth fixtures
@pytest.fixture
def api_key():
    """Get API key from environment"""
    return os.getenv("ADMIN_API_KEY", "test_api_key")


@pytest.fixture
def auth_headers(api_key):
    """Get authentication headers"""
    return {"X-API-Key": api_key}
