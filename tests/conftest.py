import os, sys
import pytest
from fastapi.testclient import TestClient

# Ensure the package is importable without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from attestation_verifier.config import Settings
from attestation_verifier.main import create_app

TEST_SALT = "test-salt"


@pytest.fixture
def settings():
    return Settings(nullifier_salt=TEST_SALT)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def e2e_client():
    """Client for an app started with E2E_MODE=true."""
    return TestClient(create_app(Settings(e2e_mode=True, nullifier_salt=TEST_SALT)),
                      raise_server_exceptions=False)


@pytest.fixture
def payload():
    def _make(**overrides):
        body = {"platform": "web", "integrityToken": "long-enough-token", "deviceKey": "dev", "nonce": "n1"}
        body.update(overrides)
        return body
    return _make
