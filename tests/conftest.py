import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app


@pytest.fixture
def google_key(monkeypatch):
    monkeypatch.setattr(settings, "GOOGLE_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_google_key(monkeypatch):
    monkeypatch.setattr(settings, "GOOGLE_KEY", "")


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def provider_requests():
    """Requests seen by the fake Places API."""
    return []


@pytest.fixture
def make_transport(provider_requests):
    """Builds an httpx.MockTransport standing in for the Places API."""
    def factory(payload=None, status_code=200, error=None):
        def handler(request: httpx.Request) -> httpx.Response:
            provider_requests.append(request)
            if error is not None:
                raise error
            return httpx.Response(status_code, json=payload)
        return httpx.MockTransport(handler)
    return factory
