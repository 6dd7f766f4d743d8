"""
Pytest configuration and fixtures for storefront tests
"""

import os
import sys

import httpx
import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from main import app  # noqa: E402
from storefront.routes.deps import get_session_service  # noqa: E402
from storefront.services.session_service import SessionService  # noqa: E402
from utils.identity import make_session_service, refuse_connection  # noqa: E402


@pytest.fixture
def session_body() -> dict:
    return {
        "user": {
            "id": "0b9c2f0e-6a43-4d1c-9a51-8f1f3f1c2d11",
            "login": "octocat",
            "name": "The Octocat",
            "avatar_url": "https://avatars.githubusercontent.com/u/583231",
            "email": "octocat@example.com",
            "role": "customer",
        },
        "csrfToken": "csrf-abc123",
    }


@pytest.fixture
def signed_in_service(session_body):
    """Identity service that answers every /session call with ``session_body``."""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=session_body)

    service = make_session_service(handler)
    service.calls = calls
    return service


@pytest.fixture
def anonymous_service():
    """Identity service that reports no session (401)."""
    return make_session_service(lambda request: httpx.Response(401, json={"error": "unauthorized"}))


@pytest.fixture
def unreachable_service():
    """Identity service whose connection is refused."""
    return make_session_service(refuse_connection)


@pytest.fixture
def use_session_service():
    """Install a SessionService for the page routes; cleared after the test."""

    def _install(service: SessionService) -> None:
        app.dependency_overrides[get_session_service] = lambda: service

    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def client(use_session_service, anonymous_service):
    """Test client on a public origin with an anonymous identity service."""
    use_session_service(anonymous_service)
    return TestClient(app)


@pytest.fixture
def local_client(use_session_service, anonymous_service):
    """Test client whose requests arrive on the local dev origin."""
    use_session_service(anonymous_service)
    return TestClient(app, base_url="http://localhost:5173")
