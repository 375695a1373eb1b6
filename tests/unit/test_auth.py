import pytest
from starlette.testclient import TestClient
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse

from auth import APIKeyMiddleware
from config import Config


async def protected(request):
    return PlainTextResponse("Chat Running")

@pytest.fixture
def app_with_middleware():
    app = Starlette()
    app.add_middleware(APIKeyMiddleware)
    app.add_route("/chat", protected)
    app.add_route("/", protected)
    return app

@pytest.fixture
def client(app_with_middleware, monkeypatch):
    monkeypatch.setattr(Config, "ACCESS_KEY", "valid-key")
    return TestClient(app_with_middleware)

@pytest.mark.parametrize("header_name", ["X-API-Key", "x-api-key", "X-Api-Key"])
def test_access_key_accepted_with_any_header_casing(client, header_name):
    """Given a valid key, the header should be accepted regardless of casing."""
    response = client.get("/chat", headers={header_name: "valid-key"})
    assert response.status_code == 200
    assert response.text == "Chat Running"

@pytest.mark.parametrize("headers", [{}, {"X-API-Key": ""}])
def test_missing_access_key_is_unauthorized(client, headers):
    """Given no key or an empty key, the middleware should return 401."""
    response = client.get("/chat", headers=headers)
    assert response.status_code == 401
    assert response.json()["error"] == "unauthorized"
    assert response.headers["WWW-Authenticate"] == "ApiKey"

def test_wrong_access_key_is_forbidden(client):
    """Given a wrong key, the middleware should return 403."""
    response = client.get("/chat", headers={"X-API-Key": "wrong-key"})
    assert response.status_code == 403
    assert response.json() == {"detail": "Invalid API key", "error": "forbidden"}

def test_health_check_is_exempt(client):
    """Given the root path, no key should be required."""
    assert client.get("/").status_code == 200

def test_open_mode_when_no_access_key_configured(app_with_middleware, monkeypatch):
    """Given no configured access key, every request should pass through."""
    monkeypatch.setattr(Config, "ACCESS_KEY", "")
    response = TestClient(app_with_middleware).get("/chat")
    assert response.status_code == 200
