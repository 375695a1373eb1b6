import pytest
from unittest.mock import AsyncMock

import httpx

from tests.fixtures.responses import GEMINI_OK_BODY


@pytest.fixture
def mock_gemini_client():
    """httpx.AsyncClient mock answering every post() with a 200 reply."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.post = AsyncMock(return_value=httpx.Response(200, text=GEMINI_OK_BODY))
    return client

@pytest.fixture
def gemini_client_builder():
    from tests.fixtures.mock_clients import GeminiClientBuilder
    return GeminiClientBuilder()

@pytest.fixture
def chat_service(mock_gemini_client):
    """ChatService with a configured key and the mocked transport."""
    from services.chat_service import ChatService
    return ChatService(api_key="test-gemini-key", http_client=mock_gemini_client)

@pytest.fixture
def auth_headers():
    """Authentication headers for API requests."""
    return {"X-API-Key": "test-key"}

@pytest.fixture
def configured_app(monkeypatch, chat_service):
    """App wired to the mocked chat service and protected by an access key."""
    from fastapi.testclient import TestClient
    from config import Config
    from main import app
    from routes.chat import get_chat_service

    monkeypatch.setattr(Config, "ACCESS_KEY", "test-key")
    app.dependency_overrides[get_chat_service] = lambda: chat_service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()

@pytest.fixture
def anyio_backend():
    """The service is built on asyncio primitives; run async tests on asyncio."""
    return "asyncio"
