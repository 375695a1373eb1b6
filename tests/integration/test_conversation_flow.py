import httpx
import pytest

from services.chat_service import ChatService
from tests.fixtures.responses import make_gemini_body
from tests.helpers import history_texts, sent_context


@pytest.mark.anyio
async def test_civil_registry_question_end_to_end(gemini_client_builder):
    """Given a configured key, a directory question should round-trip through Gemini and land in history."""
    client = gemini_client_builder.add_response(200, make_gemini_body("Room 108...")).build()
    service = ChatService(api_key="test-gemini-key", http_client=client)

    response = await service.get_response("Where is the Civil Registry?")

    assert response == "Room 108..."
    assert "CITY CIVIL REGISTRY OFFICE (CCRO)" in sent_context(client)
    assert history_texts(service) == [
        ("user", "Where is the Civil Registry?"),
        ("assistant", "Room 108..."),
    ]

@pytest.mark.anyio
async def test_history_stays_capped_over_many_turns(gemini_client_builder):
    """Given eleven or more exchanges, history should hold exactly the ten newest turns."""
    builder = gemini_client_builder
    for i in range(12):
        builder.add_response(200, make_gemini_body(f"reply {i}"))
    client = builder.build()
    service = ChatService(api_key="test-gemini-key", http_client=client)

    for i in range(12):
        await service.get_response(f"question {i}")
        assert len(service.history) <= 10

    expected = []
    for i in range(7, 12):
        expected += [("user", f"question {i}"), ("assistant", f"reply {i}")]
    assert history_texts(service) == expected

@pytest.mark.anyio
async def test_context_window_carries_only_five_latest_turns(gemini_client_builder):
    """Given a long conversation, each request should include only the five newest turns."""
    builder = gemini_client_builder
    for i in range(6):
        builder.add_response(200, make_gemini_body(f"reply {i}"))
    client = builder.build()
    service = ChatService(api_key="test-gemini-key", http_client=client)

    for i in range(6):
        await service.get_response(f"question {i}")

    block = sent_context(client).split("Recent conversation:\n", 1)[1].split("\n\nUser Question:", 1)[0]
    assert block.split("\n") == [
        "User: question 3",
        "ManilaServe: reply 3",
        "User: question 4",
        "ManilaServe: reply 4",
        "User: question 5",
    ]

@pytest.mark.anyio
async def test_failed_exchange_keeps_user_turn_for_next_request(gemini_client_builder):
    """Given a failed call followed by a success, the failed question should still appear in the next context."""
    client = (
        gemini_client_builder
        .add_error(httpx.ConnectError("connection reset"))
        .add_response(200, make_gemini_body("Room 115, Ground Floor"))
        .build()
    )
    service = ChatService(api_key="test-gemini-key", http_client=client)

    assert await service.get_response("Saan ang OSCA?") == "Network Error: connection reset"
    assert await service.get_response("Ano ang contact number?") == "Room 115, Ground Floor"

    assert "User: Saan ang OSCA?\nUser: Ano ang contact number?" in sent_context(client)
    assert history_texts(service) == [
        ("user", "Saan ang OSCA?"),
        ("user", "Ano ang contact number?"),
        ("assistant", "Room 115, Ground Floor"),
    ]

@pytest.mark.anyio
async def test_greeting_does_not_enter_context(gemini_client_builder):
    """Given a greeting before a question, the greeting should not appear in the sent context."""
    client = gemini_client_builder.add_response().build()
    service = ChatService(api_key="test-gemini-key", http_client=client)

    await service.get_response("hello")
    await service.get_response("Where is the Mayor's office?")

    assert client.post.await_count == 1
    assert "User: hello" not in sent_context(client)
