"""
Route handlers for the chat conversation.
Handles /chat and /chat/history for the single shared conversation.
"""
from fastapi import APIRouter, Depends

from models.api_models import ChatRequest, ChatReply
from models.chat_models import ResponseKind
from services.chat_service import ChatService
from utils.logger import app_logger

router = APIRouter()

_chat_service: ChatService | None = None


def get_chat_service() -> ChatService:
    """Get or create the process-wide chat service."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service


@router.post("/chat", response_model=ChatReply)
async def chat(request: ChatRequest, service: ChatService = Depends(get_chat_service)):
    """
    Send one user message and return the assistant reply.
    Failures come back as readable text with ok=false and the outcome kind.
    """
    result = await service.get_result(request.prompt)
    app_logger.info(f"Chat outcome: {result.kind.value}")

    text = result.text
    if result.kind == ResponseKind.REPLY:
        text = ChatService.sanitize_reply(text)

    return ChatReply(
        response=text,
        kind=result.kind.value,
        ok=result.ok,
        status_code=result.status_code
    )


@router.delete("/chat/history")
async def clear_history(service: ChatService = Depends(get_chat_service)):
    """Start a new conversation."""
    return {"cleared": service.reset()}
