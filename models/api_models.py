"""
Pydantic data models for API requests and responses.
"""
from typing import Optional
from pydantic import BaseModel, Field

from config import Config


class ChatRequest(BaseModel):
    """Chat request carrying one user message."""
    prompt: str = Field(..., max_length=Config.MAX_PROMPT_LENGTH, description="Text typed by the user")


class ChatReply(BaseModel):
    """Chat reply with the text to show and a machine-readable outcome."""
    response: str
    kind: str
    ok: bool
    status_code: Optional[int] = None
