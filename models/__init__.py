"""
Models package exports.
"""
from models.api_models import ChatRequest, ChatReply
from models.chat_models import (
    Speaker,
    Turn,
    ConversationHistory,
    ClientConfig,
    GenerationSettings,
    SafetySetting,
    ResponseKind,
    ChatResult,
)

__all__ = [
    'ChatRequest',
    'ChatReply',
    'Speaker',
    'Turn',
    'ConversationHistory',
    'ClientConfig',
    'GenerationSettings',
    'SafetySetting',
    'ResponseKind',
    'ChatResult',
]
