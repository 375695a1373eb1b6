"""
Context builder for Gemini requests.
Joins the persona, the grounding rules, the city hall directory and the recent turns into one prompt.
"""
from config import Config
from models.chat_models import ConversationHistory
from utils.constants import (
    PERSONA_PREAMBLE,
    CRITICAL_INSTRUCTIONS,
    CITY_HALL_DIRECTORY,
    RESPONSE_RULES,
    RECENT_CONVERSATION_HEADER,
    USER_QUESTION_TEMPLATE,
    RESPONSE_PRIMER_TEMPLATE,
)


class ContextBuilder:
    """Builds the text sent as the single Gemini content part."""

    @staticmethod
    def knowledge_base() -> str:
        """Static part of the context: persona, rules and directory."""
        sections = [
            PERSONA_PREAMBLE.format(assistant_name=Config.ASSISTANT_NAME),
            CRITICAL_INSTRUCTIONS,
            CITY_HALL_DIRECTORY,
            RESPONSE_RULES,
        ]
        return "\n\n".join(sections)

    @staticmethod
    def format_recent_turns(history: ConversationHistory, window: int = Config.RECENT_WINDOW) -> str:
        """Render the last `window` turns as "<Speaker>: <text>" lines."""
        return "\n".join(turn.render() for turn in history.recent(window))

    @staticmethod
    def build_context(history: ConversationHistory, window: int = Config.RECENT_WINDOW) -> str:
        """
        Build the full context for a request.

        Args:
            history: Conversation so far, including the current user turn
            window: Number of recent turns to include

        Returns:
            Knowledge base followed by the recent conversation block
        """
        recent = ContextBuilder.format_recent_turns(history, window)
        return f"{ContextBuilder.knowledge_base()}\n\n{RECENT_CONVERSATION_HEADER}\n{recent}"

    @staticmethod
    def build_prompt(history: ConversationHistory, prompt: str, window: int = Config.RECENT_WINDOW) -> str:
        """Context plus the user question and the response primer."""
        question = USER_QUESTION_TEMPLATE.format(prompt=prompt)
        primer = RESPONSE_PRIMER_TEMPLATE.format(assistant_name=Config.ASSISTANT_NAME)
        return f"{ContextBuilder.build_context(history, window)}\n\n{question}\n\n{primer}"
