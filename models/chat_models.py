"""
Data models for chat processing.
Contains the conversation history, client configuration, and tagged chat results.
"""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from config import Config
from utils.constants import GenerationDefaults


class Speaker(Enum):
    """Who produced a turn."""
    USER = "user"
    ASSISTANT = "assistant"

    @property
    def label(self) -> str:
        """Name shown for this speaker in the conversation block."""
        if self is Speaker.ASSISTANT:
            return Config.ASSISTANT_NAME
        return "User"


@dataclass(frozen=True)
class Turn:
    """One message in the conversation."""
    speaker: Speaker
    text: str

    def render(self) -> str:
        return f"{self.speaker.label}: {self.text}"


class ConversationHistory:
    """
    Bounded FIFO of turns.
    Pushing past max_size evicts the oldest turn first.
    """

    def __init__(self, max_size: int = Config.MAX_HISTORY_MESSAGES):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._turns: deque[Turn] = deque(maxlen=max_size)

    def append(self, speaker: Speaker, text: str) -> Turn:
        """Add a turn, dropping the oldest one when the cap is reached."""
        turn = Turn(speaker=speaker, text=text)
        self._turns.append(turn)
        return turn

    def recent(self, count: int = Config.RECENT_WINDOW) -> list[Turn]:
        """Return the last `count` turns in original order."""
        if count <= 0:
            return []
        return list(self._turns)[-count:]

    def clear(self) -> int:
        """Remove every turn and return how many were dropped."""
        dropped = len(self._turns)
        self._turns.clear()
        return dropped

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(list(self._turns))


@dataclass(frozen=True)
class SafetySetting:
    """Single Gemini safety category threshold."""
    category: str
    threshold: str = GenerationDefaults.SAFETY_THRESHOLD


@dataclass(frozen=True)
class GenerationSettings:
    """generationConfig and safetySettings sent with every request."""
    temperature: float = GenerationDefaults.TEMPERATURE
    top_k: int = GenerationDefaults.TOP_K
    top_p: float = GenerationDefaults.TOP_P
    max_output_tokens: int = GenerationDefaults.MAX_OUTPUT_TOKENS
    safety_settings: tuple[SafetySetting, ...] = field(
        default_factory=lambda: tuple(SafetySetting(c) for c in GenerationDefaults.SAFETY_CATEGORIES)
    )


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable settings for one chat client.
    Built once when the client is constructed.
    """
    api_key: str
    endpoint: str
    timeout: float = Config.REQUEST_TIMEOUT
    generation: GenerationSettings = field(default_factory=GenerationSettings)

    @classmethod
    def from_config(cls, api_key: Optional[str] = None, model: Optional[str] = None) -> "ClientConfig":
        """Create a ClientConfig from explicit values or the environment."""
        key = Config.GEMINI_API_KEY if api_key is None else api_key
        return cls(
            api_key=(key or "").strip(),
            endpoint=Config.endpoint_for(model),
            timeout=Config.REQUEST_TIMEOUT,
        )

    @property
    def has_usable_key(self) -> bool:
        return not Config.is_placeholder_key(self.api_key)


class ResponseKind(Enum):
    """Outcome of a single get_response call."""
    REPLY = "reply"
    GREETING = "greeting"
    CONFIGURATION_ERROR = "configuration_error"
    INPUT_ERROR = "input_error"
    FORMAT_ERROR = "format_error"
    HTTP_STATUS_ERROR = "http_status_error"
    TIMEOUT_ERROR = "timeout_error"
    TRANSPORT_ERROR = "transport_error"
    UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True)
class ChatResult:
    """Tagged result: the user-facing text plus the kind of outcome."""
    kind: ResponseKind
    text: str
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        """True for answers the user asked for (API reply or greeting)."""
        return self.kind in (ResponseKind.REPLY, ResponseKind.GREETING)
