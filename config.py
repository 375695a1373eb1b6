"""
Configuration module for the ManilaServe Chat Bridge.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration class."""

    # API Keys
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    API_KEY_PLACEHOLDER: str = "YOUR_GEMINI_API_KEY_HERE"

    # Optional key protecting the bridge itself (X-API-Key header)
    ACCESS_KEY: str = os.getenv("ACCESS_KEY", "")

    # API Configuration
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")
    GEMINI_ENDPOINT: str = "https://generativelanguage.googleapis.com/v1/models/{model}:generateContent"
    USER_AGENT: str = "ManilaServe-Chatbot/1.0"

    # Application Settings
    APP_TITLE: str = "ManilaServe Chat Bridge"
    ASSISTANT_NAME: str = "ManilaServe"
    MAX_PROMPT_LENGTH: int = 2000

    # Conversation window
    MAX_HISTORY_MESSAGES: int = 10
    RECENT_WINDOW: int = 5

    # Timeouts (in seconds)
    REQUEST_TIMEOUT: float = 30.0

    # Connection pool
    MAX_CONNECTIONS: int = 10
    MAX_KEEPALIVE_CONNECTIONS: int = 5

    @classmethod
    def endpoint_for(cls, model: str | None = None) -> str:
        """Build the generateContent URL for a model."""
        return cls.GEMINI_ENDPOINT.format(model=model or cls.GEMINI_MODEL)

    @classmethod
    def is_placeholder_key(cls, api_key: str | None) -> bool:
        """Detect a missing or placeholder Gemini key."""
        return not api_key or api_key == cls.API_KEY_PLACEHOLDER

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and print warnings for missing API keys."""
        if cls.is_placeholder_key(cls.GEMINI_API_KEY):
            print("   WARNING: GEMINI_API_KEY not found in .env file")
            print("   Chat replies will ask for a key. Get one from: https://aistudio.google.com/app/apikey")

        if not cls.ACCESS_KEY:
            print("   WARNING: ACCESS_KEY not set, the /chat endpoint is open to any client")

Config.validate()
