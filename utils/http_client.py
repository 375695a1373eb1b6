"""
Shared HTTP client for the Gemini API.
One pooled httpx client is reused by every chat call in the process.
"""
import httpx
from config import Config


class HTTPClientManager:
    """Manages the shared httpx client with connection pooling."""

    _gemini_client: httpx.AsyncClient | None = None

    @classmethod
    def get_gemini_client(cls) -> httpx.AsyncClient:
        """
        Get or create the shared httpx client for Gemini requests.

        Features:
        - Connection pooling (reuses TCP connections across chat turns)
        - HTTP/2 multiplexing
        - Request timeout fixed at Config.REQUEST_TIMEOUT

        Returns:
            Configured httpx.AsyncClient
        """
        if cls._gemini_client is None:
            limits = httpx.Limits(
                max_connections=Config.MAX_CONNECTIONS,
                max_keepalive_connections=Config.MAX_KEEPALIVE_CONNECTIONS,
                keepalive_expiry=30.0
            )

            cls._gemini_client = httpx.AsyncClient(
                timeout=Config.REQUEST_TIMEOUT,
                headers={"User-Agent": Config.USER_AGENT},
                limits=limits,
                http2=True
            )

        return cls._gemini_client

    @classmethod
    async def close_all(cls) -> None:
        """Close the managed client and release its connections."""
        if cls._gemini_client is not None:
            await cls._gemini_client.aclose()
            cls._gemini_client = None
