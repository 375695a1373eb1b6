"""
Access-key middleware for the chat bridge.
"""
import secrets
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from config import Config
from utils.logger import app_logger


class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Checks the X-API-Key header against Config.ACCESS_KEY.
    When no access key is configured every request is let through.
    """

    EXCLUDED_PATHS = {"/", "/docs", "/openapi.json", "/redoc"}

    async def dispatch(self, request: Request, call_next):
        """
        Verify the access key before handing the request on.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from next handler or an error response
        """
        expected = Config.ACCESS_KEY
        if not expected or request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        provided = request.headers.get("X-API-Key")
        client_host = request.client.host if request.client else "unknown"

        if not provided:
            app_logger.warning(f"Unauthorized request from {client_host} - missing access key")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={
                    "detail": "Missing API key. Include 'X-API-Key' header in your request.",
                    "error": "unauthorized"
                },
                headers={"WWW-Authenticate": "ApiKey"},
            )

        if not secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
            app_logger.warning(f"Forbidden request from {client_host} - invalid access key")
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content={"detail": "Invalid API key", "error": "forbidden"},
            )

        return await call_next(request)
