"""
Chat service containing the core chat logic.
Handles input checks, the greeting shortcut, the Gemini exchange and error classification.
"""
import asyncio
import re
from typing import Optional

import httpx

from models.chat_models import ChatResult, ClientConfig, ConversationHistory, ResponseKind, Speaker
from services.context_builder import ContextBuilder
from utils.constants import GREETING_PROMPTS, WELCOME_MESSAGE, Messages, Patterns
from utils.http_client import HTTPClientManager
from utils.json_codec import ResponseFormatError, build_request_body, extract_text_field
from utils.logger import app_logger


class ChatService:
    """
    One conversation with Gemini.

    get_response() always returns text for the user. Failures are turned into
    fixed messages and never raised to the caller. Calls on one instance are
    serialized so history appends from two requests cannot interleave.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        history: Optional[ConversationHistory] = None,
        model: Optional[str] = None,
    ):
        self.config = ClientConfig.from_config(api_key=api_key, model=model)
        self.history = history if history is not None else ConversationHistory()
        self._http_client = http_client
        self._lock = asyncio.Lock()

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Injected client, or the process-wide pooled one."""
        if self._http_client is not None:
            return self._http_client
        return HTTPClientManager.get_gemini_client()

    @staticmethod
    def is_greeting(prompt: str) -> bool:
        """Check whether the prompt is one of the greeting shortcuts."""
        return prompt.strip().lower() in GREETING_PROMPTS

    @staticmethod
    def sanitize_reply(text: str) -> str:
        """Strip bold markers and inline code ticks, and turn -/* bullets into •."""
        if not text:
            return text
        text = re.sub(Patterns.BOLD, r'\1', text, flags=re.DOTALL)
        text = re.sub(Patterns.INLINE_CODE, r'\1', text)
        text = re.sub(Patterns.DASH_BULLET, Patterns.BULLET, text, flags=re.MULTILINE)
        return re.sub(Patterns.STAR_BULLET, Patterns.BULLET, text, flags=re.MULTILINE)

    async def get_response(self, prompt: str) -> str:
        """Return the reply text for a user prompt. Never raises."""
        result = await self.get_result(prompt)
        return result.text

    async def get_result(self, prompt: str) -> ChatResult:
        """Return the reply for a user prompt along with its outcome kind."""
        if not self.config.has_usable_key:
            app_logger.warning("Gemini API key missing or placeholder, skipping request")
            return ChatResult(ResponseKind.CONFIGURATION_ERROR, Messages.KEY_REQUIRED)

        if not prompt or not prompt.strip():
            return ChatResult(ResponseKind.INPUT_ERROR, Messages.EMPTY_PROMPT)

        if self.is_greeting(prompt):
            app_logger.info("Greeting shortcut matched, returning welcome message")
            return ChatResult(ResponseKind.GREETING, WELCOME_MESSAGE)

        async with self._lock:
            self.history.append(Speaker.USER, prompt)

            try:
                return await self._exchange(prompt)
            except (httpx.TimeoutException, asyncio.TimeoutError):
                app_logger.warning(f"Gemini request timed out after {self.config.timeout}s")
                return ChatResult(ResponseKind.TIMEOUT_ERROR, Messages.TIMEOUT)
            except httpx.RequestError as e:
                message = str(e) or e.__class__.__name__
                app_logger.error(f"Gemini transport error: {message}")
                return ChatResult(ResponseKind.TRANSPORT_ERROR, Messages.NETWORK_ERROR.format(message=message))
            except Exception as e:
                message = str(e) or e.__class__.__name__
                app_logger.exception(f"Unexpected chat error: {message}")
                return ChatResult(ResponseKind.UNKNOWN_ERROR, Messages.UNEXPECTED_ERROR.format(message=message))

    def reset(self) -> int:
        """Forget the conversation. Returns the number of dropped turns."""
        dropped = self.history.clear()
        app_logger.info(f"Conversation history cleared ({dropped} turns)")
        return dropped

    async def _exchange(self, prompt: str) -> ChatResult:
        """Send the request and turn the response into a ChatResult."""
        context = ContextBuilder.build_prompt(self.history, prompt)
        body = build_request_body(context, self.config.generation)

        app_logger.info(f"Gemini request: {len(body)} chars, {len(self.history)} turns in history")

        response = await asyncio.wait_for(
            self.http_client.post(
                self.config.endpoint,
                params={"key": self.config.api_key},
                content=body.encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.config.timeout,
            ),
            timeout=self.config.timeout,
        )

        status_code = response.status_code
        response_text = response.text

        if not 200 <= status_code < 300:
            app_logger.warning(f"Gemini returned status {status_code}")
            return ChatResult(
                ResponseKind.HTTP_STATUS_ERROR,
                Messages.CONNECTION_ERROR.format(status=status_code, body=response_text),
                status_code=status_code,
            )

        try:
            reply = extract_text_field(response_text)
        except ResponseFormatError as e:
            app_logger.warning(f"Could not parse Gemini response: {e}")
            return ChatResult(ResponseKind.FORMAT_ERROR, Messages.UNEXPECTED_FORMAT, status_code=status_code)

        if not reply.strip():
            app_logger.warning("Gemini returned an empty text field")
            return ChatResult(ResponseKind.FORMAT_ERROR, Messages.NO_PROPER_RESPONSE, status_code=status_code)

        self.history.append(Speaker.ASSISTANT, reply)
        app_logger.info(f"Gemini reply: {len(reply)} chars")

        return ChatResult(ResponseKind.REPLY, reply, status_code=status_code)
