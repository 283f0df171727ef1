"""
AI Service - Groq (OpenAI-compatible) chat completion API interactions
"""
import httpx
import logging
from typing import List, Optional

from ..config import settings
from ..exceptions import AIServiceError
from ..models import AIAction

logger = logging.getLogger(__name__)


class AIService:
    """Service for AI/LLM interactions"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = settings.groq_api_key
        self.base_url = settings.ai_base_url
        self.model = settings.ai_model
        self.temperature = settings.ai_temperature
        self.max_tokens = settings.ai_max_tokens
        self.timeout = settings.ai_timeout
        self.transport = transport

    async def chat_completion(self, messages: List[dict]) -> str:
        """
        Call the chat completion API

        Args:
            messages: List of message dicts with 'role' and 'content'

        Returns:
            First choice's content, empty string if the provider sent none
        """
        if not self.api_key:
            logger.error("Groq API key not configured")
            raise AIServiceError("Groq API key not configured")

        url = f"{self.base_url}/chat/completions"
        logger.debug(f"Calling AI API: {url}, model: {self.model}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    url,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json"
                    },
                    json={
                        "model": self.model,
                        "messages": messages,
                        "temperature": self.temperature,
                        "max_tokens": self.max_tokens,
                    }
                )

                logger.debug(f"Response status: {response.status_code}")

                if response.status_code != 200:
                    logger.error(f"API error: {response.text}")
                    response.raise_for_status()

                data = response.json()
        except httpx.HTTPStatusError as e:
            raise AIServiceError(f"HTTP error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise AIServiceError(f"Request error: {type(e).__name__} - {e}") from e
        except ValueError as e:
            raise AIServiceError(f"Malformed response body: {e}") from e

        try:
            choices = data.get("choices") or []
            message = (choices[0].get("message") or {}) if choices else {}
            content = message.get("content") or ""
        except (AttributeError, TypeError, KeyError) as e:
            raise AIServiceError(f"Unexpected response shape: {e}") from e

        if not isinstance(content, str):
            raise AIServiceError(f"Unexpected content type: {type(content).__name__}")
        logger.debug(f"Response content length: {len(content)}")
        return content

    async def transform(self, action: AIAction, content: str) -> str:
        """Apply one of the fixed transforms to the given text"""
        messages = [
            {"role": "system", "content": action.instruction},
            {"role": "user", "content": content}
        ]
        return await self.chat_completion(messages)


# Singleton instance
_ai_service: Optional[AIService] = None


def get_ai_service() -> AIService:
    """Get AI service instance"""
    global _ai_service
    if _ai_service is None:
        _ai_service = AIService()
    return _ai_service
