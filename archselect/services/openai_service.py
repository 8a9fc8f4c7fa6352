"""OpenAI-compatible chat service - handles calls to /chat/completions."""
import asyncio
import logging
import os
from typing import Optional

import httpx

from archselect.exceptions import OracleError, OracleTimeoutError
from archselect.services.llm_interface import LLMServiceInterface

logger = logging.getLogger(__name__)


class OpenAIChatService(LLMServiceInterface):
    """Service for OpenAI and OpenAI-compatible chat completion APIs.

    Works against api.openai.com as well as self-hosted servers exposing the
    same ``/v1/chat/completions`` endpoint.
    """

    DEFAULT_BASE_URL = "https://api.openai.com/v1"

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = 300.0,
        retry_delay: float = 1.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url or os.getenv("OPENAI_BASE_URL", self.DEFAULT_BASE_URL)
        self.model = model or os.getenv("OPENAI_MODEL", "gpt-4")
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.retry_delay = retry_delay
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def _headers(self) -> dict:
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    async def call(
        self,
        instruction: str,
        prompt: str,
        max_retries: int = 5,
    ) -> str:
        """
        Make a chat completion call.

        Args:
            instruction: System instruction for the LLM
            prompt: User prompt/question
            max_retries: Maximum retry attempts

        Returns:
            The LLM response text
        """
        url = f"{self.base_url}/chat/completions"

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": instruction},
                {"role": "user", "content": prompt},
            ],
        }

        delay = self.retry_delay
        for attempt in range(max_retries):
            try:
                response = await self._client.post(url, json=payload, headers=self._headers())
            except (httpx.TimeoutException, httpx.RequestError) as e:
                logger.warning("Chat API error on attempt %d: %s", attempt + 1, e)
                if attempt < max_retries - 1:
                    await asyncio.sleep(delay)
                    delay *= 2
                    continue
                if isinstance(e, httpx.TimeoutException):
                    raise OracleTimeoutError("Chat API timeout after max retries") from e
                raise OracleError(f"Chat API request error: {e}") from e

            if response.status_code == 200:
                choices = response.json().get("choices", [])
                if choices:
                    return choices[0].get("message", {}).get("content", "")
                return ""
            elif response.status_code == 429:
                # Rate limited, exponential backoff
                await asyncio.sleep(delay)
                delay *= 2
            else:
                logger.error("Chat API error: %s - %s", response.status_code, response.text)
                raise OracleError(f"Error calling chat API: {response.status_code}")

        raise OracleError("Error calling chat API: Too many retries")

    async def health_check(self) -> bool:
        """Check if the server answers on /models."""
        try:
            response = await self._client.get(f"{self.base_url}/models", headers=self._headers())
            return response.status_code == 200
        except httpx.HTTPError:
            return False
