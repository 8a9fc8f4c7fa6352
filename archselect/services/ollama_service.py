"""Ollama service - handles LLM API calls."""
import asyncio
import logging
import os
from typing import Optional

import httpx

from archselect.exceptions import OracleError, OracleTimeoutError
from archselect.services.llm_interface import LLMServiceInterface

logger = logging.getLogger(__name__)


class OllamaService(LLMServiceInterface):
    """Service for communicating with Ollama API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: float = 300.0,
        retry_delay: float = 1.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url or os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
        self.model = model or os.getenv("OLLAMA_MODEL", "llama3.1")
        self.retry_delay = retry_delay
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()

    async def call(
        self,
        instruction: str,
        prompt: str,
        max_retries: int = 5,
    ) -> str:
        """
        Make a chat completion call to Ollama.

        Args:
            instruction: System instruction for the LLM
            prompt: User prompt/question
            max_retries: Maximum retry attempts

        Returns:
            The LLM response text
        """
        url = f"{self.base_url}/api/chat"

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": instruction},
                {"role": "user", "content": prompt},
            ],
            "stream": False,
        }

        delay = self.retry_delay
        for attempt in range(max_retries):
            try:
                response = await self._client.post(url, json=payload)
            except httpx.TimeoutException:
                if attempt < max_retries - 1:
                    await asyncio.sleep(delay)
                    delay *= 2
                    continue
                raise OracleTimeoutError("Ollama API timeout after max retries")
            except httpx.RequestError as e:
                logger.error("Ollama connection error for %s: %s: %s", url, type(e).__name__, e)
                raise OracleError(f"Ollama API request error: {e}") from e

            if response.status_code == 200:
                data = response.json()
                return data.get("message", {}).get("content", "")
            elif response.status_code == 429:
                # Rate limited, exponential backoff
                logger.info("Ollama rate limited, retrying in %.1fs", delay)
                await asyncio.sleep(delay)
                delay *= 2
            else:
                logger.error("Ollama error: %s - %s", response.status_code, response.text)
                raise OracleError(f"Error calling Ollama API: {response.status_code}")

        raise OracleError("Error calling Ollama API: Too many retries")

    async def health_check(self) -> bool:
        """Check if Ollama server is reachable."""
        try:
            response = await self._client.get(f"{self.base_url}/api/tags")
            return response.status_code == 200
        except httpx.HTTPError:
            return False
