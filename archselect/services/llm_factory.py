"""Builds the configured LLM backend."""
from typing import Optional

from archselect.models.settings import LLMBackend, LLMSettings
from archselect.services.llm_interface import LLMServiceInterface
from archselect.services.ollama_service import OllamaService
from archselect.services.openai_service import OpenAIChatService


def create_llm_service(settings: Optional[LLMSettings] = None) -> LLMServiceInterface:
    """Create an LLM service for the backend named in ``settings``."""
    settings = settings or LLMSettings.from_env()

    if settings.backend == LLMBackend.OPENAI:
        return OpenAIChatService(
            base_url=settings.base_url,
            model=settings.model,
            api_key=settings.api_key,
            timeout=settings.timeout,
        )
    return OllamaService(
        base_url=settings.base_url,
        model=settings.model,
        timeout=settings.timeout,
    )
