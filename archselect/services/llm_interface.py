"""Abstract LLM service interface for archselect."""
from abc import ABC, abstractmethod


class LLMServiceInterface(ABC):
    """Abstract base class defining the common LLM service interface.

    Both OllamaService and OpenAIChatService implement this interface,
    allowing the oracles to use them interchangeably.
    """

    @abstractmethod
    async def call(
        self,
        instruction: str,
        prompt: str,
        max_retries: int = 5,
    ) -> str:
        """
        Make a chat completion call to the LLM.

        Args:
            instruction: System instruction for the LLM
            prompt: User prompt/question
            max_retries: Maximum retry attempts

        Returns:
            The LLM response text
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the LLM server is reachable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        pass
