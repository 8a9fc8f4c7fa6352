"""Settings models for a decision-making run and for the LLM backend."""
import os
from enum import Enum
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator


class OptimizerMode(str, Enum):
    """Optimization mode selection."""
    ILP = "ILP"
    GREEDY = "Greedy"


class QualityWeightsMode(str, Enum):
    """How to determine quality attribute weights."""
    EQUALLY_IMPORTANT = "EquallyImportant"
    ALL_REQUIRED = "AllRequired"
    INFERRED = "Inferred"
    PROVIDED = "Provided"


class OrchestrationMode(str, Enum):
    """Which pipeline the architect runs."""
    FULL_PIPELINE = "FullPipeline"
    DIRECT = "Direct"


class ExperimentSettings(BaseModel):
    """Settings for one decision-making run."""
    system_name: str = ""
    optimization_strategy: OptimizerMode = OptimizerMode.ILP
    quality_weights_mode: QualityWeightsMode = QualityWeightsMode.INFERRED
    provided_quality_weights: Optional[Dict[str, int]] = Field(
        None,
        description="Per-attribute weights, used in Provided mode and for direct optimization",
    )
    just_run_optimization: bool = Field(
        False,
        description="Skip condition grouping and optimize once against the provided weights",
    )

    @field_validator("provided_quality_weights")
    @classmethod
    def _weights_not_negative(cls, value):
        if value is not None:
            negative = [k for k, v in value.items() if v < 0]
            if negative:
                raise ValueError(f"Quality weights must not be negative: {', '.join(negative)}")
        return value

    @model_validator(mode="after")
    def _provided_weights_present(self):
        needs_weights = (
            self.just_run_optimization
            or self.quality_weights_mode == QualityWeightsMode.PROVIDED
        )
        if needs_weights and not self.provided_quality_weights:
            raise ValueError(
                "provided_quality_weights is required in Provided mode "
                "and when just_run_optimization is set"
            )
        return self

    @property
    def orchestration_mode(self) -> OrchestrationMode:
        if self.just_run_optimization:
            return OrchestrationMode.DIRECT
        return OrchestrationMode.FULL_PIPELINE


class LLMBackend(str, Enum):
    """Supported chat completion backends."""
    OLLAMA = "ollama"
    OPENAI = "openai"


class LLMSettings(BaseModel):
    """LLM backend configuration (overrides env vars when set explicitly)."""
    backend: LLMBackend = LLMBackend.OLLAMA
    base_url: Optional[str] = Field(None, description="Server URL")
    model: Optional[str] = Field(None, description="Model name for chat")
    api_key: Optional[str] = Field(None, description="Bearer token for OpenAI-compatible servers")
    timeout: float = Field(60.0, gt=0, description="Seconds before an oracle call is abandoned")

    @classmethod
    def from_env(cls) -> "LLMSettings":
        """Build settings from the environment, reading a .env file if present."""
        load_dotenv()

        backend = LLMBackend(os.getenv("LLM_BACKEND", LLMBackend.OLLAMA.value).lower())
        if backend == LLMBackend.OPENAI:
            base_url = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
            model = os.getenv("OPENAI_MODEL", "gpt-4")
        else:
            base_url = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
            model = os.getenv("OLLAMA_MODEL", "llama3.1")

        return cls(
            backend=backend,
            base_url=base_url,
            model=model,
            api_key=os.getenv("OPENAI_API_KEY"),
            timeout=float(os.getenv("LLM_TIMEOUT", "60")),
        )
