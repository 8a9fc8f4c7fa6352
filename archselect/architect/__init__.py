"""Architect package - orchestration of the decision pipeline."""
from archselect.architect.architect import Architect
from archselect.architect.strategies import (
    DirectOptimizationStrategy,
    FullPipelineStrategy,
    OrchestrationStrategy,
)

__all__ = [
    "Architect",
    "DirectOptimizationStrategy",
    "FullPipelineStrategy",
    "OrchestrationStrategy",
]
