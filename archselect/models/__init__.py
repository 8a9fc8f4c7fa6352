"""Data models for archselect."""
from archselect.models.requirement import (
    ANY_CIRCUMSTANCES_CONDITION,
    MetricTrigger,
    Requirement,
)
from archselect.models.decision import Decision
from archselect.models.concern import Concern, ConditionGroup, SatisfiableGroup
from archselect.models.matrix import Matrix
from archselect.models.settings import (
    ExperimentSettings,
    LLMBackend,
    LLMSettings,
    OptimizerMode,
    OrchestrationMode,
    QualityWeightsMode,
)

__all__ = [
    "ANY_CIRCUMSTANCES_CONDITION",
    "Requirement",
    "MetricTrigger",
    "Decision",
    "Concern",
    "ConditionGroup",
    "SatisfiableGroup",
    "Matrix",
    "ExperimentSettings",
    "LLMBackend",
    "LLMSettings",
    "OptimizerMode",
    "OrchestrationMode",
    "QualityWeightsMode",
]
