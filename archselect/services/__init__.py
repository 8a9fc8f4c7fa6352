"""Services package for archselect."""
from archselect.services.llm_interface import LLMServiceInterface
from archselect.services.ollama_service import OllamaService
from archselect.services.openai_service import OpenAIChatService
from archselect.services.llm_factory import create_llm_service
from archselect.services.oracles import (
    EquivalenceOracle,
    GroupingOracle,
    LLMEquivalenceOracle,
    LLMGroupingOracle,
    parse_grouping_response,
)
from archselect.services.consolidator import ConditionConsolidator
from archselect.services.grouper import ConcernGrouper
from archselect.services.weights import (
    QualityWeightAggregator,
    count_quality_references,
    normalize_weights,
)
from archselect.services.optimizer_service import Optimizer, OptimizerMode
from archselect.services.reporting_service import ReportingService

__all__ = [
    "LLMServiceInterface",
    "OllamaService",
    "OpenAIChatService",
    "create_llm_service",
    "EquivalenceOracle",
    "GroupingOracle",
    "LLMEquivalenceOracle",
    "LLMGroupingOracle",
    "parse_grouping_response",
    "ConditionConsolidator",
    "ConcernGrouper",
    "QualityWeightAggregator",
    "count_quality_references",
    "normalize_weights",
    "Optimizer",
    "OptimizerMode",
    "ReportingService",
]
