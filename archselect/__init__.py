"""archselect - architecture pattern selection from quality requirements."""
from archselect.architect import Architect
from archselect.exceptions import (
    ArchSelectError,
    GroupingFormatError,
    MatrixError,
    OracleError,
    OracleTimeoutError,
)
from archselect.logging_config import setup_logging
from archselect.models import (
    Concern,
    ConditionGroup,
    Decision,
    ExperimentSettings,
    LLMSettings,
    Matrix,
    OptimizerMode,
    QualityWeightsMode,
    Requirement,
    SatisfiableGroup,
)

__version__ = "1.0.0"

__all__ = [
    "Architect",
    "ArchSelectError",
    "GroupingFormatError",
    "MatrixError",
    "OracleError",
    "OracleTimeoutError",
    "setup_logging",
    "Concern",
    "ConditionGroup",
    "Decision",
    "ExperimentSettings",
    "LLMSettings",
    "Matrix",
    "OptimizerMode",
    "QualityWeightsMode",
    "Requirement",
    "SatisfiableGroup",
]
