"""Quality weight aggregation and normalization."""
import logging
from typing import Dict, Iterable, Optional

from archselect.models.concern import SatisfiableGroup
from archselect.models.matrix import Matrix
from archselect.models.requirement import Requirement
from archselect.models.settings import QualityWeightsMode

logger = logging.getLogger(__name__)


def count_quality_references(requirements: Iterable[Requirement]) -> Dict[str, int]:
    """Count how many times each quality attribute is referenced."""
    weights: Dict[str, int] = {}
    for req in requirements:
        for quality in req.quality_attributes:
            weights[quality] = weights.get(quality, 0) + 1
    return weights


def normalize_weights(weights: Dict[str, int]) -> Dict[str, int]:
    """Normalize weights to integer percentages.

    Uses truncating division, so the result may sum to less than 100 but
    never more. A zero total maps every attribute to 0.
    """
    total = sum(weights.values())
    if total == 0:
        return {k: 0 for k in weights}

    return {k: (v * 100) // total for k, v in weights.items()}


class QualityWeightAggregator:
    """Derives raw quality attribute weights for a run or a single concern."""

    def __init__(self, matrix: Matrix):
        self.matrix = matrix

    def global_weights(
        self,
        mode: QualityWeightsMode,
        requirements: Iterable[Requirement],
        provided_weights: Optional[Dict[str, int]] = None,
    ) -> Dict[str, int]:
        """Calculate run-wide quality attribute weights based on mode."""
        if mode == QualityWeightsMode.EQUALLY_IMPORTANT:
            return {quality: 1 for quality in self.matrix.get_all_qualities()}

        if mode == QualityWeightsMode.ALL_REQUIRED:
            # No weights are inferred; every row scores zero
            logger.info("AllRequired mode: no quality weights inferred")
            return {}

        if mode == QualityWeightsMode.INFERRED:
            return count_quality_references(requirements)

        if mode == QualityWeightsMode.PROVIDED:
            if not provided_weights:
                raise ValueError("Provided quality weights mode requires provided_weights")
            return dict(provided_weights)

        raise ValueError(f"Unsupported quality weights mode: {mode}")

    def concern_weights(self, satisfiable_group: SatisfiableGroup) -> Dict[str, int]:
        """Tally quality references across the requirements of one concern."""
        return count_quality_references(satisfiable_group.requirements)
