"""Architect - main orchestration logic for architectural decision making."""
import logging
from typing import List, Dict, Optional, Tuple

from archselect.architect.strategies import (
    DirectOptimizationStrategy,
    FullPipelineStrategy,
    OrchestrationStrategy,
)
from archselect.models.concern import Concern, ConditionGroup, SatisfiableGroup
from archselect.models.decision import Decision
from archselect.models.matrix import Matrix
from archselect.models.requirement import Requirement
from archselect.models.settings import (
    ExperimentSettings,
    OrchestrationMode,
    QualityWeightsMode,
)
from archselect.services.consolidator import ConditionConsolidator
from archselect.services.grouper import ConcernGrouper
from archselect.services.optimizer_service import Optimizer
from archselect.services.oracles import EquivalenceOracle, GroupingOracle
from archselect.services.reporting_service import ReportingService
from archselect.services.weights import QualityWeightAggregator, normalize_weights

logger = logging.getLogger(__name__)


class Architect:
    """
    Main orchestration class for architectural decision making.

    Coordinates condition consolidation, concern grouping, weight
    aggregation and optimization to produce architectural decisions.
    The matrix is supplied by the caller and only read.
    """

    def __init__(
        self,
        matrix: Matrix,
        equivalence_oracle: EquivalenceOracle,
        grouping_oracle: GroupingOracle,
        settings: Optional[ExperimentSettings] = None,
        reporting_service: Optional[ReportingService] = None,
        optimizer: Optional[Optimizer] = None,
    ):
        self.matrix = matrix.validate()
        self.settings = settings or ExperimentSettings()
        self.consolidator = ConditionConsolidator(equivalence_oracle)
        self.grouper = ConcernGrouper(grouping_oracle)
        self.weight_aggregator = QualityWeightAggregator(matrix)
        self.optimizer = optimizer or Optimizer()
        self.reporting_service = reporting_service or ReportingService()

        self.requirements: List[Requirement] = []
        self.condition_groups: List[ConditionGroup] = []
        self.satisfiable_groups: List[SatisfiableGroup] = []
        self.concerns: List[Concern] = []

        self._strategies: Dict[OrchestrationMode, OrchestrationStrategy] = {
            OrchestrationMode.FULL_PIPELINE: FullPipelineStrategy(),
            OrchestrationMode.DIRECT: DirectOptimizationStrategy(),
        }

    async def select_arch(self, requirements: List[Requirement]) -> List[Concern]:
        """
        Produce concerns with their decisions for the given requirements.

        Args:
            requirements: Architecturally-significant requirements

        Returns:
            List of concerns; a concern without decisions had no optimal solution

        Raises:
            GroupingFormatError: the grouping oracle answered in an unusable format
            OracleTimeoutError: an oracle call timed out
        """
        self.requirements = list(requirements)
        self.concerns.clear()

        mode = self.settings.orchestration_mode
        logger.info("Selecting architecture (%s, %s)", mode.value, self.settings.optimization_strategy.value)

        strategy = self._strategies[mode]
        self.concerns = await strategy.run(self, self.requirements)
        return list(self.concerns)

    def select_decisions(
        self,
        desired_qualities: List[str],
        weights: Dict[str, int],
    ) -> Tuple[List[Decision], Dict[str, int]]:
        """Run the optimizer once and report its outcome."""
        logger.info("Finding optimal solution ...")
        decisions, satisfaction_scores = self.optimizer.optimize(
            self.settings.optimization_strategy,
            desired_qualities,
            self.matrix,
            weights,
        )

        self.reporting_service.writeline()
        self.reporting_service.writeline("Optimal Solution")
        if decisions:
            overall = (
                sum(satisfaction_scores.values()) / len(satisfaction_scores)
                if satisfaction_scores else 0.0
            )
            self.reporting_service.writeline(
                f"Optimal Solution Found! Overall Score (out of 100): {overall:.2f}"
            )
            for quality, score in satisfaction_scores.items():
                if score != 0:
                    self.reporting_service.writeline(
                        f"{quality}: {score}, (weight: {weights.get(quality, 0)})"
                    )
        else:
            self.reporting_service.writeline("No optimal Solution Found!")

        return decisions, satisfaction_scores

    def build_concern(
        self,
        satisfiable_group: SatisfiableGroup,
        global_weights: Dict[str, int],
        is_global: bool = False,
    ) -> Concern:
        """Optimize one satisfiable group into a concern.

        The desired qualities are the ones its requirements reference. In
        Inferred mode they are weighted by their own normalized tally,
        otherwise by the run-wide weights.
        """
        tally = self.weight_aggregator.concern_weights(satisfiable_group)
        desired = list(tally)

        if self.settings.quality_weights_mode == QualityWeightsMode.INFERRED:
            weights = normalize_weights(tally)
        else:
            weights = global_weights

        decisions, satisfaction_scores = self.select_decisions(desired, weights)

        return Concern(
            desired_qualities={q: weights.get(q, 0) for q in desired},
            decisions=decisions,
            satisfiable_group=satisfiable_group,
            satisfaction_scores=satisfaction_scores,
            is_global=is_global,
        )

    def generate_report(self) -> str:
        """Render the report for the last run."""
        return self.reporting_service.generate_report(
            self.requirements,
            self.concerns,
            self.settings.model_dump(mode="json"),
        )

    def get_results_summary(self) -> dict:
        """Get a summary of results."""
        return {
            "total_requirements": len(self.requirements),
            "condition_groups": len(self.condition_groups),
            "satisfiable_groups": len(self.satisfiable_groups),
            "concerns": [c.to_dict() for c in self.concerns],
        }
