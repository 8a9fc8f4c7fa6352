"""Orchestration strategies - the two ways an Architect can run."""
import logging
from abc import ABC, abstractmethod
from typing import List, TYPE_CHECKING

from archselect.models.concern import Concern, SatisfiableGroup
from archselect.models.requirement import Requirement
from archselect.services.weights import normalize_weights

if TYPE_CHECKING:
    from archselect.architect.architect import Architect

logger = logging.getLogger(__name__)


class OrchestrationStrategy(ABC):
    """Turns requirements into concerns using an architect's collaborators."""

    @abstractmethod
    async def run(self, architect: "Architect", requirements: List[Requirement]) -> List[Concern]:
        pass


class FullPipelineStrategy(OrchestrationStrategy):
    """Consolidate conditions, group them into concerns, optimize each concern.

    Emits one concern per satisfiable group followed by a global concern
    spanning every condition group.
    """

    async def run(self, architect: "Architect", requirements: List[Requirement]) -> List[Concern]:
        if not requirements:
            logger.warning("No requirements given; nothing to decide")
            return []

        settings = architect.settings

        logger.info(">> Generating Condition Groups ...")
        architect.condition_groups = await architect.consolidator.consolidate(requirements)

        logger.info(">> Generating Satisfiable Groups ...")
        architect.satisfiable_groups = await architect.grouper.group(architect.condition_groups)

        architect.reporting_service.writeline()
        architect.reporting_service.writeline("Conditions:")
        for cg in architect.condition_groups:
            architect.reporting_service.writeline(f"- {cg.nominal_condition}")

        global_weights = normalize_weights(architect.weight_aggregator.global_weights(
            settings.quality_weights_mode,
            requirements,
            settings.provided_quality_weights,
        ))

        logger.info(">> Generating Decisions ...")
        concerns = [
            architect.build_concern(sg, global_weights)
            for sg in architect.satisfiable_groups
        ]
        concerns.append(architect.build_concern(
            SatisfiableGroup(condition_groups=list(architect.condition_groups)),
            global_weights,
            is_global=True,
        ))
        return concerns


class DirectOptimizationStrategy(OrchestrationStrategy):
    """Skip condition analysis and optimize once against the provided weights."""

    async def run(self, architect: "Architect", requirements: List[Requirement]) -> List[Concern]:
        provided = architect.settings.provided_quality_weights or {}
        weights = normalize_weights(provided)

        # Reuse whatever condition groups an earlier run has already built
        condition_groups = []
        for sg in architect.satisfiable_groups:
            for cg in sg.condition_groups:
                if not any(cg is seen for seen in condition_groups):
                    condition_groups.append(cg)

        decisions, satisfaction_scores = architect.select_decisions(list(provided), weights)

        return [Concern(
            desired_qualities=weights,
            decisions=decisions,
            satisfiable_group=SatisfiableGroup(condition_groups=condition_groups),
            satisfaction_scores=satisfaction_scores,
            is_global=True,
        )]
