"""Concern grouper - partitions condition groups into consistent scenarios."""
import logging
from typing import List

from archselect.exceptions import GroupingFormatError
from archselect.models.concern import ConditionGroup, SatisfiableGroup
from archselect.services.oracles import GroupingOracle

logger = logging.getLogger(__name__)


class ConcernGrouper:
    """Asks a grouping oracle which condition groups can hold together."""

    def __init__(self, oracle: GroupingOracle):
        self.oracle = oracle

    async def group(self, condition_groups: List[ConditionGroup]) -> List[SatisfiableGroup]:
        if not condition_groups:
            return []

        if all(cg.is_universal for cg in condition_groups):
            logger.info("No specific conditions; using a single implicit concern")
            return [SatisfiableGroup(condition_groups=list(condition_groups))]

        conditions = [cg.nominal_condition for cg in condition_groups]
        partitions = await self.oracle.partition(conditions)

        satisfiable_groups = []
        for ids in partitions:
            for idx in ids:
                if not 1 <= idx <= len(condition_groups):
                    raise GroupingFormatError(
                        f"Condition id {idx} out of range 1..{len(condition_groups)}"
                    )
            satisfiable_groups.append(SatisfiableGroup(
                condition_groups=[condition_groups[i - 1] for i in ids]
            ))

        logger.info(
            "Grouped %d condition groups into %d satisfiable groups",
            len(condition_groups), len(satisfiable_groups),
        )
        return satisfiable_groups
