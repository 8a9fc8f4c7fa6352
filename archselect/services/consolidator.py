"""Condition consolidator - merges requirements with equivalent conditions."""
import logging
from typing import List

from archselect.models.concern import ConditionGroup
from archselect.models.requirement import Requirement
from archselect.services.oracles import EquivalenceOracle

logger = logging.getLogger(__name__)


class ConditionConsolidator:
    """Builds condition groups by asking an oracle about equivalence.

    Requirements are visited in order. Each one joins the first existing
    group whose nominal condition the oracle judges equivalent, otherwise it
    opens a new group. Equivalence is not closed transitively.
    """

    def __init__(self, oracle: EquivalenceOracle):
        self.oracle = oracle

    async def consolidate(self, requirements: List[Requirement]) -> List[ConditionGroup]:
        groups: List[ConditionGroup] = []

        for req in requirements:
            match = None
            for group in groups:
                if await self.oracle.is_equivalent(req.condition_text, group.nominal_condition):
                    match = group
                    break

            if match is not None:
                match.requirements.append(req)
            else:
                groups.append(ConditionGroup(
                    nominal_condition=req.condition_text,
                    requirements=[req],
                ))

        logger.info(
            "Consolidated %d requirements into %d condition groups",
            len(requirements), len(groups),
        )
        return groups
