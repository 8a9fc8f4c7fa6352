"""Natural-language oracles for condition equivalence and grouping.

The consolidator and grouper only depend on the two abstract oracles, so
tests can plug in deterministic fakes while production runs go through an
LLM backend.
"""
import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import List

from archselect.exceptions import GroupingFormatError, OracleTimeoutError
from archselect.services.llm_interface import LLMServiceInterface

logger = logging.getLogger(__name__)


EQUIVALENCE_INSTRUCTIONS = (
    "If the following conditions are logically equivalent return 'True' "
    "otherwise return 'False'. Just return True or False."
)

GROUPING_INSTRUCTIONS = (
    "Task: Organize a provided set of conditions into distinct, non-contradictory "
    "groups. Once grouped, simply return the IDs of the conditions in each group "
    "enclosed in parentheses. IDs start at 1 and follow the order of the list. "
    "For instance, if there are two groups where the first group includes "
    "conditions 1 and 2, and the second group includes condition 3, your "
    "response should be formatted as ((1,2),(3)).\n"
    "1. It is possible that one condition is part of more than one group.\n"
    "2. If a condition is applicable 'under any circumstances' or always true, "
    "include it in all groups.\n"
    "Return ONLY the ID format, no other text."
)

_GROUP_BOUNDARY = re.compile(r"\)\s*,\s*\(")


def parse_grouping_response(response: str) -> List[List[int]]:
    """Parse ``((1,2),(3))`` or ``(1,2),(3)`` into ``[[1, 2], [3]]``.

    Raises:
        GroupingFormatError: if any id is not an integer.
    """
    # Remove the outermost parentheses and split into groups
    body = response.strip().strip("()")
    result = []

    for group in _GROUP_BOUNDARY.split(body):
        ids = []
        for id_str in group.split(","):
            try:
                ids.append(int(id_str.strip()))
            except ValueError:
                raise GroupingFormatError(
                    f"Invalid condition id {id_str.strip()!r} in grouping response {response!r}"
                ) from None
        result.append(ids)

    return result


class EquivalenceOracle(ABC):
    """Judges whether two condition texts describe the same situation."""

    @abstractmethod
    async def is_equivalent(self, condition_a: str, condition_b: str) -> bool:
        pass


class GroupingOracle(ABC):
    """Partitions conditions into groups that can hold at the same time."""

    @abstractmethod
    async def partition(self, conditions: List[str]) -> List[List[int]]:
        """Return groups of 1-based ids into ``conditions``."""
        pass


async def _ask(llm_service: LLMServiceInterface, instructions: str, prompt: str, timeout: float) -> str:
    try:
        return await asyncio.wait_for(llm_service.call(instructions, prompt), timeout)
    except asyncio.TimeoutError:
        raise OracleTimeoutError(f"Oracle call exceeded {timeout}s") from None


class LLMEquivalenceOracle(EquivalenceOracle):
    """Asks an LLM whether two conditions are equivalent."""

    def __init__(self, llm_service: LLMServiceInterface, timeout: float = 60.0):
        self.llm_service = llm_service
        self.timeout = timeout

    async def is_equivalent(self, condition_a: str, condition_b: str) -> bool:
        prompt = f"Condition 1: '{condition_a}'\nCondition 2: '{condition_b}'"
        response = await _ask(self.llm_service, EQUIVALENCE_INSTRUCTIONS, prompt, self.timeout)
        # Anything without a truthy token, empty text included, counts as "no"
        return "true" in (response or "").lower()


class LLMGroupingOracle(GroupingOracle):
    """Asks an LLM to partition conditions into satisfiable groups."""

    def __init__(self, llm_service: LLMServiceInterface, timeout: float = 60.0):
        self.llm_service = llm_service
        self.timeout = timeout

    async def partition(self, conditions: List[str]) -> List[List[int]]:
        prompt = f"Conditions: {json.dumps(conditions)}"
        response = await _ask(self.llm_service, GROUPING_INSTRUCTIONS, prompt, self.timeout)
        logger.debug("Grouping response: %s", response)
        return parse_grouping_response(response or "")
