"""Shared fixtures and deterministic oracle fakes."""
import asyncio
from typing import Dict, List, Optional

import pytest

from archselect.models.matrix import Matrix
from archselect.models.requirement import Requirement
from archselect.services.llm_interface import LLMServiceInterface
from archselect.services.oracles import EquivalenceOracle, GroupingOracle


class FakeEquivalenceOracle(EquivalenceOracle):
    """Equal texts and explicitly listed pairs are equivalent."""

    def __init__(self, pairs=(), always: Optional[bool] = None):
        self.pairs = {frozenset(p) for p in pairs}
        self.always = always
        self.calls = []

    async def is_equivalent(self, condition_a: str, condition_b: str) -> bool:
        self.calls.append((condition_a, condition_b))
        if self.always is not None:
            return self.always
        return condition_a == condition_b or frozenset((condition_a, condition_b)) in self.pairs


class FakeGroupingOracle(GroupingOracle):
    """Returns a canned partition."""

    def __init__(self, partitions: List[List[int]]):
        self.partitions = partitions
        self.calls = []

    async def partition(self, conditions: List[str]) -> List[List[int]]:
        self.calls.append(list(conditions))
        return self.partitions


class FakeLLMService(LLMServiceInterface):
    """Answers every call with the same text, optionally after a delay."""

    def __init__(self, response: str = "", delay: float = 0.0):
        self.response = response
        self.delay = delay
        self.calls = []

    async def call(self, instruction: str, prompt: str, max_retries: int = 5) -> str:
        self.calls.append((instruction, prompt))
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.response

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass


def make_matrix(rows: Dict[str, Dict[str, Dict[str, int]]]) -> Matrix:
    """Build a matrix from ``{category: {pattern: scores}}``."""
    matrix = Matrix()
    for group, patterns in rows.items():
        for pattern, scores in patterns.items():
            matrix.add_pattern(group, pattern, scores)
    return matrix


@pytest.fixture
def sample_matrix() -> Matrix:
    """Two categories with opposing quality trade-offs."""
    return make_matrix({
        "Deployment": {
            "Monolith": {"Performance Efficiency": 1, "Security": 1, "Maintainability": -1},
            "Microservices": {"Performance Efficiency": 0, "Security": 0, "Maintainability": 1},
        },
        "Database Management": {
            "SQL": {"Performance Efficiency": -1, "Security": -1, "Maintainability": 1},
            "NoSQL": {"Performance Efficiency": 1, "Security": 1, "Maintainability": -1},
        },
    })


@pytest.fixture
def communication_matrix() -> Matrix:
    return make_matrix({
        "Comm": {
            "Sync": {"Perf": -2, "Consistency": 5},
            "Async": {"Perf": 5, "Consistency": -2},
        },
    })


@pytest.fixture(autouse=True)
def reset_requirement_ids():
    Requirement.reset_id_counter()
    yield
