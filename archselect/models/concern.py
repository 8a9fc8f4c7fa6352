"""Concern model - a consistent scenario and the decisions made for it."""
from dataclasses import dataclass, field
from typing import List, Dict, TYPE_CHECKING

from archselect.models.requirement import ANY_CIRCUMSTANCES_CONDITION

if TYPE_CHECKING:
    from archselect.models.decision import Decision
    from archselect.models.requirement import Requirement


@dataclass
class ConditionGroup:
    """Groups requirements with equivalent conditions."""
    nominal_condition: str = ""
    requirements: List["Requirement"] = field(default_factory=list)

    @property
    def is_universal(self) -> bool:
        return self.nominal_condition == ANY_CIRCUMSTANCES_CONDITION


@dataclass
class SatisfiableGroup:
    """Groups condition groups that can be true simultaneously."""
    condition_groups: List[ConditionGroup] = field(default_factory=list)

    @property
    def requirements(self) -> List["Requirement"]:
        return [req for cg in self.condition_groups for req in cg.requirements]


@dataclass
class Concern:
    """Represents a concern with decisions for a satisfiable group.

    ``desired_qualities`` holds the normalized weights the optimizer ran
    with. An empty ``decisions`` list means the solver found no optimal
    solution for this concern.
    """
    desired_qualities: Dict[str, int] = field(default_factory=dict)
    decisions: List["Decision"] = field(default_factory=list)
    satisfiable_group: SatisfiableGroup = field(default_factory=SatisfiableGroup)
    satisfaction_scores: Dict[str, int] = field(default_factory=dict)
    is_global: bool = False

    @property
    def conditions(self) -> List[str]:
        """Get list of nominal conditions."""
        return [cg.nominal_condition for cg in self.satisfiable_group.condition_groups]

    @property
    def has_solution(self) -> bool:
        return bool(self.decisions)

    @property
    def average_score(self) -> float:
        """Calculate average decision score."""
        if not self.decisions:
            return 0.0
        return sum(d.score for d in self.decisions) / len(self.decisions)

    @property
    def total_score(self) -> int:
        """Calculate total decision score."""
        return sum(d.score for d in self.decisions)

    def __str__(self) -> str:
        conditions_str = "\n".join(self.conditions)
        qualities_str = ",".join(
            f"{k}:{v}" for k, v in sorted(
                self.desired_qualities.items(),
                key=lambda x: x[1],
                reverse=True
            )
        )
        if not self.has_solution:
            decisions_str = "No optimal solution found."
        else:
            decisions_str = "\n".join(str(d) for d in self.decisions)

        return (
            f"Conditions:\n{conditions_str}\n\n"
            f"Desired Qualities:{qualities_str}\n\n"
            f"Average Decision Score (Max 100): {self.average_score:.2f}\n\n"
            f"Decisions:\n{decisions_str}"
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "conditions": self.conditions,
            "is_global": self.is_global,
            "desired_qualities": self.desired_qualities,
            "has_solution": self.has_solution,
            "average_score": self.average_score,
            "total_score": self.total_score,
            "satisfaction_scores": self.satisfaction_scores,
            "decisions": [d.to_dict() for d in self.decisions],
        }
