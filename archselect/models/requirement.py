"""Requirement model - a parsed, architecturally-significant requirement."""
from dataclasses import dataclass, field
from typing import List


ANY_CIRCUMSTANCES_CONDITION = "under any circumstances"


@dataclass
class MetricTrigger:
    """Represents a metric trigger condition."""
    metric: str = ""
    trigger: str = ""

    def __str__(self) -> str:
        return f"{self.metric}: {self.trigger}"


@dataclass
class Requirement:
    """A requirement as handed over by the requirement parser.

    Only ``condition_text`` and ``quality_attributes`` drive decisions;
    the rest is carried through for reporting.
    """
    _id_counter = 0

    id: int = 0
    description: str = ""
    condition_text: str = ANY_CIRCUMSTANCES_CONDITION
    quality_attributes: List[str] = field(default_factory=list)
    is_architecturally_significant: bool = True
    metric_triggers: List[MetricTrigger] = field(default_factory=list)

    def __post_init__(self):
        if self.id == 0:
            Requirement._id_counter += 1
            self.id = Requirement._id_counter
        if not self.condition_text or self.condition_text.strip().upper() == "N/A":
            self.condition_text = ANY_CIRCUMSTANCES_CONDITION

    @property
    def is_universal(self) -> bool:
        return self.condition_text == ANY_CIRCUMSTANCES_CONDITION

    def __str__(self) -> str:
        qa_str = ",".join(self.quality_attributes)
        return f"[{qa_str}]: {self.description}"

    def to_short_string(self) -> str:
        qa_str = ",".join(self.quality_attributes)
        return f"R{self.id}: [{qa_str}]"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "description": self.description,
            "condition_text": self.condition_text,
            "quality_attributes": list(self.quality_attributes),
            "is_architecturally_significant": self.is_architecturally_significant,
        }

    @classmethod
    def reset_id_counter(cls):
        """Reset the ID counter (useful for testing)."""
        cls._id_counter = 0
