"""Reporting service - collects the textual run report."""
import logging
from datetime import datetime
from typing import List, Dict, Optional

from archselect.models.concern import Concern
from archselect.models.requirement import Requirement

logger = logging.getLogger(__name__)


class ReportingService:
    """Collects report lines; every method is safe to call with no sink attached."""

    def __init__(self, echo: bool = False):
        self.echo = echo
        self.report_lines: List[str] = []
        self.stats: Dict[str, float] = {}

    def clear(self):
        """Clear report and stats."""
        self.report_lines.clear()
        self.stats.clear()

    def writeline(self, text: str = ""):
        """Add a line to the report."""
        self.report_lines.append(text)
        if self.echo:
            logger.info(text)

    def record_stat(self, key: str, value: float):
        """Record a statistic."""
        self.stats[key] = value

    def text(self) -> str:
        return "\n".join(self.report_lines)

    def generate_report(
        self,
        requirements: List[Requirement],
        concerns: List[Concern],
        settings: Optional[dict] = None,
    ) -> str:
        """
        Render a complete report of a run.

        Args:
            requirements: Requirements the run was given
            concerns: Generated concerns with decisions
            settings: Optional experiment settings

        Returns:
            Formatted report string
        """
        self.report_lines.clear()

        self.writeline("=" * 60)
        self.writeline("Architectural Decision Report")
        self.writeline("=" * 60)
        self.writeline(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        self.writeline()

        if settings:
            self.writeline("Settings:")
            self.writeline("-" * 40)
            for key, value in settings.items():
                self.writeline(f"  {key}: {value}")
            self.writeline()

        self.writeline("Requirements")
        self.writeline("-" * 40)
        for req in requirements:
            self.writeline(f"R{req.id}: {req.description}")
            self.writeline(f"  Quality Attributes: {', '.join(req.quality_attributes)}")
            self.writeline(f"  Condition: {req.condition_text}")
        self.writeline()

        self.writeline("=" * 60)
        self.writeline("Concerns")
        self.writeline("=" * 60)

        for i, concern in enumerate(concerns, 1):
            title = f"Concern {i}" + (" (global)" if concern.is_global else "")
            self.writeline()
            self.writeline(title)
            self.writeline("-" * 40)

            self.writeline("Conditions:")
            for condition in concern.conditions:
                self.writeline(f"  - {condition}")
            self.writeline()

            self.writeline("Desired Qualities (weight):")
            sorted_qualities = sorted(
                concern.desired_qualities.items(),
                key=lambda x: x[1],
                reverse=True
            )
            for quality, weight in sorted_qualities:
                self.writeline(f"  - {quality}: {weight}")
            self.writeline()

            if not concern.has_solution:
                self.writeline("No optimal solution found.")
                continue

            self.writeline(f"Average Decision Score: {concern.average_score:.2f}")
            self.writeline()
            self.writeline("Decisions:")
            for decision in concern.decisions:
                self.writeline(f"\n  {decision.arch_pattern_name}:")
                self.writeline(f"    Selected: {decision.selected_pattern}")
                self.writeline(f"    Score: {decision.score}")

                if decision.satisfied_qualities:
                    sat_str = ", ".join(
                        f"{q}({s})" for q, s in decision.satisfied_qualities
                    )
                    self.writeline(f"    Satisfies: {sat_str}")

                if decision.unsatisfied_qualities:
                    unsat_str = ", ".join(
                        f"{q}({s})" for q, s in decision.unsatisfied_qualities
                    )
                    self.writeline(f"    Tradeoffs: {unsat_str}")

            nonzero = {k: v for k, v in concern.satisfaction_scores.items() if v != 0}
            if nonzero:
                self.writeline()
                self.writeline("Satisfaction Scores:")
                for quality, score in nonzero.items():
                    self.writeline(f"  - {quality}: {score}")

        if self.stats:
            self.writeline()
            self.writeline("=" * 60)
            self.writeline("Statistics")
            self.writeline("-" * 40)
            for key, value in self.stats.items():
                self.writeline(f"  {key}: {value}")

        self.writeline()
        self.writeline("=" * 60)
        self.writeline("End of Report")
        self.writeline("=" * 60)

        return self.text()

    def to_dict(self) -> dict:
        """Convert report to dictionary format."""
        return {
            "report": self.text(),
            "stats": self.stats,
        }
