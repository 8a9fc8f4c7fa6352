"""Tests for the Architect orchestration."""
import asyncio

import pytest

from archselect.architect import Architect
from archselect.exceptions import GroupingFormatError, MatrixError
from archselect.models.matrix import Matrix
from archselect.models.requirement import ANY_CIRCUMSTANCES_CONDITION, Requirement
from archselect.models.settings import ExperimentSettings, OptimizerMode, QualityWeightsMode
from archselect.services.oracles import LLMGroupingOracle
from archselect.services.reporting_service import ReportingService
from conftest import FakeEquivalenceOracle, FakeGroupingOracle, FakeLLMService


def selected(concern, category):
    return next(
        d.selected_pattern for d in concern.decisions if d.arch_pattern_name == category
    )


class NoSolutionOptimizer:
    """Stands in for a solver that never reaches an optimal solution."""

    def optimize(self, mode, desired_qualities, matrix, column_weights):
        return [], {}


class TestFullPipeline:

    @pytest.fixture
    def requirements(self):
        return [
            Requirement(description="All data is encrypted",
                        quality_attributes=["Security"]),
            Requirement(description="Respond within 200ms",
                        condition_text="when traffic is high",
                        quality_attributes=["Performance Efficiency"]),
            Requirement(description="Scale out without code changes",
                        condition_text="during peak load",
                        quality_attributes=["Performance Efficiency", "Maintainability"]),
            Requirement(description="Queue edits locally",
                        condition_text="when offline",
                        quality_attributes=["Maintainability"]),
        ]

    @pytest.fixture
    def equivalence_oracle(self):
        return FakeEquivalenceOracle(pairs=[("during peak load", "when traffic is high")])

    @pytest.fixture
    def grouping_oracle(self):
        return FakeGroupingOracle([[1, 2], [1, 3]])

    def test_concern_per_group_plus_global(
        self, sample_matrix, requirements, equivalence_oracle, grouping_oracle
    ):
        architect = Architect(sample_matrix, equivalence_oracle, grouping_oracle)

        concerns = asyncio.run(architect.select_arch(requirements))

        assert len(architect.condition_groups) == 3
        assert len(architect.satisfiable_groups) == 2
        assert len(concerns) == 3
        assert [c.is_global for c in concerns] == [False, False, True]

        peak, offline, overall = concerns
        assert peak.conditions == [ANY_CIRCUMSTANCES_CONDITION, "when traffic is high"]
        assert offline.conditions == [ANY_CIRCUMSTANCES_CONDITION, "when offline"]
        assert overall.conditions == [
            ANY_CIRCUMSTANCES_CONDITION, "when traffic is high", "when offline"
        ]

    def test_inferred_weights_are_per_concern(
        self, sample_matrix, requirements, equivalence_oracle, grouping_oracle
    ):
        architect = Architect(sample_matrix, equivalence_oracle, grouping_oracle)

        peak, offline, overall = asyncio.run(architect.select_arch(requirements))

        assert peak.desired_qualities == {
            "Security": 25, "Performance Efficiency": 50, "Maintainability": 25,
        }
        assert selected(peak, "Deployment") == "Monolith"
        assert selected(peak, "Database Management") == "NoSQL"

        assert offline.desired_qualities == {"Security": 50, "Maintainability": 50}
        assert selected(offline, "Deployment") == "Microservices"

        assert overall.desired_qualities == {
            "Security": 20, "Performance Efficiency": 40, "Maintainability": 40,
        }
        assert selected(overall, "Deployment") == "Microservices"
        assert selected(overall, "Database Management") == "NoSQL"

    def test_every_concern_decides_every_category(
        self, sample_matrix, requirements, equivalence_oracle, grouping_oracle
    ):
        architect = Architect(sample_matrix, equivalence_oracle, grouping_oracle)

        for concern in asyncio.run(architect.select_arch(requirements)):
            assert concern.has_solution
            assert [d.arch_pattern_name for d in concern.decisions] == sample_matrix.get_all_groups()

    def test_greedy_and_ilp_agree(
        self, sample_matrix, requirements, equivalence_oracle, grouping_oracle
    ):
        totals = {}
        for mode in (OptimizerMode.ILP, OptimizerMode.GREEDY):
            settings = ExperimentSettings(optimization_strategy=mode)
            architect = Architect(sample_matrix, equivalence_oracle, grouping_oracle, settings)
            concerns = asyncio.run(architect.select_arch(requirements))
            totals[mode] = [c.total_score for c in concerns]

        assert totals[OptimizerMode.ILP] == totals[OptimizerMode.GREEDY]

    def test_provided_weights_apply_to_concern_qualities(
        self, sample_matrix, requirements, equivalence_oracle, grouping_oracle
    ):
        settings = ExperimentSettings(
            quality_weights_mode=QualityWeightsMode.PROVIDED,
            provided_quality_weights={"Security": 3, "Maintainability": 1},
        )
        architect = Architect(sample_matrix, equivalence_oracle, grouping_oracle, settings)

        _, offline, _ = asyncio.run(architect.select_arch(requirements))

        assert offline.desired_qualities == {"Security": 75, "Maintainability": 25}
        assert selected(offline, "Deployment") == "Monolith"

    def test_universal_requirements_skip_grouping(self, sample_matrix):
        requirements = [
            Requirement(quality_attributes=["Security"]),
            Requirement(condition_text="N/A", quality_attributes=["Maintainability"]),
        ]
        grouping_oracle = FakeGroupingOracle([[1]])
        architect = Architect(sample_matrix, FakeEquivalenceOracle(), grouping_oracle)

        concerns = asyncio.run(architect.select_arch(requirements))

        assert grouping_oracle.calls == []
        assert len(architect.condition_groups) == 1
        assert len(concerns) == 2
        assert concerns[0].conditions == [ANY_CIRCUMSTANCES_CONDITION]

    def test_no_requirements(self, sample_matrix):
        equivalence_oracle = FakeEquivalenceOracle()
        architect = Architect(sample_matrix, equivalence_oracle, FakeGroupingOracle([[1]]))

        assert asyncio.run(architect.select_arch([])) == []
        assert equivalence_oracle.calls == []

    def test_grouping_format_error_is_fatal(self, sample_matrix, requirements, equivalence_oracle):
        grouping_oracle = LLMGroupingOracle(FakeLLMService(response="(1,x)"))
        architect = Architect(sample_matrix, equivalence_oracle, grouping_oracle)

        with pytest.raises(GroupingFormatError):
            asyncio.run(architect.select_arch(requirements))

    def test_no_solution_is_reported(
        self, sample_matrix, requirements, equivalence_oracle, grouping_oracle
    ):
        reporting = ReportingService()
        architect = Architect(
            sample_matrix, equivalence_oracle, grouping_oracle,
            reporting_service=reporting,
            optimizer=NoSolutionOptimizer(),
        )

        concerns = asyncio.run(architect.select_arch(requirements))

        assert all(not c.has_solution for c in concerns)
        assert all(c.satisfaction_scores == {} for c in concerns)
        assert "No optimal Solution Found!" in reporting.text()
        assert "No optimal solution found." in architect.generate_report()


class TestDirectOptimization:

    @pytest.fixture
    def settings(self):
        return ExperimentSettings(
            just_run_optimization=True,
            provided_quality_weights={"Performance Efficiency": 1, "Security": 1},
        )

    def test_skips_condition_analysis(self, sample_matrix, settings):
        equivalence_oracle = FakeEquivalenceOracle()
        grouping_oracle = FakeGroupingOracle([[1]])
        architect = Architect(sample_matrix, equivalence_oracle, grouping_oracle, settings)

        concerns = asyncio.run(architect.select_arch([
            Requirement(condition_text="when offline", quality_attributes=["Usability"]),
        ]))

        assert equivalence_oracle.calls == []
        assert grouping_oracle.calls == []
        assert len(concerns) == 1

        concern = concerns[0]
        assert concern.conditions == []
        assert concern.desired_qualities == {"Performance Efficiency": 50, "Security": 50}
        assert selected(concern, "Deployment") == "Monolith"
        assert selected(concern, "Database Management") == "NoSQL"
        assert concern.satisfaction_scores["Security"] == 100

    def test_reuses_satisfiable_groups_of_earlier_run(self, sample_matrix, settings):
        requirements = [
            Requirement(quality_attributes=["Security"]),
            Requirement(condition_text="when traffic is high", quality_attributes=["Performance Efficiency"]),
            Requirement(condition_text="when offline", quality_attributes=["Maintainability"]),
        ]
        architect = Architect(
            sample_matrix, FakeEquivalenceOracle(), FakeGroupingOracle([[1, 2], [1, 3]])
        )
        asyncio.run(architect.select_arch(requirements))

        architect.settings = settings
        concerns = asyncio.run(architect.select_arch(requirements))

        assert concerns[0].conditions == [
            ANY_CIRCUMSTANCES_CONDITION, "when traffic is high", "when offline"
        ]


class TestArchitectConstruction:

    def test_rejects_invalid_matrix(self):
        matrix = Matrix()
        matrix.set_element("Orphan", "Security", 1)

        with pytest.raises(MatrixError):
            Architect(matrix, FakeEquivalenceOracle(), FakeGroupingOracle([[1]]))

    def test_results_summary(self, sample_matrix):
        architect = Architect(sample_matrix, FakeEquivalenceOracle(), FakeGroupingOracle([[1]]))
        asyncio.run(architect.select_arch([Requirement(quality_attributes=["Security"])]))

        summary = architect.get_results_summary()

        assert summary["total_requirements"] == 1
        assert summary["condition_groups"] == 1
        assert len(summary["concerns"]) == 2
        assert summary["concerns"][0]["decisions"][0]["selected_pattern"] == "Monolith"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
