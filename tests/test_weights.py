"""Tests for quality weight aggregation and normalization."""
import pytest

from archselect.models.concern import ConditionGroup, SatisfiableGroup
from archselect.models.requirement import Requirement
from archselect.models.settings import QualityWeightsMode
from archselect.services.weights import (
    QualityWeightAggregator,
    count_quality_references,
    normalize_weights,
)


class TestNormalizeWeights:

    def test_percentages(self):
        assert normalize_weights({"A": 1, "B": 1, "C": 2}) == {"A": 25, "B": 25, "C": 50}

    def test_truncation_never_exceeds_100(self):
        normalized = normalize_weights({"A": 1, "B": 1, "C": 1})

        assert normalized == {"A": 33, "B": 33, "C": 33}
        assert sum(normalized.values()) <= 100

    def test_zero_total(self):
        """A zero total maps every attribute to zero instead of dividing by zero."""
        assert normalize_weights({"A": 0, "B": 0}) == {"A": 0, "B": 0}
        assert normalize_weights({}) == {}


class TestQualityWeightAggregator:

    @pytest.fixture
    def requirements(self):
        return [
            Requirement(quality_attributes=["Security", "Performance Efficiency"]),
            Requirement(quality_attributes=["Security"]),
            Requirement(quality_attributes=[]),
        ]

    def test_count_quality_references(self, requirements):
        assert count_quality_references(requirements) == {
            "Security": 2,
            "Performance Efficiency": 1,
        }

    def test_equally_important_uses_every_matrix_column(self, sample_matrix, requirements):
        weights = QualityWeightAggregator(sample_matrix).global_weights(
            QualityWeightsMode.EQUALLY_IMPORTANT, requirements
        )
        assert weights == {
            "Performance Efficiency": 1,
            "Security": 1,
            "Maintainability": 1,
        }

    def test_all_required_infers_nothing(self, sample_matrix, requirements):
        weights = QualityWeightAggregator(sample_matrix).global_weights(
            QualityWeightsMode.ALL_REQUIRED, requirements
        )
        assert weights == {}

    def test_inferred_tallies_all_requirements(self, sample_matrix, requirements):
        weights = QualityWeightAggregator(sample_matrix).global_weights(
            QualityWeightsMode.INFERRED, requirements
        )
        assert weights == {"Security": 2, "Performance Efficiency": 1}

    def test_provided_weights_are_copied(self, sample_matrix, requirements):
        provided = {"Security": 5}
        weights = QualityWeightAggregator(sample_matrix).global_weights(
            QualityWeightsMode.PROVIDED, requirements, provided
        )

        assert weights == provided
        assert weights is not provided

    def test_provided_mode_without_weights(self, sample_matrix, requirements):
        with pytest.raises(ValueError):
            QualityWeightAggregator(sample_matrix).global_weights(
                QualityWeightsMode.PROVIDED, requirements
            )

    def test_concern_weights_only_count_the_concern(self, sample_matrix, requirements):
        group = SatisfiableGroup(condition_groups=[
            ConditionGroup(nominal_condition="when traffic is high", requirements=requirements[1:]),
        ])
        aggregator = QualityWeightAggregator(sample_matrix)

        assert aggregator.concern_weights(group) == {"Security": 1}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
