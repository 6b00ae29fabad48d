# tests/test_configurable_scorer.py

"""
Configurable Scorer Tests - weights, reverse scoring, methods, dimensions, interpretation
"""

import pytest

from psyscore.models.scoring import (
    DimensionDefinition,
    InterpretationConfig,
    ItemMetadata,
    ScaleConfig,
)
from psyscore.scoring.configurable_scorer import ConfigurableScorer

from tests.conftest import five_point_options


@pytest.fixture
def scorer():
    return ConfigurableScorer(default_method="sum")


# =============================================================================
# AGGREGATION METHODS
# =============================================================================


class TestScoringMethods:

    def test_weighted_scenario(self, scorer, weighted_answers, weighted_questions):
        """Scenario C: 2·1 + 3·2 + 4·1 = 12, mean 12 / 3 = 4.0."""
        result = scorer.score(weighted_answers, ScaleConfig(method="weighted"), weighted_questions)

        assert result.total_score == 12
        assert result.final_score == 12
        assert result.mean_score == 4.0
        assert result.total_weight == 4.0
        assert result.question_count == 3
        assert result.scoring_method == "weighted"
        assert result.used_weights is True
        assert result.used_reverse_scoring is False

    def test_sum_applies_weights_too(self, scorer, weighted_answers, weighted_questions):
        result = scorer.score(weighted_answers, ScaleConfig(method="sum"), weighted_questions)
        assert result.final_score == 12

    def test_average_divides_by_total_weight(self, scorer, weighted_answers, weighted_questions):
        result = scorer.score(weighted_answers, ScaleConfig(method="average"), weighted_questions)

        assert result.final_score == 3.0
        assert result.mean_score == 4.0
        assert result.average_score == 4.0
        assert result.total_mean == 4.0

    def test_average_zero_weight(self, scorer):
        questions = {"a": ItemMetadata(weight=0), "b": ItemMetadata(weight=0)}
        result = scorer.score({"a": 3, "b": 4}, ScaleConfig(method="average"), questions)

        assert result.total_score == 0
        assert result.final_score == 0
        assert result.total_weight == 0

    def test_unknown_method_falls_back_to_sum(self, scorer, weighted_answers, weighted_questions):
        result = scorer.score(weighted_answers, ScaleConfig(method="median"), weighted_questions)

        assert result.final_score == 12
        assert result.scoring_method == "median"

    @pytest.mark.parametrize("method", ["AVERAGE", "Average", " average"])
    def test_method_name_must_match_exactly(self, scorer, weighted_answers, weighted_questions, method):
        result = scorer.score(weighted_answers, ScaleConfig(method=method), weighted_questions)

        assert result.final_score == 12
        assert result.scoring_method == method

    def test_default_method(self, scorer, weighted_answers, weighted_questions):
        result = scorer.score(weighted_answers, None, weighted_questions)
        assert result.scoring_method == "sum"
        assert result.final_score == 12

    def test_missing_metadata_items_weigh_one(self, scorer):
        questions = {"a": ItemMetadata(weight=3)}
        result = scorer.score({"a": 2, "b": 2}, ScaleConfig(method="average"), questions)

        assert result.total_score == 8
        assert result.total_weight == 4
        assert result.final_score == 2.0
        assert result.mean_score == 4.0


# =============================================================================
# SIMPLIFIED MODE
# =============================================================================


class TestSimplifiedMode:
    """No item metadata: plain sum, nothing reversed or weighted."""

    def test_plain_sum(self, scorer):
        result = scorer.score({"a": 2, "b": 3, "c": 4}, ScaleConfig(method="average"))

        assert result.total_score == 9
        assert result.final_score == 9
        assert result.mean_score == 3.0
        assert result.used_weights is False
        assert result.used_reverse_scoring is False
        assert result.total_weight is None
        assert result.dimension_scores == {}
        assert result.dimension_strategy is None

    def test_dimension_config_ignored_without_metadata(self, scorer):
        result = scorer.score(
            {"1": 2, "2": 3},
            dimension_config=[DimensionDefinition(name="d", questions=[1, 2])],
        )
        assert result.dimension_scores == {}

    def test_no_answers(self, scorer):
        result = scorer.score({})
        assert result.total_score == 0
        assert result.mean_score == 0
        assert result.question_count == 0


# =============================================================================
# REVERSE SCORING & PERMISSIVENESS
# =============================================================================


class TestReverseScoring:

    def test_reverse_with_options(self, scorer):
        """Scenario D through the scorer: raw 2 on a 1..5 item → 4."""
        questions = {"q": ItemMetadata(reverse_scored=True, options=five_point_options())}
        result = scorer.score({"q": 2}, ScaleConfig(method="sum"), questions)

        assert result.total_score == 4
        assert result.used_reverse_scoring is True

    def test_reverse_then_weight(self, scorer):
        questions = {"q": ItemMetadata(reverse_scored=True, weight=2)}
        result = scorer.score({"q": 1}, ScaleConfig(method="weighted"), questions)
        assert result.total_score == 10

    def test_out_of_range_accepted(self, scorer):
        questions = {"q": ItemMetadata(options=five_point_options())}
        result = scorer.score({"q": 99}, None, questions)
        assert result.total_score == 99


# =============================================================================
# DIMENSIONS & INTERPRETATION
# =============================================================================


class TestDimensionsAndInterpretation:

    def test_implicit_dimensions(self, scorer, tagged_answers, tagged_questions):
        result = scorer.score(tagged_answers, None, tagged_questions)

        assert result.dimension_strategy == "implicit"
        assert set(result.dimension_scores) == {"mood", "sleep"}
        # q6 reversed (2 → 4) in the total, raw in the dimension breakdown
        assert result.total_score == 16
        assert result.dimension_scores["sleep"].total == 9

    def test_explicit_dimensions(self, scorer, tagged_answers, tagged_questions):
        result = scorer.score(
            tagged_answers,
            None,
            tagged_questions,
            dimension_config=[DimensionDefinition(name="core", questions=[1, 4])],
        )
        assert result.dimension_strategy == "explicit"
        assert list(result.dimension_scores) == ["core"]
        assert result.dimension_scores["core"].total == 4

    def test_configured_levels_use_final_score(self, scorer, weighted_answers, weighted_questions, severity_levels):
        config = InterpretationConfig(**severity_levels)
        result = scorer.score(weighted_answers, ScaleConfig(method="weighted"), weighted_questions, config)

        assert result.severity == "mild"
        assert result.severity_info.description == "Mild distress"

        averaged = scorer.score(weighted_answers, ScaleConfig(method="average"), weighted_questions, config)
        assert averaged.severity == "normal"

    def test_default_interpretation(self, scorer, weighted_answers, weighted_questions):
        result = scorer.score(weighted_answers, ScaleConfig(method="weighted"), weighted_questions)
        assert result.severity == "mild"

    def test_score_bounds_echoed(self, scorer):
        result = scorer.score({"a": 1}, ScaleConfig(method="sum", min_score=0, max_score=40))
        assert result.min_score == 0
        assert result.max_score == 40

    def test_to_dict(self, scorer, tagged_answers, tagged_questions):
        data = scorer.score(tagged_answers, None, tagged_questions).to_dict()

        assert data["dimension_scores"]["mood"]["question_count"] == 3
        assert data["severity_info"]["level"] == "mild"
