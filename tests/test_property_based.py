# tests/test_property_based.py
"""
Property-Based Tests

Hypothesis tests covering:
  - FixedFactorScorer bounds, exact total mean and positive-item count
  - Factor table partition
  - Reverse-scoring involution
  - Severity monotonicity over ascending interpretation levels
  - Weight neutrality of sum vs. weighted
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from psyscore.models.scoring import (
    InterpretationConfig,
    InterpretationLevel,
    ItemMetadata,
    OptionSpec,
    ScaleConfig,
)
from psyscore.scoring.configurable_scorer import ConfigurableScorer
from psyscore.scoring.factor_table import SCL90_FACTORS
from psyscore.scoring.fixed_factor_scorer import FixedFactorScorer
from psyscore.scoring.interpretation import apply_interpretation
from psyscore.scoring.normalizer import AnswerNormalizer

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

scl90_values_st = st.lists(st.integers(min_value=1, max_value=5), min_size=90, max_size=90)

generic_answers_st = st.dictionaries(
    keys=st.text(alphabet="abcdefghij", min_size=1, max_size=4),
    values=st.integers(min_value=0, max_value=10),
    min_size=1,
    max_size=20,
)


@st.composite
def ascending_levels(draw):
    """Non-overlapping integer bands starting at 0; the last band is open-ended."""
    widths = draw(st.lists(st.integers(min_value=1, max_value=20), min_size=1, max_size=6))
    levels = []
    lower = 0
    for index, width in enumerate(widths):
        levels.append(InterpretationLevel(level=f"L{index}", range_min=lower, range_max=lower + width - 1))
        lower += width
    levels.append(InterpretationLevel(level=f"L{len(widths)}", range_min=lower))
    return levels


def _level_index(label: str) -> int:
    return int(label[1:])


# ---------------------------------------------------------------------------
# Fixed scorer properties
# ---------------------------------------------------------------------------


class TestFixedScorerPropertyBased:

    @given(scl90_values_st)
    @settings(max_examples=200)
    def test_total_bounded_and_mean_exact(self, values):
        answers = {str(i + 1): v for i, v in enumerate(values)}
        result = FixedFactorScorer().score(answers)

        assert 90 <= result.total_score <= 450
        assert result.total_mean == result.total_score / 90

    @given(scl90_values_st)
    @settings(max_examples=200)
    def test_positive_item_count(self, values):
        answers = {i + 1: v for i, v in enumerate(values)}
        result = FixedFactorScorer().score(answers)

        assert result.positive_item_count == sum(1 for v in values if v >= 2)

    @given(scl90_values_st)
    @settings(max_examples=100)
    def test_factor_totals_sum_to_total(self, values):
        answers = {i + 1: v for i, v in enumerate(values)}
        result = FixedFactorScorer().score(answers)

        assert sum(f.total_score for f in result.factor_scores.values()) == result.total_score

    def test_factor_table_partitions_items(self):
        ordinals = [o for factor in SCL90_FACTORS for o in factor.item_ordinals]

        assert len(SCL90_FACTORS) == 10
        assert len(ordinals) == len(set(ordinals))
        assert set(ordinals) == set(range(1, 91))


# ---------------------------------------------------------------------------
# Normalizer properties
# ---------------------------------------------------------------------------


class TestReversePropertyBased:

    @given(st.integers(min_value=1, max_value=5))
    @settings(max_examples=50)
    def test_default_rule_involution(self, raw):
        normalizer = AnswerNormalizer()
        assert normalizer.reverse_value(normalizer.reverse_value(raw)) == raw

    @given(st.integers(min_value=2, max_value=11), st.data())
    @settings(max_examples=200)
    def test_option_rule_involution(self, point_count, data):
        item = ItemMetadata(
            reverse_scored=True,
            options=[OptionSpec(value=v) for v in range(1, point_count + 1)],
        )
        raw = data.draw(st.integers(min_value=1, max_value=point_count))
        normalizer = AnswerNormalizer()

        once = normalizer.reverse_value(raw, item)
        assert 1 <= once <= point_count
        assert normalizer.reverse_value(once, item) == raw


# ---------------------------------------------------------------------------
# Interpretation and configurable scorer properties
# ---------------------------------------------------------------------------


class TestConfigurablePropertyBased:

    @given(
        ascending_levels(),
        st.integers(min_value=0, max_value=200),
        st.integers(min_value=1, max_value=200),
    )
    @settings(max_examples=300)
    def test_severity_monotone(self, levels, low, delta):
        config = InterpretationConfig(levels=levels)
        low_index = _level_index(apply_interpretation(low, config).level)
        high_index = _level_index(apply_interpretation(low + delta, config).level)

        assert high_index >= low_index

    @given(generic_answers_st)
    @settings(max_examples=200)
    def test_weight_neutrality(self, answers):
        questions = {key: ItemMetadata(weight=1.0) for key in answers}
        scorer = ConfigurableScorer(default_method="sum")

        by_sum = scorer.score(answers, ScaleConfig(method="sum"), questions)
        by_weight = scorer.score(answers, ScaleConfig(method="weighted"), questions)

        assert by_sum.final_score == by_weight.final_score

    @given(generic_answers_st)
    @settings(max_examples=200)
    def test_mean_uses_item_count(self, answers):
        result = ConfigurableScorer(default_method="sum").score(answers)
        expected = sum(answers.values()) / len(answers)

        assert abs(result.mean_score - expected) <= 0.005 + 1e-9
