"""
Fixed Factor Scorer — SCL-90
psyscore/scoring/fixed_factor_scorer.py

Scores the 90-item SCL-90 against the frozen factor table in factor_table.py.

Pipeline:
    validate (exactly 90 answers, ordinals 1..90, values in [1, 5])
      → reverse-score (6 − raw unless option metadata says otherwise)
      → total / total mean / positive items
      → 10 factor buckets vs. normative means
      → severity from total mean, z-score vs. national norm, guidance

Severity (total mean):
    < 1.5        normal
    [1.5, 2.0)   mild
    [2.0, 3.0)   moderate
    ≥ 3.0        severe

Any malformed input fails the whole call; no partial or padded result.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Optional

import structlog

from psyscore.core.exceptions import AnswerValidationError, IncompleteAnswersError
from psyscore.models.enumerations import SeverityLevel
from psyscore.models.scoring import ItemMetadata
from psyscore.scoring.factor_table import (
    NATIONAL_NORM_MEAN,
    NATIONAL_NORM_SD,
    SCL90_FACTORS,
    SCL90_ITEM_COUNT,
    SCL90_MAX_VALUE,
    SCL90_ORDINALS,
)
from psyscore.scoring.interpretation import SeverityInfo
from psyscore.scoring.normalizer import AnswerNormalizer
from psyscore.scoring.utils import mean, round_half_up

logger = structlog.get_logger(__name__)

SCALE_NAME = "SCL-90"

POSITIVE_ITEM_THRESHOLD = 2
HIGH_FACTOR_MEAN = 2.0

SEVERITY_DESCRIPTIONS: Dict[str, str] = {
    SeverityLevel.NORMAL.value: "Psychological state is good; all indicators are within the normal range",
    SeverityLevel.MILD.value: "Some mild psychological distress is present; appropriate adjustment is advised",
    SeverityLevel.MODERATE.value: "Moderate psychological distress is present; seeking professional help is advised",
    SeverityLevel.SEVERE.value: "Considerable psychological distress is present; seeking professional help is strongly advised",
}

SEVERITY_SUGGESTIONS: Dict[str, List[str]] = {
    SeverityLevel.NORMAL.value: [
        "Your results indicate a good psychological state",
        "Keep up a healthy lifestyle and a positive outlook",
        "Continue to pay attention to your mental health",
    ],
    SeverityLevel.MILD.value: [
        "Your results suggest some mild psychological distress",
        "Try self-regulation such as exercise or meditation",
        "If symptoms persist, consult a mental health professional",
    ],
    SeverityLevel.MODERATE.value: [
        "Your results suggest moderate psychological distress",
        "Professional counselling or psychotherapy is strongly recommended",
        "Adjust your pace of life and make sure you get enough sleep and rest",
    ],
    SeverityLevel.SEVERE.value: [
        "Your results suggest considerable psychological distress",
        "Please seek professional mental health services promptly",
        "A psychiatric consultation may be appropriate",
        "Do not face this alone; reach out to family and friends for support",
    ],
}


@dataclass
class FactorScore:
    """Score of one SCL-90 factor."""
    name: str
    name_zh: str
    description: str
    total_score: float
    mean_score: float       # rounded to 0.01
    question_count: int
    norm_mean: float
    above_norm: bool        # unrounded factor mean > norm_mean


@dataclass
class NormComparison:
    national_norm_mean: float
    national_norm_sd: float
    above_norm: bool
    z_score: float          # rounded to 0.01


@dataclass
class FixedFactorResult:
    """Output of FixedFactorScorer.score()."""
    total_score: float
    mean_score: float                        # total mean rounded to 0.01
    total_mean: float                        # total_score / 90, unrounded
    question_count: int
    positive_item_count: int
    positive_symptom_mean: float
    factor_scores: Dict[str, FactorScore]
    severity: str
    severity_info: SeverityInfo
    dimension_scores: Dict[str, float]       # factor key → rounded mean
    norm_comparison: NormComparison
    recommendations: List[str] = field(default_factory=list)
    used_reverse_scoring: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def assess_severity(total_mean: float) -> str:
    if total_mean < 1.5:
        return SeverityLevel.NORMAL.value
    elif total_mean < 2.0:
        return SeverityLevel.MILD.value
    elif total_mean < 3.0:
        return SeverityLevel.MODERATE.value
    return SeverityLevel.SEVERE.value


def build_recommendations(severity: str, factor_scores: Mapping[str, FactorScore]) -> List[str]:
    """Severity guidance plus a note on factors that are both above norm and high."""
    recommendations = list(SEVERITY_SUGGESTIONS.get(severity, []))

    high_factors = [
        factor.name
        for factor in factor_scores.values()
        if factor.above_norm and factor.mean_score >= HIGH_FACTOR_MEAN
    ]
    if high_factors:
        recommendations.append(f"Pay particular attention to: {', '.join(high_factors)}")

    return recommendations


def parse_ordinal(key: Hashable) -> int:
    """Parse an answer key ("12" or 12) to an item ordinal."""
    if isinstance(key, bool):
        raise AnswerValidationError(f"Item key {key!r} is not an item number", item=key)
    if isinstance(key, int):
        return key
    try:
        return int(str(key).strip())
    except ValueError:
        raise AnswerValidationError(f"Item key {key!r} is not an item number", item=key)


class FixedFactorScorer:
    """Calculate SCL-90 total, factor and severity scores."""

    def __init__(self):
        self._normalizer = AnswerNormalizer(point_count=SCL90_MAX_VALUE, strict=True)

    def _validate_answers(self, answers: Mapping[Hashable, float]) -> Dict[int, float]:
        """Enforce exactly 90 answers keyed 1..90 with values in [1, 5]."""
        if len(answers) != SCL90_ITEM_COUNT:
            raise IncompleteAnswersError(SCALE_NAME, SCL90_ITEM_COUNT, len(answers))

        ordinal_answers: Dict[int, float] = {}
        for key, raw in answers.items():
            ordinal = parse_ordinal(key)
            if ordinal in ordinal_answers:
                raise AnswerValidationError(f"Duplicate answer for item {ordinal}", item=ordinal)
            if ordinal not in SCL90_ORDINALS:
                raise AnswerValidationError(
                    f"Item {ordinal} is outside the {SCALE_NAME} item range 1-{SCL90_ITEM_COUNT}",
                    item=ordinal,
                    expected=(1, SCL90_ITEM_COUNT),
                    actual=ordinal,
                )
            self._normalizer.check_range(ordinal, raw)
            ordinal_answers[ordinal] = raw

        return ordinal_answers

    @staticmethod
    def _index_by_ordinal(
        questions: Optional[Mapping[str, ItemMetadata]],
    ) -> Optional[Dict[int, ItemMetadata]]:
        """Re-key item metadata by order_num; the first item seen for an ordinal wins."""
        if questions is None:
            return None
        index: Dict[int, ItemMetadata] = {}
        for item in questions.values():
            if item.order_num is not None:
                index.setdefault(item.order_num, item)
        return index

    def score(
        self,
        answers: Mapping[Hashable, float],
        questions: Optional[Mapping[str, ItemMetadata]] = None,
    ) -> FixedFactorResult:
        """
        Args:
            answers: Item ordinal (int or numeric string) → raw value in [1, 5].
            questions: Optional item metadata keyed by item id; matched to answers
                       through `order_num` and used for reverse scoring only.

        Returns:
            FixedFactorResult with totals, factor breakdown, severity and norm comparison.

        Raises:
            IncompleteAnswersError: answer count differs from 90.
            AnswerValidationError: bad key, duplicate ordinal, or value out of range.

        Examples:
            >>> result = FixedFactorScorer().score({i: 1 for i in range(1, 91)})
            >>> result.total_score, result.severity
            (90, 'normal')
        """
        ordinal_answers = self._validate_answers(answers)
        normalized = self._normalizer.normalize(ordinal_answers, self._index_by_ordinal(questions))
        adjusted = normalized.values

        total_score = sum(adjusted.values())
        total_mean = total_score / SCL90_ITEM_COUNT

        positive_items = [v for v in adjusted.values() if v >= POSITIVE_ITEM_THRESHOLD]
        positive_mean = mean(positive_items)

        factor_scores: Dict[str, FactorScore] = {}
        dimension_scores: Dict[str, float] = {}
        for factor in SCL90_FACTORS:
            factor_total = sum(adjusted[ordinal] for ordinal in factor.item_ordinals)
            factor_mean = factor_total / factor.item_count
            factor_scores[factor.key] = FactorScore(
                name=factor.name,
                name_zh=factor.name_zh,
                description=factor.description,
                total_score=factor_total,
                mean_score=round_half_up(factor_mean),
                question_count=factor.item_count,
                norm_mean=factor.norm_mean,
                above_norm=factor_mean > factor.norm_mean,
            )
            dimension_scores[factor.key] = round_half_up(factor_mean)

        severity = assess_severity(total_mean)
        recommendations = build_recommendations(severity, factor_scores)
        z_score = round_half_up((total_mean - NATIONAL_NORM_MEAN) / NATIONAL_NORM_SD)

        logger.info(
            "fixed_scale_scored",
            scale=SCALE_NAME,
            total_score=total_score,
            total_mean=total_mean,
            positive_item_count=len(positive_items),
            severity=severity,
            z_score=z_score,
            reversed_items=len(normalized.reversed_items),
        )

        return FixedFactorResult(
            total_score=total_score,
            mean_score=round_half_up(total_mean),
            total_mean=total_mean,
            question_count=SCL90_ITEM_COUNT,
            positive_item_count=len(positive_items),
            positive_symptom_mean=round_half_up(positive_mean),
            factor_scores=factor_scores,
            severity=severity,
            severity_info=SeverityInfo(
                level=severity,
                description=SEVERITY_DESCRIPTIONS[severity],
                suggestions=recommendations,
            ),
            dimension_scores=dimension_scores,
            norm_comparison=NormComparison(
                national_norm_mean=NATIONAL_NORM_MEAN,
                national_norm_sd=NATIONAL_NORM_SD,
                above_norm=total_mean > NATIONAL_NORM_MEAN,
                z_score=z_score,
            ),
            recommendations=list(recommendations),
            used_reverse_scoring=normalized.used_reverse_scoring,
        )
