"""
Configurable Scorer — generic scales
psyscore/scoring/configurable_scorer.py

Scores an arbitrary scale from caller-supplied configuration.

Modes:
    simplified — no item metadata at all: total = plain sum of raw answers,
                 no reverse scoring, no weights.
    full       — reverse-score (AnswerNormalizer), then weight each item:
                     total_score  = Σ adjusted_i × weight_i
                     total_weight = Σ weight_i            (weight defaults to 1.0)

Final score by method:
    sum, weighted → total_score
    average       → total_score / total_weight   (0 when total_weight is 0)
    unknown name  → treated as sum

mean_score is always total_score / answered item count, whatever the method.
final_score ("average") and mean_score use different denominators and are
reported side by side.

This scorer is permissive: out-of-range raw values are accepted, and missing
dimension or interpretation configuration degrades to defaults.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Hashable, Mapping, NamedTuple, Optional, Sequence

import structlog

from psyscore.config import get_settings
from psyscore.models.enumerations import ScoringMethod
from psyscore.models.scoring import (
    DimensionDefinition,
    InterpretationConfig,
    ItemMetadata,
    ScaleConfig,
)
from psyscore.scoring.dimensions import DimensionScore, select_dimension_strategy
from psyscore.scoring.interpretation import SeverityInfo, apply_interpretation
from psyscore.scoring.normalizer import DEFAULT_POINT_COUNT, AnswerNormalizer
from psyscore.scoring.utils import round_half_up, safe_divide

logger = structlog.get_logger(__name__)


@dataclass
class ConfigurableResult:
    """Output of ConfigurableScorer.score()."""
    total_score: float                 # rounded to 0.01
    final_score: float                 # per scoring method, rounded to 0.01
    mean_score: float                  # total_score / question_count, rounded to 0.01
    question_count: int
    average_score: float               # alias of mean_score
    total_mean: float                  # alias of mean_score
    severity: str
    severity_info: SeverityInfo
    dimension_scores: Dict[str, DimensionScore] = field(default_factory=dict)
    scoring_method: str = ScoringMethod.SUM.value
    used_weights: bool = False
    used_reverse_scoring: bool = False
    total_weight: Optional[float] = None
    dimension_strategy: Optional[str] = None
    min_score: Optional[float] = None
    max_score: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class _Totals(NamedTuple):
    total_score: float
    final_score: float
    total_weight: Optional[float]
    used_reverse_scoring: bool


class ConfigurableScorer:
    """Calculate a generic scale score from weights, reverse flags and levels."""

    def __init__(
        self,
        point_count: int = DEFAULT_POINT_COUNT,
        default_method: Optional[str] = None,
    ):
        self._normalizer = AnswerNormalizer(point_count=point_count, strict=False)
        self.default_method = default_method or get_settings().DEFAULT_SCORING_METHOD

    def resolve_method(self, requested: Optional[str]) -> ScoringMethod:
        """Map a method name to ScoringMethod, falling back to sum for unknown names."""
        name = requested or self.default_method
        method = ScoringMethod.resolve(name)
        if method is None:
            logger.warning("scoring_method_fallback", requested=name, used=ScoringMethod.SUM.value)
            return ScoringMethod.SUM
        return method

    @staticmethod
    def _simple_totals(answers: Mapping[Hashable, float]) -> _Totals:
        total = sum(answers.values())
        return _Totals(total, total, None, False)

    def _weighted_totals(
        self,
        answers: Mapping[Hashable, float],
        questions: Mapping[Hashable, ItemMetadata],
        method: ScoringMethod,
    ) -> _Totals:
        normalized = self._normalizer.normalize(answers, questions)

        total_score = 0.0
        total_weight = 0.0
        for key, adjusted in normalized.values.items():
            item = questions.get(key)
            weight = item.effective_weight if item is not None else 1.0
            total_score += adjusted * weight
            total_weight += weight

        if method is ScoringMethod.AVERAGE:
            final_score = safe_divide(total_score, total_weight)
        else:
            final_score = total_score

        return _Totals(total_score, final_score, total_weight, normalized.used_reverse_scoring)

    def score(
        self,
        answers: Mapping[Hashable, float],
        scale_config: Optional[ScaleConfig] = None,
        questions: Optional[Mapping[Hashable, ItemMetadata]] = None,
        interpretation_config: Optional[InterpretationConfig] = None,
        dimension_config: Optional[Sequence[DimensionDefinition]] = None,
    ) -> ConfigurableResult:
        """
        Args:
            answers: Item key → raw value.
            scale_config: Aggregation method and optional score bounds.
            questions: Item key → metadata. None selects the simplified plain-sum mode.
            interpretation_config: Ordered severity levels; None uses the built-in default.
            dimension_config: Explicit dimension definitions; None groups by item tags.

        Returns:
            ConfigurableResult.

        Examples:
            >>> questions = {
            ...     "a": ItemMetadata(weight=1), "b": ItemMetadata(weight=2), "c": ItemMetadata(weight=1),
            ... }
            >>> result = ConfigurableScorer().score(
            ...     {"a": 2, "b": 3, "c": 4}, ScaleConfig(method="weighted"), questions
            ... )
            >>> result.total_score, result.mean_score
            (12.0, 4.0)
        """
        requested_method = scale_config.method if scale_config and scale_config.method else None
        method = self.resolve_method(requested_method)
        question_count = len(answers)

        if questions is None:
            totals = self._simple_totals(answers)
        else:
            totals = self._weighted_totals(answers, questions, method)

        mean_score = safe_divide(totals.total_score, question_count)

        strategy = select_dimension_strategy(questions, dimension_config)
        dimension_scores = strategy.aggregate(answers, questions) if strategy is not None else {}

        severity_info = apply_interpretation(totals.final_score, interpretation_config)

        logger.info(
            "generic_scale_scored",
            method=method.value,
            question_count=question_count,
            total_score=totals.total_score,
            final_score=totals.final_score,
            total_weight=totals.total_weight,
            dimension_strategy=strategy.kind if strategy is not None else None,
            severity=severity_info.level,
        )

        return ConfigurableResult(
            total_score=round_half_up(totals.total_score),
            final_score=round_half_up(totals.final_score),
            mean_score=round_half_up(mean_score),
            question_count=question_count,
            average_score=round_half_up(mean_score),
            total_mean=round_half_up(mean_score),
            severity=severity_info.level,
            severity_info=severity_info,
            dimension_scores=dimension_scores,
            scoring_method=requested_method or self.default_method,
            used_weights=questions is not None,
            used_reverse_scoring=totals.used_reverse_scoring,
            total_weight=totals.total_weight,
            dimension_strategy=strategy.kind if strategy is not None else None,
            min_score=scale_config.min_score if scale_config else None,
            max_score=scale_config.max_score if scale_config else None,
        )
