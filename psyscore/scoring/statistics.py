"""
Score Statistics
psyscore/scoring/statistics.py

Aggregates the total_mean of completed assessments (newest first) into the
summary shown on student and staff dashboards.

Trend (lower scores are better on symptom scales):
    recent = first `window` values, older = the next `window` values
    fewer than 2 values, or no older values  → None
    |avg(recent) − avg(older)| < threshold   → stable
    avg(recent) < avg(older)                 → improving
    otherwise                                → declining
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Sequence

from psyscore.config import get_settings
from psyscore.models.enumerations import ScoreTrend
from psyscore.scoring.utils import mean

logger = logging.getLogger(__name__)


@dataclass
class ScoreStatistics:
    """Output of ScoreStatisticsCalculator.calculate()."""
    avg_score: Optional[float]
    min_score: Optional[float]
    max_score: Optional[float]
    completed_count: int
    recent_trend: Optional[ScoreTrend]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ScoreStatisticsCalculator:
    """Summarize a series of assessment scores."""

    def __init__(self, window: Optional[int] = None, stable_threshold: Optional[float] = None):
        settings = get_settings()
        self.window = settings.TREND_WINDOW if window is None else window
        self.stable_threshold = (
            settings.TREND_STABLE_THRESHOLD if stable_threshold is None else stable_threshold
        )
        if self.window < 1:
            raise ValueError(f"window must be >= 1, got {self.window}")

    def trend(self, scores: Sequence[float]) -> Optional[ScoreTrend]:
        if len(scores) < 2:
            return None

        recent = scores[: self.window]
        older = scores[self.window : 2 * self.window]
        if not older:
            return None

        diff = mean(recent) - mean(older)
        if abs(diff) < self.stable_threshold:
            return ScoreTrend.STABLE
        return ScoreTrend.IMPROVING if diff < 0 else ScoreTrend.DECLINING

    def calculate(self, total_means: Sequence[float]) -> ScoreStatistics:
        """
        Args:
            total_means: total_mean of each completed assessment, newest first.

        Returns:
            ScoreStatistics; avg/min/max are None when no scores are given.
        """
        scores = list(total_means)
        if not scores:
            return ScoreStatistics(None, None, None, 0, None)

        stats = ScoreStatistics(
            avg_score=mean(scores),
            min_score=min(scores),
            max_score=max(scores),
            completed_count=len(scores),
            recent_trend=self.trend(scores),
        )

        logger.info(
            "score_statistics_calculated",
            extra={
                "completed_count": stats.completed_count,
                "avg_score": stats.avg_score,
                "recent_trend": stats.recent_trend.value if stats.recent_trend else None,
            },
        )
        return stats
