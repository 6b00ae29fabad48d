"""
Dependencies - Psychological Assessment Scoring Engine
psyscore/core/dependencies.py

FastAPI dependency injection for the scoring components.
"""

from functools import lru_cache

from psyscore.scoring.scoring_router import ScoringRouter
from psyscore.scoring.statistics import ScoreStatisticsCalculator


@lru_cache()
def get_scoring_router() -> ScoringRouter:
    """Get cached ScoringRouter instance."""
    return ScoringRouter()


@lru_cache()
def get_statistics_calculator() -> ScoreStatisticsCalculator:
    """Get cached ScoreStatisticsCalculator instance."""
    return ScoreStatisticsCalculator()
