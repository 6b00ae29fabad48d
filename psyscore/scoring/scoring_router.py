"""
Scoring Router
psyscore/scoring/scoring_router.py

Dispatches a ScoringRequest to a scorer by scale code and wraps the outcome
in a single ScoringEnvelope.

    scale code (upper-cased) in FIXED_SCALE_ALIASES → FixedFactorScorer
    anything else                                  → ConfigurableScorer
                                                     (method defaults to sum)

Every exception from the selected scorer becomes
ScoringEnvelope(success=False, error=<message>); no partial score is returned.
"""

from typing import Iterable, Optional

import structlog

from psyscore.config import get_settings
from psyscore.core.exceptions import AnswerValidationError
from psyscore.models.scoring import ScaleConfig, ScoringEnvelope, ScoringRequest
from psyscore.scoring.configurable_scorer import ConfigurableScorer
from psyscore.scoring.fixed_factor_scorer import FixedFactorScorer

logger = structlog.get_logger(__name__)

MISSING_SCALE_CODE = "Missing required field: scale_code"
MISSING_ANSWERS = "Missing required field: answers"


class ScoringRouter:
    """Select a scorer per request and normalize its output."""

    def __init__(
        self,
        fixed_aliases: Optional[Iterable[str]] = None,
        default_method: Optional[str] = None,
        fixed_scorer: Optional[FixedFactorScorer] = None,
        configurable_scorer: Optional[ConfigurableScorer] = None,
    ):
        settings = get_settings()
        aliases = settings.FIXED_SCALE_ALIASES if fixed_aliases is None else fixed_aliases
        self.fixed_aliases = frozenset(alias.upper() for alias in aliases)
        self.default_method = default_method or settings.DEFAULT_SCORING_METHOD
        self.fixed_scorer = fixed_scorer or FixedFactorScorer()
        self.configurable_scorer = configurable_scorer or ConfigurableScorer(
            default_method=self.default_method
        )

    def is_fixed_scale(self, scale_code: str) -> bool:
        return scale_code.upper() in self.fixed_aliases

    @staticmethod
    def check_request(request: ScoringRequest) -> Optional[str]:
        """Return the message for a missing required field, or None."""
        if not request.scale_code:
            return MISSING_SCALE_CODE
        if not request.answers:
            return MISSING_ANSWERS
        return None

    def _dispatch(self, request: ScoringRequest) -> dict:
        if self.is_fixed_scale(request.scale_code):
            result = self.fixed_scorer.score(request.answers, request.questions)
        else:
            scale_config = request.scale_config or ScaleConfig(method=self.default_method)
            result = self.configurable_scorer.score(
                request.answers,
                scale_config,
                request.questions,
                request.interpretation_config,
                request.dimension_config,
            )
        return result.to_dict()

    def route(self, request: ScoringRequest) -> ScoringEnvelope:
        """
        Score one request.

        Returns:
            ScoringEnvelope(success=True, scores=...) or
            ScoringEnvelope(success=False, error=...).
        """
        missing = self.check_request(request)
        if missing:
            return ScoringEnvelope(success=False, error=missing)

        try:
            scores = self._dispatch(request)
        except AnswerValidationError as e:
            logger.warning("scoring_rejected", scale_code=request.scale_code, error=e.message)
            return ScoringEnvelope(success=False, error=e.message)
        except Exception as e:
            logger.exception("scoring_failed", scale_code=request.scale_code)
            return ScoringEnvelope(success=False, error=str(e) or "Unknown error occurred")

        return ScoringEnvelope(success=True, scores=scores)
