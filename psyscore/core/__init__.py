"""
Core Package - Psychological Assessment Scoring Engine
psyscore/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from psyscore.core.exceptions import (
    AnswerValidationError,
    IncompleteAnswersError,
    ScoringException,
)
from psyscore.core.logging import configure_logging

__all__ = [
    # Exceptions
    "AnswerValidationError",
    "IncompleteAnswersError",
    "ScoringException",
    # Logging
    "configure_logging",
]
