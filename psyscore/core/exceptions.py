"""
Custom Exceptions - Psychological Assessment Scoring Engine
psyscore/core/exceptions.py

Exception classes raised by the scoring engine.
"""

from typing import Any, Optional


class ScoringException(Exception):
    """Base exception for scoring operations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AnswerValidationError(ScoringException):
    """Raw answers are malformed, incomplete or out of range."""

    def __init__(
        self,
        message: str,
        item: Optional[Any] = None,
        expected: Optional[Any] = None,
        actual: Optional[Any] = None,
    ):
        self.item = item
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class IncompleteAnswersError(AnswerValidationError):
    """Fixed-layout scale received the wrong number of answers."""

    def __init__(self, scale: str, expected: int, actual: int):
        self.scale = scale
        super().__init__(
            f"{scale} requires {expected} answers, got {actual}",
            expected=expected,
            actual=actual,
        )
