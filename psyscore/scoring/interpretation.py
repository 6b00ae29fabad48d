"""
Interpretation Lookup
psyscore/scoring/interpretation.py

Maps a final score onto a severity level from an ordered list of
InterpretationLevel bands.

Rules:
    1. Levels are checked in declared order; the first whose inclusive
       [range_min, range_max] contains the score wins.
       range_min defaults to 0, range_max to +infinity.
    2. No level matches → the LAST declared level is returned (ceiling fallback).
    3. No levels configured at all → built-in two-bucket default:
       score < 10 → normal, otherwise → mild.

The default in rule 3 is a scale-agnostic baseline kept for compatibility
with existing clients; it does not reflect any particular scale's range.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from psyscore.models.enumerations import SeverityLevel
from psyscore.models.scoring import InterpretationConfig, InterpretationLevel

DEFAULT_NORMAL_CEILING = 10

FALLBACK_LEVEL = SeverityLevel.SEVERE.value
FALLBACK_DESCRIPTION = "Score is outside the expected range"
FALLBACK_SUGGESTIONS = ["Consider seeking professional help"]


@dataclass
class SeverityInfo:
    """Selected severity band with its description and guidance."""
    level: str
    description: str = ""
    suggestions: List[str] = field(default_factory=list)


_DEFAULT_NORMAL = SeverityInfo(
    level=SeverityLevel.NORMAL.value,
    description="Score is within the normal range",
    suggestions=["Keep up a healthy lifestyle", "Continue to look after your mental health"],
)

_DEFAULT_MILD = SeverityInfo(
    level=SeverityLevel.MILD.value,
    description="Some psychological distress may be present",
    suggestions=["Consider making some adjustments", "Seek professional help if needed"],
)


def level_contains(level: InterpretationLevel, score: float) -> bool:
    range_min = 0.0 if level.range_min is None else level.range_min
    range_max = math.inf if level.range_max is None else level.range_max
    return range_min <= score <= range_max


def default_interpretation(score: float) -> SeverityInfo:
    base = _DEFAULT_NORMAL if score < DEFAULT_NORMAL_CEILING else _DEFAULT_MILD
    return SeverityInfo(
        level=base.level,
        description=base.description,
        suggestions=list(base.suggestions),
    )


def select_level(score: float, levels: Sequence[InterpretationLevel]) -> SeverityInfo:
    """Walk `levels` in order; first inclusive match wins, else the last level."""
    for level in levels:
        if level_contains(level, score):
            return SeverityInfo(
                level=level.level or "",
                description=level.description or "",
                suggestions=list(level.suggestions or []),
            )

    last = levels[-1]
    return SeverityInfo(
        level=last.level or FALLBACK_LEVEL,
        description=last.description or FALLBACK_DESCRIPTION,
        suggestions=list(last.suggestions or FALLBACK_SUGGESTIONS),
    )


def apply_interpretation(
    score: float,
    config: Optional[InterpretationConfig] = None,
) -> SeverityInfo:
    """
    Args:
        score: Final score of the scale.
        config: Ordered interpretation levels. None, or an empty level list,
                selects the built-in default.

    Returns:
        SeverityInfo for the matched band.
    """
    if config is None or not config.levels:
        return default_interpretation(score)
    return select_level(score, config.levels)
